"""
Models Package

Exports all models for easy importing.
"""

from coffeebeans.models.entry import Entry, ENTRY_TYPES, TIMESTAMP_FORMAT
from coffeebeans.models.session import AdminSession, ReaderSession

__all__ = ['Entry', 'ENTRY_TYPES', 'TIMESTAMP_FORMAT', 'AdminSession', 'ReaderSession']
