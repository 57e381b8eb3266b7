"""
Services Package

Exports all services for easy importing.
"""

from flask import current_app

from coffeebeans.services.tokens import generate_token, generate_reader_token, is_reader_token, READER_PREFIX
from coffeebeans.services.sessions import SessionStore
from coffeebeans.services.entries import EntryStore, ALL_TYPES
from coffeebeans.services.seed import seed_demo_entries, DEMO_ENTRIES


def get_entry_store():
    """EntryStore bound to the current application."""
    return current_app.extensions['coffeebeans']['entries']


def get_session_store():
    """SessionStore bound to the current application."""
    return current_app.extensions['coffeebeans']['sessions']


__all__ = [
    'generate_token',
    'generate_reader_token',
    'is_reader_token',
    'READER_PREFIX',
    'SessionStore',
    'EntryStore',
    'ALL_TYPES',
    'seed_demo_entries',
    'DEMO_ENTRIES',
    'get_entry_store',
    'get_session_store',
]
