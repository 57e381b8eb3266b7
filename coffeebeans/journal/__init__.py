"""
Journal Blueprint

Public browsing of entries and statistics, admin-only writes.
"""

from flask import Blueprint

journal_bp = Blueprint('journal', __name__, url_prefix='/api')

from coffeebeans.journal import routes  # noqa: E402, F401
