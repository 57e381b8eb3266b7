"""
Auth Blueprint

Admin and reader logins each issue a session token that the client sends
back in a request header.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from coffeebeans.auth import routes  # noqa: E402, F401
