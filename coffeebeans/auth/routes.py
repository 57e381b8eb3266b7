"""
Auth Routes

Password logins for the admin and reader tiers, and logout for both.
"""

from dataclasses import dataclass
from flask import current_app, g, jsonify, request
from coffeebeans.auth import auth_bp
from coffeebeans.auth.decorators import (
    ADMIN_TOKEN_HEADER,
    READER_TOKEN_HEADER,
    AccessPolicy,
    any_session_required,
)
from coffeebeans.errors import Unauthorized, ValidationError, WrongPassword
from coffeebeans.services import get_session_store


# Logout reads the admin header first and accepts unknown tokens
LOGOUT = AccessPolicy(
    headers=(ADMIN_TOKEN_HEADER, READER_TOKEN_HEADER),
    roles=frozenset({'admin', 'reader'}),
)


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _text(payload, key):
    value = payload.get(key)
    return value if isinstance(value, str) else ''


@dataclass
class AdminLogin:
    password: str

    @classmethod
    def from_json(cls, payload):
        return cls(password=_text(payload, 'password'))


@dataclass
class ReaderLogin:
    username: str
    password: str

    @classmethod
    def from_json(cls, payload, min_username_length):
        """Parse and validate a reader login body.
        
        Raises:
            ValidationError: if a field is missing or the name is too short
        """
        username = _text(payload, 'username')
        password = _text(payload, 'password')
        if not username or not password:
            raise ValidationError('Username and password required')
        
        username = username.strip()
        if len(username) < min_username_length:
            raise ValidationError(
                f'Username must be at least {min_username_length} characters'
            )
        return cls(username=username, password=password)


@auth_bp.route('/api/login', methods=['POST'])
def admin_login():
    """Exchange the admin password for an admin token."""
    form = AdminLogin.from_json(_json_body())
    
    if form.password != current_app.config['ADMIN_PASSWORD']:
        current_app.logger.warning('Rejected admin login')
        raise WrongPassword()
    
    token = get_session_store().create_admin_session()
    current_app.logger.info('Admin logged in')
    return jsonify({'token': token, 'role': 'admin'})


@auth_bp.route('/api/reader-login', methods=['POST'])
def reader_login():
    """Exchange the reader password and a display name for a reader token."""
    form = ReaderLogin.from_json(
        _json_body(),
        current_app.config['MIN_USERNAME_LENGTH'],
    )
    
    if form.password != current_app.config['READER_PASSWORD']:
        current_app.logger.warning('Rejected reader login for %s', form.username)
        raise WrongPassword()
    
    token = get_session_store().create_reader_session(form.username)
    current_app.logger.info('Reader %s logged in', form.username)
    return jsonify({'token': token, 'role': 'reader', 'username': form.username})


@auth_bp.route('/api/logout', methods=['POST'])
def logout():
    """End the session named by the request's token header."""
    token = LOGOUT.extract_token(request.headers)
    if not token:
        raise Unauthorized()

    get_session_store().delete_session(token)
    current_app.logger.info('Session ended')
    return jsonify({'ok': True})


@auth_bp.route('/api/me')
@any_session_required
def whoami():
    """Describe the session behind the request's token."""
    session = g.journal_session
    payload = {'role': session.role}
    if session.role == 'reader':
        payload['username'] = session.username
    return jsonify(payload)
