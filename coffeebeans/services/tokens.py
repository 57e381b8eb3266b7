"""
Session Token Generation

Tokens combine a random part with a time part. Both parts are lowercase
hex, so an admin token can never start with the reader prefix.
"""

import secrets
import time


READER_PREFIX = 'r_'


def generate_token():
    """Return a new opaque admin session token."""
    return secrets.token_hex(12) + format(time.time_ns(), 'x')


def generate_reader_token():
    """Return a new reader session token, marked with the reader prefix."""
    return READER_PREFIX + generate_token()


def is_reader_token(token):
    return token.startswith(READER_PREFIX)
