"""
Access Decorators

Both decorators share one check: take the token from the first of the
policy's headers that is present, resolve it, and accept it only if the
session's role is allowed by the policy.
"""

from dataclasses import dataclass
from functools import wraps
from flask import g, request
from coffeebeans.errors import Unauthorized, InvalidSession
from coffeebeans.services import get_session_store


ADMIN_TOKEN_HEADER = 'X-Admin-Token'
READER_TOKEN_HEADER = 'X-Reader-Token'


@dataclass(frozen=True)
class AccessPolicy:
    """Which headers are read, in order, and which roles are accepted."""
    headers: tuple
    roles: frozenset

    def extract_token(self, headers):
        for name in self.headers:
            token = headers.get(name)
            if token:
                return token
        return None

    def authorize(self, headers, session_store):
        """Return the session behind the request's token.
        
        Raises:
            Unauthorized: if none of the policy's headers carries a token
            InvalidSession: if the token matches no session the policy accepts
        """
        token = self.extract_token(headers)
        if not token:
            raise Unauthorized()
        
        session = session_store.resolve(token)
        if session is None or session.role not in self.roles:
            raise InvalidSession()
        return session


ADMIN_ONLY = AccessPolicy(
    headers=(ADMIN_TOKEN_HEADER,),
    roles=frozenset({'admin'}),
)

ADMIN_OR_READER = AccessPolicy(
    headers=(READER_TOKEN_HEADER, ADMIN_TOKEN_HEADER),
    roles=frozenset({'admin', 'reader'}),
)


def session_required(policy):
    """Build a view decorator enforcing the given access policy.
    
    The accepted session is stored on ``g.journal_session``.
    """
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            g.journal_session = policy.authorize(request.headers, get_session_store())
            return f(*args, **kwargs)
        return wrapper
    return decorator


admin_required = session_required(ADMIN_ONLY)
any_session_required = session_required(ADMIN_OR_READER)
