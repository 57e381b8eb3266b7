"""
Session Store

Admin and reader sessions share one backing store but live in separate
namespaces. Every lookup goes to the database; nothing is cached.
"""

from coffeebeans.errors import ValidationError
from coffeebeans.models import AdminSession, ReaderSession
from coffeebeans.services.tokens import generate_token, generate_reader_token, is_reader_token


class SessionStore:
    """Issue, look up and revoke session tokens.
    
    Args:
        db: Flask-SQLAlchemy handle the sessions are persisted through
    """
    
    def __init__(self, db):
        self.db = db
    
    def create_admin_session(self):
        token = generate_token()
        self.db.session.add(AdminSession(token=token))
        self.db.session.commit()
        return token
    
    def create_reader_session(self, username):
        """Persist a reader session under the trimmed display name."""
        username = (username or '').strip()
        if not username:
            raise ValidationError('Username required')
        
        token = generate_reader_token()
        self.db.session.add(ReaderSession(token=token, username=username))
        self.db.session.commit()
        return token
    
    def find_admin(self, token):
        return self.db.session.get(AdminSession, token)
    
    def find_reader(self, token):
        return self.db.session.get(ReaderSession, token)
    
    def resolve(self, token):
        """Look a token up in the one namespace its prefix points to.
        
        Returns:
            AdminSession, ReaderSession, or None when the token is unknown
        """
        if not token:
            return None
        if is_reader_token(token):
            return self.find_reader(token)
        return self.find_admin(token)
    
    def delete_session(self, token):
        """Remove a token from whichever namespace holds it.
        
        Unknown tokens are ignored.
        """
        AdminSession.query.filter_by(token=token).delete()
        ReaderSession.query.filter_by(token=token).delete()
        self.db.session.commit()
    
    def purge(self):
        """Delete every admin and reader session.
        
        Returns:
            Number of sessions removed
        """
        removed = AdminSession.query.delete() + ReaderSession.query.delete()
        self.db.session.commit()
        return removed
