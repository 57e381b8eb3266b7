"""
Session Models

Admin and reader sessions live in separate tables keyed by token. Neither
expires; a row exists until logout.
"""

from datetime import datetime
from coffeebeans.extensions import db


class AdminSession(db.Model):
    """Active administrator session"""
    __tablename__ = 'admin_sessions'
    
    role = 'admin'
    
    token = db.Column(db.String(64), primary_key=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)
    
    def __repr__(self):
        return '<AdminSession>'


class ReaderSession(db.Model):
    """Active read-only session under a display name"""
    __tablename__ = 'reader_sessions'
    
    role = 'reader'
    
    token = db.Column(db.String(64), primary_key=True)
    username = db.Column(db.String(100), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)
    
    def __repr__(self):
        return f'<ReaderSession {self.username}>'
