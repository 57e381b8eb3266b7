"""
Journal Entry Model
"""

from datetime import datetime
from sqlalchemy.orm import validates
from coffeebeans.extensions import db
from coffeebeans.errors import ValidationError


# Literary types, in the order the journal presents them
ENTRY_TYPES = ('Tula', 'Saloobin', 'Pagninilay', 'Kuwento')

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'


def format_timestamp(value):
    """Render a stored timestamp the way the API returns it."""
    return value.strftime(TIMESTAMP_FORMAT) if value is not None else None


class Entry(db.Model):
    """A single journal record of one literary type"""
    __tablename__ = 'entries'
    __table_args__ = (
        db.CheckConstraint(
            "type IN ('Tula', 'Saloobin', 'Pagninilay', 'Kuwento')",
            name='ck_entries_type',
        ),
    )
    
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    type = db.Column(db.String(20), nullable=False, index=True)
    title = db.Column(db.Text, nullable=False)
    body = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)
    
    @validates('type')
    def validate_type(self, key, value):
        if value not in ENTRY_TYPES:
            raise ValidationError('Invalid type')
        return value
    
    def to_dict(self):
        return {
            'id': self.id,
            'type': self.type,
            'title': self.title,
            'body': self.body,
            'created_at': format_timestamp(self.created_at),
        }
    
    def __repr__(self):
        return f'<Entry {self.id} {self.type}>'
