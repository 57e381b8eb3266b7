"""
Entry Store

Persistence contract for journal entries. Entries are created and deleted,
never edited, and always listed newest first.
"""

from sqlalchemy import func
from coffeebeans.errors import ValidationError, NotFound
from coffeebeans.models import Entry, ENTRY_TYPES
from coffeebeans.models.entry import format_timestamp


# Filter value that means "every type"
ALL_TYPES = 'all'

# Largest id a SQLite INTEGER primary key can hold
MAX_ENTRY_ID = 2 ** 63 - 1


def _clean(value):
    return value.strip() if isinstance(value, str) else ''


class EntryStore:
    """Create, list, delete and summarize journal entries.
    
    Args:
        db: Flask-SQLAlchemy handle the entries are persisted through
    """
    
    def __init__(self, db):
        self.db = db
    
    def create(self, entry_type, title, body):
        """Validate and store a new entry.
        
        Args:
            entry_type: One of ENTRY_TYPES
            title: Entry title, stored trimmed
            body: Entry text, stored trimmed
        
        Returns:
            The stored Entry, with its id and created_at assigned
        
        Raises:
            ValidationError: if a field is missing or the type is unknown
        """
        title = _clean(title)
        body = _clean(body)
        if not entry_type or not title or not body:
            raise ValidationError('type, title, body required')
        if entry_type not in ENTRY_TYPES:
            raise ValidationError('Invalid type')
        
        entry = Entry(type=entry_type, title=title, body=body)
        self.db.session.add(entry)
        self.db.session.commit()
        return entry
    
    def list(self, type_filter=None):
        """Return entries newest first, optionally of a single type."""
        query = Entry.query
        if type_filter and type_filter != ALL_TYPES:
            query = query.filter_by(type=type_filter)
        return query.order_by(Entry.id.desc()).all()
    
    def get(self, entry_id):
        """Return the entry with this id, or None for ids that cannot exist."""
        if not isinstance(entry_id, int) or not 1 <= entry_id <= MAX_ENTRY_ID:
            return None
        return self.db.session.get(Entry, entry_id)
    
    def delete_by_id(self, entry_id):
        """Delete an entry and return the record as it was before deletion.
        
        Raises:
            NotFound: if no entry has this id
        """
        entry = self.get(entry_id)
        if entry is None:
            raise NotFound()
        
        snapshot = entry.to_dict()
        self.db.session.delete(entry)
        self.db.session.commit()
        return snapshot
    
    def count(self):
        return Entry.query.count()
    
    def stats(self):
        """Summarize the journal.
        
        Returns:
            dict with total count, per-type counts (present types only)
            and the creation time of the newest entry
        """
        rows = self.db.session.query(Entry.type, func.count(Entry.id))\
            .group_by(Entry.type).all()
        by_type = {entry_type: count for entry_type, count in rows}
        
        latest = Entry.query.order_by(Entry.id.desc()).first()
        
        return {
            'total': sum(by_type.values()),
            'byType': by_type,
            'latest': format_timestamp(latest.created_at) if latest else None,
        }
