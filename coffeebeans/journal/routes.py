"""
Journal Routes

Entry listing and statistics are public. Creating and deleting entries
requires an admin token.
"""

from dataclasses import dataclass
from flask import current_app, jsonify, request
from coffeebeans.auth.decorators import admin_required
from coffeebeans.errors import NotFound
from coffeebeans.journal import journal_bp
from coffeebeans.services import get_entry_store


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


@dataclass
class EntryForm:
    """Body of a create-entry request; checked by EntryStore.create."""
    type: str
    title: str
    body: str

    @classmethod
    def from_json(cls, payload):
        return cls(
            type=payload.get('type'),
            title=payload.get('title'),
            body=payload.get('body'),
        )


@journal_bp.route('/entries')
def list_entries():
    """List entries newest first, optionally filtered with ?type=."""
    entries = get_entry_store().list(request.args.get('type'))
    return jsonify([entry.to_dict() for entry in entries])


@journal_bp.route('/stats')
def stats():
    return jsonify(get_entry_store().stats())


@journal_bp.route('/entries', methods=['POST'])
@admin_required
def create_entry():
    """Store a new entry and return it with its assigned id."""
    form = EntryForm.from_json(_json_body())
    entry = get_entry_store().create(form.type, form.title, form.body)
    current_app.logger.info('Created %s entry %d', entry.type, entry.id)
    return jsonify(entry.to_dict()), 201


@journal_bp.route('/entries/<entry_id>', methods=['DELETE'])
@admin_required
def delete_entry(entry_id):
    """Delete an entry by id.
    
    The id is converted after the admin check so a bad id without a token
    is still a 401.
    """
    if not (entry_id.isascii() and entry_id.isdigit()):
        raise NotFound()
    entry_id = int(entry_id)
    get_entry_store().delete_by_id(entry_id)
    current_app.logger.info('Deleted entry %d', entry_id)
    return jsonify({'ok': True, 'id': entry_id})
