"""Log every admin and reader out by deleting all sessions."""
import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from coffeebeans import create_app
from coffeebeans.services import get_session_store

app = create_app()

with app.app_context():
    removed = get_session_store().purge()
    print(f"Removed {removed} sessions")
