"""
Flask Extensions

The journal stores are built on top of this handle in the application
factory and reached through ``app.extensions``.
"""

from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

# Database instance
db = SQLAlchemy()

# Cross-origin headers for browser clients of the /api routes
cors = CORS()
