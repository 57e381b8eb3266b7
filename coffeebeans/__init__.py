"""
CoffeeBeans Journal - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os
from flask import Flask, jsonify
from coffeebeans.extensions import db, cors
from coffeebeans.config import Config


def create_app(config_class=Config):
    """Create and configure the Flask application.
    
    Args:
        config_class: Configuration class to use (default: Config)
    
    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(getattr(logging, app.config['LOG_LEVEL'].upper(), logging.INFO))
    
    # Initialize extensions
    db.init_app(app)
    cors.init_app(app, resources={r'/api/*': {'origins': app.config['CORS_ORIGINS']}})
    
    # Stores share the one database handle
    from coffeebeans.services import EntryStore, SessionStore
    app.extensions['coffeebeans'] = {
        'entries': EntryStore(db),
        'sessions': SessionStore(db),
    }
    
    # Register blueprints
    from coffeebeans.auth import auth_bp
    from coffeebeans.journal import journal_bp
    
    app.register_blueprint(auth_bp)
    app.register_blueprint(journal_bp)
    
    from coffeebeans.errors import register_error_handlers
    register_error_handlers(app)
    
    @app.route('/health')
    def health():
        return jsonify({'status': 'ok'})
    
    # Create database tables
    with app.app_context():
        uri = app.config['SQLALCHEMY_DATABASE_URI']
        if uri.startswith('sqlite:///') and not uri.endswith(':memory:'):
            os.makedirs(os.path.dirname(uri[len('sqlite:///'):]) or '.', exist_ok=True)
        db.create_all()
        _ensure_default_data(app)
    
    return app


def _ensure_default_data(app):
    """Seed the demonstration entries on an empty journal."""
    from coffeebeans.services import seed_demo_entries
    
    if not app.config['SEED_DEMO_ENTRIES']:
        return
    
    inserted = seed_demo_entries(app.extensions['coffeebeans']['entries'])
    if not inserted:
        app.logger.info('Journal already has entries, skipping demo data')
