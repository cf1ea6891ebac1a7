"""Application factory for the IEDC admin API."""

from __future__ import annotations

from flask import Flask, jsonify

from iedc.auth import init_auth
from iedc.blueprints import auth_bp, content_bp, dashboard_bp, events_bp, system_bp, users_bp
from iedc.config import Config
from iedc.extensions import db, limiter
from iedc.security.config import configure_cors, configure_security_headers
from iedc.services import init_stores
from iedc.services.seed import reset_store


def _error(message: str, status: int):
    return jsonify({'success': False, 'error': message}), status


def register_error_handlers(app: Flask) -> None:
    """Framework errors answer with the JSON envelope instead of HTML pages."""

    @app.errorhandler(404)
    def not_found(error):
        return _error("Not found", 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        return _error("Method not allowed", 405)

    @app.errorhandler(413)
    def payload_too_large(error):
        return _error("Payload too large", 413)

    @app.errorhandler(429)
    def rate_limited(error):
        return _error("Too many requests", 429)

    @app.errorhandler(500)
    def internal_error(error):
        app.logger.error(f"Unhandled server error: {error}")
        return _error("Internal server error", 500)


def create_app(config_class=Config):
    """Create Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    # Initialize Flask extensions
    db.init_app(app)
    init_auth(app)
    limiter.init_app(app)

    directory, content = init_stores(app)

    # Ensure models are registered before the schema is created
    import iedc.models  # noqa: F401

    with app.app_context():
        if app.config.get('SEED_ON_START', True):
            reset_store(directory, content)
        else:
            db.create_all()

    # Configure security
    configure_security_headers(app)
    configure_cors(app)
    register_error_handlers(app)

    app.register_blueprint(auth_bp, url_prefix='/api/auth')
    app.register_blueprint(users_bp, url_prefix='/api/users')
    app.register_blueprint(events_bp, url_prefix='/api/events')
    app.register_blueprint(dashboard_bp, url_prefix='/api/dashboard')
    app.register_blueprint(content_bp, url_prefix='/api/content')
    app.register_blueprint(system_bp, url_prefix='/api')

    # Register CLI commands
    from iedc.commands import register_commands
    register_commands(app)

    return app


__all__ = ["create_app"]
