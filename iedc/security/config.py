"""Security headers and CORS for the JSON API."""

from flask import request
from flask_cors import CORS


def _cors_origins(app):
    configured = app.config.get('CORS_ORIGINS', '*')
    if configured.strip() == '*':
        return '*'
    return [origin.strip() for origin in configured.split(',') if origin.strip()]


def configure_cors(app):
    """Enable CORS for every route; allowed origins come from CORS_ORIGINS.

    Preflights reflect the requested headers and allow every method the
    API serves, PATCH included.
    """
    origins = _cors_origins(app)
    CORS(app, origins=origins, send_wildcard=origins == '*')
    return app


def configure_security_headers(app):
    """Configure security headers."""

    @app.after_request
    def add_security_headers(response):
        # Prevent MIME type sniffing
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Referrer-Policy'] = 'no-referrer-when-downgrade'

        # The API never serves markup
        response.headers['Content-Security-Policy'] = "default-src 'none'; frame-ancestors 'none'"

        if request.is_secure:
            response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'

        return response

    return app


__all__ = [
    'configure_cors',
    'configure_security_headers',
]
