"""Security package for the IEDC API."""

from iedc.security.config import configure_cors, configure_security_headers

__all__ = ["configure_cors", "configure_security_headers"]
