"""Placeholder bearer tokens and the Flask-Login request loader.

Tokens are base64("<user id>:<epoch ms>"). They are not signed and must not be
mistaken for a security mechanism; they only identify the caller for the admin
UI and for activity attribution.
"""

from __future__ import annotations

import base64
import binascii
import time
from typing import Any

from flask import current_app
from flask_login import UserMixin, current_user

from iedc.extensions import login_manager
from iedc.models import User, UserStatus
from iedc.services import directory_store
from iedc.services.activity import Actor

# The built-in administrator has no database record
ADMIN_USER_ID = 0


class InvalidTokenError(ValueError):
    """Raised when a bearer token cannot be decoded."""


class AuthUser(UserMixin):
    """Authenticated caller, either a stored user or the built-in admin."""

    def __init__(self, id: int, name: str, email: str, role: str, status: str, department: str):
        self.id = id
        self.name = name
        self.email = email
        self.role = role
        self.status = status
        self.department = department

    @classmethod
    def from_user(cls, user: User) -> AuthUser:
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            role=user.role.value,
            status=user.status.value,
            department=user.department,
        )

    @classmethod
    def admin(cls) -> AuthUser:
        config = current_app.config
        return cls(
            id=ADMIN_USER_ID,
            name=config['ADMIN_NAME'],
            email=config['ADMIN_EMAIL'],
            role='admin',
            status='active',
            department=config['ADMIN_DEPARTMENT'],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'role': self.role,
            'status': self.status,
            'department': self.department,
        }

    def as_actor(self) -> Actor:
        return Actor(id=self.id, name=self.name)


def generate_token(user_id: int) -> str:
    raw = f"{user_id}:{int(time.time() * 1000)}"
    return base64.b64encode(raw.encode('utf-8')).decode('ascii')


def decode_token(token: str) -> int:
    """Return the user id carried by a token.

    Raises:
        InvalidTokenError: the token is not base64 of "<int>:<anything>"
    """
    try:
        decoded = base64.b64decode(token.encode('ascii'), validate=True).decode('utf-8')
        user_id, _, _issued = decoded.partition(':')
        return int(user_id)
    except (binascii.Error, UnicodeError, ValueError) as e:
        raise InvalidTokenError(str(e)) from e


def bearer_token(request) -> str | None:
    header = request.headers.get('Authorization', '')
    if not header.startswith('Bearer '):
        return None
    return header[len('Bearer '):].strip() or None


def resolve_user_id(user_id: int) -> AuthUser | None:
    """Map a user id to an AuthUser; only active users (or the admin) resolve."""
    if user_id == ADMIN_USER_ID:
        return AuthUser.admin()
    user = directory_store().get_user(user_id)
    if user is None or user.status != UserStatus.ACTIVE:
        return None
    return AuthUser.from_user(user)


def load_user_from_request(request) -> AuthUser | None:
    token = bearer_token(request)
    if not token:
        return None
    try:
        return resolve_user_id(decode_token(token))
    except InvalidTokenError:
        return None


def load_user(user_id: str) -> AuthUser | None:
    try:
        return resolve_user_id(int(user_id))
    except ValueError:
        return None


def current_actor() -> Actor | None:
    """The authenticated caller as an activity actor, if any."""
    if current_user and current_user.is_authenticated:
        return current_user.as_actor()
    return None


def init_auth(app) -> None:
    """Register the user loaders with Flask-Login."""
    login_manager.init_app(app)
    login_manager.user_loader(load_user)
    login_manager.request_loader(load_user_from_request)


__all__ = [
    "ADMIN_USER_ID",
    "AuthUser",
    "InvalidTokenError",
    "bearer_token",
    "current_actor",
    "decode_token",
    "generate_token",
    "init_auth",
    "resolve_user_id",
]
