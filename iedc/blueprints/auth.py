"""Authentication blueprint: login, registration, token check and approval."""

from __future__ import annotations

from datetime import date

from flask import Blueprint, current_app, request
from pydantic import ValidationError

from iedc.auth import ADMIN_USER_ID, AuthUser, InvalidTokenError, bearer_token, decode_token, generate_token
from iedc.blueprints.common.responses import auth_response, load_body, parse_id
from iedc.extensions import limiter
from iedc.models import PLACEHOLDER_AVATAR, UserRole, UserStatus
from iedc.schemas import ApproveRequest, LoginRequest, RegisterRequest, format_validation_error
from iedc.services import directory_store
from iedc.services.directory import RegistrationNotPending

auth_bp = Blueprint("auth", __name__)


def _auth_limit() -> str:
    return current_app.config['AUTH_RATE_LIMIT']


def _validation_failure(exc: ValidationError):
    return auth_response(400, error="Validation failed", message=format_validation_error(exc))


@auth_bp.route("/login", methods=["POST"])
@limiter.limit(_auth_limit)
def login():
    try:
        credentials = load_body(LoginRequest)
    except ValidationError as exc:
        return _validation_failure(exc)

    try:
        if credentials.user_type == 'admin':
            # Any password is accepted for the configured admin address
            if credentials.email != current_app.config['ADMIN_EMAIL']:
                current_app.logger.warning(f"Rejected admin login for {credentials.email}")
                return auth_response(401, error="Invalid admin credentials")
            return auth_response(
                user=AuthUser.admin().to_dict(),
                token=generate_token(ADMIN_USER_ID),
                message="Admin login successful",
            )

        user = directory_store().find_user_by_email(credentials.email)
        if user is None:
            current_app.logger.warning(f"Rejected login for unknown user {credentials.email}")
            return auth_response(401, error="User not found")
        if user.status == UserStatus.PENDING:
            return auth_response(401, error="Account pending approval. Please wait for admin approval.")
        if user.status == UserStatus.INACTIVE:
            return auth_response(401, error="Account is inactive. Please contact admin.")

        return auth_response(
            user=AuthUser.from_user(user).to_dict(),
            token=generate_token(user.id),
            message="Login successful",
        )
    except Exception:
        current_app.logger.exception("Login failed")
        return auth_response(500, error="Login failed")


@auth_bp.route("/register", methods=["POST"])
@limiter.limit(_auth_limit)
def register():
    try:
        form = load_body(RegisterRequest)
    except ValidationError as exc:
        return _validation_failure(exc)

    try:
        store = directory_store()
        if store.email_taken(form.email):
            return auth_response(409, error="Email already exists")

        # The password is validated but never stored
        user = store.create_user({
            'name': form.name,
            'email': form.email,
            'role': UserRole.STUDENT,
            'status': UserStatus.PENDING,
            'department': form.department,
            'phone': form.phone,
            'location': form.location,
            'avatar': PLACEHOLDER_AVATAR,
            'join_date': date.today(),
        })
        current_app.logger.info(f"Registered user {user.id} ({user.email}), awaiting approval")
        return auth_response(
            201,
            message="Registration successful! Your account is pending admin approval.",
            user=AuthUser.from_user(user).to_dict(),
        )
    except Exception:
        current_app.logger.exception("Registration failed")
        return auth_response(500, error="Registration failed")


@auth_bp.route("/verify", methods=["GET"])
def verify():
    token = bearer_token(request)
    if not token:
        return auth_response(401, error="No token provided")

    try:
        user_id = decode_token(token)
    except InvalidTokenError:
        return auth_response(401, error="Invalid token")

    try:
        if user_id == ADMIN_USER_ID:
            return auth_response(user=AuthUser.admin().to_dict())

        user = directory_store().get_user(user_id)
        if user is None or user.status != UserStatus.ACTIVE:
            return auth_response(401, error="Invalid or inactive user")
        return auth_response(user=AuthUser.from_user(user).to_dict())
    except Exception:
        current_app.logger.exception("Token verification failed")
        return auth_response(500, error="Token verification failed")


@auth_bp.route("/approve/<user_id>", methods=["POST"])
def approve(user_id):
    parsed_id = parse_id(user_id)
    if parsed_id is None:
        return auth_response(400, error="Invalid user ID")

    try:
        decision = load_body(ApproveRequest)
    except ValidationError as exc:
        return _validation_failure(exc)

    try:
        user = directory_store().review_registration(parsed_id, decision.approve)
    except RegistrationNotPending:
        return auth_response(400, error="User is not pending approval")
    except Exception:
        current_app.logger.exception(f"Approval of user {parsed_id} failed")
        return auth_response(500, error="User approval failed")

    if user is None:
        return auth_response(404, error="User not found")

    outcome = "approved" if decision.approve else "rejected"
    current_app.logger.info(f"User {user.id} ({user.email}) {outcome}")
    return auth_response(
        message=f"User {outcome} successfully",
        user=AuthUser.from_user(user).to_dict(),
    )


__all__ = ["auth_bp"]
