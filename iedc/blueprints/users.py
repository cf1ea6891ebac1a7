"""Admin user management API."""

from __future__ import annotations

from flask import Blueprint, request

from iedc.auth import current_actor
from iedc.blueprints.common.responses import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    api_errors,
    failure,
    int_arg,
    load_body,
    page_payload,
    parse_id,
    success,
)
from iedc.schemas import CreateUserRequest, UpdateUserRequest
from iedc.services import directory_store
from iedc.services.serializers import serialize_user

users_bp = Blueprint("users", __name__)


@users_bp.route("", methods=["GET"])
@api_errors("Failed to fetch users")
def list_users():
    page = int_arg('page', DEFAULT_PAGE)
    page_size = int_arg('pageSize', DEFAULT_PAGE_SIZE)
    users, total = directory_store().list_users(
        search=request.args.get('search'),
        role=request.args.get('role'),
        status=request.args.get('status'),
        department=request.args.get('department'),
        page=page,
        page_size=page_size,
    )
    return success(page_payload('users', [serialize_user(u) for u in users], total, page, page_size))


@users_bp.route("/<user_id>", methods=["GET"])
@api_errors("Failed to fetch user")
def get_user(user_id):
    parsed_id = parse_id(user_id)
    if parsed_id is None:
        return failure("Invalid user ID", 400)

    user = directory_store().get_user(parsed_id)
    if user is None:
        return failure("User not found", 404)
    return success(serialize_user(user))


@users_bp.route("", methods=["POST"])
@api_errors("Failed to create user")
def create_user():
    values = load_body(CreateUserRequest).values()
    store = directory_store()
    if store.email_taken(values['email']):
        return failure("Email already exists", 409)

    user = store.create_user(values)
    return success(serialize_user(user), "User created successfully", 201)


@users_bp.route("/<user_id>", methods=["PUT"])
@api_errors("Failed to update user")
def update_user(user_id):
    parsed_id = parse_id(user_id)
    if parsed_id is None:
        return failure("Invalid user ID", 400)

    values = load_body(UpdateUserRequest).values(partial=True)
    store = directory_store()
    if 'email' in values and store.email_taken(values['email'], exclude_id=parsed_id):
        return failure("Email already exists", 409)

    user = store.update_user(parsed_id, values)
    if user is None:
        return failure("User not found", 404)
    return success(serialize_user(user), "User updated successfully")


@users_bp.route("/<user_id>", methods=["DELETE"])
@api_errors("Failed to delete user")
def delete_user(user_id):
    parsed_id = parse_id(user_id)
    if parsed_id is None:
        return failure("Invalid user ID", 400)

    if not directory_store().delete_user(parsed_id, actor=current_actor()):
        return failure("User not found", 404)
    return success(message="User deleted successfully")


__all__ = ["users_bp"]
