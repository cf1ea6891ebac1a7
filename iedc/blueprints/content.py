"""Portal content API: resources, notifications and the student portal view."""

from __future__ import annotations

from datetime import date

from flask import Blueprint, request
from flask_login import current_user

from iedc.blueprints.common.responses import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    api_errors,
    bool_arg,
    failure,
    int_arg,
    load_body,
    page_payload,
    parse_id,
    success,
)
from iedc.schemas import (
    CreateNotificationRequest,
    CreateResourceRequest,
    PortalSettingsRequest,
    UpdateNotificationRequest,
    UpdateResourceRequest,
)
from iedc.services import content_store
from iedc.services.serializers import (
    serialize_notification,
    serialize_portal_content,
    serialize_portal_settings,
    serialize_resource,
)

content_bp = Blueprint("content", __name__)

# Content created without an authenticated caller is attributed to user 1
FALLBACK_CREATOR_ID = 1


def _creator_id() -> int:
    if current_user and current_user.is_authenticated:
        return current_user.id
    return FALLBACK_CREATOR_ID


# Resources

@content_bp.route("/resources", methods=["GET"])
@api_errors("Failed to fetch resources")
def list_resources():
    page = int_arg('page', DEFAULT_PAGE)
    page_size = int_arg('pageSize', DEFAULT_PAGE_SIZE)
    resources, total = content_store().list_resources(
        type=request.args.get('type'),
        category=request.args.get('category'),
        is_active=bool_arg('isActive'),
        page=page,
        page_size=page_size,
    )
    return success(page_payload('items', [serialize_resource(r) for r in resources], total, page, page_size))


@content_bp.route("/resources/<resource_id>", methods=["GET"])
@api_errors("Failed to fetch resource")
def get_resource(resource_id):
    parsed_id = parse_id(resource_id)
    if parsed_id is None:
        return failure("Invalid resource ID", 400)

    resource = content_store().get_resource(parsed_id)
    if resource is None:
        return failure("Resource not found", 404)
    return success(serialize_resource(resource))


@content_bp.route("/resources", methods=["POST"])
@api_errors("Failed to create resource")
def create_resource():
    values = load_body(CreateResourceRequest).values()
    values.update(upload_date=date.today(), is_active=True, created_by=_creator_id())

    resource = content_store().create_resource(values)
    return success(serialize_resource(resource), "Resource created successfully", 201)


@content_bp.route("/resources/<resource_id>", methods=["PUT"])
@api_errors("Failed to update resource")
def update_resource(resource_id):
    parsed_id = parse_id(resource_id)
    if parsed_id is None:
        return failure("Invalid resource ID", 400)

    values = load_body(UpdateResourceRequest).values(partial=True)
    resource = content_store().update_resource(parsed_id, values)
    if resource is None:
        return failure("Resource not found", 404)
    return success(serialize_resource(resource), "Resource updated successfully")


@content_bp.route("/resources/<resource_id>", methods=["DELETE"])
@api_errors("Failed to delete resource")
def delete_resource(resource_id):
    parsed_id = parse_id(resource_id)
    if parsed_id is None:
        return failure("Invalid resource ID", 400)

    if not content_store().delete_resource(parsed_id):
        return failure("Resource not found", 404)
    return success(message="Resource deleted successfully")


# Notifications

@content_bp.route("/notifications", methods=["GET"])
@api_errors("Failed to fetch notifications")
def list_notifications():
    page = int_arg('page', DEFAULT_PAGE)
    page_size = int_arg('pageSize', DEFAULT_PAGE_SIZE)
    notifications, total = content_store().list_notifications(
        type=request.args.get('type'),
        is_active=bool_arg('isActive'),
        is_important=bool_arg('isImportant'),
        target_audience=request.args.get('targetAudience'),
        page=page,
        page_size=page_size,
    )
    items = [serialize_notification(n) for n in notifications]
    return success(page_payload('items', items, total, page, page_size))


@content_bp.route("/notifications", methods=["POST"])
@api_errors("Failed to create notification")
def create_notification():
    values = load_body(CreateNotificationRequest).values()
    values.update(is_active=True, created_by=_creator_id())

    notification = content_store().create_notification(values)
    return success(serialize_notification(notification), "Notification created successfully", 201)


@content_bp.route("/notifications/<notification_id>", methods=["PUT"])
@api_errors("Failed to update notification")
def update_notification(notification_id):
    parsed_id = parse_id(notification_id)
    if parsed_id is None:
        return failure("Invalid notification ID", 400)

    values = load_body(UpdateNotificationRequest).values(partial=True)
    notification = content_store().update_notification(parsed_id, values)
    if notification is None:
        return failure("Notification not found", 404)
    return success(serialize_notification(notification), "Notification updated successfully")


@content_bp.route("/notifications/<notification_id>", methods=["DELETE"])
@api_errors("Failed to delete notification")
def delete_notification(notification_id):
    parsed_id = parse_id(notification_id)
    if parsed_id is None:
        return failure("Invalid notification ID", 400)

    if not content_store().delete_notification(parsed_id):
        return failure("Notification not found", 404)
    return success(message="Notification deleted successfully")


# Student portal

@content_bp.route("/student-portal", methods=["GET"])
@api_errors("Failed to fetch student portal content")
def student_portal():
    return success(serialize_portal_content(content_store().student_portal_content()))


@content_bp.route("/portal-settings", methods=["PUT"])
@api_errors("Failed to update portal settings")
def update_portal_settings():
    values = load_body(PortalSettingsRequest).values(partial=True)
    settings = content_store().update_portal_settings(values)
    return success(serialize_portal_settings(settings), "Portal settings updated successfully")


__all__ = ["content_bp"]
