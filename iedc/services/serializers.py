"""JSON shapes for API responses (camelCase keys, ISO-8601 timestamps)."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from iedc.models import Activity, Event, Notification, PortalSettings, Resource, User


def isoformat(value: datetime | date | None) -> str | None:
    """Render stored UTC datetimes as e.g. 2024-11-01T09:30:00.000Z."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.isoformat(timespec='milliseconds') + 'Z'
    return value.isoformat()


def serialize_user(user: User) -> dict[str, Any]:
    return {
        'id': user.id,
        'name': user.name,
        'email': user.email,
        'role': user.role.value,
        'status': user.status.value,
        'avatar': user.avatar,
        'joinDate': isoformat(user.join_date),
        'department': user.department,
        'phone': user.phone,
        'location': user.location,
        'createdAt': isoformat(user.created_at),
        'updatedAt': isoformat(user.updated_at),
    }


def serialize_event(event: Event) -> dict[str, Any]:
    return {
        'id': event.id,
        'title': event.title,
        'description': event.description,
        'date': event.date,
        'time': event.time,
        'location': event.location,
        'status': event.status.value,
        'attendees': event.attendees,
        'maxAttendees': event.max_attendees,
        'category': event.category,
        'organizer': event.organizer,
        'organizerId': event.organizer_id,
        'rating': event.rating,
        'image': event.image,
        'createdAt': isoformat(event.created_at),
        'updatedAt': isoformat(event.updated_at),
    }


def serialize_activity(activity: Activity) -> dict[str, Any]:
    return {
        'id': activity.id,
        'userId': activity.user_id,
        'userName': activity.user_name,
        'userAvatar': activity.user_avatar,
        'action': activity.action,
        'targetType': activity.target_type.value,
        'targetId': activity.target_id,
        'timestamp': isoformat(activity.timestamp),
    }


def serialize_resource(resource: Resource) -> dict[str, Any]:
    return {
        'id': resource.id,
        'title': resource.title,
        'description': resource.description,
        'type': resource.type.value,
        'category': resource.category.value,
        'url': resource.url,
        'fileName': resource.file_name,
        'fileSize': resource.file_size,
        'uploadDate': isoformat(resource.upload_date),
        'isActive': resource.is_active,
        'priority': resource.priority,
        'createdBy': resource.created_by,
        'createdAt': isoformat(resource.created_at),
        'updatedAt': isoformat(resource.updated_at),
    }


def serialize_notification(notification: Notification) -> dict[str, Any]:
    return {
        'id': notification.id,
        'title': notification.title,
        'message': notification.message,
        'type': notification.type.value,
        'isActive': notification.is_active,
        'isImportant': notification.is_important,
        'targetAudience': notification.target_audience.value,
        'expiryDate': isoformat(notification.expiry_date),
        'createdBy': notification.created_by,
        'createdAt': isoformat(notification.created_at),
        'updatedAt': isoformat(notification.updated_at),
    }


def serialize_portal_settings(settings: PortalSettings) -> dict[str, Any]:
    return {
        'welcomeMessage': settings.welcome_message,
        'isMaintenanceMode': settings.is_maintenance_mode,
        'maintenanceMessage': settings.maintenance_message,
    }


def serialize_portal_content(content: dict[str, Any]) -> dict[str, Any]:
    return {
        'welcomeMessage': content['welcome_message'],
        'importantNotices': [serialize_notification(n) for n in content['important_notices']],
        'announcements': [serialize_notification(n) for n in content['announcements']],
        'studyMaterials': [serialize_resource(r) for r in content['study_materials']],
        'gallery': [serialize_resource(r) for r in content['gallery']],
        'quickLinks': [serialize_resource(r) for r in content['quick_links']],
        'isMaintenanceMode': content['is_maintenance_mode'],
        'maintenanceMessage': content['maintenance_message'],
    }
