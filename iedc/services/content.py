"""Portal content store: resources, notifications and portal settings.

Content changes are not written to the activity log.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import or_

from iedc.extensions import db
from iedc.models import (
    Notification,
    NotificationType,
    PortalSettings,
    Resource,
    ResourceCategory,
    ResourceType,
    TargetAudience,
    utcnow,
)
from iedc.services.repository import Repository, coerce_enum, commit

DEFAULT_WELCOME_MESSAGE = (
    "Welcome to KPTC E-IEDC Student Portal! Explore innovation and entrepreneurship resources."
)
PORTAL_SETTINGS_ID = 1
PORTAL_SETTING_FIELDS = ('welcome_message', 'is_maintenance_mode', 'maintenance_message')


class ContentStore:
    """Owns resources, notifications and the portal settings singleton."""

    def __init__(self):
        self.resources: Repository[Resource] = Repository(Resource)
        self.notifications: Repository[Notification] = Repository(Notification)

    # -------------------------------------------------------------- resources

    def list_resources(
        self,
        type: ResourceType | str | None = None,
        category: ResourceCategory | str | None = None,
        is_active: bool | None = None,
        page: int | None = None,
        page_size: int | None = None,
    ) -> tuple[list[Resource], int]:
        """Highest priority first, newest first within a priority."""
        criteria = []
        try:
            if type:
                criteria.append(Resource.type == coerce_enum(ResourceType, type))
            if category:
                criteria.append(Resource.category == coerce_enum(ResourceCategory, category))
        except ValueError:
            return [], 0
        if is_active is not None:
            criteria.append(Resource.is_active == is_active)

        stmt = self.resources.select(
            *criteria,
            order_by=(Resource.priority.desc(), Resource.created_at.desc(), Resource.id.asc()),
        )
        return self.resources.page(stmt, page, page_size)

    def get_resource(self, resource_id: int) -> Resource | None:
        return self.resources.get(resource_id)

    def create_resource(self, data: dict[str, Any]) -> Resource:
        values = dict(data)
        values.setdefault('is_active', True)
        values.setdefault('priority', 1)
        resource = self.resources.add(values)
        commit()
        return resource

    def update_resource(self, resource_id: int, data: dict[str, Any]) -> Resource | None:
        resource = self.resources.get(resource_id)
        if resource is None:
            return None
        self.resources.merge(resource, data)
        commit()
        return resource

    def delete_resource(self, resource_id: int) -> bool:
        resource = self.resources.get(resource_id)
        if resource is None:
            return False
        self.resources.remove(resource)
        commit()
        return True

    # ---------------------------------------------------------- notifications

    def list_notifications(
        self,
        type: NotificationType | str | None = None,
        is_active: bool | None = None,
        is_important: bool | None = None,
        target_audience: TargetAudience | str | None = None,
        page: int | None = None,
        page_size: int | None = None,
        now: datetime | None = None,
    ) -> tuple[list[Notification], int]:
        """
        List unexpired notifications, important ones first, then newest first.

        Args:
            type: exact notification type
            is_active: match the active flag
            is_important: match the important flag
            target_audience: "students"/"faculty" also match notifications for
                "all"; "all" applies no audience filter
            page: 1-based page, applied only together with page_size
            page_size: items per page
            now: reference time for expiry (defaults to the current time)

        Returns:
            (notifications on the requested page, total before pagination)
        """
        criteria = [
            or_(Notification.expiry_date.is_(None), Notification.expiry_date > (now or utcnow())),
        ]
        try:
            if type:
                criteria.append(Notification.type == coerce_enum(NotificationType, type))
            audience = coerce_enum(TargetAudience, target_audience) if target_audience else None
        except ValueError:
            return [], 0
        if is_active is not None:
            criteria.append(Notification.is_active == is_active)
        if is_important is not None:
            criteria.append(Notification.is_important == is_important)
        if audience is not None and audience != TargetAudience.ALL:
            criteria.append(Notification.target_audience.in_([audience, TargetAudience.ALL]))

        stmt = self.notifications.select(
            *criteria,
            order_by=(
                Notification.is_important.desc(),
                Notification.created_at.desc(),
                Notification.id.asc(),
            ),
        )
        return self.notifications.page(stmt, page, page_size)

    def get_notification(self, notification_id: int) -> Notification | None:
        return self.notifications.get(notification_id)

    def create_notification(self, data: dict[str, Any]) -> Notification:
        values = dict(data)
        values.setdefault('is_active', True)
        values.setdefault('is_important', False)
        values.setdefault('target_audience', TargetAudience.ALL)
        notification = self.notifications.add(values)
        commit()
        return notification

    def update_notification(self, notification_id: int, data: dict[str, Any]) -> Notification | None:
        notification = self.notifications.get(notification_id)
        if notification is None:
            return None
        self.notifications.merge(notification, data)
        commit()
        return notification

    def delete_notification(self, notification_id: int) -> bool:
        notification = self.notifications.get(notification_id)
        if notification is None:
            return False
        self.notifications.remove(notification)
        commit()
        return True

    # ---------------------------------------------------------- student portal

    def portal_settings(self) -> PortalSettings:
        settings = db.session.get(PortalSettings, PORTAL_SETTINGS_ID)
        if settings is None:
            settings = PortalSettings(
                id=PORTAL_SETTINGS_ID,
                welcome_message=DEFAULT_WELCOME_MESSAGE,
                is_maintenance_mode=False,
                maintenance_message="",
                updated_at=utcnow(),
            )
            db.session.add(settings)
            commit()
        return settings

    def update_portal_settings(self, data: dict[str, Any]) -> PortalSettings:
        """Shallow-merge the supplied settings over the current ones."""
        settings = self.portal_settings()
        for key in PORTAL_SETTING_FIELDS:
            if key in data:
                setattr(settings, key, data[key])
        settings.updated_at = utcnow()
        commit()
        return settings

    def student_portal_content(self, now: datetime | None = None) -> dict[str, Any]:
        """Compose the student portal view; rebuilt on every call."""
        notices, _ = self.list_notifications(
            is_active=True, target_audience=TargetAudience.STUDENTS, now=now
        )
        settings = self.portal_settings()

        return {
            'welcome_message': settings.welcome_message,
            'important_notices': [n for n in notices if n.is_important],
            'announcements': [n for n in notices if not n.is_important],
            'study_materials': self.list_resources(
                category=ResourceCategory.STUDY_MATERIAL, is_active=True
            )[0],
            'gallery': self.list_resources(category=ResourceCategory.GALLERY, is_active=True)[0],
            'quick_links': self.list_resources(type=ResourceType.LINK, is_active=True)[0],
            'is_maintenance_mode': settings.is_maintenance_mode,
            'maintenance_message': settings.maintenance_message,
        }


__all__ = ["ContentStore", "DEFAULT_WELCOME_MESSAGE"]
