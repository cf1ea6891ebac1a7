from .models import (
    PLACEHOLDER_AVATAR,
    Activity,
    ActivityTarget,
    Event,
    EventStatus,
    Notification,
    NotificationType,
    PortalSettings,
    Resource,
    ResourceCategory,
    ResourceType,
    TargetAudience,
    TimestampedBase,
    User,
    UserRole,
    UserStatus,
    utcnow,
)

__all__ = [
    "PLACEHOLDER_AVATAR",
    "Activity",
    "ActivityTarget",
    "Event",
    "EventStatus",
    "Notification",
    "NotificationType",
    "PortalSettings",
    "Resource",
    "ResourceCategory",
    "ResourceType",
    "TargetAudience",
    "TimestampedBase",
    "User",
    "UserRole",
    "UserStatus",
    "utcnow",
]
