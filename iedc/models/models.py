from __future__ import annotations

from datetime import date, datetime, timezone
from enum import Enum

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Enum as SqlEnum,
    Float,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from iedc.extensions import db

PLACEHOLDER_AVATAR = "/placeholder.svg"


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (the storage convention)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TimestampedBase(db.Model):
    """Abstract base providing id/created/updated columns.

    Integer ids come from an AUTOINCREMENT sequence so a deleted id is never
    handed out again within the lifetime of the database.
    """

    __abstract__ = True
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        nullable=False,
    )


class UserRole(Enum):
    ADMIN = "admin"
    FACULTY = "faculty"
    STUDENT = "student"


class UserStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"


class EventStatus(Enum):
    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ActivityTarget(Enum):
    USER = "user"
    EVENT = "event"
    CONTENT = "content"
    SYSTEM = "system"


class ResourceType(Enum):
    PDF = "pdf"
    IMAGE = "image"
    VIDEO = "video"
    LINK = "link"


class ResourceCategory(Enum):
    STUDY_MATERIAL = "study_material"
    ANNOUNCEMENT = "announcement"
    EVENT = "event"
    NOTIFICATION = "notification"
    GALLERY = "gallery"


class NotificationType(Enum):
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    ERROR = "error"
    IMPORTANT = "important"


class TargetAudience(Enum):
    ALL = "all"
    STUDENTS = "students"
    FACULTY = "faculty"


class User(TimestampedBase):
    __tablename__ = "user"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    role: Mapped[UserRole] = mapped_column(
        SqlEnum(UserRole, name="user_role", native_enum=False),
        nullable=False,
        default=UserRole.STUDENT,
    )
    status: Mapped[UserStatus] = mapped_column(
        SqlEnum(UserStatus, name="user_status", native_enum=False),
        nullable=False,
        default=UserStatus.PENDING,
    )
    avatar: Mapped[str | None] = mapped_column(String(512), default=PLACEHOLDER_AVATAR)
    join_date: Mapped[date] = mapped_column(Date, nullable=False, default=date.today)
    department: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[str] = mapped_column(String(64), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)

    @property
    def is_pending(self) -> bool:
        return self.status == UserStatus.PENDING


class Event(TimestampedBase):
    __tablename__ = "event"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    # Date and time are kept as the free-form strings the admin UI submits
    date: Mapped[str] = mapped_column(String(32), nullable=False)
    time: Mapped[str] = mapped_column(String(32), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    status: Mapped[EventStatus] = mapped_column(
        SqlEnum(EventStatus, name="event_status", native_enum=False),
        nullable=False,
        default=EventStatus.UPCOMING,
    )
    attendees: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    max_attendees: Mapped[int] = mapped_column(Integer, nullable=False)
    category: Mapped[str] = mapped_column(String(128), nullable=False)
    # Soft reference: no foreign key, deleting the user leaves the event alone
    organizer_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    # Name snapshot taken at creation, refreshed only when organizer_id is updated
    organizer: Mapped[str] = mapped_column(String(255), nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    image: Mapped[str | None] = mapped_column(String(512))


class Activity(db.Model):
    __tablename__ = "activity"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False)
    user_name: Mapped[str] = mapped_column(String(255), nullable=False)
    user_avatar: Mapped[str | None] = mapped_column(String(512), default=PLACEHOLDER_AVATAR)
    action: Mapped[str] = mapped_column(String(512), nullable=False)
    target_type: Mapped[ActivityTarget] = mapped_column(
        SqlEnum(ActivityTarget, name="activity_target", native_enum=False),
        nullable=False,
    )
    target_id: Mapped[int | None] = mapped_column(Integer)
    timestamp: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow, index=True)


class Resource(TimestampedBase):
    __tablename__ = "resource"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[ResourceType] = mapped_column(
        SqlEnum(ResourceType, name="resource_type", native_enum=False),
        nullable=False,
    )
    category: Mapped[ResourceCategory] = mapped_column(
        SqlEnum(ResourceCategory, name="resource_category", native_enum=False),
        nullable=False,
    )
    url: Mapped[str] = mapped_column(String(1024), nullable=False)
    file_name: Mapped[str | None] = mapped_column(String(255))
    file_size: Mapped[int | None] = mapped_column(Integer)
    upload_date: Mapped[date] = mapped_column(Date, nullable=False, default=date.today)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    created_by: Mapped[int] = mapped_column(Integer, nullable=False, default=1)


class Notification(TimestampedBase):
    __tablename__ = "notification"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[NotificationType] = mapped_column(
        SqlEnum(NotificationType, name="notification_type", native_enum=False),
        nullable=False,
        default=NotificationType.INFO,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    is_important: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    target_audience: Mapped[TargetAudience] = mapped_column(
        SqlEnum(TargetAudience, name="target_audience", native_enum=False),
        nullable=False,
        default=TargetAudience.ALL,
    )
    expiry_date: Mapped[datetime | None] = mapped_column(DateTime)
    created_by: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    def is_expired(self, now: datetime | None = None) -> bool:
        if self.expiry_date is None:
            return False
        return self.expiry_date <= (now or utcnow())


class PortalSettings(db.Model):
    """Singleton row (id 1) holding the student portal banner settings."""

    __tablename__ = "portal_settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    welcome_message: Mapped[str] = mapped_column(Text, nullable=False, default="")
    is_maintenance_mode: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    maintenance_message: Mapped[str] = mapped_column(Text, nullable=False, default="")
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
