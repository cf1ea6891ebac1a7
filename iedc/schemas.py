"""
Request schemas for the JSON API.

Each pydantic model validates one request body. Field names are snake_case
in Python and camelCase on the wire (e.g. ``max_attendees`` <-> ``maxAttendees``).
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, Literal, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictBool, StrictInt, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from iedc.models import (
    EventStatus,
    NotificationType,
    ResourceCategory,
    ResourceType,
    TargetAudience,
    UserRole,
    UserStatus,
)

Text = Annotated[str, Field(min_length=1)]

# JSON numbers and booleans only; "50" or "true" are rejected rather than coerced
Count = Annotated[int, Field(strict=True, ge=0)]
PositiveInt = Annotated[int, Field(strict=True, ge=1)]
Priority = Annotated[int, Field(strict=True, ge=1, le=10)]
Rating = Annotated[float, Field(strict=True, ge=0, le=5)]


def parse_timestamp(value: Any) -> Any:
    """Accept ISO dates/datetimes (with or without offset), stored as naive UTC."""
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(('Z', 'z')):
            text = text[:-1] + '+00:00'
        value = datetime.fromisoformat(text)
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def format_validation_error(error: ValidationError) -> str:
    """Flatten pydantic errors into "field: message" pairs joined by commas."""
    messages = []
    for item in error.errors():
        field = '.'.join(str(part) for part in item.get('loc', ()))
        messages.append(f"{field}: {item['msg']}" if field else item['msg'])
    return ', '.join(messages)


class RequestSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')

    def values(self, partial: bool = False) -> dict[str, Any]:
        """Field values for the store.

        Omitted and null fields are dropped so the store applies its own
        defaults (create) or leaves the stored value alone (update).
        """
        return self.model_dump(exclude_unset=partial, exclude_none=True)


# Auth

class LoginRequest(RequestSchema):
    email: EmailStr
    password: Text
    user_type: Literal['admin', 'user']


class RegisterRequest(RequestSchema):
    name: Text
    email: EmailStr
    password: Annotated[str, Field(min_length=6)]
    phone: Text
    department: Text
    location: Text


class ApproveRequest(RequestSchema):
    approve: StrictBool = False


# Users

class CreateUserRequest(RequestSchema):
    name: Text
    email: EmailStr
    role: UserRole
    department: Text
    phone: Text
    location: Text
    status: Optional[UserStatus] = None


class UpdateUserRequest(RequestSchema):
    name: Optional[Text] = None
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None
    department: Optional[Text] = None
    phone: Optional[Text] = None
    location: Optional[Text] = None
    status: Optional[UserStatus] = None


# Events

class CreateEventRequest(RequestSchema):
    title: Text
    description: Text
    date: Text
    time: Text
    location: Text
    max_attendees: PositiveInt
    category: Text
    organizer_id: PositiveInt
    status: Optional[EventStatus] = None


class UpdateEventRequest(RequestSchema):
    title: Optional[Text] = None
    description: Optional[Text] = None
    date: Optional[Text] = None
    time: Optional[Text] = None
    location: Optional[Text] = None
    max_attendees: Optional[PositiveInt] = None
    category: Optional[Text] = None
    organizer_id: Optional[PositiveInt] = None
    status: Optional[EventStatus] = None
    attendees: Optional[Count] = None
    rating: Optional[Rating] = None


# Content

def _check_url(value: str | None) -> str | None:
    if value is None:
        return value
    parsed = urlparse(value)
    if not parsed.scheme or not (parsed.netloc or parsed.path):
        raise ValueError("Valid URL is required")
    return value


class CreateResourceRequest(RequestSchema):
    title: Text
    description: Text
    type: ResourceType
    category: ResourceCategory
    url: Text
    file_name: Optional[str] = None
    file_size: Optional[StrictInt] = None
    priority: Optional[Priority] = None

    @field_validator('url')
    @classmethod
    def check_url(cls, value):
        return _check_url(value)


class UpdateResourceRequest(RequestSchema):
    title: Optional[Text] = None
    description: Optional[Text] = None
    type: Optional[ResourceType] = None
    category: Optional[ResourceCategory] = None
    url: Optional[Text] = None
    file_name: Optional[str] = None
    file_size: Optional[StrictInt] = None
    priority: Optional[Priority] = None
    is_active: Optional[StrictBool] = None

    @field_validator('url')
    @classmethod
    def check_url(cls, value):
        return _check_url(value)


class CreateNotificationRequest(RequestSchema):
    title: Text
    message: Text
    type: NotificationType
    is_important: Optional[StrictBool] = None
    target_audience: Optional[TargetAudience] = None
    expiry_date: Optional[datetime] = None

    @field_validator('expiry_date', mode='before')
    @classmethod
    def parse_expiry(cls, value):
        return parse_timestamp(value)


class UpdateNotificationRequest(RequestSchema):
    title: Optional[Text] = None
    message: Optional[Text] = None
    type: Optional[NotificationType] = None
    is_important: Optional[StrictBool] = None
    target_audience: Optional[TargetAudience] = None
    expiry_date: Optional[datetime] = None
    is_active: Optional[StrictBool] = None

    @field_validator('expiry_date', mode='before')
    @classmethod
    def parse_expiry(cls, value):
        return parse_timestamp(value)


class PortalSettingsRequest(RequestSchema):
    welcome_message: Optional[str] = None
    is_maintenance_mode: Optional[StrictBool] = None
    maintenance_message: Optional[str] = None
