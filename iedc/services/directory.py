"""User and event store with activity logging."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, or_

from iedc.models import (
    PLACEHOLDER_AVATAR,
    ActivityTarget,
    Event,
    EventStatus,
    User,
    UserRole,
    UserStatus,
)
from iedc.services.activity import DEFAULT_ACTOR, Actor, ActivityLog
from iedc.services.repository import Repository, coerce_enum, commit

# Placeholder figures shown on the dashboard until real finance data exists
PLACEHOLDER_REVENUE = 45680
PLACEHOLDER_MONTHLY_GROWTH = 23.4

ANY = "all"


class RegistrationNotPending(Exception):
    """Raised when approving or rejecting a user who is not awaiting review."""


def actor_for(user: User) -> Actor:
    return Actor(id=user.id, name=user.name, avatar=user.avatar or PLACEHOLDER_AVATAR)


class DirectoryStore:
    """Owns users, events and the activity log."""

    def __init__(self, activity: ActivityLog | None = None):
        self.users: Repository[User] = Repository(User)
        self.events: Repository[Event] = Repository(Event)
        self.activity = activity or ActivityLog()

    # ------------------------------------------------------------------ users

    def list_users(
        self,
        search: str | None = None,
        role: UserRole | str | None = None,
        status: UserStatus | str | None = None,
        department: str | None = None,
        page: int | None = None,
        page_size: int | None = None,
    ) -> tuple[list[User], int]:
        """
        List users matching every given filter, in insertion order.

        Args:
            search: case-insensitive substring of name, email or department
            role: exact role ("all" means any)
            status: exact status ("all" means any)
            department: exact department ("all" means any)
            page: 1-based page, applied only together with page_size
            page_size: items per page

        Returns:
            (users on the requested page, total before pagination)
        """
        criteria = []
        if search:
            criteria.append(or_(
                User.name.icontains(search, autoescape=True),
                User.email.icontains(search, autoescape=True),
                User.department.icontains(search, autoescape=True),
            ))
        try:
            if role and role != ANY:
                criteria.append(User.role == coerce_enum(UserRole, role))
            if status and status != ANY:
                criteria.append(User.status == coerce_enum(UserStatus, status))
        except ValueError:
            return [], 0
        if department and department != ANY:
            criteria.append(User.department == department)

        return self.users.page(self.users.select(*criteria), page, page_size)

    def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def find_user_by_email(self, email: str) -> User | None:
        return self.users.first(User.email == email)

    def email_taken(self, email: str, exclude_id: int | None = None) -> bool:
        criteria = [User.email == email]
        if exclude_id is not None:
            criteria.append(User.id != exclude_id)
        return self.users.count(*criteria) > 0

    def create_user(self, data: dict[str, Any]) -> User:
        """Create a user; status defaults to pending until an admin reviews it."""
        values = dict(data)
        values.setdefault('status', UserStatus.PENDING)
        values.setdefault('avatar', PLACEHOLDER_AVATAR)

        user = self.users.add(values)
        self.activity.record(actor_for(user), "Created new user account", ActivityTarget.USER, user.id)
        commit()
        return user

    def update_user(self, user_id: int, data: dict[str, Any]) -> User | None:
        user = self.users.get(user_id)
        if user is None:
            return None

        self.users.merge(user, data)
        self.activity.record(actor_for(user), "Updated user profile", ActivityTarget.USER, user.id)
        commit()
        return user

    def delete_user(self, user_id: int, actor: Actor | None = None) -> bool:
        """Remove a user. Events organized by the user are left untouched."""
        user = self.users.get(user_id)
        if user is None:
            return False

        name = user.name
        self.users.remove(user)
        self.activity.record(actor or DEFAULT_ACTOR, f"Deleted user {name}", ActivityTarget.USER, user_id)
        commit()
        return True

    def review_registration(self, user_id: int, approve: bool) -> User | None:
        """
        Move a pending user to active (approve) or inactive (reject).

        Returns:
            The updated user, or None when the id is unknown

        Raises:
            RegistrationNotPending: the user is not awaiting approval
        """
        user = self.users.get(user_id)
        if user is None:
            return None
        if not user.is_pending:
            raise RegistrationNotPending(f"User {user_id} is {user.status.value}, not pending")

        new_status = UserStatus.ACTIVE if approve else UserStatus.INACTIVE
        return self.update_user(user_id, {'status': new_status})

    # ----------------------------------------------------------------- events

    def list_events(
        self,
        search: str | None = None,
        status: EventStatus | str | None = None,
        category: str | None = None,
        organizer_id: int | None = None,
        page: int | None = None,
        page_size: int | None = None,
    ) -> tuple[list[Event], int]:
        """List events matching every given filter, in insertion order.

        Category compares case-insensitively; search covers title,
        description and the organizer name snapshot.
        """
        criteria = []
        if search:
            criteria.append(or_(
                Event.title.icontains(search, autoescape=True),
                Event.description.icontains(search, autoescape=True),
                Event.organizer.icontains(search, autoescape=True),
            ))
        if status and status != ANY:
            try:
                criteria.append(Event.status == coerce_enum(EventStatus, status))
            except ValueError:
                return [], 0
        if category and category != ANY:
            criteria.append(func.lower(Event.category) == category.lower())
        if organizer_id:
            criteria.append(Event.organizer_id == organizer_id)

        return self.events.page(self.events.select(*criteria), page, page_size)

    def get_event(self, event_id: int) -> Event | None:
        return self.events.get(event_id)

    def create_event(self, data: dict[str, Any]) -> Event | None:
        """
        Create an event organized by an existing user.

        Returns:
            The new event, or None (nothing stored) when organizer_id is unknown
        """
        organizer_id = data.get('organizer_id')
        organizer = self.users.get(organizer_id) if organizer_id is not None else None
        if organizer is None:
            return None

        values = dict(data)
        values.setdefault('status', EventStatus.UPCOMING)
        values.update(attendees=0, rating=0, organizer=organizer.name)

        event = self.events.add(values)
        self.activity.record(
            actor_for(organizer), f"Created new event: {event.title}", ActivityTarget.EVENT, event.id
        )
        commit()
        return event

    def update_event(self, event_id: int, data: dict[str, Any], actor: Actor | None = None) -> Event | None:
        event = self.events.get(event_id)
        if event is None:
            return None

        values = dict(data)
        if 'organizer_id' in values:
            organizer = self.users.get(values['organizer_id'])
            if organizer is not None:
                values['organizer'] = organizer.name

        self.events.merge(event, values)
        self.activity.record(
            actor or DEFAULT_ACTOR, f"Updated event: {event.title}", ActivityTarget.EVENT, event.id
        )
        commit()
        return event

    def delete_event(self, event_id: int, actor: Actor | None = None) -> bool:
        event = self.events.get(event_id)
        if event is None:
            return False

        title = event.title
        self.events.remove(event)
        self.activity.record(actor or DEFAULT_ACTOR, f"Deleted event: {title}", ActivityTarget.EVENT, event_id)
        commit()
        return True

    def upcoming_events(self, limit: int = 5) -> list[Event]:
        return self.list_events(status=EventStatus.UPCOMING, page=1, page_size=limit)[0]

    # ------------------------------------------------------------ dashboard

    def list_activities(self, limit: int = 10):
        return self.activity.recent(limit)

    def dashboard_stats(self) -> dict[str, Any]:
        """Headline counts for the admin dashboard.

        Revenue and growth are fixed placeholder figures, not computed.
        """
        return {
            'totalUsers': self.users.count(),
            'activeUsers': self.users.count(User.status == UserStatus.ACTIVE),
            'pendingUsers': self.users.count(User.status == UserStatus.PENDING),
            'inactiveUsers': self.users.count(User.status == UserStatus.INACTIVE),
            'totalEvents': self.events.count(),
            'upcomingEvents': self.events.count(Event.status == EventStatus.UPCOMING),
            'ongoingEvents': self.events.count(Event.status == EventStatus.ONGOING),
            'completedEvents': self.events.count(Event.status == EventStatus.COMPLETED),
            'totalRevenue': PLACEHOLDER_REVENUE,
            'monthlyGrowth': PLACEHOLDER_MONTHLY_GROWTH,
        }


__all__ = ["DirectoryStore", "RegistrationNotPending", "actor_for"]
