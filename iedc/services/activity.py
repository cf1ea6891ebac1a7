"""Append-only activity log shown on the admin dashboard."""

from __future__ import annotations

from dataclasses import dataclass

from iedc.models import PLACEHOLDER_AVATAR, Activity, ActivityTarget
from iedc.services.repository import Repository


@dataclass(frozen=True)
class Actor:
    """Who an activity entry is attributed to."""

    id: int
    name: str
    avatar: str = PLACEHOLDER_AVATAR


# Attribution used when an administrative change arrives without a known user
DEFAULT_ACTOR = Actor(id=1, name="Admin")


class ActivityLog:
    """Write-only from the stores' point of view, read newest first."""

    def __init__(self):
        self.entries: Repository[Activity] = Repository(Activity)

    def record(
        self,
        actor: Actor,
        action: str,
        target_type: ActivityTarget,
        target_id: int | None = None,
    ) -> Activity:
        """
        Append an activity entry to the current transaction.

        Args:
            actor: user the entry is attributed to
            action: human readable description (e.g. "Updated user profile")
            target_type: kind of entity affected
            target_id: ID of entity affected
        """
        return self.entries.add({
            'user_id': actor.id,
            'user_name': actor.name,
            'user_avatar': actor.avatar,
            'action': action,
            'target_type': target_type,
            'target_id': target_id,
        })

    def recent(self, limit: int = 10) -> list[Activity]:
        """Most recent entries first; entries sharing a timestamp keep insertion order."""
        stmt = self.entries.select(
            order_by=(Activity.timestamp.desc(), Activity.id.asc())
        ).limit(limit)
        return self.entries.fetch(stmt)

    def count(self) -> int:
        return self.entries.count()


__all__ = ["Actor", "ActivityLog", "DEFAULT_ACTOR"]
