"""Dashboard aggregates."""

from __future__ import annotations

from flask import Blueprint

from iedc.blueprints.common.responses import api_errors, int_arg, success
from iedc.services import directory_store
from iedc.services.serializers import serialize_activity, serialize_event

dashboard_bp = Blueprint("dashboard", __name__)


@dashboard_bp.route("/stats", methods=["GET"])
@api_errors("Failed to fetch dashboard statistics")
def stats():
    return success(directory_store().dashboard_stats())


@dashboard_bp.route("/activities", methods=["GET"])
@api_errors("Failed to fetch activities")
def recent_activities():
    activities = directory_store().list_activities(int_arg('limit', 10))
    return success({
        'activities': [serialize_activity(a) for a in activities],
        'total': len(activities),
    })


@dashboard_bp.route("/upcoming-events", methods=["GET"])
@api_errors("Failed to fetch upcoming events")
def upcoming_events():
    events = directory_store().upcoming_events(int_arg('limit', 5))
    return success([serialize_event(e) for e in events])


__all__ = ["dashboard_bp"]
