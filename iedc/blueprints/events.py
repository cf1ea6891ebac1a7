"""Admin event management API."""

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
from iedc.schemas import CreateEventRequest, UpdateEventRequest
from iedc.services import directory_store
from iedc.services.serializers import serialize_event

events_bp = Blueprint("events", __name__)


@events_bp.route("", methods=["GET"])
@api_errors("Failed to fetch events")
def list_events():
    page = int_arg('page', DEFAULT_PAGE)
    page_size = int_arg('pageSize', DEFAULT_PAGE_SIZE)
    events, total = directory_store().list_events(
        search=request.args.get('search'),
        status=request.args.get('status'),
        category=request.args.get('category'),
        organizer_id=parse_id(request.args.get('organizerId')),
        page=page,
        page_size=page_size,
    )
    return success(page_payload('events', [serialize_event(e) for e in events], total, page, page_size))


@events_bp.route("/<event_id>", methods=["GET"])
@api_errors("Failed to fetch event")
def get_event(event_id):
    parsed_id = parse_id(event_id)
    if parsed_id is None:
        return failure("Invalid event ID", 400)

    event = directory_store().get_event(parsed_id)
    if event is None:
        return failure("Event not found", 404)
    return success(serialize_event(event))


@events_bp.route("", methods=["POST"])
@api_errors("Failed to create event")
def create_event():
    values = load_body(CreateEventRequest).values()
    values.setdefault('image', "/placeholder.svg")

    event = directory_store().create_event(values)
    if event is None:
        return failure("Organizer not found", 400)
    return success(serialize_event(event), "Event created successfully", 201)


@events_bp.route("/<event_id>", methods=["PUT"])
@api_errors("Failed to update event")
def update_event(event_id):
    parsed_id = parse_id(event_id)
    if parsed_id is None:
        return failure("Invalid event ID", 400)

    values = load_body(UpdateEventRequest).values(partial=True)
    store = directory_store()
    if 'organizer_id' in values and store.get_user(values['organizer_id']) is None:
        return failure("Organizer not found", 400)

    event = store.update_event(parsed_id, values, actor=current_actor())
    if event is None:
        return failure("Event not found", 404)
    return success(serialize_event(event), "Event updated successfully")


@events_bp.route("/<event_id>", methods=["DELETE"])
@api_errors("Failed to delete event")
def delete_event(event_id):
    parsed_id = parse_id(event_id)
    if parsed_id is None:
        return failure("Invalid event ID", 400)

    if not directory_store().delete_event(parsed_id, actor=current_actor()):
        return failure("Event not found", 404)
    return success(message="Event deleted successfully")


__all__ = ["events_bp"]
