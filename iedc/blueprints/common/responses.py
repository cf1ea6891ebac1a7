"""Response envelopes and request parsing shared by the API blueprints."""

from __future__ import annotations

from functools import wraps
from typing import Any, Type, TypeVar

from flask import current_app, jsonify, request
from pydantic import BaseModel, ValidationError
from werkzeug.exceptions import HTTPException

from iedc.extensions import db
from iedc.schemas import format_validation_error

Schema = TypeVar("Schema", bound=BaseModel)

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


def success(data: Any = None, message: str | None = None, status: int = 200):
    payload: dict[str, Any] = {'success': True}
    if data is not None:
        payload['data'] = data
    if message:
        payload['message'] = message
    return jsonify(payload), status


def failure(error: str, status: int, message: str | None = None):
    payload: dict[str, Any] = {'success': False, 'error': error}
    if message:
        payload['message'] = message
    return jsonify(payload), status


def validation_failure(exc: ValidationError):
    return failure("Validation failed", 400, format_validation_error(exc))


def auth_response(status: int = 200, **fields: Any):
    """Auth endpoints answer with a flat body: {success, user?, token?, error?, message?}."""
    payload: dict[str, Any] = {'success': status < 400}
    payload.update({key: value for key, value in fields.items() if value is not None})
    return jsonify(payload), status


def parse_id(raw: str) -> int | None:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def int_arg(name: str, default: int) -> int:
    """Positive integer query argument; anything else yields the default."""
    try:
        value = int(request.args.get(name, ''))
    except ValueError:
        return default
    return value if value > 0 else default


def bool_arg(name: str) -> bool | None:
    """Query booleans accept "true"/"false"; anything else means no filter."""
    raw = request.args.get(name)
    if raw == 'true':
        return True
    if raw == 'false':
        return False
    return None


def load_body(schema: Type[Schema]) -> Schema:
    """Validate the JSON body; a missing or malformed body validates as empty.

    Raises:
        ValidationError: the body does not satisfy the schema
    """
    data = request.get_json(silent=True)
    return schema.model_validate(data if data is not None else {})


def page_payload(key: str, items: list[dict[str, Any]], total: int, page: int, page_size: int) -> dict[str, Any]:
    return {key: items, 'total': total, 'page': page, 'pageSize': page_size}


def api_errors(message: str):
    """Map validation errors to 400 and unexpected errors to a logged 500."""

    def decorator(view_func):
        @wraps(view_func)
        def wrapped(*args, **kwargs):
            try:
                return view_func(*args, **kwargs)
            except ValidationError as exc:
                return validation_failure(exc)
            except HTTPException:
                raise
            except Exception:
                current_app.logger.exception(f"{message} ({request.method} {request.path})")
                db.session.rollback()
                return failure(message, 500)

        return wrapped

    return decorator


__all__ = [
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "api_errors",
    "auth_response",
    "bool_arg",
    "failure",
    "int_arg",
    "load_body",
    "page_payload",
    "parse_id",
    "success",
    "validation_failure",
]
