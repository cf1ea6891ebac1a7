"""Stores and helpers shared by the blueprints and CLI commands."""

from __future__ import annotations

from flask import current_app

from iedc.services.content import ContentStore
from iedc.services.directory import DirectoryStore

DIRECTORY_EXTENSION = "iedc.directory"
CONTENT_EXTENSION = "iedc.content"


def init_stores(app) -> tuple[DirectoryStore, ContentStore]:
    """Construct the stores once per application and register them on it."""
    directory = DirectoryStore()
    content = ContentStore()
    app.extensions[DIRECTORY_EXTENSION] = directory
    app.extensions[CONTENT_EXTENSION] = content
    return directory, content


def directory_store() -> DirectoryStore:
    return current_app.extensions[DIRECTORY_EXTENSION]


def content_store() -> ContentStore:
    return current_app.extensions[CONTENT_EXTENSION]


__all__ = ["init_stores", "directory_store", "content_store"]
