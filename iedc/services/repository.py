"""Generic id-keyed repository over a single model."""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, Iterable, Type, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError

from iedc.extensions import db
from iedc.models import utcnow

Model = TypeVar("Model", bound=db.Model)
E = TypeVar("E", bound=Enum)

PROTECTED_FIELDS = frozenset({"id", "created_at", "updated_at"})


def commit() -> None:
    """Commit the current session, rolling back before re-raising on failure."""
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        raise


def coerce_enum(enum_cls: Type[E], value: E | str | None) -> E | None:
    """Map a filter value onto an enum member.

    Raises ValueError for values outside the enum so callers can turn an
    unknown filter into an empty result.
    """
    if value is None or isinstance(value, enum_cls):
        return value
    return enum_cls(str(value))


def paginate_bounds(page: int | None, page_size: int | None) -> tuple[int, int] | None:
    """Return (offset, limit) when both page and page_size are positive."""
    if not page or not page_size or page < 1 or page_size < 1:
        return None
    return (page - 1) * page_size, page_size


class Repository(Generic[Model]):
    """Id-keyed access to one table, iterated in insertion (id) order.

    Nothing here commits; the owning store decides the transaction
    boundary so that a record and its activity entry land together.
    """

    def __init__(self, model: Type[Model]):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
        """
        self.model = model

    def get(self, object_id: int) -> Model | None:
        """Get record by ID, or None when it does not exist."""
        return db.session.get(self.model, object_id)

    def select(self, *criteria: Any, order_by: Iterable[Any] | None = None) -> Select:
        """
        Build a filtered statement.

        Args:
            criteria: SQLAlchemy filter expressions, AND-combined
            order_by: order clauses; defaults to insertion order

        Returns:
            Select statement over the model
        """
        stmt = select(self.model).where(*criteria)
        if order_by is None:
            order_by = (self.model.id.asc(),)
        return stmt.order_by(*order_by)

    def fetch(self, stmt: Select) -> list[Model]:
        return list(db.session.execute(stmt).scalars())

    def first(self, *criteria: Any) -> Model | None:
        return db.session.execute(self.select(*criteria).limit(1)).scalars().first()

    def count(self, *criteria: Any) -> int:
        stmt = select(func.count()).select_from(self.model).where(*criteria)
        return db.session.execute(stmt).scalar_one()

    def page(
        self,
        stmt: Select,
        page: int | None = None,
        page_size: int | None = None,
    ) -> tuple[list[Model], int]:
        """
        Run a statement with optional pagination.

        Args:
            stmt: statement from select()
            page: 1-based page number
            page_size: items per page

        Returns:
            (items for the page, total matching items before pagination)
        """
        total = db.session.execute(
            select(func.count()).select_from(stmt.order_by(None).subquery())
        ).scalar_one()

        bounds = paginate_bounds(page, page_size)
        if bounds is not None:
            offset, limit = bounds
            stmt = stmt.offset(offset).limit(limit)

        return list(db.session.execute(stmt).scalars()), total

    def add(self, data: dict[str, Any]) -> Model:
        """Create a record with fresh timestamps and flush it to obtain its id."""
        values = {k: v for k, v in data.items() if k not in PROTECTED_FIELDS}
        instance = self.model(**values)
        if hasattr(self.model, "created_at"):
            now = utcnow()
            instance.created_at = now
            instance.updated_at = now
        db.session.add(instance)
        db.session.flush()
        return instance

    def merge(self, instance: Model, data: dict[str, Any]) -> Model:
        """Apply a partial update onto an existing record.

        The id and created_at never change and updated_at never moves
        backwards, even if the clock does.
        """
        for key, value in data.items():
            if hasattr(instance, key) and key not in PROTECTED_FIELDS:
                setattr(instance, key, value)

        if hasattr(instance, "updated_at"):
            now = utcnow()
            previous = instance.updated_at
            instance.updated_at = now if previous is None or now >= previous else previous

        db.session.flush()
        return instance

    def remove(self, instance: Model) -> None:
        db.session.delete(instance)
        db.session.flush()


__all__ = ["Repository", "coerce_enum", "commit", "paginate_bounds"]
