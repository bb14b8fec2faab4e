"""SQLAlchemy mixins for common model patterns.

Provides: StringIdMixin and TimestampMixin, combined as CatalogModel.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func


class StringIdMixin:
    """Mixin for models keyed by a prefixed string id (e.g. song-<cuid>).

    Ids are assigned by the repository at creation so they can be returned
    and used for cache keys before the insert round-trip.
    """

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String(64), primary_key=True)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class CatalogModel(StringIdMixin, TimestampMixin):
    """Combined mixin: string id + created_at/updated_at."""

    __abstract__ = True
