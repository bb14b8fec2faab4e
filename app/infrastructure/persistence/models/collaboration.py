"""Collaboration ORM model: users with owner-equivalent access to a playlist."""

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import StringIdMixin


class Collaboration(StringIdMixin, Base):
    """Table: collaborations. Unique (playlist_id, user_id)."""

    __tablename__ = "collaborations"

    playlist_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("playlists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        UniqueConstraint("playlist_id", "user_id", name="uq_collaboration"),
    )
