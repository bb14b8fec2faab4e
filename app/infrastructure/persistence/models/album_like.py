"""User album like ORM model."""

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import StringIdMixin


class UserAlbumLike(StringIdMixin, Base):
    """Table: user_album_likes. A user likes an album at most once."""

    __tablename__ = "user_album_likes"

    user_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    album_id: Mapped[str] = mapped_column(
        String(64),
        ForeignKey("albums.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        UniqueConstraint("user_id", "album_id", name="uq_user_album_like"),
    )
