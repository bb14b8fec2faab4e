"""Album ORM model."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CatalogModel


class Album(CatalogModel, Base):
    """Album model. Table: albums. cover holds the uploaded cover URL."""

    __tablename__ = "albums"

    name: Mapped[str] = mapped_column(String, nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    cover: Mapped[str | None] = mapped_column(String(256), nullable=True)
