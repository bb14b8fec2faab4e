"""User ORM model. Credentials are handled by the auth service, not here."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import CatalogModel


class User(CatalogModel, Base):
    """User model. Table: users. username is unique."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    fullname: Mapped[str] = mapped_column(String, nullable=False)
