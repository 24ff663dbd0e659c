"""SQLAlchemy declarative Base shared by users and products."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base; alembic/env.py autogenerates from Base.metadata."""

    pass
