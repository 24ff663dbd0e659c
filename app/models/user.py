"""ORM model for application users (registration and login)."""

import uuid

from sqlalchemy import Column, DateTime, String, Uuid

from app.models.base import Base

DEFAULT_ROLE = "user"


class User(Base):
    """
    User account for JWT authentication.

    email is unique and matched case-sensitively. role is stored but not
    enforced by any route.
    """

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=DEFAULT_ROLE)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
