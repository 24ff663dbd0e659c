"""Request/response schemas for auth endpoints."""

import uuid
from datetime import datetime
from typing import Literal

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, field_validator


class RegisterRequest(BaseModel):
    """Payload for account registration."""

    email: str = Field(..., max_length=255, description="Email address (stored and matched exactly)")
    password: str = Field(..., min_length=6, description="Password (at least 6 characters)")
    full_name: str = Field(..., min_length=2, max_length=255, description="Full name")

    @field_validator("email")
    @classmethod
    def validate_email_syntax(cls, v: str) -> str:
        # Syntax check only; the address is kept exactly as given.
        try:
            validate_email(v, check_deliverability=False)
        except EmailNotValidError as e:
            raise ValueError("Invalid email address") from e
        return v


class LoginRequest(BaseModel):
    """Credentials for login."""

    email: str = Field(..., description="Email address")
    password: str = Field(..., description="Password")


class UserPublic(BaseModel):
    """Public projection of a user; never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    email: str
    full_name: str
    role: str
    created_at: datetime
    updated_at: datetime


class RegisteredUser(BaseModel):
    user: UserPublic


class RegisterResponse(BaseModel):
    status: Literal["success"] = "success"
    message: str = "User created successfully"
    data: RegisteredUser


class LoginResponse(BaseModel):
    """JWT access token returned after successful login."""

    status: Literal["success"] = "success"
    token: str = Field(..., description="JWT bearer token, valid for 24 hours")
