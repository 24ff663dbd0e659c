"""Response envelope shared by every endpoint."""

from typing import Literal

from pydantic import BaseModel


class MessageResponse(BaseModel):
    status: Literal["success"] = "success"
    message: str


class ErrorResponse(BaseModel):
    """Body of every error response."""

    status: Literal["error"] = "error"
    message: str
