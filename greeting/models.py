"""Pydantic models shared across application layers."""

from pydantic import BaseModel, Field


class DataResponse(BaseModel):
    """Payload returned by ``GET /api/data``."""

    message: str = Field(description="Greeting shown by the frontend.")


class ErrorResponse(BaseModel):
    """Error body returned for framework-level failures."""

    error: str
    detail: str | None = None
