"""Schemas shared by every endpoint."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serializing field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ErrorResponse(CamelModel):
    """Error body returned with every non-2xx response.

    Attributes:
        error: Machine-readable error kind (e.g. ``fetch_failed``).
        message: Human-readable message.
        details: Optional debugging context.
    """

    error: str = Field(..., description="Error kind")
    message: str = Field(..., description="Human-readable message")
    details: dict[str, Any] | None = Field(None, description="Debugging context")
