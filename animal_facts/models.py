"""Response envelopes returned by the service."""

from pydantic import BaseModel, Field


class FactResponse(BaseModel):
    """Successful fact lookup."""

    fact: str = Field(..., description="Fact text from the upstream provider")
    animal: str = Field(..., description="Selector of the animal the fact is about")


class ErrorResponse(BaseModel):
    """Error response envelope."""

    error: str = Field(..., description="High-level error message")
    detail: str | None = Field(None, description="Additional context for debugging")
