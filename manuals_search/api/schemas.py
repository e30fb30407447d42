# manuals_search/api/schemas.py
"""API response schemas."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from ..models.manual import Manual


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str
    error_id: Optional[str] = None


class DebugResponse(BaseModel):
    """Diagnostic summary returned by /api/manuals?debug=1."""

    model_config = ConfigDict(populate_by_name=True)

    count: int
    sample: list[Manual] = Field(default_factory=list)
    env_present: dict[str, bool] = Field(default_factory=dict, alias="envPresent")


class HealthResponse(BaseModel):
    status: str
    version: str
