"""
Bookstore API - Shared Schemas
===============================

What:  The camelCase base model used by every transfer object, plus the
       response models that are not tied to one entity.
How:   Field names stay snake_case in Python; `to_camel` produces the JSON
       aliases. FastAPI serializes response models by alias, and
       populate_by_name lets clients send either spelling.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for transfer objects exchanged as camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ValidationErrorResponse(BaseModel):
    """
    Body of a 400 caused by request validation.

    Example:
        {
            "title": "One or more validation errors occurred.",
            "status": 400,
            "errors": [{"type": "missing", "loc": ["body", "title"], "msg": "Field required"}]
        }
    """
    title: str = Field(description="Summary of the failure")
    status: int = Field(default=400, description="HTTP status code")
    errors: List[Dict[str, Any]] = Field(description="Field-level errors reported by pydantic")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
