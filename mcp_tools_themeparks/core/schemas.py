from __future__ import annotations

import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# Same shape zod's .uuid() accepts: 8-4-4-4-12 hex, any case.
UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"

YEAR_MIN = 2000
YEAR_MAX = 2100


class EntityRequest(BaseModel):
    """Parameters shared by all single-entity tools."""
    model_config = ConfigDict(frozen=True)

    entity_id: str = Field(
        ...,
        pattern=UUID_PATTERN,
        description=(
            "The unique GUID identifier for the entity (e.g., a specific destination, "
            "park, attraction, show, or restaurant)."
        ),
    )


class ScheduleRequest(EntityRequest):
    """Schedule lookup: year and month are optional but only meaningful together."""
    year: Optional[int] = Field(
        default=None,
        ge=YEAR_MIN,
        le=YEAR_MAX,
        description="Optional. The year for the schedule (e.g., 2025). If omitted with month, fetches general schedule.",
    )
    month: Optional[int] = Field(
        default=None,
        ge=1,
        le=12,
        description="Optional. The month for the schedule (1-12). Requires year if specified.",
    )

    @property
    def has_partial_period(self) -> bool:
        return (self.year is None) != (self.month is None)


class ToolResponse(BaseModel):
    """Uniform tool result: a text payload, flagged when it describes a failure."""
    model_config = ConfigDict(frozen=True)

    text: str
    is_error: bool = False

    @classmethod
    def success(cls, data: Any) -> "ToolResponse":
        return cls(text=json.dumps(data, indent=2, ensure_ascii=False))

    @classmethod
    def failure(cls, message: str) -> "ToolResponse":
        return cls(text=message, is_error=True)
