from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from ..core.errors import ThemeParksApiError
from ..core.schemas import EntityRequest, ScheduleRequest, ToolResponse
from .client import ThemeParksClient


logger = logging.getLogger(__name__)

PARTIAL_SCHEDULE_MESSAGE = "Error: If providing year or month for the schedule, both must be specified."


def list_destinations(client: ThemeParksClient) -> ToolResponse:
    """All top-level destinations (e.g. Walt Disney World Resort)."""
    return _fetch(client, "/destinations", "Error listing destinations")


def get_entity_details(client: ThemeParksClient, entity_id: str) -> ToolResponse:
    """Static information for one entity."""
    req = _entity_request(entity_id)
    if isinstance(req, ToolResponse):
        return req
    return _fetch(client, f"/entity/{req.entity_id}", f"Error fetching details for entity {req.entity_id}")


def get_entity_children(client: ThemeParksClient, entity_id: str) -> ToolResponse:
    """Direct children of an entity (parks of a destination, attractions of a park, ...)."""
    req = _entity_request(entity_id)
    if isinstance(req, ToolResponse):
        return req
    return _fetch(
        client,
        f"/entity/{req.entity_id}/children",
        f"Error fetching children for entity {req.entity_id}",
    )


def get_entity_live_data(client: ThemeParksClient, entity_id: str) -> ToolResponse:
    """Live data (wait times, operating hours, show times) for an entity and its children."""
    req = _entity_request(entity_id)
    if isinstance(req, ToolResponse):
        return req
    return _fetch(
        client,
        f"/entity/{req.entity_id}/live",
        f"Error fetching live data for entity {req.entity_id}",
    )


def get_entity_schedule(
    client: ThemeParksClient,
    entity_id: str,
    year: Optional[int] = None,
    month: Optional[int] = None,
) -> ToolResponse:
    """Operating schedule of an entity, either general or for one year/month.

    The API only knows `/schedule` and `/schedule/{year}/{month}`, so a lone year
    or month is rejected before any request is made.
    """
    try:
        req = ScheduleRequest(entity_id=entity_id, year=year, month=month)
    except ValidationError as exc:
        return _invalid(exc)

    if req.has_partial_period:
        return ToolResponse.failure(PARTIAL_SCHEDULE_MESSAGE)

    path = schedule_path(req)
    return _fetch(client, path, f"Error fetching schedule for entity {req.entity_id}")


def schedule_path(req: ScheduleRequest) -> str:
    path = f"/entity/{req.entity_id}/schedule"
    if req.year is not None and req.month is not None:
        path += f"/{req.year}/{req.month}"
    return path


def _fetch(client: ThemeParksClient, path: str, error_prefix: str) -> ToolResponse:
    try:
        data = client.get(path)
    except ThemeParksApiError as exc:
        return ToolResponse.failure(f"{error_prefix}: {exc}")
    return ToolResponse.success(data)


def _entity_request(entity_id: str):
    try:
        return EntityRequest(entity_id=entity_id)
    except ValidationError as exc:
        return _invalid(exc)


def _invalid(exc: ValidationError) -> ToolResponse:
    problems = "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    logger.info("Rejected tool parameters: %s", problems)
    return ToolResponse.failure(f"Invalid parameters: {problems}")
