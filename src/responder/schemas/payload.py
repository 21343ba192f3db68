"""Pydantic v2 schema for the root endpoint payload.

Python attribute names are English; the wire keys kept by the deployed
clients are Spanish (``mensaje``, ``estado``), so both fields use aliases.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ResponsePayload(BaseModel):
    """Payload returned on ``/``. Built fresh for every request."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    message: str = Field(..., alias="mensaje")
    status: str = Field(..., alias="estado")
    instance_id: int = Field(..., ge=0, lt=10000)
    timestamp: str  # ISO-8601, UTC, millisecond precision
