"""Pydantic schemas for API response models."""

from responder.schemas.payload import ResponsePayload

__all__ = ["ResponsePayload"]
