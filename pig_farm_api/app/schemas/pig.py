"""Pydantic models for pigs kept on the farm."""

from pydantic import Field

from .base import Number, RecordDate, RecordInput, RequiredText, StoredRecord


class PigCreate(RecordInput):
    """Schema for registering a pig."""

    name: RequiredText = Field(..., examples=["Wilbur"])
    breed: RequiredText = Field(..., examples=["Yorkshire"])
    birth_date: RecordDate = Field(..., examples=["2023-01-01"])
    weight: Number = Field(..., examples=[50])
    health_status: RequiredText = Field(..., examples=["healthy"])


class Pig(PigCreate, StoredRecord):
    """A stored pig."""
