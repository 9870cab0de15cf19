"""
Pydantic models for veterinary health records.

Like feed records, health records reference a pig by ``pig_id``
without any existence check.
"""

from pydantic import Field

from .base import RecordDate, RecordInput, RequiredText, StoredRecord


class HealthRecordCreate(RecordInput):
    """Schema for recording a health event."""

    pig_id: RequiredText = Field(..., examples=["5f0c2a4e-3b1d-4c8e-9f6a-2d7b1e0c9a11"])
    description: RequiredText = Field(..., examples=["Routine vaccination"])
    date: RecordDate = Field(..., examples=["2024-03-15"])
    veterinarian: RequiredText = Field(..., examples=["Dr. Herriot"])


class HealthRecord(HealthRecordCreate, StoredRecord):
    """A stored health record."""
