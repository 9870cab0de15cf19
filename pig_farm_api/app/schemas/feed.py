"""
Pydantic models for feed records.

``pig_id`` is stored as given; it is not checked against the pig
collection.
"""

from pydantic import Field

from .base import Number, RecordDate, RecordInput, RequiredText, StoredRecord


class FeedCreate(RecordInput):
    """Schema for logging a feeding."""

    pig_id: RequiredText = Field(..., examples=["5f0c2a4e-3b1d-4c8e-9f6a-2d7b1e0c9a11"])
    feed_type: RequiredText = Field(..., examples=["grower pellets"])
    quantity: Number = Field(..., examples=[2.5])
    date: RecordDate = Field(..., examples=["2024-03-15"])


class Feed(FeedCreate, StoredRecord):
    """A stored feed record."""
