"""Pydantic models for farm inventory items."""

from pydantic import Field

from .base import Number, RecordInput, RequiredText, StoredRecord


class InventoryItemCreate(RecordInput):
    """Schema for adding an inventory item."""

    item_name: RequiredText = Field(..., examples=["Corn feed (25kg bag)"])
    quantity: Number = Field(..., examples=[40])
    cost: Number = Field(..., examples=[18.75])


class InventoryItem(InventoryItemCreate, StoredRecord):
    """A stored inventory item."""
