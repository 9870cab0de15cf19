"""
Pydantic schema definitions for farm records.

Each entity defines a ``<Entity>Create`` model, the field-schema
descriptor for incoming payloads, and a stored record model that adds
the generated ``id`` and ``createdAt``.  Shared field types and the
record factory live in ``base``.
"""

from .base import RecordInput, StoredRecord, build_record
from .feed import Feed, FeedCreate
from .health_record import HealthRecord, HealthRecordCreate
from .inventory import InventoryItem, InventoryItemCreate
from .invoice import Invoice, InvoiceCreate
from .pig import Pig, PigCreate

__all__ = [
    "RecordInput",
    "StoredRecord",
    "build_record",
    "Feed",
    "FeedCreate",
    "HealthRecord",
    "HealthRecordCreate",
    "InventoryItem",
    "InventoryItemCreate",
    "Invoice",
    "InvoiceCreate",
    "Pig",
    "PigCreate",
]
