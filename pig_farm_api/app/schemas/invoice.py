"""
Pydantic models for invoices.

``customer_id`` is an opaque string; customers are not stored by this
service.
"""

from pydantic import Field

from .base import Number, RecordDate, RecordInput, RequiredText, StoredRecord


class InvoiceCreate(RecordInput):
    """Schema for issuing an invoice."""

    customer_id: RequiredText = Field(..., examples=["CUST-0042"])
    amount: Number = Field(..., examples=[1250.0])
    date: RecordDate = Field(..., examples=["2024-03-31"])


class Invoice(InvoiceCreate, StoredRecord):
    """A stored invoice."""
