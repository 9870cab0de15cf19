"""
Registry of the record collections exposed by the API.

A ``Resource`` bundles everything that differs between collections:
the URL path, the storage table, the field-schema descriptor, the
stored record model, the keys used in JSON responses and the labels
used in messages.  Adding a collection means adding a schema module,
a table migration and an entry here.
"""

from dataclasses import dataclass
from typing import List, Tuple, Type

from pydantic.alias_generators import to_camel

from ..schemas import (
    Feed,
    FeedCreate,
    HealthRecord,
    HealthRecordCreate,
    InventoryItem,
    InventoryItemCreate,
    Invoice,
    InvoiceCreate,
    Pig,
    PigCreate,
    RecordInput,
    StoredRecord,
)


def describe_fields(names: List[str]) -> str:
    """Quote and join field names: ``'a'``, ``'a' and 'b'``, ``'a', 'b', and 'c'``."""
    quoted = [f"'{name}'" for name in names]
    if len(quoted) <= 2:
        return " and ".join(quoted)
    return ", ".join(quoted[:-1]) + ", and " + quoted[-1]


@dataclass(frozen=True)
class Resource:
    """Description of one record collection."""

    path: str
    table: str
    schema: Type[RecordInput]
    record_model: Type[StoredRecord]
    singular_key: str
    plural_key: str
    label: str
    plural_label: str

    @property
    def field_names(self) -> List[str]:
        """Payload keys of the required fields, in declaration order."""
        return [
            field.alias or to_camel(name)
            for name, field in self.schema.model_fields.items()
        ]

    @property
    def invalid_input_message(self) -> str:
        return (
            f"Invalid input: Ensure {describe_fields(self.field_names)} "
            "are provided and are of the correct types."
        )

    @property
    def created_message(self) -> str:
        return f"{self.label[0].upper()}{self.label[1:]} created successfully"

    @property
    def retrieved_message(self) -> str:
        return f"{self.plural_label[0].upper()}{self.plural_label[1:]} retrieved successfully"

    @property
    def create_failed_message(self) -> str:
        return f"Server error occurred while creating the {self.label}."

    @property
    def list_failed_message(self) -> str:
        return f"Server error occurred while retrieving {self.plural_label}."


PIGS = Resource(
    path="/pigs",
    table="pigs",
    schema=PigCreate,
    record_model=Pig,
    singular_key="pig",
    plural_key="pigs",
    label="pig",
    plural_label="pigs",
)

FEEDS = Resource(
    path="/feeds",
    table="feeds",
    schema=FeedCreate,
    record_model=Feed,
    singular_key="feed",
    plural_key="feeds",
    label="feed record",
    plural_label="feed records",
)

HEALTH_RECORDS = Resource(
    path="/healthRecords",
    table="health_records",
    schema=HealthRecordCreate,
    record_model=HealthRecord,
    singular_key="healthRecord",
    plural_key="healthRecords",
    label="health record",
    plural_label="health records",
)

# The inventory collection uses the same key for one item and for the list.
INVENTORY = Resource(
    path="/inventory",
    table="inventory",
    schema=InventoryItemCreate,
    record_model=InventoryItem,
    singular_key="inventory",
    plural_key="inventory",
    label="inventory item",
    plural_label="inventory items",
)

INVOICES = Resource(
    path="/invoices",
    table="invoices",
    schema=InvoiceCreate,
    record_model=Invoice,
    singular_key="invoice",
    plural_key="invoices",
    label="invoice",
    plural_label="invoices",
)

RESOURCES: Tuple[Resource, ...] = (PIGS, FEEDS, HEALTH_RECORDS, INVENTORY, INVOICES)
