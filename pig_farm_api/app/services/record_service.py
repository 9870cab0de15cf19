"""
Business logic shared by every record collection.

``RecordService`` validates a payload against the resource's
field-schema descriptor, builds the record, and inserts it into the
store.  Validation runs before anything is constructed or written, so
a rejected payload never changes a collection.
"""

import logging
from typing import Any, List

from pydantic import ValidationError

from ..core.db import RecordStore
from ..core.errors import RecordValidationError
from ..schemas import RecordInput, StoredRecord, build_record
from .resources import Resource


logger = logging.getLogger(__name__)


class RecordService:
    """Create and list records of one resource."""

    def __init__(self, resource: Resource, store: RecordStore) -> None:
        self.resource = resource
        self.store = store

    def validate(self, payload: Any) -> RecordInput:
        """Check ``payload`` against the field schema.

        Raises ``RecordValidationError`` if the payload is not a JSON
        object or any required field is missing or has the wrong type.
        """
        if not isinstance(payload, dict):
            logger.info("Rejected %s payload: not a JSON object", self.resource.label)
            raise RecordValidationError(self.resource.invalid_input_message)
        try:
            return self.resource.schema.model_validate(payload)
        except ValidationError as exc:
            errors = exc.errors()
            logger.info(
                "Rejected %s payload: %s",
                self.resource.label,
                "; ".join(f"{'.'.join(map(str, e['loc']))}: {e['msg']}" for e in errors),
            )
            raise RecordValidationError(self.resource.invalid_input_message, errors) from exc

    async def create(self, payload: Any) -> StoredRecord:
        """Validate, build and store a new record, then return it.

        ``StorageFault`` from the store propagates to the caller.
        """
        data = self.validate(payload)
        record = build_record(self.resource.record_model, data)
        self.store.insert(
            self.resource.table,
            record.id,
            record.model_dump(mode="json", by_alias=True),
        )
        logger.info("Created %s %s", self.resource.label, record.id)
        return record

    async def list_all(self) -> List[StoredRecord]:
        """Return every stored record, ordered by identifier."""
        documents = self.store.values(self.resource.table)
        return [self.resource.record_model.model_validate(doc) for doc in documents]
