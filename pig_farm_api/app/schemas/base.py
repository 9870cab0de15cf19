"""
Shared field types, base models and the record factory.

Payloads use camelCase keys (``birthDate``, ``pigId``) while the Python
side uses snake_case attributes; the alias generator maps between the
two.  Field rules:

* ``RequiredText`` -- a JSON string with at least one character.
* ``Number`` -- a JSON number.  Booleans, numeric strings and
  non-finite floats are rejected.
* ``RecordDate`` -- an ISO-8601 date or date-time string, normalised to
  a timezone-aware UTC ``datetime``.  A bare date means midnight UTC.
"""

from datetime import datetime, timezone
from typing import Annotated, Any, Type, TypeVar, Union
from uuid import uuid4

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
)
from pydantic.alias_generators import to_camel


def _parse_date(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise ValueError("must be an ISO-8601 date string")
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise ValueError(f"{value!r} is not a valid date") from exc


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    try:
        return value.astimezone(timezone.utc)
    except OverflowError as exc:
        raise ValueError("date is out of range once converted to UTC") from exc


RequiredText = Annotated[StrictStr, Field(min_length=1)]
Number = Union[StrictInt, Annotated[StrictFloat, Field(allow_inf_nan=False)]]
RecordDate = Annotated[datetime, BeforeValidator(_parse_date), AfterValidator(_as_utc)]


class RecordInput(BaseModel):
    """Base class for field-schema descriptors.

    Field declaration order is the order in which fields are named in
    validation error messages.  Payloads are matched by their camelCase
    keys only; snake_case spellings count as unknown keys, which are
    dropped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        extra="ignore",
        frozen=True,
    )


class StoredRecord(RecordInput):
    """Fields every stored record carries in addition to its domain fields."""

    id: str = Field(..., min_length=1)
    created_at: RecordDate


R = TypeVar("R", bound=StoredRecord)


def build_record(record_model: Type[R], data: RecordInput) -> R:
    """Return a new immutable record built from validated input.

    The record gets a fresh UUID4 identifier and the current UTC time
    as ``created_at``.
    """
    return record_model.model_validate(
        {
            **data.model_dump(by_alias=True),
            "id": str(uuid4()),
            "createdAt": datetime.now(timezone.utc),
        }
    )
