"""Domain layer: entities and errors. No dependencies on outer layers."""

from contactbook.domain.entities import (
    RECORD_FIELDS,
    Record,
    format_contacts,
    new_record_id,
    parse_contacts,
)
from contactbook.domain.errors import (
    ContactBookError,
    InvalidArgumentError,
    InvalidInputError,
    NotFoundError,
)

__all__ = [
    "RECORD_FIELDS",
    "ContactBookError",
    "InvalidArgumentError",
    "InvalidInputError",
    "NotFoundError",
    "Record",
    "format_contacts",
    "new_record_id",
    "parse_contacts",
]
