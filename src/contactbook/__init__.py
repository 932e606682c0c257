"""
Contactbook core: clean-architecture layout.

- domain: Record entity and the error taxonomy. No outer dependencies.
- application: ports (RecordCollection).
- infrastructure: adapters (InMemoryRecordCollection, YAML seed loader).
"""

from contactbook.application import RecordCollection
from contactbook.domain import (
    ContactBookError,
    InvalidArgumentError,
    InvalidInputError,
    NotFoundError,
    Record,
)
from contactbook.infrastructure import InMemoryRecordCollection, load_seed

__all__ = [
    "ContactBookError",
    "InMemoryRecordCollection",
    "InvalidArgumentError",
    "InvalidInputError",
    "NotFoundError",
    "Record",
    "RecordCollection",
    "load_seed",
]
