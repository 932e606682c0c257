"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Mapping
from typing import Protocol

from contactbook.domain import Record


class RecordCollection(Protocol):
    """Ordered store of Records. Reads return copies; misses on get/remove return None."""

    def add(self, fields: Mapping) -> Record:
        """Create a Record with a new id, append it and return a copy."""
        ...

    def get_by_id(self, record_id: str) -> Record | None:
        """Return a copy of the record with the given id, or None."""
        ...

    def get_all(self) -> list[Record]:
        """Return copies of all records in insertion order."""
        ...

    def update(self, record_id: str, fields: Mapping | None = None) -> Record:
        """Merge fields over an existing record, keeping its id and position."""
        ...

    def remove(self, record_id: str) -> list[Record] | None:
        """Remove a record. Returns the remaining records, or None if not found."""
        ...

    def remove_all(self) -> None:
        ...

    def __len__(self) -> int:
        ...
