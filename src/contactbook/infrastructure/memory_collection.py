"""In-memory implementation of RecordCollection (no DB)."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace

from contactbook.domain import (
    InvalidArgumentError,
    InvalidInputError,
    NotFoundError,
    Record,
)

logger = logging.getLogger(__name__)

NOT_FOUND = -1


def _copy(record: Record) -> Record:
    return replace(record)


def _check_fields(fields, operation: str) -> Mapping:
    if fields is None:
        raise InvalidInputError(f"No data provided to {operation}: received {fields!r}")
    if not isinstance(fields, Mapping):
        raise InvalidInputError(
            f"Data provided to {operation} must be a mapping. "
            f"Received {fields!r} ({type(fields).__name__})"
        )
    return fields


def _check_id(record_id, operation: str, *, allow_empty: bool = True) -> str:
    if record_id is None or (not allow_empty and not record_id):
        raise InvalidArgumentError(f"An id must be provided to {operation}")
    if not isinstance(record_id, str):
        raise InvalidArgumentError(
            f"The id provided to {operation} must be a string. "
            f"Received {record_id!r} ({type(record_id).__name__})"
        )
    return record_id


class InMemoryRecordCollection:
    """Stores records in memory. Order preserved by insertion.
    The record list is private; every read hands out copies.
    """

    def __init__(self, initial_records: Sequence[Mapping] = ()) -> None:
        if not isinstance(initial_records, Sequence) or isinstance(
            initial_records, (str, bytes)
        ):
            raise InvalidInputError(
                f"Records must be a sequence. Received {initial_records!r} "
                f"({type(initial_records).__name__})"
            )
        self._records: list[Record] = []
        for fields in initial_records:
            self._records.append(Record.from_fields(_check_fields(fields, "create")))

    def __len__(self) -> int:
        return len(self._records)

    def _find(self, record_id: str) -> int:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                return index
        logger.info("Record with id %s not found", record_id)
        return NOT_FOUND

    def index_of_id(self, record_id: str) -> int:
        """Return the position of the record with this id, or -1. A miss is logged, not raised."""
        return self._find(_check_id(record_id, "index_of_id"))

    def get_by_id(self, record_id: str) -> Record | None:
        index = self._find(_check_id(record_id, "get_by_id"))
        if index == NOT_FOUND:
            return None
        return _copy(self._records[index])

    def get_all(self) -> list[Record]:
        return [_copy(record) for record in self._records]

    def add(self, fields: Mapping) -> Record:
        record = Record.from_fields(_check_fields(fields, "add"))
        self._records.append(record)
        return _copy(record)

    def update(self, record_id: str, fields: Mapping | None = None) -> Record:
        """Merge fields over an existing record. The id and position are kept.

        Raises NotFoundError when the id is unknown: callers of update expect the
        record to exist, unlike get_by_id and remove.
        """
        _check_id(record_id, "update", allow_empty=False)
        fields = _check_fields({} if fields is None else fields, "update")
        index = self._find(record_id)
        if index == NOT_FOUND:
            raise NotFoundError(record_id)
        merged = {**self._records[index].to_fields(), **fields}
        updated = Record.from_fields(merged, record_id=record_id)
        self._records[index] = updated
        return _copy(updated)

    def remove(self, record_id: str) -> list[Record] | None:
        index = self._find(_check_id(record_id, "remove", allow_empty=False))
        if index == NOT_FOUND:
            return None
        del self._records[index]
        return self.get_all()

    def remove_all(self) -> None:
        self._records = []
