"""Errors raised by record collections."""


class ContactBookError(Exception):
    """Base class for collection errors."""


class InvalidInputError(ContactBookError, TypeError):
    """Seed or field-set input is malformed (not a sequence, not a mapping, missing)."""


class InvalidArgumentError(ContactBookError, ValueError):
    """A record id argument is missing or not a string."""


class NotFoundError(ContactBookError, LookupError):
    """Update requested for an id that is not in the collection."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"Record with id {record_id} not found")
        self.record_id = record_id
