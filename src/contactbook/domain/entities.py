"""Domain entities: Record and the contacts text helpers."""

import uuid
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

# Fields a Record carries besides its id, in display/form order.
RECORD_FIELDS = ("name", "address", "telephone", "email", "contacts")

CONTACTS_SEPARATOR = ","
CONTACTS_DISPLAY_SEPARATOR = ", "


def new_record_id() -> str:
    return str(uuid.uuid4())


def parse_contacts(value: str | Sequence[str] | int | float | None) -> tuple[str, ...]:
    """Split contacts text on "," and trim each piece. Empty pieces are dropped.

    A sequence is accepted too; each item is split the same way so a list
    like ["a, b", "c"] becomes ("a", "b", "c"). Any other scalar is read as its text.
    """
    if value is None:
        return ()
    if not isinstance(value, Sequence):
        value = str(value)
    if isinstance(value, str):
        pieces = value.split(CONTACTS_SEPARATOR)
    else:
        pieces = [p for item in value for p in str(item).split(CONTACTS_SEPARATOR)]
    return tuple(p.strip() for p in pieces if p.strip())


def format_contacts(values: Sequence[str]) -> str:
    return CONTACTS_DISPLAY_SEPARATOR.join(values)


def _text(value) -> str:
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class Record:
    """
    A single contact-like entry held by a collection.
    The id is generated at creation and never changes; all other fields are free-form.
    """

    id: str = field(default_factory=new_record_id)
    name: str = ""
    address: str = ""
    telephone: str = ""
    email: str = ""
    contacts: tuple[str, ...] = ()

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise ValueError("Record id must be a non-empty string.")
        for name in ("name", "address", "telephone", "email"):
            object.__setattr__(self, name, _text(getattr(self, name)))
        object.__setattr__(self, "contacts", parse_contacts(self.contacts))

    @classmethod
    def from_fields(cls, fields: Mapping, record_id: str | None = None) -> "Record":
        """Build a Record from a raw field-set.

        Any "id" key in fields is ignored: a fresh id is generated unless
        record_id is given. Keys that are not record fields are ignored.
        """
        values = {name: fields[name] for name in RECORD_FIELDS if name in fields}
        if record_id is None:
            return cls(**values)
        return cls(id=record_id, **values)

    def to_fields(self) -> dict:
        """Return a plain dict of the record, id included, contacts as a list."""
        return {
            "id": self.id,
            "name": self.name,
            "address": self.address,
            "telephone": self.telephone,
            "email": self.email,
            "contacts": list(self.contacts),
        }
