"""
Form synchronizer: move record-shaped data in and out of the record form.

populate() fills fields from a mapping (edit), extract() reads a submission
into a flat dict (submit) and clear() resets the form after a submit.
Each field declares its kind up front so populate never has to guess.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from contactbook.domain import format_contacts

ID_FIELD = "id"


class FieldKind(str, Enum):
    TEXT = "text"
    EMAIL = "email"
    TEL = "tel"
    TEXTAREA = "textarea"
    HIDDEN = "hidden"
    SELECT_MULTIPLE = "select-multiple"
    CHECKBOX = "checkbox"

    @property
    def is_multi_value(self) -> bool:
        return self in (FieldKind.SELECT_MULTIPLE, FieldKind.CHECKBOX)


@dataclass
class FormField:
    """One named control. Multi-value kinds use options/selected, the rest use value."""

    name: str
    kind: FieldKind = FieldKind.TEXT
    label: str = ""
    value: str = ""
    default: str = ""
    options: tuple[str, ...] = ()
    selected: list[str] = field(default_factory=list)
    default_selected: tuple[str, ...] = ()

    def __post_init__(self):
        if not self.value:
            self.value = self.default
        if not self.selected:
            self.selected = list(self.default_selected)

    def reset(self) -> None:
        self.value = "" if self.kind == FieldKind.HIDDEN else self.default
        self.selected = list(self.default_selected)


class RecordForm:
    """Ordered set of named fields; looked up by name like form.elements[name]."""

    def __init__(self, fields: Iterable[FormField], name: str = "itemForm") -> None:
        self.name = name
        self._fields: dict[str, FormField] = {}
        for form_field in fields:
            if form_field.name in self._fields:
                raise ValueError(f"Duplicate form field name: {form_field.name}")
            self._fields[form_field.name] = form_field

    def __iter__(self):
        return iter(self._fields.values())

    def __contains__(self, name: str) -> bool:
        return name in self._fields

    def get(self, name: str) -> FormField | None:
        return self._fields.get(name)

    def value(self, name: str) -> str:
        form_field = self._fields.get(name)
        return form_field.value if form_field else ""

    def submission(self) -> list[tuple[str, str]]:
        """Return the (name, value) pairs a browser would submit for the current state."""
        pairs: list[tuple[str, str]] = []
        for form_field in self._fields.values():
            if form_field.kind.is_multi_value:
                pairs.extend(
                    (form_field.name, option)
                    for option in form_field.options
                    if option in form_field.selected
                )
            else:
                pairs.append((form_field.name, form_field.value))
        return pairs


def build_record_form() -> RecordForm:
    return RecordForm(
        [
            FormField(ID_FIELD, FieldKind.HIDDEN),
            FormField("name", FieldKind.TEXT, "Name"),
            FormField("address", FieldKind.TEXT, "Address"),
            FormField("telephone", FieldKind.TEL, "Telephone"),
            FormField("email", FieldKind.EMAIL, "Email"),
            FormField("contacts", FieldKind.TEXT, "Contacts (comma separated)"),
        ]
    )


def _display_value(value: Any) -> Any:
    # Falsy values show as empty, except numbers (0 stays "0").
    if not value and not (isinstance(value, (int, float)) and not isinstance(value, bool)):
        return ""
    return value


def populate(form: RecordForm, data: Mapping[str, Any]) -> None:
    """Set each field named by a key in data. Keys with no matching field are skipped."""
    for name, raw in data.items():
        form_field = form.get(name)
        if form_field is None:
            continue
        value = _display_value(raw)
        if form_field.kind.is_multi_value:
            values = [str(v) for v in value] if isinstance(value, (list, tuple)) else [str(value)]
            form_field.selected = [o for o in form_field.options if o in values]
        elif isinstance(value, (list, tuple)):
            form_field.value = format_contacts([str(v) for v in value])
        else:
            form_field.value = str(value)


def _pairs(form_data) -> Iterable[tuple[str, Any]]:
    if hasattr(form_data, "multi_items"):
        return form_data.multi_items()
    if isinstance(form_data, Mapping):
        return form_data.items()
    return form_data


def extract(form_data) -> dict[str, Any]:
    """Read a submission into a flat dict.

    form_data may be a Starlette FormData (or anything with multi_items()),
    a mapping, or an iterable of (name, value) pairs. A name that occurs more
    than once maps to the ordered list of its values.
    """
    data: dict[str, Any] = {}
    for name, value in _pairs(form_data):
        if name not in data:
            data[name] = value
        elif isinstance(data[name], list):
            data[name].append(value)
        else:
            data[name] = [data[name], value]
    return data


def clear(form: RecordForm) -> None:
    """Reset every field to its default. Hidden fields are always emptied."""
    for form_field in form:
        form_field.reset()
