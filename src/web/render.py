"""View renderer: project records into the list mount and build the page markup."""

from collections.abc import Iterable
from dataclasses import dataclass
from html import escape

from contactbook.domain import Record
from web.forms import FieldKind, FormField, RecordForm

NO_ITEMS_HTML = "<p>No items to display</p>"


@dataclass(frozen=True)
class ListEntry:
    """One rendered list item: display text plus edit/delete controls keyed by id."""

    record_id: str
    name: str
    email: str

    def html(self) -> str:
        rid = escape(self.record_id)
        return (
            '<li class="list-group-item">'
            f'<span class="name">{escape(self.name)} </span>'
            f'<span class="email">{escape(self.email)}</span>'
            '<div class="controls">'
            f'<form method="post" action="/records/{rid}/edit">'
            f'<button class="btn btn-warning update" data-id="{rid}">'
            '<span class="sr-only">Edit</span></button></form>'
            f'<form method="post" action="/records/{rid}/delete">'
            f'<button class="btn btn-danger delete" data-id="{rid}">'
            '<span class="sr-only">Delete</span></button></form>'
            "</div></li>"
        )


class ListMount:
    """Render target for the record list. Holds what is currently displayed."""

    def __init__(self, mount_id: str = "listMount") -> None:
        self.mount_id = mount_id
        self.entries: list[ListEntry] = []

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def remove_entry(self, record_id: str) -> bool:
        """Drop one displayed entry without re-rendering. Returns True if one was removed."""
        for index, entry in enumerate(self.entries):
            if entry.record_id == record_id:
                del self.entries[index]
                return True
        return False

    def inner_html(self) -> str:
        if not self.entries:
            return NO_ITEMS_HTML
        return "<ul>" + "".join(entry.html() for entry in self.entries) + "</ul>"

    def html(self) -> str:
        return f'<div id="{escape(self.mount_id)}">{self.inner_html()}</div>'


def render(records: Iterable[Record], target: ListMount) -> ListMount:
    """Replace everything in target with one entry per record (placeholder when empty)."""
    target.entries = [
        ListEntry(record_id=r.id, name=r.name, email=r.email) for r in records
    ]
    return target


def _render_field(form_field: FormField) -> str:
    name = escape(form_field.name)
    if form_field.kind == FieldKind.HIDDEN:
        return f'<input type="hidden" name="{name}" value="{escape(form_field.value)}">'
    label = f'<label for="{name}">{escape(form_field.label or form_field.name)}</label>'
    if form_field.kind == FieldKind.SELECT_MULTIPLE:
        options = "".join(
            f'<option value="{escape(o)}"{" selected" if o in form_field.selected else ""}>'
            f"{escape(o)}</option>"
            for o in form_field.options
        )
        control = f'<select id="{name}" name="{name}" multiple>{options}</select>'
    elif form_field.kind == FieldKind.CHECKBOX:
        control = "".join(
            f'<label><input type="checkbox" name="{name}" value="{escape(o)}"'
            f'{" checked" if o in form_field.selected else ""}> {escape(o)}</label>'
            for o in form_field.options
        )
    elif form_field.kind == FieldKind.TEXTAREA:
        control = f'<textarea id="{name}" name="{name}">{escape(form_field.value)}</textarea>'
    else:
        control = (
            f'<input type="{form_field.kind.value}" id="{name}" name="{name}" '
            f'value="{escape(form_field.value)}">'
        )
    return f'<div class="form-group">{label}{control}</div>'


def render_form(form: RecordForm, mode_label: str) -> str:
    fields = "".join(_render_field(f) for f in form)
    return (
        f'<form name="{escape(form.name)}" method="post" action="/records">'
        f'<h2><span class="action-type">{escape(mode_label)}</span> record</h2>'
        f"{fields}"
        f'<button type="submit" class="btn btn-primary">'
        f'<span class="action-type">{escape(mode_label)}</span></button>'
        "</form>"
    )


def render_page(form: RecordForm, mount: ListMount, mode_label: str) -> str:
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8"><title>Contactbook</title></head>'
        "<body><main>"
        f"{render_form(form, mode_label)}"
        f"{mount.html()}"
        "</main></body></html>"
    )
