"""Controller: turn form submits and edit/delete clicks into collection calls and re-renders."""

import logging
from typing import Any

from contactbook.application import RecordCollection
from contactbook.domain import Record, parse_contacts
from web.form_machine import EVENT_EDIT, EVENT_RESET, EVENT_SUBMIT, FormMode
from web.forms import ID_FIELD, RecordForm, build_record_form, clear, extract, populate
from web.render import ListMount, render, render_page

logger = logging.getLogger(__name__)


class RecordController:
    """Owns one form, one list mount and the form mode; works on an injected collection."""

    def __init__(
        self,
        collection: RecordCollection,
        *,
        form: RecordForm | None = None,
        mount: ListMount | None = None,
        mode: FormMode | None = None,
    ) -> None:
        self.collection = collection
        self.form = form if form is not None else build_record_form()
        self.mount = mount if mount is not None else ListMount()
        self.mode = mode if mode is not None else FormMode()
        self.render()

    @property
    def mode_label(self) -> str:
        return self.mode.label

    def render(self) -> ListMount:
        return render(self.collection.get_all(), self.mount)

    def page(self) -> str:
        return render_page(self.form, self.mount, self.mode_label)

    def edit(self, record_id: str) -> Record | None:
        """Load a record into the form and switch to Edit. Unknown ids change nothing."""
        record = self.collection.get_by_id(record_id)
        if record is None:
            logger.warning("Edit requested for unknown record %s", record_id)
            return None
        logger.info("Loading record %s into form", record_id)
        populate(self.form, record.to_fields())
        self.mode.send(EVENT_EDIT)
        return record

    def submit(self, form_data: Any) -> Record:
        """Store a submission: update when the hidden id is set, otherwise add."""
        data = extract(form_data)
        data["contacts"] = list(parse_contacts(data.get("contacts")))
        record_id = data.pop(ID_FIELD, "")
        if isinstance(record_id, list):
            record_id = record_id[0] if record_id else ""
        if record_id:
            logger.info("Updating record %s", record_id)
            record = self.collection.update(record_id, data)
        else:
            logger.info("Adding record %s", data.get("name", ""))
            record = self.collection.add(data)
        clear(self.form)
        self.mode.send(EVENT_SUBMIT)
        self.render()
        return record

    def delete(self, record_id: str) -> list[Record] | None:
        """Remove a record and its list entry; fall back to a full render when the list empties."""
        logger.info("Deleting record %s", record_id)
        remaining = self.collection.remove(record_id)
        self.mount.remove_entry(record_id)
        if self.mount.is_empty:
            self.render()
        if self.form.value(ID_FIELD) == record_id:
            clear(self.form)
            self.mode.send(EVENT_RESET)
        return remaining
