"""Tests for the Add/Edit form mode machine."""

import json

import pytest

from web.form_machine import (
    EVENT_EDIT,
    EVENT_RESET,
    EVENT_SUBMIT,
    MODE_ADD,
    MODE_EDIT,
    FormMode,
    get_machine_path,
    load_machine,
)


def test_load_machine():
    path = get_machine_path()
    assert path.name == "record_form.json"
    machine = load_machine(path)
    assert machine["initial"] == MODE_ADD
    assert set(machine["states"]) == {MODE_ADD, MODE_EDIT}


def test_machine_path_env_override(tmp_path, monkeypatch):
    path = tmp_path / "machine.json"
    monkeypatch.setenv("FORM_MACHINE_PATH", str(path))
    assert get_machine_path() == path.resolve()


def test_load_machine_missing_initial(tmp_path):
    path = tmp_path / "machine.json"
    path.write_text(json.dumps({"id": "broken", "states": {"add": {}}}))
    with pytest.raises(ValueError, match="initial"):
        load_machine(path)


def test_load_machine_without_states(tmp_path):
    path = tmp_path / "machine.json"
    path.write_text(json.dumps({"id": "broken", "initial": "add", "states": {}}))
    with pytest.raises(ValueError, match="states"):
        load_machine(path)


def test_transitions():
    mode = FormMode()
    assert mode.send(EVENT_SUBMIT) == MODE_ADD
    assert mode.send(EVENT_EDIT) == MODE_EDIT
    assert mode.send(EVENT_EDIT) == MODE_EDIT
    assert mode.send(EVENT_SUBMIT) == MODE_ADD
    mode.send(EVENT_EDIT)
    assert mode.send(EVENT_RESET) == MODE_ADD


def test_unknown_event_keeps_mode():
    mode = FormMode()
    mode.send(EVENT_EDIT)
    assert mode.send("CANCEL") == MODE_EDIT


def test_form_modes_built_from_separate_configs_are_independent():
    read_only = {
        "id": "readOnly",
        "initial": "add",
        "states": {"add": {"on": {}}, "edit": {"on": {}}},
    }
    locked = FormMode(read_only)
    default = FormMode()
    assert locked.send(EVENT_EDIT) == MODE_ADD
    assert default.send(EVENT_EDIT) == MODE_EDIT
    del locked, read_only
    assert FormMode().send(EVENT_EDIT) == MODE_EDIT


def test_form_mode_labels():
    mode = FormMode()
    assert mode.value == MODE_ADD
    assert mode.label == "Add"
    assert not mode.is_editing

    mode.send(EVENT_EDIT)
    assert mode.is_editing
    assert mode.label == "Update"

    mode.send(EVENT_SUBMIT)
    assert mode.value == MODE_ADD
    assert mode.label == "Add"
