"""
Add/Edit mode of the record form as an XState machine (xstate-python).

The machine is standard XState JSON (id, initial, states with on: { EVENT: target }),
so the same file opens in Stately Studio or JS XState.
"""

import json
import os
from pathlib import Path

from xstate.machine import Machine

MODE_ADD = "add"
MODE_EDIT = "edit"

EVENT_EDIT = "EDIT"
EVENT_SUBMIT = "SUBMIT"
EVENT_RESET = "RESET"

MODE_LABELS = {MODE_ADD: "Add", MODE_EDIT: "Update"}


def get_machine_path() -> Path:
    """Return path to the form machine JSON (FORM_MACHINE_PATH env or the packaged file)."""
    path = os.environ.get("FORM_MACHINE_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return Path(__file__).resolve().parent / "machines" / "record_form.json"


def load_machine(path: Path | None = None) -> dict:
    """Read and check the machine JSON: an initial state that is one of its states."""
    config = json.loads((path or get_machine_path()).read_text(encoding="utf-8"))
    states = config.get("states")
    if not isinstance(states, dict) or not states:
        raise ValueError("Form machine needs a non-empty 'states' mapping")
    if config.get("initial") not in states:
        raise ValueError(f"Form machine 'initial' must be one of {sorted(states)}")
    return config


def _handled_events(config: dict, state_value: str) -> set[str]:
    return set((config["states"].get(state_value) or {}).get("on") or {})


class FormMode:
    """Current mode of one form. Only the label is shown to the user."""

    def __init__(self, machine: dict | None = None) -> None:
        self._config = machine if machine is not None else load_machine()
        self._machine = Machine(self._config)
        self.value: str = self._config["initial"]

    @property
    def label(self) -> str:
        return MODE_LABELS.get(self.value, self.value.title())

    @property
    def is_editing(self) -> bool:
        return self.value == MODE_EDIT

    def send(self, event: str) -> str:
        """Apply event. An event the current mode does not handle leaves it unchanged."""
        if event not in _handled_events(self._config, self.value):
            return self.value
        state = self._machine.state_from(self.value)
        self.value = self._machine.transition(state, event).value
        return self.value
