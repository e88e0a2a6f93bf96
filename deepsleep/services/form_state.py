"""
Record Form State

The single page's form is modelled as an immutable FormState value and a
pure update(state, action) function. Routes feed user actions in, execute the
returned Command (at most one store call), then feed Submitted back in.
Nothing here touches the database.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Tuple, Union

from deepsleep.services.validators import validate_sleep_record


FORM_INPUT_FORMAT = "%Y-%m-%dT%H:%M"

# Only these fields survive between requests; times and note are reloaded
# from the store, so a long note never has to fit in a cookie.
COOKIE_FIELDS = ("editing_id", "error", "flash")


@dataclass(frozen=True)
class FormState:
    start_time: str = ""
    end_time: str = ""
    note: str = ""
    editing_id: Optional[int] = None
    error: Optional[str] = None
    flash: Optional[str] = None

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def to_cookie(self) -> dict:
        return {k: getattr(self, k) for k in COOKIE_FIELDS}

    @classmethod
    def from_cookie(cls, data: Optional[dict]) -> "FormState":
        if not isinstance(data, dict):
            return cls()
        fields = {k: data[k] for k in COOKIE_FIELDS if k in data}
        try:
            return cls(**fields)
        except TypeError:
            return cls()


# --- Actions ---

@dataclass(frozen=True)
class Edit:
    record_id: int
    start_time: datetime
    end_time: datetime
    note: Optional[str] = None


@dataclass(frozen=True)
class CancelEdit:
    pass


@dataclass(frozen=True)
class Submit:
    start_time: str
    end_time: str
    note: str = ""


@dataclass(frozen=True)
class Submitted:
    pass


@dataclass(frozen=True)
class Deleted:
    record_id: int


@dataclass(frozen=True)
class Rendered:
    pass


Action = Union[Edit, CancelEdit, Submit, Submitted, Deleted, Rendered]


@dataclass(frozen=True)
class Command:
    """A single store call the caller must run."""
    kind: str  # "create" or "update"
    start_time: datetime
    end_time: datetime
    note: Optional[str] = None
    record_id: Optional[int] = None


def update(state: FormState, action: Action) -> Tuple[FormState, Optional[Command]]:
    """Return the next state and the store command to run, if any."""
    if isinstance(action, Edit):
        # Prefill shows the stored wall clock as entered, not APP_TIMEZONE;
        # the list converts to APP_TIMEZONE, so the two differ outside UTC.
        return FormState(
            start_time=action.start_time.strftime(FORM_INPUT_FORMAT),
            end_time=action.end_time.strftime(FORM_INPUT_FORMAT),
            note=action.note or "",
            editing_id=action.record_id,
            error=state.error,
            flash=state.flash,
        ), None

    if isinstance(action, CancelEdit):
        return FormState(), None

    if isinstance(action, Submit):
        entered = replace(
            state,
            start_time=action.start_time or "",
            end_time=action.end_time or "",
            note=action.note or "",
            error=None,
            flash=None,
        )
        result = validate_sleep_record({
            "start_time": action.start_time,
            "end_time": action.end_time,
            "note": action.note,
        })
        if not result.is_valid:
            return replace(entered, error="; ".join(result.errors)), None

        cleaned = result.cleaned
        command = Command(
            kind="update" if state.is_editing else "create",
            start_time=cleaned["start_time"],
            end_time=cleaned["end_time"],
            note=cleaned["note"],
            record_id=state.editing_id,
        )
        return entered, command

    if isinstance(action, Submitted):
        return FormState(flash="Record updated." if state.is_editing else None), None

    if isinstance(action, Deleted):
        if state.editing_id == action.record_id:
            return FormState(), None
        return state, None

    if isinstance(action, Rendered):
        return replace(state, error=None, flash=None), None

    raise TypeError(f"Unknown form action: {action!r}")
