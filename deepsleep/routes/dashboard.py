"""
Sleep Log Page

Server-rendered single page: record form, daily charts and record list.
Form interaction runs through services.form_state; the current FormState is
carried between requests in a signed cookie (edit mode and messages only).
"""

import logging
import os
from fastapi import APIRouter, Request, Depends, Form, HTTPException
from fastapi.responses import HTMLResponse, RedirectResponse
from itsdangerous import URLSafeSerializer, BadData
from sqlalchemy.orm import Session

from deepsleep.database import get_db
from deepsleep.services import form_state
from deepsleep.services.aggregation import chart_series
from deepsleep.services.form_state import FormState
from deepsleep.services.records import (
    create_record,
    delete_record,
    get_record,
    list_records,
    update_record,
)
from deepsleep.template_config import templates, get_app_tz

logger = logging.getLogger(__name__)

router = APIRouter(tags=["dashboard"])

SECRET_KEY = os.getenv("SECRET_KEY", "change-me-deepsleep-form-state-key")
FORM_STATE_COOKIE = "form_state"
serializer = URLSafeSerializer(SECRET_KEY, salt="form-state")


def load_state(request: Request) -> FormState:
    """Read the form state cookie; a missing or tampered cookie gives a blank form."""
    token = request.cookies.get(FORM_STATE_COOKIE)
    if not token:
        return FormState()
    try:
        return FormState.from_cookie(serializer.loads(token))
    except BadData:
        logger.warning("Discarding unreadable form state cookie")
        return FormState()


def save_state(response, state: FormState):
    response.set_cookie(
        key=FORM_STATE_COOKIE,
        value=serializer.dumps(state.to_cookie()),
        httponly=True,
        samesite="lax",
    )
    return response


def _redirect_home(state: FormState) -> RedirectResponse:
    return save_state(RedirectResponse(url="/", status_code=303), state)


def _with_edited_record(db: Session, state: FormState) -> FormState:
    """Refill times and note of the record being edited from the store."""
    if not state.is_editing:
        return state
    record = get_record(db, state.editing_id)
    if not record:
        logger.warning(f"Edited sleep record {state.editing_id} no longer exists")
        return FormState(error="Record not found")
    state, _ = form_state.update(
        state,
        form_state.Edit(
            record_id=record.id,
            start_time=record.start_time,
            end_time=record.end_time,
            note=record.note,
        ),
    )
    return state


def _render(request: Request, db: Session, state: FormState, status_code: int = 200):
    """Render the page for `state`, then store it with messages cleared."""
    records = list_records(db)
    chart = chart_series(records, get_app_tz()) if records else None

    response = templates.TemplateResponse(
        request,
        "index.html",
        {
            "state": state,
            "records": records,
            "chart": chart,
            "timezone": get_app_tz().key,
        },
        status_code=status_code,
    )
    state, _ = form_state.update(state, form_state.Rendered())
    return save_state(response, state)


def _run(db: Session, state: FormState, command: form_state.Command) -> FormState:
    """Execute one store command and advance the state."""
    if command.kind == "update":
        record = update_record(
            db, command.record_id, command.start_time, command.end_time, command.note
        )
        if not record:
            # Deleted elsewhere while being edited
            return FormState(error="Record not found")
    else:
        create_record(db, command.start_time, command.end_time, command.note)

    state, _ = form_state.update(state, form_state.Submitted())
    return state


@router.get("/", response_class=HTMLResponse)
async def index(request: Request, db: Session = Depends(get_db)):
    """Form, charts and list. Charts are omitted when there are no records."""
    return _render(request, db, _with_edited_record(db, load_state(request)))


@router.post("/form/submit")
async def submit_form(
    request: Request,
    start_time: str = Form(None),
    end_time: str = Form(None),
    note: str = Form(None),
    db: Session = Depends(get_db),
):
    """Create or update depending on edit mode.

    Invalid input makes no store call and re-renders the page directly so
    the entered values are kept without passing through the cookie.
    """
    state, command = form_state.update(
        load_state(request),
        form_state.Submit(start_time=start_time, end_time=end_time, note=note or ""),
    )
    if not command:
        logger.info(f"Rejected sleep record submission: {state.error}")
        return _render(request, db, state, status_code=422)

    return _redirect_home(_run(db, state, command))


@router.post("/form/edit/{record_id}")
async def edit_form(request: Request, record_id: int, db: Session = Depends(get_db)):
    """Put a record into edit mode; the page reloads its fields from the store."""
    record = get_record(db, record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Record not found")

    state, _ = form_state.update(
        load_state(request),
        form_state.Edit(
            record_id=record.id,
            start_time=record.start_time,
            end_time=record.end_time,
            note=record.note,
        ),
    )
    return _redirect_home(state)


@router.post("/form/cancel")
async def cancel_edit(request: Request):
    state, _ = form_state.update(load_state(request), form_state.CancelEdit())
    return _redirect_home(state)


@router.post("/form/delete/{record_id}")
async def delete_from_form(request: Request, record_id: int, db: Session = Depends(get_db)):
    if not delete_record(db, record_id):
        raise HTTPException(status_code=404, detail="Record not found")

    state, _ = form_state.update(load_state(request), form_state.Deleted(record_id=record_id))
    return _redirect_home(state)
