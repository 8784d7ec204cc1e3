from enum import Enum

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from notes_app.api.state import event_log, session, session_lock
from notes_app.models.notes import DraftOut, FieldValue, NoteOut
from notes_app.storage.event_log import Event

router = APIRouter(prefix="/draft", tags=["draft"])


class DraftField(str, Enum):
    title = "title"
    text = "text"


def _draft() -> DraftOut:
    return DraftOut.from_draft(session.draft, dialog_open=session.dialog_open)


@router.get("", response_model=DraftOut)
def get_draft() -> DraftOut:
    with session_lock:
        return _draft()


@router.post("/open", response_model=DraftOut)
def open_dialog() -> DraftOut:
    with session_lock:
        session.open_dialog()
        return _draft()


@router.post("/close", response_model=DraftOut)
def close_dialog() -> DraftOut:
    with session_lock:
        session.close_dialog()
        return _draft()


@router.put("/{field}", response_model=DraftOut)
def type_value(field: DraftField, payload: FieldValue) -> DraftOut:
    with session_lock:
        session.draft.set_value(field.value, payload.value)
        return _draft()


@router.post("/{field}/blur", response_model=DraftOut)
def blur_field(field: DraftField) -> DraftOut:
    with session_lock:
        session.draft.blur(field.value)
        return _draft()


@router.post("/submit", status_code=201, response_model=NoteOut)
def submit_draft():
    with session_lock:
        if not session.dialog_open:
            raise HTTPException(status_code=409, detail="Create dialog is not open")

        note = session.submit_draft()
        if note is None:
            # nothing created; the draft now shows both fields' errors
            return JSONResponse(status_code=422, content=_draft().model_dump())

        event_log.emit(Event(event_type="NOTE_CREATED", note_id=note.id, meta={"via": "draft"}))

    return NoteOut.from_note(note)
