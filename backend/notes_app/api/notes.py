from fastapi import APIRouter, HTTPException

from notes_app.api.state import event_log, session, session_lock
from notes_app.core.deletion import DeletionState, NoPendingDeletion
from notes_app.core.validation import validate_note
from notes_app.models.notes import DeleteRequestOut, NoteCreate, NoteOut, ViewOut, ViewUpdate
from notes_app.storage.event_log import Event
from notes_app.storage.notes_store import NewNote

router = APIRouter(prefix="/notes", tags=["notes"])


def _view() -> ViewOut:
    return ViewOut.build(
        session.view(),
        current_page=session.page,
        search=session.search,
        total_count=len(session.store),
    )


@router.get("", response_model=ViewOut)
def get_view() -> ViewOut:
    with session_lock:
        return _view()


@router.patch("/view", response_model=ViewOut)
def update_view(payload: ViewUpdate) -> ViewOut:
    with session_lock:
        if payload.search is not None:
            session.set_search(payload.search)
        if payload.page is not None:
            session.set_page(payload.page)
        return _view()


@router.post("", response_model=NoteOut, status_code=201)
def create_note(payload: NoteCreate) -> NoteOut:
    errors = validate_note(payload.title, payload.text)
    if any(errors.values()):
        raise HTTPException(status_code=422, detail=errors)

    with session_lock:
        note = session.store.create(NewNote(title=payload.title, text=payload.text))

        event_log.emit(Event(event_type="NOTE_CREATED", note_id=note.id))

    return NoteOut.from_note(note)


@router.post("/{note_id}/delete", response_model=DeleteRequestOut, status_code=202)
def request_delete(note_id: str) -> DeleteRequestOut:
    with session_lock:
        note = session.store.get(note_id)
        if note is None:
            raise HTTPException(status_code=404, detail="Note not found")

        pending = session.deletion.request(note)

        event_log.emit(Event(event_type="NOTE_DELETE_REQUESTED", note_id=note.id))

    return DeleteRequestOut(note_id=pending.note_id, message=pending.message)


def _resolve(confirmed: bool) -> ViewOut:
    with session_lock:
        pending = session.deletion.pending
        try:
            outcome = session.deletion.resolve(confirmed)
        except NoPendingDeletion:
            raise HTTPException(status_code=409, detail="No deletion pending")

        event_type = "NOTE_DELETED" if outcome is DeletionState.COMMITTED else "NOTE_DELETE_CANCELLED"
        event_log.emit(Event(event_type=event_type, note_id=pending.note_id))

        return _view()


@router.post("/pending-delete/confirm", response_model=ViewOut)
def confirm_delete() -> ViewOut:
    return _resolve(confirmed=True)


@router.post("/pending-delete/cancel", response_model=ViewOut)
def cancel_delete() -> ViewOut:
    return _resolve(confirmed=False)
