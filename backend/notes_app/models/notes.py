from pydantic import BaseModel, Field

from notes_app.core.draft import DraftForm
from notes_app.core.paging import NotesPage
from notes_app.storage.notes_store import Note
from notes_app.utils.dates import format_date


class NoteCreate(BaseModel):
    # lengths are checked by notes_app.core.validation for field-specific messages
    title: str
    text: str


class NoteOut(BaseModel):
    id: str
    title: str
    text: str
    created_at: str
    created_label: str

    @classmethod
    def from_note(cls, note: Note) -> "NoteOut":
        return cls(
            id=note.id,
            title=note.title,
            text=note.text,
            created_at=note.created_at.isoformat(),
            created_label=format_date(note.created_at),
        )


class ViewUpdate(BaseModel):
    search: str | None = None
    page: int | None = Field(default=None, ge=1)


class ViewOut(BaseModel):
    notes: list[NoteOut]
    total_pages: int
    current_page: int
    search: str
    show_pagination: bool
    total_count: int

    @classmethod
    def build(cls, page: NotesPage, current_page: int, search: str, total_count: int) -> "ViewOut":
        return cls(
            notes=[NoteOut.from_note(n) for n in page.notes],
            total_pages=page.total_pages,
            current_page=current_page,
            search=search,
            show_pagination=page.show_pagination,
            total_count=total_count,
        )


class DeleteRequestOut(BaseModel):
    note_id: str
    message: str


class FieldValue(BaseModel):
    value: str


class DraftOut(BaseModel):
    dialog_open: bool
    title: str
    text: str
    activated: dict[str, bool]
    errors: dict[str, str]
    text_counter: str
    text_counter_error: bool
    can_create: bool

    @classmethod
    def from_draft(cls, draft: DraftForm, dialog_open: bool) -> "DraftOut":
        shown = draft.displayed_errors
        return cls(
            dialog_open=dialog_open,
            title=draft.values["title"],
            text=draft.values["text"],
            activated=dict(draft.activated),
            errors=shown,
            text_counter=draft.text_counter,
            text_counter_error=bool(shown["text"]),
            can_create=draft.can_create,
        )
