import math
from dataclasses import dataclass
from typing import Sequence

from notes_app.storage.notes_store import Note

PAGE_SIZE = 6


@dataclass(frozen=True)
class NotesPage:
    notes: tuple[Note, ...]
    total_pages: int
    filtered_count: int

    @property
    def show_pagination(self) -> bool:
        return self.total_pages > 0


def matches(note: Note, search: str) -> bool:
    term = search.lower()
    return term in note.title.lower() or term in note.text.lower()


def filter_notes(notes: Sequence[Note], search: str) -> list[Note]:
    # insertion order is kept; no relevance ranking
    return [n for n in notes if matches(n, search)]


def total_pages(count: int) -> int:
    return math.ceil(count / PAGE_SIZE)


def paginate(notes: Sequence[Note], search: str, page: int) -> NotesPage:
    """Visible slice of `notes` for a search term and a 1-indexed page."""
    filtered = filter_notes(notes, search)
    start = max(page - 1, 0) * PAGE_SIZE
    return NotesPage(
        notes=tuple(filtered[start:start + PAGE_SIZE]),
        total_pages=total_pages(len(filtered)),
        filtered_count=len(filtered),
    )


def page_after_delete(page: int, count_before_delete: int) -> int:
    """
    Step back one page when the deleted note was alone on the last page.
    Driven by the unfiltered collection size, even while a search is active.
    """
    if count_before_delete % PAGE_SIZE == 1:
        return max(page - 1, 1)
    return page
