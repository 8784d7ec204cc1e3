import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Protocol, Sequence

from notes_app.utils.dates import parse_timestamp, utc_now

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class NewNote:
    title: str
    text: str


@dataclass(frozen=True)
class Note:
    id: str
    title: str
    text: str
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "text": self.text,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Note":
        # KeyError / TypeError / ValueError on a malformed record
        for field in ("id", "title", "text"):
            if not isinstance(raw[field], str):
                raise TypeError(f"{field} must be a string")
        return cls(
            id=raw["id"],
            title=raw["title"],
            text=raw["text"],
            created_at=parse_timestamp(raw["created_at"]),
        )


class Persistence(Protocol):
    def save(self, notes: Sequence[Note]) -> None: ...


class NotesStore:
    """
    Authoritative in-memory, insertion-ordered note collection.

    Every mutation writes the whole collection through `persistence` before
    returning. `create` does not validate: callers run the validators first.
    """

    def __init__(self, persistence: Persistence, notes: Sequence[Note] = ()):
        self.persistence = persistence
        self._notes: list[Note] = list(notes)

    def __len__(self) -> int:
        return len(self._notes)

    def create(self, draft: NewNote) -> Note:
        note = Note(
            id=str(uuid.uuid4()),
            title=draft.title,
            text=draft.text,
            created_at=utc_now(),
        )
        self._notes.append(note)
        self.persistence.save(self._notes)
        log.info("note created id=%s", note.id)
        return note

    def delete(self, note_id: str) -> bool:
        """Remove the note with `note_id`; returns False (and writes nothing) if absent."""
        remaining = [n for n in self._notes if n.id != note_id]
        if len(remaining) == len(self._notes):
            return False
        self._notes = remaining
        self.persistence.save(self._notes)
        log.info("note deleted id=%s", note_id)
        return True

    def get(self, note_id: str) -> Note | None:
        for n in self._notes:
            if n.id == note_id:
                return n
        return None

    def all(self) -> tuple[Note, ...]:
        return tuple(self._notes)
