import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol

from notes_app.storage.notes_store import Note, NotesStore

log = logging.getLogger(__name__)


class DeletionState(str, Enum):
    IDLE = "idle"
    CONFIRM_PENDING = "confirm_pending"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


class NoPendingDeletion(RuntimeError):
    pass


class ConfirmationGate(Protocol):
    def confirm(self, message: str) -> bool:
        """True when the user confirms, False when they decline or dismiss."""
        ...


def confirmation_message(title: str) -> str:
    return f'Are you certain you want to delete the note "{title}"?'


@dataclass(frozen=True)
class PendingDeletion:
    note_id: str
    title: str

    @property
    def message(self) -> str:
        return confirmation_message(self.title)


class DeletionWorkflow:
    """
    Confirm-then-commit deletion.

    `request` moves to CONFIRM_PENDING; `resolve` commits or cancels and
    returns to IDLE. `on_committed` receives the collection size from
    before the delete.
    """

    def __init__(self, store: NotesStore, on_committed: Callable[[int], None]):
        self.store = store
        self.on_committed = on_committed
        self.pending: Optional[PendingDeletion] = None

    @property
    def state(self) -> DeletionState:
        return DeletionState.CONFIRM_PENDING if self.pending else DeletionState.IDLE

    def request(self, note: Note) -> PendingDeletion:
        # a newer request replaces one still waiting for an answer
        self.pending = PendingDeletion(note_id=note.id, title=note.title)
        return self.pending

    def resolve(self, confirmed: bool) -> DeletionState:
        if self.pending is None:
            raise NoPendingDeletion("No deletion pending")
        pending, self.pending = self.pending, None

        if not confirmed:
            log.info("deletion cancelled id=%s", pending.note_id)
            return DeletionState.CANCELLED

        count_before = len(self.store)
        if self.store.delete(pending.note_id):
            self.on_committed(count_before)
        return DeletionState.COMMITTED

    def run(self, note: Note, gate: ConfirmationGate) -> DeletionState:
        pending = self.request(note)
        return self.resolve(gate.confirm(pending.message))
