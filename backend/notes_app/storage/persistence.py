import logging
from typing import Callable, Sequence

from notes_app.storage.kv_store import KeyValueStore
from notes_app.storage.notes_store import Note

log = logging.getLogger(__name__)

NOTES_KEY = "notes"
INITIALIZED_KEY = "has_set_initial_notes"


class NotesPersistence:
    """
    Load/save of the whole note collection to a key-value store.

    The first load for a storage location applies the seed notes when nothing
    is stored; afterwards an empty collection stays empty.
    """

    def __init__(self, kv: KeyValueStore, seed: Callable[[], Sequence[Note]] = tuple):
        self.kv = kv
        self.seed = seed
        self.seed_applied = False

    def _read_initialized(self) -> bool:
        try:
            return self.kv.get(INITIALIZED_KEY) is True
        except Exception as exc:
            # unreadable flag: behave as a first run
            log.warning("Could not read initialized flag, treating as unset: %s", exc)
            return False

    def _read_notes(self) -> list[Note]:
        try:
            raw = self.kv.get(NOTES_KEY)
            if raw is None:
                return []
            if not isinstance(raw, list):
                raise TypeError("stored notes are not a list")
            return [Note.from_dict(item) for item in raw]
        except Exception as exc:
            # corrupted or wrongly shaped data counts as nothing stored
            log.warning("Stored notes unreadable, starting from none: %r", exc)
            return []

    def load(self) -> list[Note]:
        """Never raises on bad stored data; see the seed policy in the class doc."""
        initialized = self._read_initialized()
        notes = self._read_notes()

        self.seed_applied = False
        if not initialized and not notes:
            notes = list(self.seed())
            if notes:
                self.save(notes)
                self.seed_applied = True
                log.info("Seed notes applied count=%d", len(notes))

        if not initialized:
            self.kv.set(INITIALIZED_KEY, True)
        return notes

    def save(self, notes: Sequence[Note]) -> None:
        self.kv.set(NOTES_KEY, [n.to_dict() for n in notes])
