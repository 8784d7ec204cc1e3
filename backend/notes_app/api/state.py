import threading

from notes_app.core.session import NotesSession
from notes_app.settings import data_dir, seed_enabled
from notes_app.storage.event_log import Event, EventLog
from notes_app.storage.kv_store import JsonFileStore
from notes_app.storage.notes_store import NotesStore
from notes_app.storage.persistence import NotesPersistence
from notes_app.storage.seed import default_seed_notes

# DATA_DIR config via env var; tests reload this module per data dir
DATA_DIR = data_dir()

event_log = EventLog(DATA_DIR)
persistence = NotesPersistence(
    JsonFileStore(DATA_DIR),
    seed=default_seed_notes if seed_enabled() else tuple,
)
store = NotesStore(persistence, persistence.load())
session = NotesSession(store)

# single user, single writer: handlers hold this for their whole body
session_lock = threading.Lock()

if persistence.seed_applied:
    event_log.emit(Event(event_type="SEED_APPLIED", meta={"count": len(store)}))
