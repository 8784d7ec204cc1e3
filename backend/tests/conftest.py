import importlib
import logging

import pytest
from fastapi.testclient import TestClient

from notes_app.storage.kv_store import JsonFileStore
from notes_app.storage.notes_store import NewNote, NotesStore
from notes_app.storage.persistence import NotesPersistence


def _reload_app():
    # reload modules so that api/state.py picks up new env vars
    import notes_app.api.state
    import notes_app.api.notes
    import notes_app.api.draft
    import notes_app.main

    importlib.reload(notes_app.api.state)
    importlib.reload(notes_app.api.notes)
    importlib.reload(notes_app.api.draft)
    importlib.reload(notes_app.main)
    return notes_app.main.app


@pytest.fixture()
def client(tmp_path, monkeypatch):
    # isolate data dir per test, start without seed notes
    monkeypatch.setenv("APP_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("APP_SEED_NOTES", "0")
    return TestClient(_reload_app())


@pytest.fixture()
def seeded_client(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("APP_SEED_NOTES", raising=False)
    return TestClient(_reload_app())


@pytest.fixture()
def kv(tmp_path):
    return JsonFileStore(tmp_path)


@pytest.fixture()
def store(kv):
    persistence = NotesPersistence(kv)
    return NotesStore(persistence, persistence.load())


@pytest.fixture()
def add_notes(store):
    def _add(count, prefix="Note"):
        return [
            store.create(NewNote(title=f"{prefix} {i}", text=f"body of note number {i:03d}"))
            for i in range(1, count + 1)
        ]

    return _add


@pytest.fixture()
def app_log(caplog):
    # the app logger doesn't propagate, so hook caplog's handler onto it directly
    logger = logging.getLogger("notes_app")
    logger.addHandler(caplog.handler)
    try:
        yield caplog
    finally:
        logger.removeHandler(caplog.handler)
