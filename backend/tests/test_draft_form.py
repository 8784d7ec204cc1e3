import pytest

from notes_app.core.draft import DraftForm
from notes_app.core.session import NotesSession


def test_errors_hidden_until_activated():
    draft = DraftForm()
    assert draft.errors == {"title": "must be specified", "text": "must be at least 20 characters."}
    assert draft.displayed_errors == {"title": "", "text": ""}
    assert not draft.can_create


def test_blur_activates_title():
    draft = DraftForm()
    draft.blur("title")
    assert draft.displayed_errors["title"] == "must be specified"
    assert draft.displayed_errors["text"] == ""


def test_typing_title_does_not_activate_it():
    draft = DraftForm()
    draft.set_value("title", "t" * 51)
    assert draft.displayed_errors["title"] == ""
    draft.blur("title")
    assert draft.displayed_errors["title"] == "can not exceed 50 characters."


def test_blur_activates_text():
    draft = DraftForm()
    draft.blur("text")
    assert draft.displayed_errors["text"] == "must be at least 20 characters."


def test_text_activates_after_passing_minimum_then_deleting():
    draft = DraftForm()
    draft.set_value("text", "a" * 20)
    assert not draft.activated["text"]

    draft.set_value("text", "a" * 21)
    assert draft.activated["text"]
    assert draft.displayed_errors["text"] == ""

    draft.set_value("text", "a" * 19)
    assert draft.displayed_errors["text"] == "must be at least 20 characters."


def test_too_much_text_shows_error_and_counter_error():
    draft = DraftForm()
    draft.set_value("text", "a" * 301)
    assert draft.displayed_errors["text"] == "can not exceed 300 characters."
    assert draft.text_counter == "301 / 300"


def test_text_counter_tracks_length():
    draft = DraftForm()
    draft.set_value("text", "a" * 200)
    assert draft.text_counter == "200 / 300"


def test_submit_with_errors_activates_both_and_returns_nothing():
    draft = DraftForm()
    draft.set_value("title", "Fake title")
    draft.set_value("text", "not enough text")

    assert draft.attempt_submit() is None
    assert draft.activated == {"title": True, "text": True}
    assert draft.displayed_errors["text"] == "must be at least 20 characters."


def test_submit_valid_draft():
    draft = DraftForm()
    draft.set_value("text", "a" * 30)
    draft.set_value("title", "A")
    assert draft.can_create

    new_note = draft.attempt_submit()
    assert (new_note.title, new_note.text) == ("A", "a" * 30)


def test_unknown_field_is_rejected():
    with pytest.raises(ValueError):
        DraftForm().set_value("body", "x")


def test_session_submit_creates_note_and_closes_dialog(store):
    session = NotesSession(store)
    session.open_dialog()
    session.draft.set_value("title", "A")
    session.draft.set_value("text", "a" * 30)

    note = session.submit_draft()

    assert store.all() == (note,)
    assert not session.dialog_open
    assert session.draft.values == {"title": "", "text": ""}
    assert note in session.view().notes


def test_session_submit_with_errors_creates_nothing(store):
    session = NotesSession(store)
    session.open_dialog()
    session.draft.set_value("title", "A")
    session.draft.set_value("text", "not enough text")

    assert session.submit_draft() is None
    assert len(store) == 0
    assert session.dialog_open


def test_closing_dialog_discards_draft(store):
    session = NotesSession(store)
    session.open_dialog()
    session.draft.set_value("title", "half written")
    session.draft.blur("title")
    session.close_dialog()

    session.open_dialog()
    assert session.draft.values == {"title": "", "text": ""}
    assert session.draft.activated == {"title": False, "text": False}
