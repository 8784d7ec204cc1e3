from notes_app.core.validation import is_creatable, validate_note, validate_text, validate_title


def test_title_bounds():
    assert validate_title("") == "must be specified"
    assert validate_title("A") == ""
    assert validate_title("t" * 50) == ""
    assert validate_title("t" * 51) == "can not exceed 50 characters."


def test_text_bounds():
    assert validate_text("") == "must be at least 20 characters."
    assert validate_text("a" * 19) == "must be at least 20 characters."
    assert validate_text("a" * 20) == ""
    assert validate_text("a" * 300) == ""
    assert validate_text("a" * 301) == "can not exceed 300 characters."


def test_not_enough_text_is_rejected():
    # 15 characters
    assert validate_text("not enough text") == "must be at least 20 characters."
    assert not is_creatable("Fake title", "not enough text")


def test_note_is_creatable_only_when_both_fields_pass():
    assert is_creatable("A", "a" * 30)
    assert not is_creatable("", "a" * 30)
    assert not is_creatable("t" * 51, "a" * 30)
    assert validate_note("", "short") == {
        "title": "must be specified",
        "text": "must be at least 20 characters.",
    }
