"""Field validators for a note draft.

Each returns "" when the value is acceptable, otherwise the reason shown
after the field's label ("Title must be specified").
"""

TITLE_MAX_LENGTH = 50
TEXT_MIN_LENGTH = 20
TEXT_MAX_LENGTH = 300


def validate_title(title: str) -> str:
    if len(title) > TITLE_MAX_LENGTH:
        return f"can not exceed {TITLE_MAX_LENGTH} characters."
    return "" if title else "must be specified"


def validate_text(text: str) -> str:
    if len(text) < TEXT_MIN_LENGTH:
        return f"must be at least {TEXT_MIN_LENGTH} characters."
    if len(text) > TEXT_MAX_LENGTH:
        return f"can not exceed {TEXT_MAX_LENGTH} characters."
    return ""


def validate_note(title: str, text: str) -> dict[str, str]:
    return {"title": validate_title(title), "text": validate_text(text)}


def is_creatable(title: str, text: str) -> bool:
    return not any(validate_note(title, text).values())
