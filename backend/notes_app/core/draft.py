from notes_app.core.validation import TEXT_MAX_LENGTH, TEXT_MIN_LENGTH, is_creatable, validate_note
from notes_app.storage.notes_store import NewNote

FIELDS = ("title", "text")


class DraftForm:
    """
    Values of the create-note dialog plus per-field activation flags.

    Errors are always computed; a field's error is only displayed once the
    field is activated (blur, submit attempt, or for text: typing past the
    minimum length).
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.values = {"title": "", "text": ""}
        self.activated = {"title": False, "text": False}

    @staticmethod
    def _check_field(field: str) -> None:
        if field not in FIELDS:
            raise ValueError(f"Unknown draft field: {field}")

    def set_value(self, field: str, value: str) -> None:
        self._check_field(field)
        self.values[field] = value
        # overshooting the minimum once means deleting back below it shows the error
        if field == "text" and len(value) > TEXT_MIN_LENGTH:
            self.activated["text"] = True

    def blur(self, field: str) -> None:
        self._check_field(field)
        self.activated[field] = True

    @property
    def errors(self) -> dict[str, str]:
        return validate_note(self.values["title"], self.values["text"])

    @property
    def displayed_errors(self) -> dict[str, str]:
        errors = self.errors
        return {f: errors[f] if self.activated[f] else "" for f in FIELDS}

    @property
    def can_create(self) -> bool:
        return is_creatable(self.values["title"], self.values["text"])

    @property
    def text_counter(self) -> str:
        return f"{len(self.values['text'])} / {TEXT_MAX_LENGTH}"

    def attempt_submit(self) -> NewNote | None:
        """Activate both fields; return the draft only if it passes validation."""
        self.activated = {"title": True, "text": True}
        if not self.can_create:
            return None
        return NewNote(title=self.values["title"], text=self.values["text"])
