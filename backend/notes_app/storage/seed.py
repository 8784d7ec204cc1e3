import uuid
from datetime import timedelta

from notes_app.storage.notes_store import Note
from notes_app.utils.dates import utc_now


def default_seed_notes() -> list[Note]:
    """A starter note so a first run isn't a blank page."""
    return [
        Note(
            id=str(uuid.uuid4()),
            title="Nancy's Visit Notes",
            text=(
                "Per your doctor's instructions, take two green Placebium pills every morning "
                "with breakfast, and one white Fakeidote pill at bedtime."
            ),
            # pretend it was written two days ago
            created_at=utc_now() - timedelta(days=2),
        )
    ]
