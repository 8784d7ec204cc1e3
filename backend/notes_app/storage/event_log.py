import json
import os
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from notes_app.utils.dates import utc_now


def _events_path(base_dir: Path) -> Path:
    return base_dir / "events" / "events.log"


@dataclass(frozen=True)
class Event:
    event_type: str
    note_id: Optional[str] = None
    meta: Optional[dict[str, Any]] = None

    def to_json_line(self) -> str:
        obj = {
            "event_id": str(uuid.uuid4()),
            "event_type": self.event_type,
            "ts": utc_now().isoformat(),
            "note_id": self.note_id,
            "meta": self.meta or {},
        }
        return json.dumps(obj, ensure_ascii=False)


class EventLog:
    def __init__(self, base_dir: Path):
        self.base_dir = base_dir

    @property
    def path(self) -> Path:
        return _events_path(self.base_dir)

    def emit(self, event: Event) -> None:
        path = self.path
        path.parent.mkdir(parents=True, exist_ok=True)

        # append-only, durable write
        with path.open("a", encoding="utf-8") as f:
            f.write(event.to_json_line() + "\n")
            f.flush()
            os.fsync(f.fileno())
