import json
import os
import re
from pathlib import Path
from typing import Any, Optional, Protocol

_KEY_RE = re.compile(r"^[A-Za-z0-9_\-]+$")


def _atomic_write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    with tmp_path.open("w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
        f.flush()
        os.fsync(f.fileno())
    tmp_path.replace(path)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[Any]: ...

    def set(self, key: str, value: Any) -> None: ...


class JsonFileStore:
    """
    Durable key-value store: one JSON document per key under base_dir/kv.
    Values are replaced whole on every write.
    """

    def __init__(self, base_dir: Path):
        self.base_dir = base_dir

    def _key_path(self, key: str) -> Path:
        # keys become file names; keep them strict to avoid path issues
        if not _KEY_RE.match(key):
            raise ValueError("Invalid key")
        return self.base_dir / "kv" / f"{key}.json"

    def get(self, key: str) -> Optional[Any]:
        """Return the decoded value, or None when the key was never written.

        Raises OSError / ValueError when the stored document can't be read.
        """
        p = self._key_path(key)
        if not p.exists():
            return None
        return json.loads(p.read_text(encoding="utf-8"))

    def set(self, key: str, value: Any) -> None:
        _atomic_write_json(self._key_path(key), value)
