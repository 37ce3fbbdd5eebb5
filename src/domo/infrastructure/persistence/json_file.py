"""Tiny JSON-file store shared by the local backend repositories.

Each file holds a single JSON document (a list of records, or an object
for the session file). Writes replace the whole file.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


class JsonFile:

    def __init__(self, file_path: Path, default: Any) -> None:
        self._file_path = file_path
        self._default = default
        self._ensure_file()

    def load(self) -> Any:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, document: Any) -> None:
        self._file_path.write_text(
            json.dumps(document, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self.persist(self._default)
