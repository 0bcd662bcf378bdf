"""JSON-file-backed implementation of PreferenceRepository."""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.repository.preference_repository import PreferenceRepository


class JsonPreferenceRepository(PreferenceRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- PreferenceRepository interface ---------------------------------------

    def get(self, key: str) -> str | None:
        return self._load_raw().get(key)

    def set(self, key: str, value: str) -> None:
        records = self._load_raw()
        records[key] = value
        self._persist_raw(records)

    def remove(self, key: str) -> None:
        records = self._load_raw()
        if records.pop(key, None) is not None:
            self._persist_raw(records)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict[str, str]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, records: dict[str, str]) -> None:
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
