"""JSON-file-backed implementation of CredentialStore."""

from __future__ import annotations

import json
from pathlib import Path

from restock.infrastructure.api.credentials import Credential, CredentialStore


class JsonCredentialStore(CredentialStore):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path

    # --- CredentialStore interface --------------------------------------------

    def get(self) -> Credential | None:
        raw = self._load_raw()
        if not raw or not raw.get("token"):
            return None
        return self._to_domain(raw)

    def set(self, credential: Credential) -> None:
        self._persist_raw(self._to_raw(credential))

    def clear(self) -> None:
        if self._file_path.exists():
            self._file_path.unlink()

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(credential: Credential) -> dict:
        return {
            "token": credential.token,
            "user": credential.user,
            "role": credential.role,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Credential:
        return Credential(
            token=raw["token"],
            user=raw.get("user"),
            role=raw.get("role"),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict | None:
        if not self._file_path.exists():
            return None
        try:
            data = json.loads(self._file_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            return None
        return data if isinstance(data, dict) else None

    def _persist_raw(self, record: dict) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._file_path.with_suffix(".tmp")
        tmp.write_text(json.dumps(record, indent=2) + "\n", encoding="utf-8")
        tmp.replace(self._file_path)
