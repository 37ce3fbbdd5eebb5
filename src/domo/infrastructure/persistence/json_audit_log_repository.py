"""JSON-file-backed audit trail.

The hosted backend writes audit rows from a database trigger; locally
the product repository calls ``record()`` after every mutation.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from domo.domain.model.audit_log import AuditLog, AuditOperation
from domo.domain.repository.audit_log_repository import AuditLogRepository
from domo.infrastructure.persistence.json_file import JsonFile


class JsonAuditLogRepository(AuditLogRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, default=[])

    # --- AuditLogRepository interface -----------------------------------------

    def list_all(self) -> list[AuditLog]:
        entries = [self._to_domain(raw) for raw in self._file.load()]
        return sorted(entries, key=lambda e: e.created_at, reverse=True)

    # --- Writing ---------------------------------------------------------------

    def record(
        self,
        operation: AuditOperation,
        data: dict[str, Any],
        user_email: str | None,
    ) -> AuditLog:
        entry = AuditLog(
            id=uuid.uuid4().hex,
            created_at=datetime.now(timezone.utc),
            user_email=user_email,
            operation=operation,
            data=dict(data),
        )
        records = self._file.load()
        records.append(self._to_raw(entry))
        self._file.persist(records)
        return entry

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(entry: AuditLog) -> dict:
        return {
            "id": entry.id,
            "created_at": entry.created_at.isoformat(),
            "user_email": entry.user_email,
            "operation": entry.operation.value,
            "data": entry.data,
        }

    @staticmethod
    def _to_domain(raw: dict) -> AuditLog:
        return AuditLog(
            id=raw["id"],
            created_at=datetime.fromisoformat(raw["created_at"]),
            user_email=raw.get("user_email"),
            operation=AuditOperation(raw["operation"]),
            data=raw.get("data") or {},
        )
