"""Application service: Show Audit Logs use case (admin-only query)."""

from __future__ import annotations

import json
from datetime import datetime, tzinfo

from domo.application.auth_guard import AuthGuard
from domo.application.dto import AuditLogDTO
from domo.domain.model.audit_log import AuditLog
from domo.domain.repository.audit_log_repository import AuditLogRepository

# Only these columns of the row snapshot are shown.
DISPLAYED_COLUMNS = ("name", "quantity")


class ShowAuditLogsHandler:

    def __init__(
        self,
        audit_repo: AuditLogRepository,
        guard: AuthGuard,
        tz: tzinfo | None = None,
    ) -> None:
        self._audit_repo = audit_repo
        self._guard = guard
        self._tz = tz

    def handle(self) -> list[AuditLogDTO]:
        self._guard.require_admin()
        return [self._to_dto(entry) for entry in self._audit_repo.list_all()]

    # --- Mapping --------------------------------------------------------------

    def _to_dto(self, entry: AuditLog) -> AuditLogDTO:
        data = {k: entry.data[k] for k in DISPLAYED_COLUMNS if k in entry.data}
        return AuditLogDTO(
            id=entry.id,
            datetime=format_timestamp(entry.created_at, self._tz),
            user=entry.user_email or "",
            operation=entry.operation.value.lower().capitalize(),
            data=json.dumps(data, separators=(",", ":")),
        )


def format_timestamp(value: datetime, tz: tzinfo | None = None) -> str:
    """Short weekday, day/month/year, 24h time: "Mon, 19/10/2026, 14:05:03"."""
    local = value.astimezone(tz)
    return f"{local:%a}, {local:%d/%m/%Y}, {local:%H:%M:%S}"
