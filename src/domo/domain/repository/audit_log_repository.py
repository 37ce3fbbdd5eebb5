"""Abstract read access to the backend's audit trail."""

from __future__ import annotations

from abc import ABC, abstractmethod

from domo.domain.model.audit_log import AuditLog


class AuditLogRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[AuditLog]:
        """Return every audit entry, newest first."""
