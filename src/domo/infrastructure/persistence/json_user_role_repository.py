"""JSON-file-backed implementation of UserRoleRepository."""

from __future__ import annotations

from pathlib import Path

from domo.domain.model.principal import Role
from domo.domain.repository.user_role_repository import UserRoleRepository
from domo.infrastructure.persistence.json_file import JsonFile


class JsonUserRoleRepository(UserRoleRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, default=[])

    def get_role(self, user_id: str) -> Role:
        for raw in self._file.load():
            if raw["user"] == user_id:
                return Role.parse(raw.get("role"))
        return Role.UNKNOWN

    def set_role(self, user_id: str, role: Role) -> None:
        if not role.is_resolved:
            raise ValueError("Cannot store an unknown role")
        records = [raw for raw in self._file.load() if raw["user"] != user_id]
        records.append({"user": user_id, "role": role.value})
        self._file.persist(records)
