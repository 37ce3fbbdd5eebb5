"""Abstract lookup of a user's role."""

from __future__ import annotations

from abc import ABC, abstractmethod

from domo.domain.model.principal import Role


class UserRoleRepository(ABC):

    @abstractmethod
    def get_role(self, user_id: str) -> Role:
        """Return the user's role, or Role.UNKNOWN when no role row exists."""
