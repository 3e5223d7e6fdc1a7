from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Viewer:
    """Caller identity as handed over by the login layer.

    Note: no credentials here; `user_id` is trusted and matched against
    student emails for the USER role.
    """

    user_id: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
