from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    token: str
    role: Role
    email: str

    @property
    def is_hr(self) -> bool:
        return self.role == Role.HR
