from __future__ import annotations

from typing import Optional, Union

from ..core.enums import AttendanceStatus, Role
from ..core.exceptions import ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_status(value: Union[AttendanceStatus, str, None]) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    if isinstance(value, str):
        try:
            return AttendanceStatus(value.strip().upper())
        except ValueError:
            pass
    allowed = ", ".join(s.value for s in AttendanceStatus)
    raise ValidationError(f"Invalid attendance status {value!r}, expected one of: {allowed}")


def require_role(value: Union[Role, str, None]) -> Role:
    if isinstance(value, Role):
        return value
    if isinstance(value, str):
        try:
            return Role(value.strip().upper())
        except ValueError:
            pass
    raise ValidationError(f"Invalid role {value!r}")
