from __future__ import annotations

from typing import Any

from core.errors import ValidationError


def require_non_empty(value: Any, field: str) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field} cannot be empty", field=field)
