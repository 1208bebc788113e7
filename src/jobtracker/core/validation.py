from __future__ import annotations

from typing import Any


def valid_string(value: Any) -> Any:
    """Map ``None`` and blank strings to ``None``; anything else passes through untouched."""
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


def coerce_flag(value: Any) -> int:
    """Coerce a marked flag to ``0`` or ``1``; any other integer is rejected."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, float) and not value.is_integer():
        raise ValueError("is_marked must be an integer")
    try:
        flag = int(value)
    except (TypeError, ValueError) as exc:
        raise ValueError("is_marked must be an integer") from exc
    if flag not in (0, 1):
        raise ValueError("is_marked must be 0 or 1")
    return flag
