# dreamhouse/domain/parsing.py
from __future__ import annotations

import math
from datetime import date, datetime
from typing import Any


def to_int(x: Any) -> int | None:
    if x is None or x == "" or isinstance(x, bool):
        return None
    try:
        return int(float(x))
    except (TypeError, ValueError, OverflowError):
        return None


def to_float(x: Any) -> float | None:
    if x is None or x == "" or isinstance(x, bool):
        return None
    try:
        v = float(x)
    except (TypeError, ValueError):
        return None
    if math.isnan(v) or math.isinf(v):
        return None
    return v


def to_bool(x: Any) -> bool:
    if isinstance(x, bool):
        return x
    if isinstance(x, str):
        return x.strip().lower() in ("1", "true", "yes", "y", "t")
    if isinstance(x, (int, float)):
        return x != 0
    return False


def to_date(x: Any) -> date | None:
    """Accepts date/datetime objects and ISO strings ('2019-04-02', '2019-04-02T00:00:00Z')."""
    if x is None or x == "":
        return None
    if isinstance(x, datetime):
        return x.date()
    if isinstance(x, date):
        return x
    if isinstance(x, str):
        s = x.strip()
        try:
            return date.fromisoformat(s[:10])
        except ValueError:
            return None
    return None


def to_str_list(x: Any) -> list[str]:
    if not isinstance(x, (list, tuple)):
        return []
    out: list[str] = []
    for v in x:
        if v is None:
            continue
        s = str(v).strip()
        if s:
            out.append(s)
    return out


def get_first(payload: dict[str, Any], *keys: str) -> Any:
    """Return first non-empty key from payload."""
    for k in keys:
        v = payload.get(k)
        if v is None:
            continue
        if isinstance(v, str) and not v.strip():
            continue
        return v
    return None
