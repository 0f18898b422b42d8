# force_ui/timeutils.py

from __future__ import annotations

import time
from datetime import datetime, timezone


def now_iso() -> str:
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"


def now_ms() -> int:
    return int(time.time() * 1000)


def parse_iso_maybe(dt_str: str | None) -> datetime | None:
    if not dt_str:
        return None
    # handle 2025-01-01T00:00:00Z and 2025-01-01T00:00:00
    s = dt_str.replace("Z", "")
    try:
        return datetime.fromisoformat(s)
    except ValueError:
        return None
