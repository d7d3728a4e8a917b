from __future__ import annotations

import math
from typing import Any, Iterable


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Clamp to [0, 100] and round half-up to an integer."""
    if math.isnan(value):
        return 0
    return round_half_up(min(100.0, max(0.0, float(value))))


def clean_strings(items: Iterable[Any] | None, *, limit: int | None = None) -> list[str]:
    """Keep non-blank strings, de-duplicated case-insensitively, first occurrence wins."""
    output: list[str] = []
    seen: set[str] = set()
    for item in items or ():
        if not isinstance(item, str):
            continue
        text = item.strip()
        if not text:
            continue
        key = text.casefold()
        if key in seen:
            continue
        seen.add(key)
        output.append(text)
        if limit is not None and len(output) >= limit:
            break
    return output


def unique_in_order(items: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(items))
