"""Item record, its on-disk shape, and time-based decay."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable

from bucketlist.defaults import ACTIVE_THRESHOLD, DECAY, SEC_OF_DECAY
from bucketlist.errors import ClockError


@dataclass
class Item:
    priority: float
    last_touched: int
    active: bool = True
    note: str = ""

    def to_dict(self) -> dict[str, Any]:
        """On-disk form. Field names are fixed for existing data files."""
        return {
            "prio": self.priority,
            "last": self.last_touched,
            "active": self.active,
            "note": self.note,
        }

    @classmethod
    def from_dict(cls, raw: object) -> Item:
        """Build an Item from its on-disk form.

        Raises ValueError when a field is missing or has the wrong type;
        the store wraps that into a SerializationError.
        """
        if not isinstance(raw, dict):
            raise ValueError(f"record must be an object, got {type(raw).__name__}")
        missing = [k for k in ("prio", "last", "active", "note") if k not in raw]
        if missing:
            raise ValueError(f"missing field(s): {', '.join(missing)}")

        prio, last, active, note = raw["prio"], raw["last"], raw["active"], raw["note"]
        # bool is an int subclass; reject it where a number is expected
        if isinstance(prio, bool) or not isinstance(prio, (int, float)) or prio < 0:
            raise ValueError(f"'prio' must be a non-negative number, got {prio!r}")
        if isinstance(last, bool) or not isinstance(last, int) or last < 0:
            raise ValueError(f"'last' must be an unsigned integer, got {last!r}")
        if not isinstance(active, bool):
            raise ValueError(f"'active' must be a boolean, got {active!r}")
        if not isinstance(note, str):
            raise ValueError(f"'note' must be a string, got {note!r}")
        return cls(priority=float(prio), last_touched=last, active=active, note=note)


def now_seconds(clock: Callable[[], float] | None = None) -> int:
    """Whole seconds since the epoch."""
    now = clock() if clock is not None else time.time()
    if now < 0:
        raise ClockError(now)
    return int(now)


def elapsed_days(last_touched: int, now: int, sec_of_decay: int = SEC_OF_DECAY) -> int:
    """Whole days between two timestamps, truncated. Never negative."""
    return max(now - last_touched, 0) // sec_of_decay


def recompute(
    item: Item,
    now: int,
    decay: float = DECAY,
    threshold: float = ACTIVE_THRESHOLD,
    sec_of_decay: int = SEC_OF_DECAY,
) -> Item:
    """Apply decay for the whole days since last touch and refresh `active`.

    last_touched is left alone, so decay is always measured from the last
    touch and a same-day reload changes nothing.
    """
    days = elapsed_days(item.last_touched, now, sec_of_decay)
    if days:
        item.priority *= decay ** days
    item.active = item.priority >= threshold
    return item
