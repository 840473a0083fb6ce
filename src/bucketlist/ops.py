"""Operations over the in-memory collection: add/incr, note, del, ls, show.

Each mutating operation changes the mapping in place and returns a result
dict for the CLI. Missing names raise NotFound; nothing here touches disk.
"""

from __future__ import annotations

import logging
from typing import Any

from bucketlist.defaults import ACTIVE_THRESHOLD
from bucketlist.errors import NotFound
from bucketlist.items import Item, now_seconds

log = logging.getLogger(__name__)


def _record(name: str, item: Item) -> dict[str, Any]:
    return {"name": name, **item.to_dict()}


def add_or_increment(
    items: dict[str, Item],
    name: str,
    now: int | None = None,
    threshold: float = ACTIVE_THRESHOLD,
) -> dict[str, Any]:
    """Touch `name`: +1.0 priority if present, otherwise create it at 1.0.

    `active` follows the new priority against `threshold`, which is always
    true with the default threshold.
    """
    if now is None:
        now = now_seconds()

    item = items.get(name)
    if item is not None:
        item.priority += 1.0
        item.last_touched = now
        item.active = item.priority >= threshold
        return {
            "status": "raised",
            "message": f"The priority of `{name}` gets higher.",
            "item": _record(name, item),
        }

    item = Item(priority=1.0, last_touched=now, active=1.0 >= threshold, note="")
    items[name] = item
    return {
        "status": "added",
        "message": f"A new item `{name}` is added.",
        "item": _record(name, item),
    }


def annotate(items: dict[str, Item], name: str, note: str) -> dict[str, Any]:
    """Replace the note of an existing item."""
    item = items.get(name)
    if item is None:
        raise NotFound(name)
    item.note = note
    return {
        "status": "noted",
        "message": f"The note of `{name}` is updated.",
        "item": _record(name, item),
    }


def delete(items: dict[str, Item], name: str) -> dict[str, Any]:
    try:
        item = items.pop(name)
    except KeyError:
        raise NotFound(name) from None
    log.info("deleted %s: %s", name, item)
    return {
        "status": "deleted",
        "message": f"`{name}` is deleted.",
        "item": _record(name, item),
    }


def get_item(items: dict[str, Item], name: str) -> dict[str, Any]:
    item = items.get(name)
    if item is None:
        raise NotFound(name)
    return _record(name, item)


def list_items(
    items: dict[str, Item],
    show_inactive: bool = False,
    threshold: float = ACTIVE_THRESHOLD,
) -> list[tuple[str, Item]]:
    """Return (name, item) pairs by descending priority.

    Builds a new list; `items` keeps its insertion order. Unless
    show_inactive, stops at the first item at or below `threshold`. Sorting
    puts all of those at the tail.
    """
    ordered = sorted(items.items(), key=lambda kv: kv[1].priority, reverse=True)
    if show_inactive:
        return ordered

    shown: list[tuple[str, Item]] = []
    for name, item in ordered:
        if item.priority <= threshold:
            break
        shown.append((name, item))
    return shown
