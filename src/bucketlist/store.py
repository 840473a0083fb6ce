"""JSON store: one data.json per config dir, name -> record, insertion order.

The whole collection is read at start (decay applied on read) and written
back at the end. No locking: two concurrent invocations race and the last
writer wins.
"""

from __future__ import annotations

import json
import logging
import os
import stat
import tempfile
from pathlib import Path

from bucketlist.config import Settings
from bucketlist.defaults import DATA_FILENAME
from bucketlist.errors import SerializationError, StoreIOError
from bucketlist.items import Item, now_seconds, recompute

log = logging.getLogger(__name__)


def data_path(store_dir: str | Path) -> Path:
    return Path(store_dir) / DATA_FILENAME


def ensure_store_dir(store_dir: str | Path) -> Path:
    """Create the config dir (and parents) if needed."""
    path = Path(store_dir)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise StoreIOError(path, exc) from exc
    return path


def parse(text: str, source: object = DATA_FILENAME) -> dict[str, Item]:
    """Parse data.json contents into an ordered name -> Item mapping."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(source, str(exc)) from exc
    if not isinstance(raw, dict):
        raise SerializationError(source, f"expected an object at top level, got {type(raw).__name__}")

    items: dict[str, Item] = {}
    for name, record in raw.items():
        try:
            items[name] = Item.from_dict(record)
        except (ValueError, OverflowError) as exc:
            raise SerializationError(source, f"item `{name}`: {exc}") from exc
    return items


def dump(items: dict[str, Item]) -> str:
    return json.dumps({name: item.to_dict() for name, item in items.items()})


def load(
    store_dir: str | Path,
    settings: Settings | None = None,
    now: int | None = None,
) -> dict[str, Item]:
    """Load the collection and decay every record to `now`.

    A missing or zero-length data file yields an empty collection. Anything
    else that does not parse is a SerializationError; the file is left as is.
    """
    settings = settings or Settings()
    path = data_path(ensure_store_dir(store_dir))
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        log.debug("no data file at %s, starting empty", path)
        return {}
    except UnicodeDecodeError as exc:
        raise SerializationError(path, str(exc)) from exc
    except OSError as exc:
        raise StoreIOError(path, exc) from exc

    if not text.strip():
        log.debug("empty data file at %s", path)
        return {}

    items = parse(text, path)
    if now is None:
        now = now_seconds()
    for item in items.values():
        recompute(
            item,
            now,
            decay=settings.decay,
            threshold=settings.active_threshold,
            sec_of_decay=settings.sec_of_decay,
        )
    log.debug("loaded %d item(s) from %s", len(items), path)
    return items


def save(store_dir: str | Path, items: dict[str, Item]) -> Path:
    """Replace data.json with the full collection.

    The directory must already exist; load() creates it. Content goes to a
    temp file in the same dir and is renamed over the old file, keeping the
    old file's permission bits. A brand-new data.json is created 0600.
    """
    path = data_path(store_dir)
    try:
        content = dump(items)
    except (TypeError, ValueError) as exc:
        raise SerializationError(path, str(exc)) from exc

    try:
        fd, tmp = tempfile.mkstemp(dir=str(path.parent), prefix=".data-", suffix=".tmp")
    except OSError as exc:
        raise StoreIOError(path, exc) from exc
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        try:
            os.chmod(tmp, stat.S_IMODE(os.stat(path).st_mode))
        except FileNotFoundError:
            pass
        os.replace(tmp, path)
    except OSError as exc:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise StoreIOError(path, exc) from exc
    log.debug("saved %d item(s) to %s", len(items), path)
    return path
