from .errors import (
    BucketListError,
    ClockError,
    ConfigError,
    HomeDirectoryUnresolvable,
    NotFound,
    SerializationError,
    StoreIOError,
)
from .items import Item, recompute
from .ops import add_or_increment, annotate, delete, get_item, list_items
from .store import load, save

__all__ = [
    "BucketListError",
    "ClockError",
    "ConfigError",
    "HomeDirectoryUnresolvable",
    "Item",
    "NotFound",
    "SerializationError",
    "StoreIOError",
    "add_or_increment",
    "annotate",
    "delete",
    "get_item",
    "list_items",
    "load",
    "recompute",
    "save",
]
