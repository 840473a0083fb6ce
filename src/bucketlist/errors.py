"""Failure kinds surfaced by the store and the operations.

Every error the CLI can report derives from BucketListError, so the command
layer catches one type and turns it into an error payload.
"""

from __future__ import annotations


class BucketListError(Exception):
    """Base class for all bucketlist failures."""


class NotFound(BucketListError):
    def __init__(self, name: str) -> None:
        super().__init__(f"No such an item (name: `{name}`)")
        self.name = name


class HomeDirectoryUnresolvable(BucketListError):
    def __init__(self, home: str | None) -> None:
        super().__init__(f"Cannot resolve home directory: {home!r}")
        self.home = home


class StoreIOError(BucketListError):
    """Filesystem failure while creating, reading or writing the store."""

    def __init__(self, path: object, cause: OSError) -> None:
        super().__init__(f"I/O error on {path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class ClockError(BucketListError):
    def __init__(self, now: float) -> None:
        super().__init__(f"System clock is before the epoch ({now})")
        self.now = now


class SerializationError(BucketListError):
    """The data file exists but does not hold a name -> record mapping."""

    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Cannot parse {path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigError(BucketListError):
    def __init__(self, path: object, reason: str) -> None:
        super().__init__(f"Invalid config {path}: {reason}")
        self.path = path
        self.reason = reason
