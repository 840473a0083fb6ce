"""Shared constants — env var names, default paths, resolvers.

Single source of truth for where the store lives and how items decay.
Resolvers take the environment as an argument so tests never touch the
real home directory.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from bucketlist.errors import HomeDirectoryUnresolvable

# ---------------------------------------------------------------------------
# Env var names
# ---------------------------------------------------------------------------

ENV_HOME = "BUCKETLIST_HOME"
ENV_DIR = "BUCKETLIST_DIR"
ENV_LOG = "BUCKETLIST_LOG"

# ---------------------------------------------------------------------------
# Default paths
# ---------------------------------------------------------------------------

CONFIG_DIRNAME = ".bucketlist"
DATA_FILENAME = "data.json"
CONFIG_FILENAME = "config.yaml"

# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------

DECAY = 0.925
SEC_OF_DECAY = 86400
ACTIVE_THRESHOLD = 0.1


# ---------------------------------------------------------------------------
# Resolvers
# ---------------------------------------------------------------------------


def home_dir(environ: Mapping[str, str] | None = None) -> str | None:
    """Resolve home: ENV_HOME > HOME > USERPROFILE, or None if none is set.

    Empty values count as unset.
    """
    env = os.environ if environ is None else environ
    for key in (ENV_HOME, "HOME", "USERPROFILE"):
        value = env.get(key)
        if value:
            return value
    return None


def resolve_config_dir(home: str | None) -> Path:
    """Return <home>/.bucketlist, or ./.bucketlist when home is unknown."""
    if home is None:
        return Path(".") / CONFIG_DIRNAME
    if not home or not os.path.isabs(home):
        raise HomeDirectoryUnresolvable(home)
    try:
        os.fsencode(home)
    except UnicodeError:
        raise HomeDirectoryUnresolvable(home) from None
    return Path(home) / CONFIG_DIRNAME


def resolve_store_dir(environ: Mapping[str, str] | None = None) -> Path:
    """Resolve store dir: ENV_DIR > <home>/.bucketlist."""
    env = os.environ if environ is None else environ
    explicit = env.get(ENV_DIR)
    if explicit:
        return Path(explicit).expanduser()
    return resolve_config_dir(home_dir(env))
