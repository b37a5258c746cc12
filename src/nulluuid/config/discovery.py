"""Locate the nulluuid.toml that applies to a directory.

``NULLUUID_CONFIG`` pins an explicit file and disables the search; an
unset or empty variable falls back to the nearest ``nulluuid.toml`` in
the start directory or one of its ancestors.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "nulluuid.toml"
CONFIG_ENV_VAR = "NULLUUID_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None."""
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned).expanduser()
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    return next(
        (d / CONFIG_FILENAME for d in (here, *here.parents) if (d / CONFIG_FILENAME).is_file()),
        None,
    )
