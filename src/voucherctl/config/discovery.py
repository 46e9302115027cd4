"""Locate voucherctl.toml.

An explicit ``--config`` path wins, then ``VOUCHERCTL_CONFIG``, then the
nearest ``voucherctl.toml`` walking up from the start directory.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "voucherctl.toml"
CONFIG_ENV_VAR = "VOUCHERCTL_CONFIG"


def locate_config(explicit: str | Path | None = None, start: Path | None = None) -> Path | None:
    """Return the config file to load, or None to run on defaults.

    A named file that does not exist disables the walk-up search.
    """
    named = explicit or os.environ.get(CONFIG_ENV_VAR)
    if named:
        path = Path(named)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        if (directory / CONFIG_FILENAME).is_file():
            return directory / CONFIG_FILENAME
    return None
