"""Default file locations."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_ENV_VAR = "ELECTION_HELPERS_CONFIG"
CONFIG_FILENAME = "election_helpers.yml"


def config_path() -> Path:
    """Return the config file path: ``$ELECTION_HELPERS_CONFIG`` or ``./election_helpers.yml``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).resolve()
    return Path.cwd() / CONFIG_FILENAME
