"""Per-user configuration location."""
from __future__ import annotations

import sys
from pathlib import Path

from platformdirs import user_config_path


def default_config_path() -> Path:
    if sys.platform in ("win32", "darwin"):
        config_dir = user_config_path("Shamir Core", appauthor=False, roaming=True)
    else:
        config_dir = user_config_path("shamir-core", appauthor=False)
    return Path(config_dir) / "config.yaml"
