"""On-disk locations for application data."""

import os
import tempfile
from pathlib import Path


def cache_dir(name: str) -> Path:
    """
    Return a named cache directory.

    The root is ``RWA_UI_CACHE_DIR`` when set, otherwise the system temp
    directory.
    """
    root = os.getenv("RWA_UI_CACHE_DIR") or tempfile.gettempdir()
    return Path(root) / name
