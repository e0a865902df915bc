"""
Logging for the RWA Finance UI.

Every module logs through a child of the ``rwa_ui`` logger, named after its
path inside the package (``rwa_ui.services.token_service_impl``). Only the
package logger has a handler, so Reflex's own logging is left untouched.
The level comes from ``RWA_UI_LOG_LEVEL``, then ``LOG_LEVEL``.
"""

import logging
import os
from pathlib import Path

_ROOT = "rwa_ui"
_PACKAGE_DIR = Path(__file__).resolve().parent.parent
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_root() -> logging.Logger:
    root = logging.getLogger(_ROOT)
    if not root.handlers:
        level = os.getenv("RWA_UI_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO"
        root.setLevel(getattr(logging, level.upper(), logging.INFO))
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
        root.propagate = False
    return root


def logger(name: str) -> logging.Logger:
    """
    Return the package logger for a module.

    Args:
        name: ``__file__`` of the calling module, or a dotted name.
    """
    _configure_root()
    if "/" in name or "\\" in name:
        path = Path(name).resolve().with_suffix("")
        try:
            name = ".".join(path.relative_to(_PACKAGE_DIR).parts)
        except ValueError:
            name = path.name
    if name == _ROOT or name.startswith(_ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT}.{name}")


def redact(secret: str | None, keep: int = 8) -> str:
    """Return a short prefix of a token or signature that is safe to log."""
    if not secret:
        return "<none>"
    if len(secret) <= keep:
        return "*" * len(secret)
    return f"{secret[:keep]}..."
