"""Central logging setup for mersalg.

Usage in any module:
    from mersalg.utils.logging import get_logger
    logger = get_logger(__name__)
    logger.info("Synced %d products", n)
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from ..config.settings import LOG_FILE, LOG_LEVEL

ROOT_LOGGER_NAME = "mersalg"
LOG_FORMAT = "%(asctime)s [%(levelname)-7s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_CONFIGURED = False


class SafeStreamHandler(logging.StreamHandler):
    """StreamHandler that degrades to escaped output on encoding errors.

    Product titles carry characters like "æ", "ø", "″" and "™" that some
    consoles cannot encode.
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record) + self.terminator
            try:
                self.stream.write(msg)
            except UnicodeEncodeError:
                encoding = getattr(self.stream, "encoding", None) or "utf-8"
                self.stream.write(msg.encode(encoding, "backslashreplace").decode(encoding))
            self.flush()
        except Exception:
            self.handleError(record)


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        return value if isinstance(value, int) else logging.INFO
    return int(level)


def setup_logging(
    level: Union[int, str, None] = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """Attach console + file handlers to the ``mersalg`` logger once."""
    global _CONFIGURED
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if _CONFIGURED:
        return root
    _CONFIGURED = True

    resolved = _resolve_level(level)
    root.setLevel(logging.DEBUG)
    fmt = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = SafeStreamHandler(sys.stderr)
    console.setLevel(resolved)
    console.setFormatter(fmt)
    root.addHandler(console)

    target = log_file or LOG_FILE
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(target, encoding="utf-8", delay=True)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)
    except OSError:
        # read-only deployments log to the console only
        root.debug("File logging disabled for %s", target)

    return root


def set_console_level(level: Union[int, str]) -> None:
    """Change the console verbosity after setup (``--verbose`` in the CLI)."""
    resolved = _resolve_level(level)
    for handler in setup_logging().handlers:
        if isinstance(handler, SafeStreamHandler):
            handler.setLevel(resolved)


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``mersalg`` namespace, configuring on first use."""
    setup_logging()
    return logging.getLogger(name)
