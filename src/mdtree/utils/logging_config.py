"""Logging configuration for mdtree and the demo server.

Call sites attach structured context through ``extra={...}``. The formatter
installed by :func:`configure_logging` appends those fields to each line so
they stay visible without a JSON log pipeline.
"""

from __future__ import annotations

import logging
import sys

from mdtree.config import MDTREE_LOG_LEVEL

_HANDLER_NAME = "mdtree"

# Attributes present on every LogRecord; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime"}


class ExtraFieldsFormatter(logging.Formatter):
    """Formatter that renders ``extra`` fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        fields = {
            key: value
            for key, value in vars(record).items()
            if key not in _RESERVED_ATTRS and not key.startswith("_")
        }
        if not fields:
            return base
        rendered = " ".join(f"{key}={value!r}" for key, value in sorted(fields.items()))
        return f"{base} | {rendered}"


def configure_logging(level: str | int | None = None) -> None:
    """Install the mdtree handler on the root logger.

    Calling this more than once replaces the level but never stacks handlers.
    """
    root = logging.getLogger()
    root.setLevel(level or MDTREE_LOG_LEVEL)
    if any(handler.get_name() == _HANDLER_NAME for handler in root.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        ExtraFieldsFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name``."""
    return logging.getLogger(name)
