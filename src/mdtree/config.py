"""Local configuration for mdtree."""

from __future__ import annotations

import os


DEFAULT_PRESET = "default"
DEFAULT_HIGHLIGHT_STYLE = "default"
DEFAULT_LOG_LEVEL = "INFO"

PRESET_NAMES = ("default", "zero", "commonmark")

# Preset used when callers do not name one.
MDTREE_DEFAULT_PRESET = os.getenv("MDTREE_DEFAULT_PRESET", DEFAULT_PRESET)
# Pygments style used for highlighted fences.
MDTREE_HIGHLIGHT_STYLE = os.getenv("MDTREE_HIGHLIGHT_STYLE", DEFAULT_HIGHLIGHT_STYLE)
MDTREE_LOG_LEVEL = os.getenv("MDTREE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
