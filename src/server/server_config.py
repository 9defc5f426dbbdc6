"""Configuration for the demo server."""

from __future__ import annotations

import os

DEFAULT_MAX_SOURCE_CHARS = 200_000

# Upper bound on submitted Markdown; bounds tokenizer and tree-building work.
MAX_SOURCE_CHARS = int(os.getenv("MDTREE_MAX_SOURCE_CHARS", str(DEFAULT_MAX_SOURCE_CHARS)))

APP_TITLE = "mdtree demonstrator"
APP_DESCRIPTION = "Render Markdown through markdown-it tokens and a rebuilt syntax tree."
