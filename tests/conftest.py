"""Test setup for mdtree."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Callable

import pytest
from markdown_it.token import Token

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


TokenFactory = Callable[..., Token]


@pytest.fixture
def make_token() -> TokenFactory:
    """Build a markdown-it token with keyword overrides."""

    def _make(type_: str, nesting: int = 0, tag: str = "", **fields: Any) -> Token:
        return Token(type_, tag, nesting, **fields)

    return _make


@pytest.fixture
def sample_markdown() -> str:
    """A document touching most block and inline syntax."""
    return (
        "# Title\n"
        "\n"
        "Some *emphasis*, **strong** and `code`.\n"
        "\n"
        "> quoted\n"
        "\n"
        "- one\n"
        "- two\n"
        "\n"
        "1. first\n"
        "2. second\n"
        "\n"
        "---\n"
        "\n"
        "```python\n"
        "print('hi')\n"
        "```\n"
    )
