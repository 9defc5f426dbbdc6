"""Inspect markdown-it token streams and the syntax trees built from them."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

import httpx
from markdown_it.token import Token

from mdtree.config import PRESET_NAMES
from mdtree.tokenizer import tokenize
from mdtree.tree import SyntaxTreeNode


def main() -> None:
    parser = argparse.ArgumentParser(description="Inspect markdown-it token types and the rebuilt syntax tree.")
    parser.add_argument("--url", help="URL of a raw Markdown file to fetch")
    parser.add_argument("--file", help="Local Markdown file path")
    parser.add_argument("--text", help="Inline Markdown text")
    parser.add_argument("--preset", choices=PRESET_NAMES, default="default", help="Tokenizer preset")
    parser.add_argument("--html", action="store_true", help="Allow raw HTML in the source")
    parser.add_argument("--show-text", action="store_true", help="Show text content in the tree outline")
    args = parser.parse_args()

    if not (args.url or args.file or args.text):
        parser.error("Provide --url, --file or --text")

    source = load_markdown(url=args.url, file_path=args.file, text=args.text)
    tokens = tokenize(source, args.preset, {"html": args.html})
    types, inline_types = collect_stats(tokens)

    print("Block tokens:")
    for name, count in types.most_common():
        print(f"{name}: {count}")

    print("\nInline tokens:")
    for name, count in inline_types.most_common():
        print(f"{name}: {count}")

    print("\nTree:")
    print(SyntaxTreeNode(tokens).pretty(show_text=args.show_text))


def load_markdown(*, url: str | None, file_path: str | None, text: str | None) -> str:
    if text is not None:
        return text
    if url:
        response = httpx.get(url, follow_redirects=True, timeout=15.0)
        response.raise_for_status()
        return response.text

    path = Path(file_path or "")
    if not path.is_file():
        raise FileNotFoundError(f"Markdown file not found: {path}")
    return path.read_text(encoding="utf-8")


def collect_stats(tokens: list[Token]) -> tuple[Counter, Counter]:
    types = Counter()
    inline_types = Counter()

    for token in tokens:
        types[token.type] += 1
        for child in token.children or []:
            inline_types[child.type] += 1
    return types, inline_types


if __name__ == "__main__":
    main()
