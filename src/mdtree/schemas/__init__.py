"""Shared schemas for mdtree."""

from mdtree.schemas.options import TOKENIZER_OPTION_NAMES, ParseOptions, PresetName
from mdtree.schemas.render import RenderResult

__all__ = ["TOKENIZER_OPTION_NAMES", "ParseOptions", "PresetName", "RenderResult"]
