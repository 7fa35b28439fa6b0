from __future__ import annotations

from .blocks import Block, iter_blocks
from .document import ParsedDocument, RenderRequest, RenderSegment
from .explanation import (
    ExplanationParser,
    RawExplanation,
    WordForm,
    get_parser,
    parse,
)
from .tokens import EntryKind, StyleTag, StyledToken
from .youdao import raw_explanation_from_payload


__all__ = [
    "Block",
    "EntryKind",
    "ExplanationParser",
    "ParsedDocument",
    "RawExplanation",
    "RenderRequest",
    "RenderSegment",
    "StyleTag",
    "StyledToken",
    "WordForm",
    "get_parser",
    "iter_blocks",
    "parse",
    "raw_explanation_from_payload",
]
