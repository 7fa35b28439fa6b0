"""Styled token model shared by the parser and the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class StyleTag(str, Enum):
    REGULAR = "regular"
    PART_OF_SPEECH = "part_of_speech"
    WORD = "word"
    SEPARATOR = "separator"
    VARIANT_NAME = "variant_name"


class EntryKind(str, Enum):
    WORD = "word"
    VARIANT = "variant"


@dataclass(frozen=True)
class StyledToken:
    """Smallest styled unit of a dictionary document."""

    text: str
    style: StyleTag = StyleTag.REGULAR
    #: Set on word tokens only.
    entry_kind: Optional[EntryKind] = None
    #: Opaque payload for the presentation layer (click / hover targets).
    link_data: Any = field(default=None, hash=False)

    def __str__(self) -> str:
        return self.text

    @property
    def is_translation(self) -> bool:
        return self.style is StyleTag.WORD and self.entry_kind is EntryKind.WORD


LINE_BREAK = StyledToken("\n")
