"""Parsed dictionary document and its plain-text / render projections."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Tuple

from .tokens import EntryKind, StyleTag, StyledToken


SECTION_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class RenderSegment:
    text: str
    style: StyleTag
    entry_kind: Optional[EntryKind] = None
    link_data: Any = field(default=None, hash=False)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"text": self.text, "style": self.style.value}
        if self.entry_kind is not None:
            data["entry_kind"] = self.entry_kind.value
        if self.link_data is not None:
            data["link"] = self.link_data
        return data


@dataclass(frozen=True)
class RenderRequest:
    """
    Renderer-agnostic view of a document.

    Part-of-speech segments are wrapped in tabs; the renderer places a single
    right-aligned tab stop after the widest of ``part_of_speech_labels`` so
    that all definitions start at the same column.
    """

    word_segments: Tuple[RenderSegment, ...]
    variant_segments: Tuple[RenderSegment, ...] = ()
    section_separator: str = ""
    part_of_speech_labels: Tuple[str, ...] = ()

    def iter_segments(self) -> Iterator[RenderSegment]:
        yield from self.word_segments
        if self.variant_segments:
            yield RenderSegment(self.section_separator, StyleTag.REGULAR)
            yield from self.variant_segments

    @property
    def text(self) -> str:
        return "".join(segment.text for segment in self.iter_segments())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word_segments": [segment.to_dict() for segment in self.word_segments],
            "variant_segments": [segment.to_dict() for segment in self.variant_segments],
            "section_separator": self.section_separator,
            "part_of_speech_labels": list(self.part_of_speech_labels),
        }


@dataclass(frozen=True)
class ParsedDocument:
    """Tokens of one dictionary entry plus its translation candidates."""

    word_tokens: Tuple[StyledToken, ...]
    variant_tokens: Tuple[StyledToken, ...] = ()
    translations: FrozenSet[str] = field(default_factory=frozenset)

    @property
    def ordered_translations(self) -> List[str]:
        seen = dict.fromkeys(
            token.text for token in self.word_tokens if token.is_translation
        )
        return [text for text in seen if text in self.translations]

    def plain_text(self, include_variants: bool) -> str:
        pieces: List[str] = []
        for token in self.word_tokens:
            pieces.append(token.text)
            # No tab alignment in plain text.
            if token.style is StyleTag.PART_OF_SPEECH:
                pieces.append(" ")

        if include_variants and self.variant_tokens:
            pieces.append(SECTION_SEPARATOR)
            pieces.extend(token.text for token in self.variant_tokens)

        return "".join(pieces)

    def render_request(self) -> RenderRequest:
        word_segments = tuple(_to_segment(token) for token in self.word_tokens)
        variant_segments = tuple(_to_segment(token) for token in self.variant_tokens)
        labels = tuple(
            token.text
            for token in self.word_tokens
            if token.style is StyleTag.PART_OF_SPEECH
        )
        return RenderRequest(
            word_segments=word_segments,
            variant_segments=variant_segments,
            section_separator=SECTION_SEPARATOR if variant_segments else "",
            part_of_speech_labels=labels,
        )

    def __str__(self) -> str:
        return self.plain_text(include_variants=True)


def _to_segment(token: StyledToken) -> RenderSegment:
    text = token.text
    if token.style is StyleTag.PART_OF_SPEECH:
        text = f"\t{text}\t"
    return RenderSegment(
        text=text,
        style=token.style,
        entry_kind=token.entry_kind,
        link_data=token.link_data,
    )
