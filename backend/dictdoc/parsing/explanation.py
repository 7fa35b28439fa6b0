"""Tokenizer for dictionary explanation lines and word forms."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Callable, Dict, List, Optional, Sequence

from .blocks import iter_blocks
from .document import ParsedDocument
from .tokens import LINE_BREAK, EntryKind, StyleTag, StyledToken


LOGGER = logging.getLogger(__name__)

PARTS_OF_SPEECH = (
    "a", "adj", "prep", "pron", "n", "v", "conj", "s", "sc", "o", "oc", "vi",
    "vt", "aux", "ad", "adv", "art", "num", "int", "u", "c", "pl", "abbr",
)

EXPLANATION_PATTERN = re.compile(
    r"^((%s)\.)(.+)$" % "|".join(PARTS_OF_SPEECH)
)
WORDS_SEPARATOR_PATTERN = re.compile(r"[,;，；]")
VARIANTS_SEPARATOR_PATTERN = re.compile(r"\s*或\s*")
ANNOTATION_PATTERN = re.compile(r"\(.*?\)|（.*?）|\[.*?]|【.*?】|<.*?>")

GROUP_PART_OF_SPEECH = 1
GROUP_WORDS = 3

# ASCII separators get a trailing space; full-width ones carry their own.
_SPACED_SEPARATORS = {",", ";"}

LinkResolver = Callable[[str, EntryKind], Any]


@dataclass(frozen=True)
class WordForm:
    """Inflected form of the headword, e.g. ``("复数", "cats")``."""

    name: str
    value: str


@dataclass(frozen=True)
class RawExplanation:
    explanations: Sequence[str]
    word_forms: Sequence[WordForm] = field(default_factory=tuple)


class ExplanationParser:
    """Turns raw explanation lines into a :class:`ParsedDocument`."""

    def __init__(self, link_resolver: Optional[LinkResolver] = None) -> None:
        self.link_resolver = link_resolver

    def parse(self, raw: Optional[RawExplanation]) -> Optional[ParsedDocument]:
        if raw is None or not raw.explanations:
            return None

        word_tokens: List[StyledToken] = []
        translations: Dict[str, None] = {}
        for index, explanation in enumerate(raw.explanations):
            if index > 0:
                word_tokens.append(LINE_BREAK)
            self._parse_explanation(explanation, word_tokens, translations)

        return ParsedDocument(
            word_tokens=tuple(word_tokens),
            variant_tokens=tuple(self._parse_word_forms(raw.word_forms)),
            translations=frozenset(translations),
        )

    def _parse_explanation(
        self,
        explanation: str,
        tokens: List[StyledToken],
        translations: Dict[str, None],
    ) -> None:
        match = EXPLANATION_PATTERN.match(explanation)
        if match:
            tokens.append(
                StyledToken(match.group(GROUP_PART_OF_SPEECH), StyleTag.PART_OF_SPEECH)
            )
            words = match.group(GROUP_WORDS).strip()
        else:
            LOGGER.debug("Explanation without part of speech: %r", explanation)
            words = explanation.strip()

        for block in iter_blocks(words, WORDS_SEPARATOR_PATTERN):
            if block.is_match:
                separator = block.text
                if separator in _SPACED_SEPARATORS:
                    separator += " "
                tokens.append(StyledToken(separator, StyleTag.SEPARATOR))
            else:
                self._parse_words(block.text.strip(), tokens, translations)

    def _parse_words(
        self,
        words: str,
        tokens: List[StyledToken],
        translations: Dict[str, None],
    ) -> None:
        for block in iter_blocks(words, ANNOTATION_PATTERN):
            if block.is_match:
                tokens.append(StyledToken(block.text))
                continue

            word = block.text.strip()
            if not word:
                tokens.append(StyledToken(block.text))
                continue

            # Keep the gap between a word and its annotation outside the word.
            leading, _, trailing = block.text.partition(word)
            if leading:
                tokens.append(StyledToken(leading))
            tokens.append(self._word_token(word, EntryKind.WORD))
            translations[word] = None
            if trailing:
                tokens.append(StyledToken(trailing))

    def _parse_word_forms(self, word_forms: Sequence[WordForm]) -> List[StyledToken]:
        tokens: List[StyledToken] = []
        for index, word_form in enumerate(word_forms or ()):
            if index > 0:
                tokens.append(LINE_BREAK)

            tokens.append(StyledToken(f"{word_form.name}: ", StyleTag.VARIANT_NAME))
            values = VARIANTS_SEPARATOR_PATTERN.split(word_form.value)
            for value_index, value in enumerate(values):
                if value_index > 0:
                    tokens.append(StyledToken(", ", StyleTag.SEPARATOR))
                tokens.append(self._word_token(value, EntryKind.VARIANT))
        return tokens

    def _word_token(self, text: str, entry_kind: EntryKind) -> StyledToken:
        link_data = None
        if self.link_resolver is not None:
            link_data = self.link_resolver(text, entry_kind)
        return StyledToken(text, StyleTag.WORD, entry_kind, link_data)


@lru_cache(maxsize=1)
def get_parser() -> ExplanationParser:
    return ExplanationParser()


def parse(raw: Optional[RawExplanation]) -> Optional[ParsedDocument]:
    """Parse ``raw`` with the default parser; ``None`` means nothing to show."""

    return get_parser().parse(raw)
