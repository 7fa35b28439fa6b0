from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from dictdoc.config import Settings, get_settings
from dictdoc.parsing import (
    EntryKind,
    ExplanationParser,
    ParsedDocument,
    RawExplanation,
    get_parser,
    raw_explanation_from_payload,
)


def lookup_link(text: str, entry_kind: EntryKind) -> Dict[str, str]:
    """Link data telling the frontend which word a click should look up."""
    return {"query": text.strip(), "kind": entry_kind.value}


@dataclass(slots=True)
class DocumentResult:
    document: ParsedDocument
    text: str
    translations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "translations": list(self.translations),
            "render": self.document.render_request().to_dict(),
        }


class DocumentService:
    def __init__(
        self,
        settings: Optional[Settings] = None,
        parser: Optional[ExplanationParser] = None,
    ) -> None:
        self._settings = settings
        if parser is None:
            parser = ExplanationParser(lookup_link) if self.settings.link_words else get_parser()
        self.parser = parser

    @property
    def settings(self) -> Settings:
        # Read lazily so a refreshed environment is honoured.
        return self._settings or get_settings()

    def build(self, payload: Any) -> Optional[DocumentResult]:
        if not isinstance(payload, dict):
            raise ValueError(f"Unsupported payload type: {type(payload).__name__}")
        return self.build_from_raw(raw_explanation_from_payload(payload))

    def build_from_raw(
        self,
        raw: Optional[RawExplanation],
        *,
        include_variants: Optional[bool] = None,
    ) -> Optional[DocumentResult]:
        document = self.parser.parse(raw)
        if document is None:
            return None
        return DocumentResult(
            document=document,
            text=self.text(document, include_variants=include_variants),
            translations=document.ordered_translations,
        )

    def text(self, document: ParsedDocument, *, include_variants: Optional[bool] = None) -> str:
        if include_variants is None:
            include_variants = self.settings.show_word_forms
        return document.plain_text(include_variants)
