import logging
from typing import Annotated, Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from dictdoc.parsing import RawExplanation, WordForm
from dictdoc.services.documents import DocumentResult, DocumentService


LOGGER = logging.getLogger(__name__)


class WordFormModel(BaseModel):
    name: str = Field(description="Word form label, e.g. '复数'.")
    value: str = Field(description="Alternatives separated by '或'.")


class ExplanationRequest(BaseModel):
    explanations: List[str] = Field(
        default_factory=list,
        description="Explanation lines, e.g. 'n. cat, dog'.",
    )
    word_forms: List[WordFormModel] = Field(default_factory=list)

    def to_raw(self) -> RawExplanation:
        return RawExplanation(
            explanations=tuple(self.explanations),
            word_forms=tuple(WordForm(name=wf.name, value=wf.value) for wf in self.word_forms),
        )


class RenderPayload(BaseModel):
    word_segments: List[Dict[str, Any]]
    variant_segments: List[Dict[str, Any]]
    section_separator: str
    part_of_speech_labels: List[str]


class DocumentPayload(BaseModel):
    text: str
    translations: List[str]
    render: RenderPayload


router = APIRouter(prefix="/dictionary", tags=["dictionary"])


def get_document_service() -> DocumentService:
    return DocumentService()


DocumentServiceDep = Annotated[DocumentService, Depends(get_document_service)]


def _require_document(result: Optional[DocumentResult]) -> DocumentResult:
    if result is None:
        LOGGER.debug("Request without explanations")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No explanations to show.",
        )
    return result


@router.post("/document", response_model=DocumentPayload)
def build_document(
    payload: ExplanationRequest,
    service: DocumentServiceDep,
) -> Dict[str, Any]:
    result = _require_document(service.build_from_raw(payload.to_raw()))
    return result.to_dict()


@router.post("/text", response_class=PlainTextResponse)
def build_text(
    payload: ExplanationRequest,
    service: DocumentServiceDep,
    include_variants: Annotated[Optional[bool], Query()] = None,
) -> str:
    result = _require_document(
        service.build_from_raw(payload.to_raw(), include_variants=include_variants)
    )
    return result.text


@router.post("/provider", response_model=DocumentPayload)
def build_provider_document(
    payload: Dict[str, Any],
    service: DocumentServiceDep,
) -> Dict[str, Any]:
    result = _require_document(service.build(payload))
    return result.to_dict()
