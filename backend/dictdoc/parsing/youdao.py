"""Mapping of translation-provider responses onto :class:`RawExplanation`."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional

from .explanation import RawExplanation, WordForm


LOGGER = logging.getLogger(__name__)

BASIC_KEY = "basic"
EXPLAINS_KEY = "explains"
WORD_FORMS_KEY = "wfs"
WORD_FORM_KEY = "wf"


def raw_explanation_from_payload(payload: Optional[Dict[str, Any]]) -> Optional[RawExplanation]:
    """
    Extract explanations and word forms from a provider response.

    Expected shape::

        {"basic": {"explains": ["n. cat"],
                   "wfs": [{"wf": {"name": "复数", "value": "cats"}}]}}

    Returns ``None`` when there is nothing to explain.
    """
    if not isinstance(payload, dict):
        return None

    basic = payload.get(BASIC_KEY)
    if not isinstance(basic, dict):
        return None

    explanations = [
        item for item in basic.get(EXPLAINS_KEY) or [] if isinstance(item, str)
    ]
    if not explanations:
        return None

    return RawExplanation(
        explanations=tuple(explanations),
        word_forms=tuple(_iter_word_forms(basic.get(WORD_FORMS_KEY))),
    )


def _iter_word_forms(wrappers: Any) -> Iterable[WordForm]:
    if not isinstance(wrappers, list):
        return []

    word_forms: List[WordForm] = []
    for wrapper in wrappers:
        word_form = wrapper.get(WORD_FORM_KEY) if isinstance(wrapper, dict) else None
        if not isinstance(word_form, dict):
            LOGGER.debug("Skipping malformed word form wrapper: %r", wrapper)
            continue

        name = word_form.get("name")
        value = word_form.get("value")
        if not isinstance(name, str) or not isinstance(value, str):
            LOGGER.debug("Skipping word form without name/value: %r", word_form)
            continue
        word_forms.append(WordForm(name=name, value=value))
    return word_forms
