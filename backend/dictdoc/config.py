from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_FALSE_VALUES = {"false", "0", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() not in _FALSE_VALUES


@dataclass(frozen=True)
class Settings:
    #: Append the word-form section to the plain-text projection.
    show_word_forms: bool = True
    #: Attach lookup targets to word tokens served over HTTP.
    link_words: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings(
        show_word_forms=_env_flag("DICTDOC_SHOW_WORD_FORMS", True),
        link_words=_env_flag("DICTDOC_LINK_WORDS", True),
    )
