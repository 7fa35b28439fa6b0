"""Split text into alternating matched / unmatched blocks."""

from __future__ import annotations

import re
from typing import Iterator, NamedTuple, Pattern, Union


class Block(NamedTuple):
    text: str
    is_match: bool


def iter_blocks(text: str, pattern: Union[str, Pattern[str]]) -> Iterator[Block]:
    """
    Yield the blocks of ``text`` in order.

    Matched spans are flagged ``is_match=True``; the text between them is
    yielded as unmatched blocks. Gaps of length 0 are not yielded, so the
    concatenation of all blocks gives back ``text`` exactly.
    """
    if not text:
        return

    regex = re.compile(pattern) if isinstance(pattern, str) else pattern
    cursor = 0
    for match in regex.finditer(text):
        start, end = match.span()
        if start == end:
            continue
        if start > cursor:
            yield Block(text[cursor:start], False)
        yield Block(match.group(0), True)
        cursor = end

    if cursor < len(text):
        yield Block(text[cursor:], False)
