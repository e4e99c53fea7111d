"""
Sentence-level text splitting.

Boundaries fall right after a terminating punctuation mark, CJK (。！？)
or Western (.!?). Whitespace after the mark belongs to no sentence.
"""

import logging
import re
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)

SENTENCE_TERMINATORS = "。！？.!?"

_BOUNDARY = re.compile(rf"(?<=[{re.escape(SENTENCE_TERMINATORS)}])\s*")


@dataclass
class Sentence:
    """A sentence with position information."""

    text: str
    start: int
    end: int
    index: int


def split_into_sentences(text: str) -> List[Sentence]:
    """
    Split text into sentences.

    Every terminator is a boundary; there is no abbreviation or decimal
    handling. Text without any terminator comes back as one sentence.

    Args:
        text: Text to split (may be empty or blank)

    Returns:
        List of trimmed, non-empty Sentence objects in document order

    Example:
        >>> [s.text for s in split_into_sentences("Hello world. This is great!")]
        ['Hello world.', 'This is great!']
    """
    sentences: List[Sentence] = []
    if not text or not text.strip():
        return sentences

    pos = 0
    for match in _BOUNDARY.finditer(text):
        _append_sentence(sentences, text, pos, match.start())
        pos = match.end()
    _append_sentence(sentences, text, pos, len(text))

    return sentences


def _append_sentence(sentences: List[Sentence], text: str, start: int, end: int) -> None:
    """Trim text[start:end] and append it if anything is left."""
    raw = text[start:end]
    stripped = raw.strip()
    if not stripped:
        return

    offset = start + len(raw) - len(raw.lstrip())
    sentences.append(
        Sentence(
            text=stripped,
            start=offset,
            end=offset + len(stripped),
            index=len(sentences),
        )
    )
