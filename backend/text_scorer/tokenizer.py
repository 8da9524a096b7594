"""
Word tokenization and sentence segmentation.

Both functions are Unicode-aware: letters and digits from any script count
as word characters, so non-English text tokenizes the same way English does.
"""
from typing import List

import regex

# Letters, digits, apostrophes and hyphens between word boundaries
WORD_PATTERN = regex.compile(r"\b[\p{L}\p{N}'-]+\b")
WHITESPACE_PATTERN = regex.compile(r'\s+')
SENTENCE_BOUNDARY = regex.compile(r'(?<=[.!?])\s+')


def tokenize(text: str) -> List[str]:
    """Return the lower-cased words of ``text`` in order, duplicates kept."""
    return WORD_PATTERN.findall(text.lower())


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim."""
    return WHITESPACE_PATTERN.sub(' ', text).strip()


def segment(text: str) -> List[str]:
    """
    Split text into sentences.

    Whitespace is normalized first, then the text is split right after any
    '.', '!' or '?' that is followed by whitespace. The punctuation stays
    with the sentence it ends.

    Returns:
        Trimmed, non-empty sentences in their original order
    """
    sentences = SENTENCE_BOUNDARY.split(normalize_whitespace(text))
    return [s.strip() for s in sentences if s.strip()]
