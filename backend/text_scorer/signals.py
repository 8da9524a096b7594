"""
Text Scorer Signal Extraction
Computes the six statistics the heuristic layer scores a text on.

Signals:
- length: token count
- burstiness: normalized spread of sentence lengths
- repetition: share of tokens that repeat an earlier token
- punctuation_rate: share of characters that are . , ! ? ; :
- avg_word_len: mean token length in characters
- unique_word_ratio: distinct tokens over total tokens
"""
import math
from collections import Counter
from dataclasses import asdict, dataclass
from typing import Dict, List

from .tokenizer import segment, tokenize

PUNCTUATION_MARKS = frozenset('.,!?;:')
EPSILON = 1e-6


def clamp01(value: float) -> float:
    """Clamp a value to the [0, 1] range."""
    return max(0.0, min(1.0, value))


def sample_stddev(values: List[float]) -> float:
    """Standard deviation with the N-1 denominator. 0 for fewer than 2 values."""
    if len(values) <= 1:
        return 0.0
    mean = sum(values) / len(values)
    variance = sum((x - mean) ** 2 for x in values) / (len(values) - 1)
    return math.sqrt(variance)


@dataclass(frozen=True)
class Signals:
    """Signal vector for a single text. Ratios are already clamped."""
    length: int
    burstiness: float
    repetition: float
    punctuation_rate: float
    avg_word_len: float
    unique_word_ratio: float

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


def _burstiness(text: str) -> float:
    sentence_lengths = [len(tokenize(s)) for s in segment(text)]
    sentence_lengths = [n for n in sentence_lengths if n > 0]
    if len(sentence_lengths) < 2:
        return 0.0

    mean = sum(sentence_lengths) / len(sentence_lengths)
    return clamp01(sample_stddev(sentence_lengths) / (mean + EPSILON))


def _repetition(words: List[str]) -> float:
    if not words:
        return 0.0
    repeats = sum(count - 1 for count in Counter(words).values())
    return clamp01(repeats / len(words))


def compute_signals(text: str) -> Signals:
    """
    Compute the signal vector for ``text``.

    Pure function. Degenerate input (empty string, punctuation only) yields
    zeros rather than NaN.

    Args:
        text: Raw text, untokenized

    Returns:
        Immutable Signals record
    """
    words = tokenize(text)
    length = len(words)

    unique_word_ratio = clamp01(len(set(words)) / length) if length else 0.0

    punct = sum(1 for ch in text if ch in PUNCTUATION_MARKS)
    punctuation_rate = clamp01(punct / len(text)) if text else 0.0

    avg_word_len = sum(len(w) for w in words) / length if length else 0.0

    return Signals(
        length=length,
        burstiness=_burstiness(text),
        repetition=_repetition(words),
        punctuation_rate=punctuation_rate,
        avg_word_len=avg_word_len,
        unique_word_ratio=unique_word_ratio,
    )
