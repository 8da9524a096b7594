"""
Heuristic baseline scorer.

Maps a signal vector to a 0-1 AI-likelihood score with a fixed weighted
formula. The band constants below were tuned empirically and the confidence
thresholds downstream assume these exact values.
"""
from dataclasses import dataclass
from typing import Tuple

from .signals import Signals, clamp01

# Sub-score bands
REPETITION_SATURATION = 0.22
UNIQUE_RATIO_CEILING = 0.62
UNIQUE_RATIO_SPAN = 0.25
PUNCTUATION_TARGET = 0.03
WORD_LENGTH_TARGET = 4.7
WORD_LENGTH_SPAN = 2.0

# Sub-score weights (sum to 1.0)
WEIGHT_LOW_BURST = 0.34
WEIGHT_REPETITION = 0.26
WEIGHT_LOW_UNIQUE = 0.20
WEIGHT_PUNCT_MID = 0.10
WEIGHT_WORD_LEN_MID = 0.10

# Length dampening: 0.55x below 40 tokens, full strength from 300
MIN_RELIABLE_LENGTH = 40
LENGTH_RAMP = 260
SHORT_TEXT_FLOOR = 0.55
LENGTH_WEIGHT = 0.45

# Note thresholds
NOTE_LOW_BURST = 0.75
NOTE_REPETITION = 0.18
NOTE_LOW_UNIQUE = 0.5


@dataclass(frozen=True)
class HeuristicResult:
    ai_probability: float
    notes: Tuple[str, ...] = ()


def length_factor(length: int) -> float:
    """0 for texts under 40 tokens, rising linearly to 1 at 300 tokens."""
    return clamp01((length - MIN_RELIABLE_LENGTH) / LENGTH_RAMP)


def heuristic_score(signals: Signals) -> HeuristicResult:
    """
    Score a signal vector.

    Five clamped sub-scores are combined with fixed weights, then dampened
    for short texts.

    Args:
        signals: Signal vector from compute_signals()

    Returns:
        HeuristicResult with ai_probability in [0, 1] and explanatory notes
    """
    low_burst = clamp01(1 - signals.burstiness)
    rep = clamp01(signals.repetition / REPETITION_SATURATION)
    low_unique = clamp01((UNIQUE_RATIO_CEILING - signals.unique_word_ratio) / UNIQUE_RATIO_SPAN)
    punct_mid = 1 - clamp01(abs(signals.punctuation_rate - PUNCTUATION_TARGET) / PUNCTUATION_TARGET)
    word_len_mid = 1 - clamp01(abs(signals.avg_word_len - WORD_LENGTH_TARGET) / WORD_LENGTH_SPAN)

    raw = (
        WEIGHT_LOW_BURST * low_burst
        + WEIGHT_REPETITION * rep
        + WEIGHT_LOW_UNIQUE * low_unique
        + WEIGHT_PUNCT_MID * punct_mid
        + WEIGHT_WORD_LEN_MID * word_len_mid
    )

    damping = SHORT_TEXT_FLOOR + LENGTH_WEIGHT * length_factor(signals.length)
    ai_probability = clamp01(raw * damping)

    notes = []
    if signals.length < MIN_RELIABLE_LENGTH:
        notes.append('Text is short; detector confidence is reduced.')
    if low_burst > NOTE_LOW_BURST:
        notes.append('Low sentence-length variance (low burstiness).')
    if signals.repetition > NOTE_REPETITION:
        notes.append('Elevated repetition detected.')
    if signals.unique_word_ratio < NOTE_LOW_UNIQUE:
        notes.append('Lower lexical diversity observed.')

    return HeuristicResult(ai_probability=ai_probability, notes=tuple(notes))
