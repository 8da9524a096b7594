"""
Ensemble combiner: fixed-weight blend of the heuristic, compression and
stability scores, bucketed into a confidence label.
"""
from dataclasses import dataclass

from .signals import clamp01

WEIGHT_HEURISTIC = 0.4
WEIGHT_COMPRESSION = 0.3
WEIGHT_STABILITY = 0.3

HIGH_THRESHOLD = 0.80
MEDIUM_THRESHOLD = 0.55

CONFIDENCE_LABELS = ('low', 'medium', 'high')


@dataclass(frozen=True)
class EnsembleResult:
    score: float
    confidence: str


def confidence_label(score: float) -> str:
    """Bucket a final score into 'low', 'medium' or 'high'."""
    if score >= HIGH_THRESHOLD:
        return 'high'
    if score >= MEDIUM_THRESHOLD:
        return 'medium'
    return 'low'


def combine(heuristic: float, compression: float, stability: float) -> EnsembleResult:
    """
    Weighted sum of the three sub-scores.

    The compression score is always included, at 0 when it was gated off
    for a short text; weights are not renormalized.
    """
    score = clamp01(
        WEIGHT_HEURISTIC * heuristic
        + WEIGHT_COMPRESSION * compression
        + WEIGHT_STABILITY * stability
    )
    return EnsembleResult(score=score, confidence=confidence_label(score))
