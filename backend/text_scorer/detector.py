"""
Text Scorer Detector
Estimates how likely a text is to be machine-generated, with supporting signals.

Architecture:
- Heuristic layer: burstiness, repetition, lexical diversity, punctuation, word length
- ZipPy layer: gzip compression ratio (texts of 60+ tokens)
- DetectGPT-style layer: score stability under deterministic token swaps
- Ensemble: fixed 0.4 / 0.3 / 0.3 blend with low / medium / high confidence

Every request is a pure function of its text; nothing is cached or stored.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from . import config
from .compression import NOT_APPLIED, ZippyResult, score_compression
from .ensemble import EnsembleResult, combine
from .exceptions import CompressionUnavailableError, InvalidInputError
from .heuristic import HeuristicResult, heuristic_score
from .signals import Signals, compute_signals
from .stability import StabilityResult, detectgpt_score

logger = logging.getLogger(__name__)

CALIBRATION_LABELS = ('human', 'ai')
UNLABELED = 'unlabeled'

ZIPPY_NOTES = (
    'ZipPy-style compression entropy applied.',
    'Lower compression ratios often correlate with AI-generated text.',
)
DEGRADED_NOTE = 'Compression layer unavailable; scored without it.'


@dataclass(frozen=True)
class DetectionResult:
    """Everything computed for one text."""
    signals: Signals
    heuristic: HeuristicResult
    zippy: ZippyResult
    stability: StabilityResult
    ensemble: EnsembleResult
    degraded: bool = False

    @property
    def notes(self) -> Tuple[str, ...]:
        notes = list(self.heuristic.notes)
        if self.zippy.applied:
            notes.extend(ZIPPY_NOTES)
        if self.degraded:
            notes.append(DEGRADED_NOTE)
        return tuple(notes)

    def to_response(self) -> Dict:
        """Normal-mode response body."""
        return {
            "ai_probability": self.ensemble.score,
            "confidence": self.ensemble.confidence,
            "signals": {
                **self.signals.to_dict(),
                "compression_ratio": self.zippy.compression_ratio,
                "zippy_score": self.zippy.zippy_score,
                "detectgpt_stability": self.stability.stability,
            },
            "notes": list(self.notes),
            "degraded": self.degraded,
        }

    def to_calibration_response(self, label: Optional[str] = None) -> Dict:
        """Calibration-mode response body: raw signals plus every sub-score."""
        return {
            "label": normalize_label(label),
            "signals": self.signals.to_dict(),
            "scores": {
                "heuristic": self.heuristic.ai_probability,
                "zippy": self.zippy.zippy_score,
                "detectgpt": self.stability.stability,
                "ensemble": self.ensemble.score,
            },
        }


def normalize_label(label: Optional[str]) -> str:
    """Return 'human' or 'ai' when given one of them, otherwise 'unlabeled'."""
    if isinstance(label, str) and label.strip().lower() in CALIBRATION_LABELS:
        return label.strip().lower()
    return UNLABELED


class AIContentDetector:
    """
    Multi-signal AI text detector:
    - Heuristic baseline score
    - Compression (zippy) score
    - Perturbation stability score
    - Ensemble probability and confidence bucket
    """

    def __init__(self, compression_fallback: Optional[bool] = None):
        """Initialize the detector.

        Args:
            compression_fallback: If True, a failing compressor yields a
                degraded result with zippy_score 0. If False, the
                CompressionUnavailableError reaches the caller.
                Defaults to config.COMPRESSION_FALLBACK.
        """
        if compression_fallback is None:
            compression_fallback = config.COMPRESSION_FALLBACK
        self.compression_fallback = compression_fallback
        logger.info(f"AIContentDetector initialized (compression fallback: {'on' if compression_fallback else 'off'})")

    async def _score_compression(self, text: str, length: int) -> Tuple[ZippyResult, bool]:
        try:
            return await score_compression(text, length), False
        except CompressionUnavailableError as e:
            if not self.compression_fallback:
                raise
            logger.warning(f"Compression unavailable, scoring without it: {e}")
            return NOT_APPLIED, True

    async def analyze(self, text: str) -> DetectionResult:
        """
        Run the full scoring pipeline.

        Args:
            text: Text to analyze (leading/trailing whitespace is ignored)

        Returns:
            DetectionResult with every intermediate score

        Raises:
            InvalidInputError: text is empty or whitespace-only
            CompressionUnavailableError: gzip failed and fallback is off
        """
        if not isinstance(text, str) or not text.strip():
            raise InvalidInputError("Empty text provided")

        text = text.strip()

        signals = compute_signals(text)
        heuristic = heuristic_score(signals)
        zippy, degraded = await self._score_compression(text, signals.length)
        stability = detectgpt_score(text, heuristic.ai_probability)
        ensemble = combine(heuristic.ai_probability, zippy.zippy_score, stability.stability)

        logger.debug(
            f"Scored {signals.length} tokens: heuristic={heuristic.ai_probability:.3f} "
            f"zippy={zippy.zippy_score:.3f} stability={stability.stability:.3f} "
            f"-> {ensemble.score:.3f} ({ensemble.confidence})"
        )

        return DetectionResult(
            signals=signals,
            heuristic=heuristic,
            zippy=zippy,
            stability=stability,
            ensemble=ensemble,
            degraded=degraded,
        )

    async def predict(self, text: str) -> Dict:
        """Score a text and return the normal-mode response."""
        result = await self.analyze(text)
        return result.to_response()

    async def calibrate(self, text: str, label: Optional[str] = None) -> Dict:
        """
        Score a text for dataset collection.

        Scores are computed exactly as in predict(); only the returned fields
        differ.

        Args:
            text: Text to analyze
            label: 'human' or 'ai'; anything else is recorded as 'unlabeled'
        """
        result = await self.analyze(text)
        return result.to_calibration_response(label)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    detector = AIContentDetector()

    sample_ai_text = """
    In today's rapidly evolving digital landscape, it is essential to recognize that productivity
    is a multifaceted concept influenced by numerous variables. By implementing structured
    time-management strategies and maintaining consistent routines, individuals can optimize
    outcomes and achieve measurable improvements.
    """

    sample_human_text = """
    I planned to clean my desk this morning, but I ended up sorting old notes instead. It's not
    dramatic, just a small reminder that attention drifts. I'm going to set a 20-minute timer,
    finish one task, and then decide what's worth keeping.
    """

    def debug_text(text, label):
        result = asyncio.run(detector.analyze(text))
        print(f"\n{'='*60}")
        print(f"DEBUG - {label}")
        print(f"{'='*60}")
        for name, value in result.signals.to_dict().items():
            print(f"{name}: {value:.3f}")
        print(f"Heuristic: {result.heuristic.ai_probability:.3f}")
        print(f"Zippy: {result.zippy.zippy_score:.3f} (ratio {result.zippy.compression_ratio:.3f})")
        print(f"Stability: {result.stability.stability:.3f}")
        print(f"\nFINAL: {result.ensemble.score:.3f} ({result.ensemble.confidence})")
        for note in result.notes:
            print(f"  - {note}")

    debug_text(sample_ai_text, "AI-STYLE TEXT")
    debug_text(sample_human_text, "HUMAN-WRITTEN TEXT")
