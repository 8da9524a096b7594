"""
Text Scorer Module
Statistical AI-generated text detection: heuristic, compression and stability signals.
"""
from .detector import AIContentDetector, DetectionResult
from .exceptions import CompressionUnavailableError, InvalidInputError, TextScorerError
from .signals import Signals, compute_signals
from .tokenizer import segment, tokenize

__all__ = [
    'AIContentDetector',
    'DetectionResult',
    'CompressionUnavailableError',
    'InvalidInputError',
    'TextScorerError',
    'Signals',
    'compute_signals',
    'segment',
    'tokenize',
]
