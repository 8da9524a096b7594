"""
Pytest fixtures for Text Scorer tests.
"""
import os

# Must be set before app.py is imported anywhere
os.environ.setdefault('RATELIMIT_ENABLED', '0')

import pytest

from text_scorer import AIContentDetector


SAMPLE_HUMAN_TEXT = (
    "I planned to clean my desk this morning, but I ended up sorting old notes instead. "
    "It's not dramatic, just a small reminder that attention drifts. I'm going to set a "
    "20-minute timer, finish one task, and then decide what's worth keeping."
)

SAMPLE_AI_TEXT = (
    "In today's rapidly evolving digital landscape, it is essential to recognize that "
    "productivity is a multifaceted concept influenced by numerous variables. By implementing "
    "structured time-management strategies and maintaining consistent routines, individuals "
    "can optimize outcomes and achieve measurable improvements."
)

# Long enough (60+ tokens) for the compression layer to run
LONG_TEXT = " ".join([SAMPLE_HUMAN_TEXT, SAMPLE_AI_TEXT, SAMPLE_HUMAN_TEXT])

REPEATED_THE = " ".join(["the."] * 400)


@pytest.fixture
def detector():
    """Detector with the compression fallback enabled."""
    return AIContentDetector(compression_fallback=True)


@pytest.fixture
def strict_detector():
    """Detector that surfaces compression failures to the caller."""
    return AIContentDetector(compression_fallback=False)


@pytest.fixture
def client():
    """Flask test client for the API server."""
    from app import app

    app.config['TESTING'] = True
    with app.test_client() as test_client:
        yield test_client
