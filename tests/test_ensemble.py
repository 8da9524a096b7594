"""
Tests for the ensemble combiner.
"""
import pytest

from text_scorer.ensemble import CONFIDENCE_LABELS, combine, confidence_label


class TestConfidenceLabel:
    """Test confidence thresholds"""

    @pytest.mark.parametrize("score,label", [
        (0.0, 'low'),
        (0.5499, 'low'),
        (0.55, 'medium'),
        (0.7999, 'medium'),
        (0.80, 'high'),
        (1.0, 'high'),
    ])
    def test_thresholds(self, score, label):
        """Test 0.55 and 0.80 are inclusive lower bounds"""
        assert confidence_label(score) == label

    def test_monotonic(self):
        """Test higher scores never get a lower label"""
        ranks = [CONFIDENCE_LABELS.index(confidence_label(i / 100)) for i in range(101)]
        assert ranks == sorted(ranks)


class TestCombine:
    """Test the weighted ensemble"""

    def test_weights(self):
        """Test weights are 0.4 heuristic, 0.3 compression and 0.3 stability"""
        result = combine(0.5, 0.2, 1.0)
        assert result.score == pytest.approx(0.4 * 0.5 + 0.3 * 0.2 + 0.3 * 1.0)
        assert result.confidence == 'medium'

    def test_bounds(self):
        """Test all-zero and all-one inputs hit the range ends"""
        assert combine(0.0, 0.0, 0.0).score == 0.0
        assert combine(1.0, 1.0, 1.0).score == pytest.approx(1.0)
        assert combine(1.0, 1.0, 1.0).score <= 1.0

    def test_gated_compression_is_not_renormalized(self):
        """Test a gated compression score still takes its 0.3 weight"""
        result = combine(1.0, 0.0, 1.0)
        assert result.score == pytest.approx(0.7)
        assert result.confidence == 'medium'
