# tests/test_scoring.py
"""Tests for the fixed-penalty scoring functions."""

import itertools

import pytest
from sitepitch import scoring
from sitepitch.models import ContrastRisk
from sitepitch.constants import LOW_TEXT_THRESHOLD, AI_TEXT_THRESHOLD


TEXT_LENGTHS = [0, 1, LOW_TEXT_THRESHOLD - 1, LOW_TEXT_THRESHOLD, AI_TEXT_THRESHOLD - 1,
                AI_TEXT_THRESHOLD, 50000]


class TestScoring:
    """Test suite for scoring rules."""

    @pytest.mark.parametrize("value,expected", [
        (-40, 0),
        (0, 0),
        (55, 55),
        (100, 100),
        (140, 100),
    ])
    def test_clamp_score(self, value, expected):
        """Test clamping into 0-100."""
        assert scoring.clamp_score(value) == expected

    def test_seo_score_all_penalties(self):
        """Test the worst-case SEO score."""
        assert scoring.seo_score(0, False, False) == 40

    def test_seo_score_no_penalties(self):
        """Test the best-case SEO score."""
        assert scoring.seo_score(LOW_TEXT_THRESHOLD, True, True) == 100

    def test_seo_score_single_penalties(self):
        """Test each SEO penalty on its own."""
        assert scoring.seo_score(5000, False, True) == 80
        assert scoring.seo_score(100, True, True) == 80
        assert scoring.seo_score(5000, True, False) == 80

    def test_ai_visibility_score(self):
        """Test AI visibility baseline and penalties."""
        assert scoring.ai_visibility_score(AI_TEXT_THRESHOLD, True, True) == 70
        assert scoring.ai_visibility_score(AI_TEXT_THRESHOLD, False, True) == 50
        assert scoring.ai_visibility_score(AI_TEXT_THRESHOLD, True, False) == 60
        assert scoring.ai_visibility_score(AI_TEXT_THRESHOLD - 1, True, True) == 60
        assert scoring.ai_visibility_score(0, False, False) == 30

    def test_accessibility_score(self):
        """Test accessibility baseline and penalties."""
        assert scoring.accessibility_score(2000, ContrastRisk.LOW) == 75
        assert scoring.accessibility_score(2000, ContrastRisk.MEDIUM) == 65
        assert scoring.accessibility_score(2000, ContrastRisk.HIGH) == 55
        assert scoring.accessibility_score(0, ContrastRisk.HIGH) == 45

    @pytest.mark.parametrize("count,expected", [
        (0, ContrastRisk.LOW),
        (1, ContrastRisk.MEDIUM),
        (5, ContrastRisk.MEDIUM),
        (6, ContrastRisk.HIGH),
        (40, ContrastRisk.HIGH),
    ])
    def test_contrast_risk_for(self, count, expected):
        """Test risk levels from the uncapped match count."""
        assert scoring.contrast_risk_for(count) == expected

    @pytest.mark.parametrize("score,label", [
        (100, "high"),
        (80, "high"),
        (79, "medium"),
        (50, "medium"),
        (49, "weak"),
        (0, "weak"),
    ])
    def test_score_label(self, score, label):
        """Test score label boundaries."""
        assert scoring.score_label(score) == label

    def test_more_text_never_lowers_scores(self):
        """Test monotonicity in visible text length for every other signal combination."""
        for schema, service, faq in itertools.product([True, False], repeat=3):
            for risk in ContrastRisk:
                seo = [scoring.seo_score(n, schema, service) for n in TEXT_LENGTHS]
                ai = [scoring.ai_visibility_score(n, faq, schema) for n in TEXT_LENGTHS]
                acc = [scoring.accessibility_score(n, risk) for n in TEXT_LENGTHS]
                for series in (seo, ai, acc):
                    assert series == sorted(series)

    def test_scores_always_within_bounds(self):
        """Test that no combination escapes 0-100."""
        for n in TEXT_LENGTHS:
            for schema, service, faq in itertools.product([True, False], repeat=3):
                for risk in ContrastRisk:
                    for value in (
                        scoring.seo_score(n, schema, service),
                        scoring.ai_visibility_score(n, faq, schema),
                        scoring.accessibility_score(n, risk),
                    ):
                        assert 0 <= value <= 100
