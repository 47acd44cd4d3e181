"""Tests for the request and prompt quality rubrics."""

import pytest

from prompt_studio.engine.analyzer import PromptAnalyzer
from prompt_studio.engine.metrics import (
    calculate_detailed_metrics,
    calculate_quality_metrics,
    count_sections,
    has_structured_sections,
    round_half_up,
    weighted_overall,
    PROMPT_WEIGHTS,
    REQUEST_WEIGHTS,
)


def request_metrics(text):
    return calculate_quality_metrics(text, PromptAnalyzer().analyze(text))


class TestRounding:
    """Tests for half-up rounding."""

    def test_half_rounds_up(self):
        """Test .5 rounds up instead of to even."""
        assert round_half_up(54.5) == 55
        assert round_half_up(52.5) == 53
        assert round_half_up(51.75) == 52
        assert round_half_up(51.25) == 51

    def test_weights_sum_to_one(self):
        """Test both weight vectors are normalized."""
        assert sum(REQUEST_WEIGHTS) == pytest.approx(1.0)
        assert sum(PROMPT_WEIGHTS) == pytest.approx(1.0)

    def test_weighted_overall(self):
        """Test the overall score is the rounded weighted sum."""
        assert weighted_overall((100, 100, 100, 100, 100), PROMPT_WEIGHTS) == 100
        assert weighted_overall((0, 0, 0, 0, 0), REQUEST_WEIGHTS) == 0


class TestRequestMetrics:
    """Tests for the pre-transformation rubric."""

    def test_blog_post_request(self):
        """Test sub-scores of a short content request."""
        metrics = request_metrics("write a blog post about cats")

        assert metrics.clarity == 70
        assert metrics.specificity == 30
        assert metrics.completeness == 40
        assert metrics.professionalism == 60
        assert metrics.actionability == 75
        assert metrics.overall_score == 52

    def test_term_checks_are_case_sensitive(self):
        """Test "Write" does not earn the action boost while intent still does."""
        metrics = request_metrics("Write a blog post about cats")

        assert metrics.clarity == 70
        assert metrics.actionability == 50

    def test_question_and_length_boost_clarity(self):
        """Test a question of ten or more words."""
        metrics = request_metrics("could you tell me more about the history of old sailing ships?")

        assert metrics.clarity == 80

    def test_scores_are_bounded(self):
        """Test every sub-score stays within 0..100."""
        metrics = request_metrics(
            "As a professional expert, create a detailed specific step by step process "
            "for my target audience so we can develop business strategy and write a plan "
            "with a clear goal in a defined format for the company?"
        )
        for value in (
            metrics.clarity,
            metrics.specificity,
            metrics.completeness,
            metrics.professionalism,
            metrics.actionability,
        ):
            assert 0 <= value <= 100
        assert metrics.professionalism == 100
        assert metrics.actionability == 100


class TestDetailedMetrics:
    """Tests for the transformed-prompt rubric."""

    def test_hello_world(self):
        """Test an unstructured two-word prompt."""
        metrics = calculate_detailed_metrics("hello world")

        assert metrics.clarity == 60
        assert metrics.specificity == 50
        assert metrics.completeness == 40
        assert metrics.professionalism == 70
        assert metrics.actionability == 60
        assert metrics.overall_score == 55

    def test_section_counting(self):
        """Test sections are counted by exact header."""
        prompt = "#CONTEXT\nx\n#GOAL\ny\n#OUTPUT\nz"

        assert count_sections(prompt) == 3
        assert has_structured_sections(prompt)
        assert not has_structured_sections("#CONTEXT #GOAL")

    def test_completeness_scales_with_sections(self):
        """Test each section adds eight completeness points."""
        metrics = calculate_detailed_metrics("#CONTEXT #GOAL")
        assert metrics.completeness == pytest.approx(56)

    def test_prompt_terms_are_case_insensitive(self):
        """Test the prompt rubric lower-cases before matching."""
        metrics = calculate_detailed_metrics("CREATE an EXPERT ANALYSIS step")

        assert metrics.professionalism == 100
        assert metrics.actionability == 100
