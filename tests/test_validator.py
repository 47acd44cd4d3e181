"""Tests for prompt quality validation."""

import pytest

from prompt_studio.engine.transformer import MetaPromptTransformer
from prompt_studio.engine.validator import PromptQualityValidator
from prompt_studio.models import (
    ComplianceCheck,
    IssueSeverity,
    QualityReport,
    SuggestionPriority,
)


@pytest.fixture
def validator():
    return PromptQualityValidator()


@pytest.fixture
def blog_transformation():
    return MetaPromptTransformer().transform("write a blog post about cats")


class TestValidatePrompt:
    """Tests for single prompt validation."""

    def test_unstructured_prompt(self, validator):
        """Test a two-word prompt fails every structural check."""
        result = validator.validate_prompt("hello world")

        assert result.metrics.overall_score == 55
        assert result.compliance.compliance_rate == 0
        assert result.overall_score == 45
        assert result.is_valid is False

        severities = [i.severity for i in result.issues]
        assert severities == [
            IssueSeverity.CRITICAL,
            IssueSeverity.CRITICAL,
            IssueSeverity.HIGH,
            IssueSeverity.HIGH,
            IssueSeverity.MEDIUM,
            IssueSeverity.MEDIUM,
            IssueSeverity.LOW,
            IssueSeverity.LOW,
        ]
        assert [i.category for i in result.issues][:2] == ["Role Definition", "Structure"]

        assert [s.priority for s in result.suggestions] == [
            SuggestionPriority.HIGH,
            SuggestionPriority.HIGH,
            SuggestionPriority.MEDIUM,
            SuggestionPriority.MEDIUM,
            SuggestionPriority.LOW,
        ]

    def test_transformed_prompt_passes(self, validator, blog_transformation):
        """Test a generated meta-prompt validates cleanly."""
        result = validator.validate(blog_transformation)

        assert result.is_valid is True
        assert result.overall_score == 100
        assert result.issues == []
        assert result.compliance.compliance_rate == 1

    def test_missing_output_section(self, validator, blog_transformation):
        """Test removing #OUTPUT raises only the output issue."""
        prompt = blog_transformation.transformed_prompt.replace("#OUTPUT\n", "")
        result = validator.validate_prompt(prompt)

        assert result.compliance.has_output_section is False
        assert len(result.issues) == 1
        assert result.issues[0].severity == IssueSeverity.MEDIUM
        assert result.issues[0].category == "Output Specification"
        assert result.is_valid is True

    def test_validate_many(self, validator, blog_transformation):
        """Test each transformation is validated independently."""
        results = validator.validate_many([blog_transformation, blog_transformation])
        assert len(results) == 2
        assert results[0] == results[1]

    @pytest.mark.parametrize(
        "prompt",
        [
            "hello world",
            "You are an expert. Write a poem.",
            "#CONTEXT\nsome context\n#GOAL\na goal",
            "You are a senior analyst.\n#CONTEXT\nx\n#GOAL\ny\n#INFORMATION\nz\n#RESPONSE GUIDELINES\nw",
            MetaPromptTransformer().transform("analyze our quarterly revenue").transformed_prompt,
            MetaPromptTransformer()
            .transform("plan a software migration")
            .transformed_prompt.replace("#OUTPUT\n", ""),
        ],
    )
    def test_validity_matches_score_and_issues(self, validator, prompt):
        """Test is_valid holds exactly when the score is 70+ with no critical issue."""
        result = validator.validate_prompt(prompt)
        has_critical = any(i.severity == IssueSeverity.CRITICAL for i in result.issues)

        assert result.is_valid == (result.overall_score >= 70 and not has_critical)


class TestOverallScore:
    """Tests for the compliance adjustment."""

    def test_half_compliance_is_neutral(self, validator):
        """Test a 50% compliance rate leaves the metrics score unchanged."""
        compliance = ComplianceCheck(
            has_expert_role=True,
            has_structured_framework=True,
            has_context_section=True,
            has_goal_section=True,
            has_information_section=True,
        )
        metrics = validator.validate_prompt("hello world").metrics

        assert validator.calculate_overall_score(metrics, compliance) == 55

    def test_score_is_clamped(self, validator):
        """Test the adjusted score never exceeds 100."""
        metrics = validator.validate_prompt("hello world").metrics.model_copy(
            update={"overall_score": 100}
        )
        compliance = ComplianceCheck(**{name: True for name in ComplianceCheck.model_fields})

        assert validator.calculate_overall_score(metrics, compliance) == 100


class TestQualityReport:
    """Tests for aggregate quality reports."""

    def test_empty_report(self, validator):
        """Test an empty list yields zeros."""
        assert validator.generate_quality_report([]) == QualityReport()

    def test_report_aggregates(self, validator, blog_transformation):
        """Test averages, pass rate and most common categories."""
        good = validator.validate(blog_transformation)
        bad = validator.validate_prompt("hello world")

        report = validator.generate_quality_report([good, bad, bad])

        # (100 + 45 + 45) / 3 = 63.33
        assert report.average_score == 63
        assert report.pass_rate == 33
        assert report.common_issues[:2] == ["Role Definition", "Structure"]
        assert len(report.common_issues) == 5
        assert report.top_suggestions[0] == "Role Enhancement"
        assert report.compliance_rate == 33
