"""Quality validation of transformed prompts."""

from collections import Counter
from typing import Iterable

from prompt_studio.engine import metrics as rubric
from prompt_studio.models import (
    ComplianceCheck,
    IssueSeverity,
    PromptQualityMetrics,
    PromptTransformationResult,
    QualityIssue,
    QualityReport,
    QualitySuggestion,
    QualityValidationResult,
    SuggestionPriority,
)
from prompt_studio.utils.logger import get_logger

logger = get_logger()

MIN_QUALITY_SCORE = 70
REPORT_TOP_N = 5


class PromptQualityValidator:
    """Re-scores a transformed prompt and reports issues and suggestions."""

    def validate(self, transformation: PromptTransformationResult) -> QualityValidationResult:
        """Validate one transformation.

        Args:
            transformation: The result to check. Only its transformed prompt
                is inspected.

        Returns:
            QualityValidationResult; ``is_valid`` requires an overall score of
            at least 70 and no critical issue.
        """
        return self.validate_prompt(transformation.transformed_prompt)

    def validate_prompt(self, prompt: str) -> QualityValidationResult:
        """Validate raw prompt text, such as a hand-edited or remote prompt."""
        metrics = rubric.calculate_detailed_metrics(prompt)
        compliance = self.check_compliance(prompt)
        issues = self.identify_issues(prompt, metrics, compliance)
        suggestions = self.generate_suggestions(metrics, compliance)
        overall = self.calculate_overall_score(metrics, compliance)

        is_valid = overall >= MIN_QUALITY_SCORE and not any(
            i.severity == IssueSeverity.CRITICAL for i in issues
        )
        logger.debug(
            f"Validated prompt: score={overall} valid={is_valid} "
            f"issues={len(issues)} suggestions={len(suggestions)}"
        )
        return QualityValidationResult(
            is_valid=is_valid,
            overall_score=overall,
            metrics=metrics,
            issues=issues,
            suggestions=suggestions,
            compliance=compliance,
        )

    def validate_many(
        self, transformations: Iterable[PromptTransformationResult]
    ) -> list[QualityValidationResult]:
        """Validate each transformation independently."""
        return [self.validate(t) for t in transformations]

    @staticmethod
    def check_compliance(prompt: str) -> ComplianceCheck:
        word_count = len(prompt.split())
        min_words = rubric.MIN_PROMPT_LENGTH / rubric.CHARS_PER_WORD
        max_words = rubric.MAX_PROMPT_LENGTH / rubric.CHARS_PER_WORD

        return ComplianceCheck(
            has_expert_role="You are" in prompt and rubric.has_expert_credentials(prompt),
            has_structured_framework=rubric.has_structured_sections(prompt),
            has_context_section="#CONTEXT" in prompt,
            has_goal_section="#GOAL" in prompt,
            has_information_section="#INFORMATION" in prompt,
            has_guidelines_section="#RESPONSE GUIDELINES" in prompt,
            has_output_section="#OUTPUT" in prompt,
            meets_length_requirements=min_words <= word_count <= max_words,
            has_actionable_elements=rubric.has_action_verbs(prompt),
            has_professional_tone=rubric.has_professional_terminology(prompt),
        )

    @staticmethod
    def identify_issues(
        prompt: str,
        metrics: PromptQualityMetrics,
        compliance: ComplianceCheck,
    ) -> list[QualityIssue]:
        issues: list[QualityIssue] = []

        if not compliance.has_expert_role:
            issues.append(QualityIssue(
                severity=IssueSeverity.CRITICAL,
                category="Role Definition",
                description="Missing or inadequate expert role definition",
                impact="AI may not adopt appropriate expertise level",
                location="Beginning of prompt",
            ))
        if not compliance.has_structured_framework:
            issues.append(QualityIssue(
                severity=IssueSeverity.CRITICAL,
                category="Structure",
                description="Missing structured framework sections",
                impact="Reduces prompt effectiveness and clarity",
                location="Overall structure",
            ))

        if metrics.clarity < 70:
            issues.append(QualityIssue(
                severity=IssueSeverity.HIGH,
                category="Clarity",
                description="Prompt lacks clarity and specific instructions",
                impact="May lead to ambiguous or off-target responses",
                location="Throughout prompt",
            ))
        if metrics.completeness < 60:
            issues.append(QualityIssue(
                severity=IssueSeverity.HIGH,
                category="Completeness",
                description="Missing essential sections or requirements",
                impact="Incomplete guidance may result in suboptimal outputs",
                location="Missing sections",
            ))

        if metrics.specificity < 60:
            issues.append(QualityIssue(
                severity=IssueSeverity.MEDIUM,
                category="Specificity",
                description="Lacks sufficient detail and specific requirements",
                impact="May result in generic rather than tailored responses",
                location="Requirements sections",
            ))
        if not compliance.has_output_section:
            issues.append(QualityIssue(
                severity=IssueSeverity.MEDIUM,
                category="Output Specification",
                description="Missing detailed output requirements",
                impact="AI may not format response appropriately",
                location="#OUTPUT section",
            ))

        if metrics.professionalism < 80:
            issues.append(QualityIssue(
                severity=IssueSeverity.LOW,
                category="Professionalism",
                description="Could benefit from more professional terminology",
                impact="May not fully leverage domain expertise",
                location="Language and terminology",
            ))
        if len(prompt) < rubric.MIN_PROMPT_LENGTH:
            issues.append(QualityIssue(
                severity=IssueSeverity.LOW,
                category="Length",
                description="Prompt may be too brief for complex tasks",
                impact="Insufficient guidance for comprehensive responses",
                location="Overall prompt length",
            ))

        return issues

    @staticmethod
    def generate_suggestions(
        metrics: PromptQualityMetrics,
        compliance: ComplianceCheck,
    ) -> list[QualitySuggestion]:
        suggestions: list[QualitySuggestion] = []

        if not compliance.has_expert_role:
            suggestions.append(QualitySuggestion(
                priority=SuggestionPriority.HIGH,
                category="Role Enhancement",
                suggestion="Add comprehensive expert role with specific credentials and experience",
                expected_improvement=15,
                implementation='Start with "You are a [specific expert title] with [credentials/experience]..."',
            ))
        if metrics.clarity < 70:
            suggestions.append(QualitySuggestion(
                priority=SuggestionPriority.HIGH,
                category="Clarity Improvement",
                suggestion="Add more specific instructions and clear expectations",
                expected_improvement=12,
                implementation="Use bullet points, numbered lists, and explicit requirements",
            ))

        if metrics.specificity < 70:
            suggestions.append(QualitySuggestion(
                priority=SuggestionPriority.MEDIUM,
                category="Detail Enhancement",
                suggestion="Include specific examples, constraints, and success criteria",
                expected_improvement=10,
                implementation="Add concrete examples and measurable outcomes",
            ))
        if not compliance.has_output_section:
            suggestions.append(QualitySuggestion(
                priority=SuggestionPriority.MEDIUM,
                category="Output Specification",
                suggestion="Add detailed output format and structure requirements",
                expected_improvement=8,
                implementation="Include format, length, style, and quality requirements",
            ))

        if metrics.actionability < 80:
            suggestions.append(QualitySuggestion(
                priority=SuggestionPriority.LOW,
                category="Actionability",
                suggestion="Include more action-oriented language and step-by-step guidance",
                expected_improvement=5,
                implementation="Use action verbs and provide clear process steps",
            ))

        return suggestions

    @staticmethod
    def calculate_overall_score(metrics: PromptQualityMetrics, compliance: ComplianceCheck) -> int:
        """Metrics score adjusted by up to ten points for compliance."""
        bonus = (compliance.compliance_rate - 0.5) * 20
        return int(rubric.clamp(rubric.round_half_up(metrics.overall_score + bonus)))

    @staticmethod
    def generate_quality_report(validations: list[QualityValidationResult]) -> QualityReport:
        """Aggregate several validation results.

        Args:
            validations: Results to summarize.

        Returns:
            QualityReport with rounded averages and the five most frequent
            issue and suggestion categories. An empty list yields zeros.
        """
        if not validations:
            return QualityReport()

        count = len(validations)
        average = sum(v.overall_score for v in validations) / count
        passed = sum(1 for v in validations if v.is_valid)

        # Counter.most_common keeps first-seen order for equal counts.
        issue_counts = Counter(i.category for v in validations for i in v.issues)
        suggestion_counts = Counter(s.category for v in validations for s in v.suggestions)
        compliance = sum(v.compliance.compliance_rate for v in validations) / count

        return QualityReport(
            average_score=rubric.round_half_up(average),
            pass_rate=rubric.round_half_up(passed / count * 100),
            common_issues=[c for c, _ in issue_counts.most_common(REPORT_TOP_N)],
            top_suggestions=[c for c, _ in suggestion_counts.most_common(REPORT_TOP_N)],
            compliance_rate=rubric.round_half_up(compliance * 100),
        )
