"""Quality validation models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from prompt_studio.models.analysis import PromptQualityMetrics


class IssueSeverity(str, Enum):
    """Severity of a quality issue."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class SuggestionPriority(str, Enum):
    """Priority of an improvement suggestion."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class QualityIssue(BaseModel):
    """A rubric threshold or compliance check that was missed."""

    severity: IssueSeverity
    category: str = Field(..., description="Rubric area (e.g., 'Clarity', 'Structure')")
    description: str
    impact: str = Field(..., description="Likely effect on the model's response")
    location: Optional[str] = Field(default=None, description="Where in the prompt")


class QualitySuggestion(BaseModel):
    """A remediation paired with a quality issue."""

    priority: SuggestionPriority
    category: str
    suggestion: str
    expected_improvement: int = Field(..., description="Estimated score gain in points")
    implementation: str = Field(..., description="How to apply the suggestion")


class ComplianceCheck(BaseModel):
    """Structural checks against a transformed prompt."""

    has_expert_role: bool = False
    has_structured_framework: bool = False
    has_context_section: bool = False
    has_goal_section: bool = False
    has_information_section: bool = False
    has_guidelines_section: bool = False
    has_output_section: bool = False
    meets_length_requirements: bool = False
    has_actionable_elements: bool = False
    has_professional_tone: bool = False

    @property
    def compliance_rate(self) -> float:
        """Fraction of checks that pass."""
        values = list(self.model_dump().values())
        return sum(1 for v in values if v) / len(values)


class QualityValidationResult(BaseModel):
    """Re-scored metrics, compliance, issues and suggestions for one prompt."""

    is_valid: bool
    overall_score: int = Field(..., ge=0, le=100)
    metrics: PromptQualityMetrics
    issues: list[QualityIssue] = Field(default_factory=list)
    suggestions: list[QualitySuggestion] = Field(default_factory=list)
    compliance: ComplianceCheck


class QualityReport(BaseModel):
    """Aggregate view over several validation results."""

    average_score: int = 0
    pass_rate: int = 0
    common_issues: list[str] = Field(default_factory=list)
    top_suggestions: list[str] = Field(default_factory=list)
    compliance_rate: int = 0
