"""Pydantic models for Prompt Studio."""

from prompt_studio.models.analysis import (
    ComplexityLevel,
    Domain,
    Intent,
    PromptAnalysis,
    PromptQualityMetrics,
)
from prompt_studio.models.template import (
    PromptTemplate,
    TemplateApplication,
    TemplateDetectionResult,
)
from prompt_studio.models.transformation import (
    EnhancementOutcome,
    PromptTransformationResult,
    TransformationType,
)
from prompt_studio.models.validation import (
    ComplianceCheck,
    IssueSeverity,
    QualityIssue,
    QualityReport,
    QualitySuggestion,
    QualityValidationResult,
    SuggestionPriority,
)

__all__ = [
    "ComplexityLevel",
    "ComplianceCheck",
    "Domain",
    "EnhancementOutcome",
    "Intent",
    "IssueSeverity",
    "PromptAnalysis",
    "PromptQualityMetrics",
    "PromptTemplate",
    "PromptTransformationResult",
    "QualityIssue",
    "QualityReport",
    "QualitySuggestion",
    "QualityValidationResult",
    "SuggestionPriority",
    "TemplateApplication",
    "TemplateDetectionResult",
    "TransformationType",
]
