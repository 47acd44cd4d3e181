"""Prompt analysis and quality metric models."""

from enum import Enum

from pydantic import BaseModel, Field


class Intent(str, Enum):
    """Coarse task-type classification of a request."""

    CONTENT_CREATION = "content_creation"
    ANALYSIS = "analysis"
    PLANNING = "planning"
    EDUCATION = "education"
    OPTIMIZATION = "optimization"
    GENERAL = "general"


class Domain(str, Enum):
    """Coarse subject-matter classification of a request."""

    BUSINESS = "business"
    TECHNOLOGY = "technology"
    CREATIVE = "creative"
    EDUCATION = "education"
    HEALTH = "health"
    PERSONAL = "personal"
    GENERAL = "general"


class ComplexityLevel(str, Enum):
    """Expertise level a request calls for."""

    BASIC = "basic"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class PromptAnalysis(BaseModel):
    """Classification of a single raw request."""

    intent: Intent = Field(default=Intent.GENERAL, description="Detected task type")
    domain: Domain = Field(default=Domain.GENERAL, description="Detected subject domain")
    complexity_level: ComplexityLevel = Field(
        default=ComplexityLevel.BASIC, description="Detected complexity level"
    )
    required_expertise: list[str] = Field(
        default_factory=list, description="Expertise labels implied by the domain"
    )
    suggested_framework: str = Field(..., description="Framework suggested for the intent")
    missing_elements: list[str] = Field(
        default_factory=list, description="Elements the request does not mention"
    )
    improvement_opportunities: list[str] = Field(
        default_factory=list, description="Generic ways to improve the request"
    )


class PromptQualityMetrics(BaseModel):
    """Five weighted quality sub-scores and their rounded overall score."""

    clarity: float = Field(..., ge=0, le=100)
    specificity: float = Field(..., ge=0, le=100)
    completeness: float = Field(..., ge=0, le=100)
    professionalism: float = Field(..., ge=0, le=100)
    actionability: float = Field(..., ge=0, le=100)
    overall_score: int = Field(..., ge=0, le=100)
