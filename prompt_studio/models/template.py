"""Prompt template catalog models."""

from typing import Optional

from pydantic import BaseModel, Field


class PromptTemplate(BaseModel):
    """A structured prompt template from the catalog."""

    id: str = Field(..., description="Stable template identifier")
    name: str = Field(..., description="Display name")
    category: str = Field(..., description="Catalog category (e.g., 'education', 'business')")
    description: str = Field(..., description="What the template is for")
    keywords: list[str] = Field(default_factory=list, description="Keywords used for matching")
    structure: str = Field(..., description="Five-section template body")
    example: str = Field(..., description="Canonical usage example")
    effectiveness: int = Field(..., ge=0, le=100, description="Hand-curated rating (0-100)")
    usage_count: int = Field(default=0, ge=0, description="Times the template was applied")


class TemplateDetectionResult(BaseModel):
    """Outcome of matching a request against the catalog."""

    suggested_template: Optional[PromptTemplate] = Field(
        default=None, description="Best match, or None when confidence is too low"
    )
    confidence: float = Field(..., ge=0, le=100, description="Normalized match score (0-100)")
    alternative_templates: list[PromptTemplate] = Field(
        default_factory=list, description="Next best matches in rank order"
    )
    reasoning: str = Field(..., description="Human-readable explanation of the confidence band")


class TemplateApplication(BaseModel):
    """A request rendered through a catalog template."""

    original_prompt: str
    applied_template: PromptTemplate
    enhanced_prompt: str
    improvements: list[str] = Field(default_factory=list)
