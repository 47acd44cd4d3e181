"""Transformation result models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from prompt_studio.models.validation import QualityValidationResult


class TransformationType(str, Enum):
    """How a transformed prompt was produced."""

    META_PROMPT = "meta-prompt"
    ENHANCED_PROMPT = "enhanced-prompt"
    TEMPLATE_PROMPT = "template-prompt"


class PromptTransformationResult(BaseModel):
    """The assembled output of a single transformation call."""

    model_config = ConfigDict(frozen=True)

    original: str = Field(..., description="The raw request as received")
    transformed_prompt: str = Field(..., description="The five-section prompt")
    transformation_type: TransformationType = Field(default=TransformationType.META_PROMPT)
    quality_score: int = Field(..., ge=0, le=100, description="Pre-transformation overall score")
    improvements: list[str] = Field(default_factory=list)
    applied_techniques: list[str] = Field(default_factory=list)
    expert_role: str = Field(..., description="The expert-role sentence used")
    output_specifications: list[str] = Field(default_factory=list)
    processing_time_ms: float = Field(default=0.0, ge=0)
    template_used: Optional[str] = Field(
        default=None, description="Domain value or catalog template id"
    )
    local_only: bool = Field(
        default=True, description="True when no remote enhancement was applied"
    )
    enhancement_error: Optional[str] = Field(
        default=None, description="Failure kind when remote enhancement fell back"
    )


class EnhancementOutcome(BaseModel):
    """A transformation with its validation, as returned by the pipeline."""

    request_id: str
    category: str = Field(..., description="Target AI system category")
    transformation: PromptTransformationResult
    validation: QualityValidationResult
    model: Optional[str] = Field(default=None, description="Remote model that refined the prompt")
    cached: bool = False
