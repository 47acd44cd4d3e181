"""API routes for Prompt Studio."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from prompt_studio.api.handlers import EngineServices, get_services
from prompt_studio.api.rate_limiter import RateLimitExceededError
from prompt_studio.engine import UnknownTemplateError, calculate_quality_metrics
from prompt_studio.models import (
    EnhancementOutcome,
    PromptAnalysis,
    PromptQualityMetrics,
    PromptTemplate,
    PromptTransformationResult,
    QualityReport,
    QualityValidationResult,
    TemplateApplication,
    TemplateDetectionResult,
)
from prompt_studio.utils.logger import get_logger
from prompt_studio.utils.sanitization import SanitizationError, normalize_prompt, validate_prompt_length

logger = get_logger()

router = APIRouter(prefix="/api", tags=["prompt-studio"])


# Request/Response models
class PromptRequest(BaseModel):
    """A raw request to analyze, transform or enhance."""

    prompt: str = Field(..., description="The raw prompt text")


class TransformRequest(PromptRequest):
    """Request to transform a prompt, optionally through a catalog template."""

    template_id: Optional[str] = Field(default=None, description="Catalog template to apply")


class BatchTransformRequest(BaseModel):
    """Several prompts transformed in one call."""

    prompts: list[str] = Field(..., description="Raw prompts")


class ValidateRequest(BaseModel):
    """A finished prompt to score."""

    prompt: str = Field(..., description="Transformed or hand-written prompt text")


class AnalyzeResponse(BaseModel):
    """Classification and pre-transformation score of a request."""

    analysis: PromptAnalysis
    metrics: PromptQualityMetrics


class TransformResponse(BaseModel):
    """A transformation and its validation."""

    transformation: PromptTransformationResult
    validation: QualityValidationResult


class BatchTransformResponse(BaseModel):
    """Batch transformations with an aggregate quality report."""

    results: list[TransformResponse]
    report: QualityReport


def _input_error(e: SanitizationError) -> HTTPException:
    return HTTPException(status_code=422, detail=str(e))


def _template_or_404(services: EngineServices, template_id: str) -> PromptTemplate:
    template = services.library.get_template(template_id)
    if template is None:
        raise HTTPException(status_code=404, detail=f"Template {template_id} not found")
    return template


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_prompt(
    request: PromptRequest,
    services: EngineServices = Depends(get_services),
) -> AnalyzeResponse:
    """Classify a request and score it before transformation."""
    text = normalize_prompt(request.prompt).text
    analysis = services.analyzer.analyze(text)
    return AnalyzeResponse(analysis=analysis, metrics=calculate_quality_metrics(text, analysis))


@router.post("/transform", response_model=TransformResponse)
async def transform_prompt(
    request: TransformRequest,
    services: EngineServices = Depends(get_services),
) -> TransformResponse:
    """Transform a request locally into a five-section prompt and validate it."""
    text = normalize_prompt(request.prompt).text
    try:
        if request.template_id:
            transformation = services.transformer.transform_with_template(text, request.template_id)
        else:
            transformation = services.transformer.transform(text)
    except SanitizationError as e:
        raise _input_error(e)
    except UnknownTemplateError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return TransformResponse(
        transformation=transformation,
        validation=services.validator.validate(transformation),
    )


@router.post("/transform/batch", response_model=BatchTransformResponse)
async def transform_batch(
    request: BatchTransformRequest,
    services: EngineServices = Depends(get_services),
) -> BatchTransformResponse:
    """Transform several requests; rejected entries get a basic fallback prompt."""
    transformations = services.transformer.transform_many(request.prompts)
    validations = services.validator.validate_many(transformations)
    return BatchTransformResponse(
        results=[
            TransformResponse(transformation=t, validation=v)
            for t, v in zip(transformations, validations)
        ],
        report=services.validator.generate_quality_report(validations),
    )


@router.post("/validate", response_model=QualityValidationResult)
async def validate_prompt(
    request: ValidateRequest,
    services: EngineServices = Depends(get_services),
) -> QualityValidationResult:
    """Score a finished prompt against the quality rubric."""
    return services.validator.validate_prompt(request.prompt)


@router.post("/enhance", response_model=EnhancementOutcome)
async def enhance_prompt(
    request: PromptRequest,
    http_request: Request,
    services: EngineServices = Depends(get_services),
) -> EnhancementOutcome:
    """Transform a request and refine it with the remote model.

    Remote failures fall back to the local result; the response then has
    ``transformation.local_only`` set and ``enhancement_error`` naming the
    failure kind.
    """
    client_id = http_request.client.host if http_request.client else "unknown"
    try:
        services.rate_limiter.check(client_id)
    except RateLimitExceededError as e:
        raise HTTPException(
            status_code=429,
            detail=f"Rate limit exceeded. Retry after {e.retry_after:.1f} seconds.",
            headers={"Retry-After": str(int(e.retry_after))},
        )

    try:
        return await services.pipeline.enhance(request.prompt)
    except SanitizationError as e:
        raise _input_error(e)


@router.post("/templates/detect", response_model=TemplateDetectionResult)
async def detect_template(
    request: PromptRequest,
    services: EngineServices = Depends(get_services),
) -> TemplateDetectionResult:
    """Suggest the catalog template that best matches a request."""
    return services.matcher.detect_template(request.prompt)


@router.get("/templates", response_model=list[PromptTemplate])
async def list_templates(
    category: Optional[str] = None,
    services: EngineServices = Depends(get_services),
) -> list[PromptTemplate]:
    """List catalog templates, optionally for one category."""
    if category:
        return services.library.get_templates_by_category(category)
    return services.library.templates


@router.get("/templates/categories", response_model=list[str])
async def list_categories(services: EngineServices = Depends(get_services)) -> list[str]:
    """List template categories in catalog order."""
    return services.library.get_categories()


@router.get("/templates/popular", response_model=list[PromptTemplate])
async def popular_templates(
    limit: int = 5,
    services: EngineServices = Depends(get_services),
) -> list[PromptTemplate]:
    """List the most used templates."""
    return services.library.get_popular_templates(limit)


@router.get("/templates/usage", response_model=dict[str, int])
async def template_usage(services: EngineServices = Depends(get_services)) -> dict[str, int]:
    """Usage counts keyed by template id."""
    return services.library.get_usage_statistics()


@router.get("/templates/{template_id}", response_model=PromptTemplate)
async def get_template(
    template_id: str,
    services: EngineServices = Depends(get_services),
) -> PromptTemplate:
    """Get one template by id."""
    return _template_or_404(services, template_id)


@router.post("/templates/{template_id}/apply", response_model=TemplateApplication)
async def apply_template(
    template_id: str,
    request: PromptRequest,
    services: EngineServices = Depends(get_services),
) -> TemplateApplication:
    """Render a request through a template and record the usage."""
    template = _template_or_404(services, template_id)
    try:
        text = validate_prompt_length(normalize_prompt(request.prompt).text)
    except SanitizationError as e:
        raise _input_error(e)
    return services.library.apply_template(text, template)


@router.get("/metrics")
async def usage_metrics(services: EngineServices = Depends(get_services)) -> dict:
    """Remote usage, cache hits, fallbacks and phase timings."""
    return services.usage_metrics.to_dict()
