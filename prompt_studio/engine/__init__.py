"""Rule-based prompt engine."""

from prompt_studio.engine.analyzer import PromptAnalyzer
from prompt_studio.engine.library import InvalidTemplateError, TemplateLibrary
from prompt_studio.engine.matcher import TemplateMatcher
from prompt_studio.engine.metrics import calculate_detailed_metrics, calculate_quality_metrics
from prompt_studio.engine.pipeline import PromptPipeline
from prompt_studio.engine.transformer import MetaPromptTransformer, UnknownTemplateError
from prompt_studio.engine.validator import PromptQualityValidator

__all__ = [
    "InvalidTemplateError",
    "MetaPromptTransformer",
    "PromptAnalyzer",
    "PromptPipeline",
    "PromptQualityValidator",
    "TemplateLibrary",
    "TemplateMatcher",
    "UnknownTemplateError",
    "calculate_detailed_metrics",
    "calculate_quality_metrics",
]
