"""Meta-prompt transformer: expands a short request into a five-section prompt."""

import re
import time
from typing import Iterable, Optional

from prompt_studio.engine.analyzer import PromptAnalyzer
from prompt_studio.engine.library import TemplateLibrary
from prompt_studio.engine.metrics import calculate_quality_metrics
from prompt_studio.models import (
    Domain,
    Intent,
    PromptAnalysis,
    PromptTransformationResult,
    TransformationType,
)
from prompt_studio.prompts import fragments
from prompt_studio.prompts.catalog import TEMPLATE_APPLIED_TECHNIQUES
from prompt_studio.utils.logger import get_logger
from prompt_studio.utils.sanitization import SanitizationError, validate_prompt_length

logger = get_logger()

# A request quoted into #CONTEXT must not introduce a second section header.
_SECTION_MARKER = re.compile(r"#+(?=CONTEXT|GOAL|INFORMATION|RESPONSE GUIDELINES|OUTPUT)")

FALLBACK_QUALITY_SCORE = 30


class UnknownTemplateError(LookupError):
    """Raised when a template id is not in the library."""

    def __init__(self, template_id: str):
        super().__init__(f"Unknown template '{template_id}'")
        self.template_id = template_id


def escape_section_markers(text: str) -> str:
    """Drop every ``#`` before a canonical section header inside user text."""
    return _SECTION_MARKER.sub("", text)


def _bullets(items: Iterable[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def render_expert_role(analysis: PromptAnalysis) -> str:
    """Domain expert sentence followed by the intent modifier."""
    base = fragments.EXPERT_ROLES.get(analysis.domain.value, fragments.EXPERT_ROLES[Domain.GENERAL.value])
    modifier = fragments.INTENT_MODIFIERS.get(
        analysis.intent.value, fragments.INTENT_MODIFIERS[Intent.GENERAL.value]
    )
    return f"{base} {modifier}"


def render_context(request: str, analysis: PromptAnalysis) -> str:
    base = fragments.CONTEXTS.get(analysis.domain.value, fragments.CONTEXTS[Domain.GENERAL.value])
    return (
        f"{base}\n\n"
        f'Original request: "{escape_section_markers(request)}"\n\n'
        f"This requires {analysis.complexity_level.value}-level expertise with focus on "
        f"{analysis.suggested_framework}."
    )


def render_goal(analysis: PromptAnalysis) -> str:
    base = fragments.GOALS.get(analysis.intent.value, fragments.GOALS[Intent.GENERAL.value])
    return f"{base}\n\nSpecific objectives:\n{_bullets(fragments.GOAL_OBJECTIVES)}"


def render_information(analysis: PromptAnalysis) -> str:
    items = fragments.BASE_INFORMATION + fragments.DOMAIN_INFORMATION.get(analysis.domain.value, [])
    return f"Required information to provide optimal guidance:\n{_bullets(items)}"


def render_guidelines(analysis: PromptAnalysis) -> str:
    items = fragments.BASE_GUIDELINES + fragments.DOMAIN_GUIDELINES.get(analysis.domain.value, [])
    return _bullets(items)


def render_output(analysis: PromptAnalysis) -> str:
    items = fragments.BASE_OUTPUT_SPECS + fragments.COMPLEXITY_OUTPUT_SPECS.get(
        analysis.complexity_level.value, []
    )
    return _bullets(items)


def render_meta_prompt(request: str, analysis: PromptAnalysis) -> str:
    """Assemble the role line and the five sections in canonical order."""
    return fragments.META_PROMPT_LAYOUT.format(
        expert_role=render_expert_role(analysis),
        context=render_context(request, analysis),
        goal=render_goal(analysis),
        information=render_information(analysis),
        guidelines=render_guidelines(analysis),
        output=render_output(analysis),
    )


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


class MetaPromptTransformer:
    """Turns raw requests into structured prompts.

    The transformer is stateless apart from the injected analyzer and
    library; concurrent calls are safe.
    """

    def __init__(
        self,
        analyzer: Optional[PromptAnalyzer] = None,
        library: Optional[TemplateLibrary] = None,
    ):
        self.analyzer = analyzer or PromptAnalyzer()
        self.library = library or TemplateLibrary()

    def transform(self, raw_input: str) -> PromptTransformationResult:
        """Transform a request into a five-section meta-prompt.

        Args:
            raw_input: The raw request.

        Returns:
            PromptTransformationResult of type ``meta-prompt``.

        Raises:
            InputTooShortError: If the trimmed request is under two characters.
        """
        start = time.perf_counter()
        request = validate_prompt_length(raw_input)

        analysis = self.analyzer.analyze(request)
        metrics = calculate_quality_metrics(request, analysis)
        expert_role = render_expert_role(analysis)
        transformed = render_meta_prompt(request, analysis)

        result = PromptTransformationResult(
            original=request,
            transformed_prompt=transformed,
            transformation_type=TransformationType.META_PROMPT,
            quality_score=metrics.overall_score,
            improvements=list(fragments.IMPROVEMENTS),
            applied_techniques=list(fragments.APPLIED_TECHNIQUES),
            expert_role=expert_role.split("\n")[0],
            output_specifications=list(fragments.OUTPUT_SPECIFICATION_SUMMARY),
            processing_time_ms=_elapsed_ms(start),
            template_used=analysis.domain.value,
        )
        logger.debug(
            f"Transformed prompt: domain={analysis.domain.value} intent={analysis.intent.value} "
            f"score={metrics.overall_score} chars={len(transformed)}"
        )
        return result

    def transform_with_template(self, raw_input: str, template_id: str) -> PromptTransformationResult:
        """Render a request through a catalog template.

        Args:
            raw_input: The raw request.
            template_id: Id of the catalog template to apply.

        Returns:
            PromptTransformationResult of type ``template-prompt``.

        Raises:
            InputTooShortError: If the trimmed request is under two characters.
            UnknownTemplateError: If the template id is not in the library.
        """
        start = time.perf_counter()
        request = validate_prompt_length(raw_input)

        template = self.library.get_template(template_id)
        if template is None:
            raise UnknownTemplateError(template_id)

        analysis = self.analyzer.analyze(request)
        metrics = calculate_quality_metrics(request, analysis)
        application = self.library.apply_template(request, template)

        return PromptTransformationResult(
            original=request,
            transformed_prompt=application.enhanced_prompt,
            transformation_type=TransformationType.TEMPLATE_PROMPT,
            quality_score=metrics.overall_score,
            improvements=application.improvements,
            applied_techniques=list(TEMPLATE_APPLIED_TECHNIQUES),
            expert_role=self._template_role(template.structure, template.name),
            output_specifications=list(fragments.OUTPUT_SPECIFICATION_SUMMARY),
            processing_time_ms=_elapsed_ms(start),
            template_used=template.id,
        )

    def transform_many(self, prompts: Iterable[str]) -> list[PromptTransformationResult]:
        """Transform a batch; rejected inputs become a basic fallback result."""
        results = []
        for prompt in prompts:
            try:
                results.append(self.transform(prompt))
            except SanitizationError as e:
                logger.debug(f"Batch transform fell back for {prompt!r}: {e}")
                results.append(self.fallback_result(prompt))
        return results

    @staticmethod
    def fallback_result(prompt: str) -> PromptTransformationResult:
        """The minimal result used when a batch entry cannot be transformed."""
        return PromptTransformationResult(
            original=prompt,
            transformed_prompt=fragments.FALLBACK_PROMPT.format(prompt=prompt),
            transformation_type=TransformationType.META_PROMPT,
            quality_score=FALLBACK_QUALITY_SCORE,
            improvements=["Basic professional framing applied"],
            applied_techniques=["Simple role assignment"],
            expert_role="Professional consultant",
            output_specifications=["Professional response required"],
            processing_time_ms=0.0,
            template_used="fallback",
        )

    @staticmethod
    def _template_role(structure: str, default: str) -> str:
        for line in structure.splitlines():
            if line.startswith("You are"):
                return line
        return default
