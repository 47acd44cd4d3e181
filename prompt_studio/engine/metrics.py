"""Quality rubrics for raw requests and for transformed prompts.

Two separate rubrics exist on purpose. ``calculate_quality_metrics`` scores
the raw request before transformation; ``calculate_detailed_metrics`` scores
the structure of a transformed prompt. They use different base scores,
boosts and weights and must not be merged.
"""

import math

from prompt_studio.models import ComplexityLevel, Domain, Intent, PromptAnalysis, PromptQualityMetrics

# Weights: clarity, specificity, completeness, professionalism, actionability
REQUEST_WEIGHTS = (0.20, 0.25, 0.25, 0.15, 0.15)
PROMPT_WEIGHTS = (0.25, 0.20, 0.25, 0.15, 0.15)

REQUIRED_SECTIONS = (
    "#CONTEXT",
    "#GOAL",
    "#INFORMATION",
    "#RESPONSE GUIDELINES",
    "#OUTPUT",
)

MIN_PROMPT_LENGTH = 200  # characters
OPTIMAL_PROMPT_LENGTH = 500
MAX_PROMPT_LENGTH = 2000
CHARS_PER_WORD = 4

SPECIFIC_INSTRUCTION_TERMS = ("specific", "detailed", "must include", "requirements", "criteria")
EXAMPLE_TERMS = ("example", "for instance", "such as", "like", "including")
CONSTRAINT_TERMS = ("must", "should", "avoid", "limit", "maximum", "minimum", "constraint")
OUTPUT_SPEC_TERMS = ("format", "structure", "length", "style", "tone", "output")
PROFESSIONAL_TERMS = ("professional", "expert", "analysis", "methodology", "framework", "best practices")
CREDENTIAL_TERMS = ("years of experience", "expert", "specialist", "certified", "professional", "consultant")
ACTION_VERBS = ("create", "develop", "analyze", "design", "implement", "provide", "generate", "build")
STEP_TERMS = ("step", "process", "methodology", "approach", "procedure", "workflow")


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative scores (``round`` rounds to even)."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))


def weighted_overall(scores: tuple[float, ...], weights: tuple[float, ...]) -> int:
    """Rounded weighted sum of the five sub-scores."""
    return int(clamp(round_half_up(sum(s * w for s, w in zip(scores, weights)))))


def _build_metrics(scores: tuple[float, ...], weights: tuple[float, ...]) -> PromptQualityMetrics:
    clarity, specificity, completeness, professionalism, actionability = (clamp(s) for s in scores)
    clamped = (clarity, specificity, completeness, professionalism, actionability)
    return PromptQualityMetrics(
        clarity=clarity,
        specificity=specificity,
        completeness=completeness,
        professionalism=professionalism,
        actionability=actionability,
        overall_score=weighted_overall(clamped, weights),
    )


def _has_any(text: str, terms: tuple[str, ...]) -> bool:
    return any(term in text for term in terms)


def calculate_quality_metrics(raw_input: str, analysis: PromptAnalysis) -> PromptQualityMetrics:
    """Score a raw request before transformation.

    Substring checks run against the trimmed request as written (case
    sensitive); classification-based boosts come from ``analysis``.

    Args:
        raw_input: The raw request.
        analysis: The analyzer's classification of the same request.

    Returns:
        PromptQualityMetrics weighted 0.20/0.25/0.25/0.15/0.15.
    """
    text = (raw_input or "").strip()
    word_count = len(text.split())

    clarity = 50
    if "?" in text:
        clarity += 10
    if word_count >= 10:
        clarity += 20
    if analysis.intent != Intent.GENERAL:
        clarity += 20

    specificity = 30
    if analysis.domain != Domain.GENERAL:
        specificity += 25
    if analysis.complexity_level == ComplexityLevel.ADVANCED:
        specificity += 25
    elif analysis.complexity_level == ComplexityLevel.INTERMEDIATE:
        specificity += 15
    if _has_any(text, ("specific", "detailed")):
        specificity += 20

    completeness = 40
    if not analysis.missing_elements:
        completeness += 30
    elif len(analysis.missing_elements) <= 2:
        completeness += 15
    if word_count >= 20:
        completeness += 20
    if _has_any(text, ("target", "audience")):
        completeness += 10

    professionalism = 60
    if _has_any(text, ("professional", "expert")):
        professionalism += 20
    if analysis.required_expertise:
        professionalism += 20

    actionability = 50
    if _has_any(text, ("create", "write", "develop")):
        actionability += 25
    if _has_any(text, ("step", "process", "method")):
        actionability += 25

    return _build_metrics(
        (clarity, specificity, completeness, professionalism, actionability),
        REQUEST_WEIGHTS,
    )


def count_sections(prompt: str) -> int:
    return sum(1 for section in REQUIRED_SECTIONS if section in prompt)


def has_structured_sections(prompt: str) -> bool:
    """At least three of the five canonical section headers are present."""
    return count_sections(prompt) >= 3


def has_specific_instructions(prompt: str) -> bool:
    return _has_any(prompt.lower(), SPECIFIC_INSTRUCTION_TERMS)


def has_examples(prompt: str) -> bool:
    return _has_any(prompt.lower(), EXAMPLE_TERMS)


def has_constraints(prompt: str) -> bool:
    return _has_any(prompt.lower(), CONSTRAINT_TERMS)


def has_output_specifications(prompt: str) -> bool:
    return _has_any(prompt.lower(), OUTPUT_SPEC_TERMS)


def has_professional_terminology(prompt: str) -> bool:
    return _has_any(prompt.lower(), PROFESSIONAL_TERMS)


def has_expert_credentials(prompt: str) -> bool:
    return _has_any(prompt.lower(), CREDENTIAL_TERMS)


def has_action_verbs(prompt: str) -> bool:
    return _has_any(prompt.lower(), ACTION_VERBS)


def has_step_by_step_guidance(prompt: str) -> bool:
    return _has_any(prompt.lower(), STEP_TERMS)


def calculate_detailed_metrics(prompt: str) -> PromptQualityMetrics:
    """Score the structure of a transformed prompt.

    Args:
        prompt: The transformed prompt text.

    Returns:
        PromptQualityMetrics weighted 0.25/0.20/0.25/0.15/0.15.
    """
    word_count = len(prompt.split())

    clarity = 60
    if "You are" in prompt:
        clarity += 15
    if has_structured_sections(prompt):
        clarity += 15
    if has_specific_instructions(prompt):
        clarity += 10

    specificity = 50
    if word_count >= OPTIMAL_PROMPT_LENGTH / CHARS_PER_WORD:
        specificity += 20
    if has_examples(prompt):
        specificity += 15
    if has_constraints(prompt):
        specificity += 15

    completeness = 40 + count_sections(prompt) / len(REQUIRED_SECTIONS) * 40
    if has_output_specifications(prompt):
        completeness += 20

    professionalism = 70
    if has_professional_terminology(prompt):
        professionalism += 15
    if has_expert_credentials(prompt):
        professionalism += 15

    actionability = 60
    if has_action_verbs(prompt):
        actionability += 20
    if has_step_by_step_guidance(prompt):
        actionability += 20

    return _build_metrics(
        (clarity, specificity, completeness, professionalism, actionability),
        PROMPT_WEIGHTS,
    )
