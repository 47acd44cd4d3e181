"""Rule-based classification of raw requests."""

from prompt_studio.models import ComplexityLevel, Domain, Intent, PromptAnalysis
from prompt_studio.utils.logger import get_logger

logger = get_logger()

# Checked in order; the first set with a keyword present wins.
INTENT_KEYWORDS: list[tuple[Intent, tuple[str, ...]]] = [
    (Intent.CONTENT_CREATION, ("write", "create", "generate")),
    (Intent.ANALYSIS, ("analyze", "review", "evaluate")),
    (Intent.PLANNING, ("plan", "strategy", "organize")),
    (Intent.EDUCATION, ("learn", "teach", "explain")),
    (Intent.OPTIMIZATION, ("improve", "optimize", "enhance")),
]

DOMAIN_KEYWORDS: list[tuple[Domain, tuple[str, ...]]] = [
    (Domain.BUSINESS, ("business", "marketing", "sales", "strategy", "company", "revenue", "profit")),
    (Domain.TECHNOLOGY, ("code", "programming", "software", "app", "website", "tech", "ai", "data")),
    (Domain.CREATIVE, ("design", "art", "creative", "visual", "aesthetic", "brand", "logo")),
    (Domain.EDUCATION, ("learn", "teach", "course", "curriculum", "student", "education", "training")),
    (Domain.HEALTH, ("health", "fitness", "medical", "wellness", "nutrition", "exercise")),
    (Domain.PERSONAL, ("personal", "life", "goal", "habit", "productivity", "self", "career")),
]

ADVANCED_TERMS = ("comprehensive", "detailed", "advanced")
INTERMEDIATE_TERMS = ("specific", "professional")

REQUIRED_EXPERTISE = {
    Domain.BUSINESS: ["Business Strategy", "Market Analysis"],
    Domain.TECHNOLOGY: ["Technical Architecture", "Software Development"],
    Domain.CREATIVE: ["Creative Direction", "Visual Design"],
    Domain.EDUCATION: ["Instructional Design", "Learning Psychology"],
    Domain.HEALTH: ["Health Sciences", "Evidence-Based Practice"],
    Domain.PERSONAL: ["Personal Development", "Behavioral Psychology"],
}

FRAMEWORKS = {
    Intent.CONTENT_CREATION: "AIDA (Attention, Interest, Desire, Action)",
    Intent.ANALYSIS: "SWOT Analysis Framework",
    Intent.PLANNING: "SMART Goals + Action Planning",
    Intent.EDUCATION: "Bloom's Taxonomy + Learning Objectives",
    Intent.OPTIMIZATION: "Continuous Improvement Methodology",
    Intent.GENERAL: "Problem-Solution Framework",
}

# Returned for every request.
IMPROVEMENT_OPPORTUNITIES = [
    "Add specific role-based expertise",
    "Include detailed output specifications",
    "Specify quality criteria and constraints",
    "Add relevant examples or references",
    "Define success metrics and evaluation criteria",
]


def _contains_any(text: str, terms: tuple[str, ...]) -> bool:
    return any(term in text for term in terms)


class PromptAnalyzer:
    """Classifies a request by intent, domain and complexity.

    All checks are case-insensitive substring tests, so short keywords such
    as "ai" or "art" also match inside longer words ("explain", "start").
    """

    def analyze(self, text: str) -> PromptAnalysis:
        """Analyze a raw request.

        Args:
            text: The request. Empty text yields general/general/basic.

        Returns:
            PromptAnalysis for the request.
        """
        lowered = (text or "").lower().strip()
        word_count = len(lowered.split())

        intent = self.detect_intent(lowered)
        domain = self.detect_domain(lowered)
        complexity = self.detect_complexity(lowered, word_count)

        analysis = PromptAnalysis(
            intent=intent,
            domain=domain,
            complexity_level=complexity,
            required_expertise=list(REQUIRED_EXPERTISE.get(domain, [])),
            suggested_framework=FRAMEWORKS[intent],
            missing_elements=self.find_missing_elements(lowered, word_count),
            improvement_opportunities=list(IMPROVEMENT_OPPORTUNITIES),
        )
        logger.debug(
            f"Analyzed prompt: intent={intent.value} domain={domain.value} "
            f"complexity={complexity.value} words={word_count}"
        )
        return analysis

    @staticmethod
    def detect_intent(lowered: str) -> Intent:
        for intent, keywords in INTENT_KEYWORDS:
            if _contains_any(lowered, keywords):
                return intent
        return Intent.GENERAL

    @staticmethod
    def detect_domain(lowered: str) -> Domain:
        for domain, keywords in DOMAIN_KEYWORDS:
            if _contains_any(lowered, keywords):
                return domain
        return Domain.GENERAL

    @staticmethod
    def detect_complexity(lowered: str, word_count: int) -> ComplexityLevel:
        if word_count > 20 or _contains_any(lowered, ADVANCED_TERMS):
            return ComplexityLevel.ADVANCED
        if word_count > 10 or _contains_any(lowered, INTERMEDIATE_TERMS):
            return ComplexityLevel.INTERMEDIATE
        return ComplexityLevel.BASIC

    @staticmethod
    def find_missing_elements(lowered: str, word_count: int) -> list[str]:
        missing: list[str] = []
        if not _contains_any(lowered, ("target", "audience")):
            missing.append("Target audience specification")
        if not _contains_any(lowered, ("goal", "objective")):
            missing.append("Clear objectives and success criteria")
        if word_count < 5:
            missing.append("Sufficient context and details")
        if not _contains_any(lowered, ("format", "structure")):
            missing.append("Output format and structure requirements")
        return missing
