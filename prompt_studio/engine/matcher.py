"""Keyword-overlap matching of requests against the template catalog."""

from dataclasses import dataclass, field

from prompt_studio.engine.library import TemplateLibrary
from prompt_studio.models import PromptTemplate, TemplateDetectionResult
from prompt_studio.utils.logger import get_logger

logger = get_logger()

EXACT_MATCH_POINTS = 10
PARTIAL_MATCH_POINTS = 5
CONFIDENCE_SCALE = 50  # raw score that maps to 100% confidence
SUGGESTION_THRESHOLD = 40
HIGH_CONFIDENCE = 70
MAX_ALTERNATIVES = 3


@dataclass
class TemplateScore:
    """Raw match score of one template."""

    template: PromptTemplate
    score: float = 0.0
    matched_keywords: list[str] = field(default_factory=list)


class TemplateMatcher:
    """Ranks catalog templates by weighted keyword overlap with a request."""

    def __init__(self, library: TemplateLibrary):
        self.library = library

    def score_template(self, template: PromptTemplate, text: str) -> TemplateScore:
        """Score one template against lower-cased text.

        Each keyword found in the text earns 10 points; each (keyword, word)
        pair where one contains the other earns 5 more. The total is scaled
        by the template's effectiveness rating.
        """
        words = text.split()
        result = TemplateScore(template=template)
        score = 0

        for keyword in template.keywords:
            keyword = keyword.lower()
            if keyword in text:
                score += EXACT_MATCH_POINTS
                result.matched_keywords.append(keyword)
            for word in words:
                if keyword in word or word in keyword:
                    score += PARTIAL_MATCH_POINTS

        result.score = score * (template.effectiveness / 100)
        return result

    def rank(self, text: str) -> list[TemplateScore]:
        """Score every template, best first; ties keep catalog order."""
        lowered = (text or "").lower()
        scores = [self.score_template(t, lowered) for t in self.library.templates]
        return sorted(scores, key=lambda s: s.score, reverse=True)

    def detect_template(self, text: str) -> TemplateDetectionResult:
        """Find the best template for a request.

        A low confidence is a valid "no suggestion" result, not an error.

        Args:
            text: The raw request.

        Returns:
            TemplateDetectionResult with the suggestion (or None), the
            confidence, up to three alternatives and a reasoning string.
        """
        ranked = self.rank(text)
        if not ranked:
            return TemplateDetectionResult(
                confidence=0.0,
                reasoning="No templates available for matching.",
            )

        best = ranked[0]
        confidence = min(best.score / CONFIDENCE_SCALE * 100, 100.0)

        if confidence > HIGH_CONFIDENCE:
            reasoning = (
                f"High confidence match based on keywords: {', '.join(best.matched_keywords)}"
            )
        elif confidence > SUGGESTION_THRESHOLD:
            reasoning = "Moderate confidence match. Consider this template or explore alternatives."
        else:
            reasoning = (
                "Low confidence match. General enhancement recommended or manual template selection."
            )

        logger.debug(f"Template detection: best={best.template.id} confidence={confidence:.1f}")

        return TemplateDetectionResult(
            suggested_template=best.template if confidence > SUGGESTION_THRESHOLD else None,
            confidence=confidence,
            alternative_templates=[s.template for s in ranked[1 : 1 + MAX_ALTERNATIVES]],
            reasoning=reasoning,
        )
