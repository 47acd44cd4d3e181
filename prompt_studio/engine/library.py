"""Template library: catalog lookup, application and usage tracking."""

import json
from pathlib import Path
from typing import Iterable, Optional, Union

from prompt_studio.models import PromptTemplate, TemplateApplication
from prompt_studio.prompts.catalog import (
    TEMPLATE_CATALOG,
    TEMPLATE_IMPROVEMENTS,
    TEMPLATE_REQUEST_SUFFIX,
)
from prompt_studio.utils.logger import get_logger
from prompt_studio.utils.storage import InMemoryUsageStore, UsageStore

logger = get_logger()

REQUIRED_SECTIONS = (
    "#CONTEXT",
    "#GOAL",
    "#INFORMATION",
    "#RESPONSE GUIDELINES",
    "#OUTPUT",
)


class InvalidTemplateError(ValueError):
    """Raised when a seed entry is not a usable five-section template."""

    pass


class TemplateLibrary:
    """The catalog of structured prompt templates.

    Constructed explicitly and passed to the components that need it. Usage
    counters live in a ``UsageStore`` so they can be shared or persisted.
    """

    def __init__(
        self,
        templates: Optional[Iterable[Union[dict, PromptTemplate]]] = None,
        usage_store: Optional[UsageStore] = None,
    ):
        """Initialize the library.

        Args:
            templates: Seed entries; defaults to the built-in catalog.
            usage_store: Counter store; defaults to an in-memory store.

        Raises:
            InvalidTemplateError: If an entry lacks a section header or
                duplicates an id.
        """
        self.usage_store = usage_store or InMemoryUsageStore()
        self._templates: list[PromptTemplate] = []
        seen: set[str] = set()

        for entry in TEMPLATE_CATALOG if templates is None else templates:
            template = entry if isinstance(entry, PromptTemplate) else PromptTemplate(**entry)
            missing = [s for s in REQUIRED_SECTIONS if s not in template.structure]
            if missing:
                raise InvalidTemplateError(
                    f"Template '{template.id}' is missing sections: {', '.join(missing)}"
                )
            if template.id in seen:
                raise InvalidTemplateError(f"Duplicate template id '{template.id}'")
            seen.add(template.id)
            self._templates.append(template)

        logger.debug(f"Template library loaded with {len(self._templates)} templates")

    @classmethod
    def from_file(cls, path: Path, usage_store: Optional[UsageStore] = None) -> "TemplateLibrary":
        """Load the catalog from a JSON seed file holding a list of templates."""
        with open(path, "r") as f:
            entries = json.load(f)
        return cls(entries, usage_store=usage_store)

    @property
    def templates(self) -> list[PromptTemplate]:
        """All templates in catalog order, with current usage counts."""
        return [self._with_usage(t) for t in self._templates]

    def get_template(self, template_id: str) -> Optional[PromptTemplate]:
        """Get a template by id, or None when unknown."""
        for template in self._templates:
            if template.id == template_id:
                return self._with_usage(template)
        return None

    def get_templates_by_category(self, category: str) -> list[PromptTemplate]:
        """Get all templates in a category."""
        return [self._with_usage(t) for t in self._templates if t.category == category]

    def get_categories(self) -> list[str]:
        """Get the distinct categories in first-seen order."""
        return list(dict.fromkeys(t.category for t in self._templates))

    def get_usage_statistics(self) -> dict[str, int]:
        """Get usage counts keyed by template id."""
        return self.usage_store.all()

    def get_popular_templates(self, limit: int = 5) -> list[PromptTemplate]:
        """Get the most used templates, ties kept in catalog order."""
        ranked = sorted(self.templates, key=lambda t: t.usage_count, reverse=True)
        return ranked[: max(limit, 0)]

    def apply_template(self, user_input: str, template: PromptTemplate) -> TemplateApplication:
        """Render a request through a template and record the usage."""
        enhanced_prompt = (
            f"{template.structure}\n\n"
            f"USER REQUEST: {user_input}\n\n"
            f"{TEMPLATE_REQUEST_SUFFIX}"
        )
        count = self.usage_store.increment(template.id)
        logger.debug(f"Template usage tracked: {template.id} ({count})")

        return TemplateApplication(
            original_prompt=user_input,
            applied_template=template.model_copy(update={"usage_count": count}),
            enhanced_prompt=enhanced_prompt,
            improvements=list(TEMPLATE_IMPROVEMENTS),
        )

    def _with_usage(self, template: PromptTemplate) -> PromptTemplate:
        return template.model_copy(update={"usage_count": self.usage_store.get(template.id)})

    def __len__(self) -> int:
        return len(self._templates)
