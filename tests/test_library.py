"""Tests for the template library and usage storage."""

import json
import threading

import pytest

from prompt_studio.engine.library import REQUIRED_SECTIONS, InvalidTemplateError, TemplateLibrary
from prompt_studio.prompts.catalog import GOAL_SETTING_TRACKING, TEMPLATE_CATALOG
from prompt_studio.utils.storage import InMemoryUsageStore, JsonUsageStore


@pytest.fixture
def library():
    """A library over the built-in catalog with fresh counters."""
    return TemplateLibrary(usage_store=InMemoryUsageStore())


class TestCatalog:
    """Tests for the seeded catalog."""

    def test_ten_templates(self, library):
        """Test the built-in catalog is loaded in order."""
        assert len(library) == 10
        assert [t.id for t in library.templates] == [t["id"] for t in TEMPLATE_CATALOG]

    def test_every_template_has_all_sections(self, library):
        """Test every structure carries the five section headers."""
        for template in library.templates:
            for section in REQUIRED_SECTIONS:
                assert section in template.structure, f"{template.id} lacks {section}"

    def test_get_template(self, library):
        """Test lookup by id."""
        template = library.get_template("goal_setting_tracking")
        assert template is not None
        assert template.name == "Goal Setting & Tracking"
        assert template.effectiveness == 94

    def test_get_unknown_template(self, library):
        """Test unknown ids return None."""
        assert library.get_template("does_not_exist") is None

    def test_categories_first_seen_order(self, library):
        """Test categories are unique and keep catalog order."""
        assert library.get_categories() == [
            "personal_development",
            "career_development",
            "marketing",
            "travel",
            "education",
            "business",
            "productivity",
        ]

    def test_templates_by_category(self, library):
        """Test filtering by category."""
        education = library.get_templates_by_category("education")
        assert [t.id for t in education] == [
            "complex_topic_simplification",
            "personalized_learning_paths",
        ]
        assert library.get_templates_by_category("unknown") == []


class TestSeedValidation:
    """Tests for rejecting bad seed entries."""

    def test_missing_section_rejected(self):
        """Test a structure without #OUTPUT is rejected."""
        entry = dict(GOAL_SETTING_TRACKING)
        entry["structure"] = entry["structure"].replace("#OUTPUT", "#RESULT")
        with pytest.raises(InvalidTemplateError, match="#OUTPUT"):
            TemplateLibrary([entry])

    def test_duplicate_id_rejected(self):
        """Test duplicate ids are rejected."""
        with pytest.raises(InvalidTemplateError, match="Duplicate"):
            TemplateLibrary([GOAL_SETTING_TRACKING, GOAL_SETTING_TRACKING])

    def test_from_file(self, tmp_path):
        """Test loading a JSON seed file."""
        seed = tmp_path / "templates.json"
        seed.write_text(json.dumps([GOAL_SETTING_TRACKING]))

        library = TemplateLibrary.from_file(seed)

        assert len(library) == 1
        assert library.get_template("goal_setting_tracking") is not None


class TestApplyTemplate:
    """Tests for applying templates and tracking usage."""

    def test_apply_renders_structure_and_request(self, library):
        """Test the enhanced prompt is structure, request, then instruction."""
        template = library.get_template("budget_travel_planning")
        application = library.apply_template("Plan a week in Lisbon", template)

        assert application.enhanced_prompt.startswith(template.structure)
        assert "USER REQUEST: Plan a week in Lisbon" in application.enhanced_prompt
        assert application.enhanced_prompt.endswith("addressing the user's request.")
        assert application.original_prompt == "Plan a week in Lisbon"
        assert len(application.improvements) == 5

    def test_apply_increments_usage(self, library):
        """Test each application bumps the usage counter."""
        template = library.get_template("budget_travel_planning")
        library.apply_template("one", template)
        application = library.apply_template("two", template)

        assert application.applied_template.usage_count == 2
        assert library.get_template("budget_travel_planning").usage_count == 2
        assert library.get_usage_statistics() == {"budget_travel_planning": 2}

    def test_popular_templates_by_usage(self, library):
        """Test popular templates are ordered by usage count."""
        travel = library.get_template("budget_travel_planning")
        goals = library.get_template("goal_setting_tracking")
        library.apply_template("a trip", travel)
        library.apply_template("goals", goals)
        library.apply_template("more goals", goals)

        popular = library.get_popular_templates(limit=2)

        assert [t.id for t in popular] == ["goal_setting_tracking", "budget_travel_planning"]

    def test_popular_ties_keep_catalog_order(self, library):
        """Test unused templates keep catalog order."""
        popular = library.get_popular_templates()
        assert [t.id for t in popular] == [t["id"] for t in TEMPLATE_CATALOG[:5]]


class TestUsageStores:
    """Tests for usage counter storage."""

    def test_in_memory_counts(self):
        """Test increments and reads."""
        store = InMemoryUsageStore()
        assert store.get("x") == 0
        assert store.increment("x") == 1
        assert store.increment("x") == 2
        assert store.all() == {"x": 2}

    def test_json_store_persists(self, tmp_path):
        """Test counters survive a reload."""
        path = tmp_path / "usage.json"
        store = JsonUsageStore(path)
        store.increment("goal_setting_tracking")
        store.increment("goal_setting_tracking")

        reloaded = JsonUsageStore(path)

        assert reloaded.get("goal_setting_tracking") == 2

    def test_json_store_corrupt_file_is_empty(self, tmp_path):
        """Test an unreadable file starts from zero."""
        path = tmp_path / "usage.json"
        path.write_text("not json")

        store = JsonUsageStore(path)

        assert store.all() == {}

    def test_json_store_concurrent_increments(self, tmp_path):
        """Test concurrent increments leave the file holding the final count."""
        path = tmp_path / "usage.json"
        store = JsonUsageStore(path)

        def bump():
            for _ in range(25):
                store.increment("goal_setting_tracking")

        threads = [threading.Thread(target=bump) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert store.get("goal_setting_tracking") == 200
        assert json.loads(path.read_text()) == {"goal_setting_tracking": 200}
        assert JsonUsageStore(path).get("goal_setting_tracking") == 200
        assert not (tmp_path / "usage.json.tmp").exists()
