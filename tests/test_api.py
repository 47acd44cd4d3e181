"""Tests for the FastAPI backend."""

import pytest
from fastapi.testclient import TestClient

from prompt_studio.api.handlers import EngineServices, get_services
from prompt_studio.api.main import app
from prompt_studio.api.rate_limiter import ClientRateLimiter, RateLimitConfig
from prompt_studio.utils.config import Settings


@pytest.fixture
def services():
    """Engine services with no remote adapter."""
    return EngineServices(Settings(_env_file=None, openrouter_api_key=None))


@pytest.fixture
def client(services):
    """Create a test client bound to fresh services."""
    app.dependency_overrides[get_services] = lambda: services
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealthEndpoint:
    """Tests for health endpoint."""

    def test_health_check(self, client):
        """Test health check returns status."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "openrouter" in data["api_keys"]


class TestRootEndpoint:
    """Tests for root endpoint."""

    def test_root_returns_info(self, client):
        """Test root endpoint returns API info."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Prompt Studio"
        assert "enhance" in data["endpoints"]


class TestAnalyzeEndpoint:
    """Tests for the analyze endpoint."""

    def test_analyze(self, client):
        """Test classification and pre-transformation metrics."""
        response = client.post("/api/analyze", json={"prompt": "write a blog post about cats"})
        assert response.status_code == 200
        data = response.json()
        assert data["analysis"]["intent"] == "content_creation"
        assert data["analysis"]["domain"] == "general"
        assert data["metrics"]["overall_score"] == 52


class TestTransformEndpoints:
    """Tests for the transform endpoints."""

    def test_transform(self, client):
        """Test a meta-prompt transformation with its validation."""
        response = client.post("/api/transform", json={"prompt": "write a blog post about cats"})
        assert response.status_code == 200
        data = response.json()
        assert data["transformation"]["transformation_type"] == "meta-prompt"
        assert data["transformation"]["quality_score"] == 52
        assert data["validation"]["is_valid"] is True

    def test_transform_with_template(self, client):
        """Test a template transformation."""
        response = client.post(
            "/api/transform",
            json={"prompt": "plan a week in Lisbon", "template_id": "budget_travel_planning"},
        )
        assert response.status_code == 200
        assert response.json()["transformation"]["template_used"] == "budget_travel_planning"

    def test_transform_too_short(self, client):
        """Test short input is a 422."""
        response = client.post("/api/transform", json={"prompt": " a "})
        assert response.status_code == 422
        assert "too short" in response.json()["detail"]

    def test_transform_unknown_template(self, client):
        """Test an unknown template is a 404."""
        response = client.post(
            "/api/transform", json={"prompt": "plan a trip", "template_id": "nope"}
        )
        assert response.status_code == 404

    def test_batch(self, client):
        """Test batch results and the aggregate report."""
        response = client.post(
            "/api/transform/batch",
            json={"prompts": ["write a blog post about cats", "x"]},
        )
        assert response.status_code == 200
        data = response.json()
        assert len(data["results"]) == 2
        assert data["results"][1]["transformation"]["template_used"] == "fallback"
        assert "average_score" in data["report"]


class TestValidateEndpoint:
    """Tests for the validate endpoint."""

    def test_validate(self, client):
        """Test a raw prompt is scored."""
        response = client.post("/api/validate", json={"prompt": "hello world"})
        assert response.status_code == 200
        data = response.json()
        assert data["overall_score"] == 45
        assert data["is_valid"] is False
        assert len(data["issues"]) == 8


class TestEnhanceEndpoint:
    """Tests for the enhance endpoint."""

    def test_enhance_local_only(self, client):
        """Test enhancement without a key returns the local result."""
        response = client.post("/api/enhance", json={"prompt": "write a blog post about cats"})
        assert response.status_code == 200
        data = response.json()
        assert data["transformation"]["local_only"] is True
        assert data["transformation"]["enhancement_error"] is None
        assert data["category"] == "text_ai"

    def test_enhance_too_long(self, client, services):
        """Test over-long input is a 422."""
        text = "x" * (services.settings.max_prompt_length + 1)
        response = client.post("/api/enhance", json={"prompt": text})
        assert response.status_code == 422

    def test_enhance_rate_limited(self, client, services):
        """Test the per-client limit returns 429 with Retry-After."""
        services.rate_limiter = ClientRateLimiter(per_client_config=RateLimitConfig(burst_size=1))

        first = client.post("/api/enhance", json={"prompt": "write a blog post about cats"})
        second = client.post("/api/enhance", json={"prompt": "write a blog post about cats"})

        assert first.status_code == 200
        assert second.status_code == 429
        assert "Retry-After" in second.headers


class TestTemplateEndpoints:
    """Tests for the template endpoints."""

    def test_list_templates(self, client):
        """Test listing all templates and one category."""
        assert len(client.get("/api/templates").json()) == 10

        education = client.get("/api/templates", params={"category": "education"}).json()
        assert [t["id"] for t in education] == [
            "complex_topic_simplification",
            "personalized_learning_paths",
        ]

    def test_categories(self, client):
        """Test the category list."""
        response = client.get("/api/templates/categories")
        assert response.status_code == 200
        assert len(response.json()) == 7

    def test_get_template(self, client):
        """Test fetching one template and a missing one."""
        response = client.get("/api/templates/goal_setting_tracking")
        assert response.status_code == 200
        assert response.json()["name"] == "Goal Setting & Tracking"

        assert client.get("/api/templates/nope").status_code == 404

    def test_detect(self, client):
        """Test template detection."""
        response = client.post(
            "/api/templates/detect",
            json={"prompt": "Help me develop my personal writing style and voice as an author"},
        )
        assert response.status_code == 200
        assert response.json()["suggested_template"]["id"] == "personal_writing_style"

    def test_apply_and_usage(self, client):
        """Test applying a template records usage and affects popularity."""
        assert client.get("/api/templates/usage").json() == {}

        response = client.post(
            "/api/templates/goal_setting_tracking/apply",
            json={"prompt": "run a marathon this year"},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["applied_template"]["usage_count"] == 1
        assert "USER REQUEST: run a marathon this year" in data["enhanced_prompt"]

        assert client.get("/api/templates/usage").json() == {"goal_setting_tracking": 1}
        popular = client.get("/api/templates/popular", params={"limit": 2}).json()
        assert popular[0]["id"] == "goal_setting_tracking"
        assert len(popular) == 2

    def test_apply_errors(self, client):
        """Test unknown templates and short input."""
        assert client.post(
            "/api/templates/nope/apply", json={"prompt": "anything"}
        ).status_code == 404
        assert client.post(
            "/api/templates/goal_setting_tracking/apply", json={"prompt": "x"}
        ).status_code == 422


class TestMetricsEndpoint:
    """Tests for the metrics endpoint."""

    def test_metrics(self, client):
        """Test usage metrics reflect a local enhancement."""
        client.post("/api/enhance", json={"prompt": "write a blog post about cats"})

        data = client.get("/api/metrics").json()
        assert data["api_calls"] == 0
        assert "transform" in data["phase_timings"]
