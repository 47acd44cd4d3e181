"""FastAPI backend for Prompt Studio."""

from prompt_studio.api.main import app
from prompt_studio.api.routes import router
from prompt_studio.api.handlers import EngineServices

__all__ = [
    "app",
    "router",
    "EngineServices",
]
