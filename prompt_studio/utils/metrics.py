"""Token usage and phase timing for the enhancement pipeline."""

import threading
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class TokenUsage:
    """Token usage for a single remote call."""

    input_tokens: int = 0
    output_tokens: int = 0
    model: str = ""
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def total_tokens(self) -> int:
        """Total tokens used."""
        return self.input_tokens + self.output_tokens


@dataclass
class UsageMetrics:
    """Aggregated remote usage and local timings for a pipeline."""

    total_input_tokens: int = 0
    total_output_tokens: int = 0
    api_calls: int = 0
    fallbacks: int = 0
    cache_hits: int = 0
    phase_timings: dict[str, float] = field(default_factory=dict)
    usage_by_model: dict[str, TokenUsage] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def total_tokens(self) -> int:
        """Total tokens used across all calls."""
        return self.total_input_tokens + self.total_output_tokens

    def add_usage(self, usage: TokenUsage) -> None:
        """Add usage from a successful remote call.

        Args:
            usage: Token usage from the call.
        """
        with self._lock:
            self.total_input_tokens += usage.input_tokens
            self.total_output_tokens += usage.output_tokens
            self.api_calls += 1

            if usage.model:
                if usage.model not in self.usage_by_model:
                    self.usage_by_model[usage.model] = TokenUsage(model=usage.model)
                self.usage_by_model[usage.model].input_tokens += usage.input_tokens
                self.usage_by_model[usage.model].output_tokens += usage.output_tokens

    def record_fallback(self) -> None:
        with self._lock:
            self.fallbacks += 1

    def record_cache_hit(self) -> None:
        with self._lock:
            self.cache_hits += 1

    def record_phase_timing(self, phase: str, duration: float) -> None:
        """Record timing for a phase.

        Args:
            phase: Phase name.
            duration: Duration in seconds.
        """
        with self._lock:
            self.phase_timings[phase] = self.phase_timings.get(phase, 0.0) + duration

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "total_input_tokens": self.total_input_tokens,
            "total_output_tokens": self.total_output_tokens,
            "total_tokens": self.total_tokens,
            "api_calls": self.api_calls,
            "fallbacks": self.fallbacks,
            "cache_hits": self.cache_hits,
            "phase_timings": {k: round(v, 6) for k, v in self.phase_timings.items()},
            "usage_by_model": {
                model: {
                    "input_tokens": usage.input_tokens,
                    "output_tokens": usage.output_tokens,
                    "total_tokens": usage.total_tokens,
                }
                for model, usage in self.usage_by_model.items()
            },
        }


class PhaseTimer:
    """Context manager for timing phases."""

    def __init__(self, metrics: UsageMetrics, phase: str):
        """Initialize timer.

        Args:
            metrics: Metrics object to record timing.
            phase: Phase name.
        """
        self.metrics = metrics
        self.phase = phase
        self.start_time: Optional[float] = None

    def __enter__(self) -> "PhaseTimer":
        """Start timing."""
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Record timing."""
        if self.start_time is not None:
            duration = time.perf_counter() - self.start_time
            self.metrics.record_phase_timing(self.phase, duration)
