"""Retry and circuit breaker helpers for remote enhancement calls."""

import asyncio
import functools
import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Optional, TypeVar

from prompt_studio.utils.logger import get_logger

logger = get_logger()

T = TypeVar("T")


class CircuitState(str, Enum):
    """Circuit breaker states."""

    CLOSED = "closed"  # Normal operation
    OPEN = "open"  # Failing, reject requests
    HALF_OPEN = "half_open"  # Testing if service recovered


@dataclass
class RetryConfig:
    """Configuration for retry behavior."""

    max_attempts: int = 2
    base_delay: float = 1.0  # seconds
    max_delay: float = 10.0  # seconds
    exponential_base: float = 2.0
    jitter: bool = True
    should_retry: Callable[[Exception], bool] = lambda e: True


@dataclass
class CircuitBreakerConfig:
    """Configuration for circuit breaker."""

    failure_threshold: int = 5
    recovery_timeout: float = 60.0  # seconds
    half_open_max_calls: int = 1


@dataclass
class CircuitBreaker:
    """Stops calling a remote service after repeated failures."""

    config: CircuitBreakerConfig = field(default_factory=CircuitBreakerConfig)
    state: CircuitState = CircuitState.CLOSED
    failure_count: int = 0
    last_failure_time: float = 0.0
    half_open_calls: int = 0

    def can_execute(self) -> bool:
        """Check if execution is allowed based on circuit state."""
        if self.state == CircuitState.CLOSED:
            return True

        if self.state == CircuitState.OPEN:
            if time.time() - self.last_failure_time >= self.config.recovery_timeout:
                self.state = CircuitState.HALF_OPEN
                self.half_open_calls = 1
                logger.info("Circuit breaker transitioning to HALF_OPEN")
                return True
            return False

        if self.half_open_calls < self.config.half_open_max_calls:
            self.half_open_calls += 1
            return True
        return False

    def record_success(self) -> None:
        """Record a successful call."""
        if self.state == CircuitState.HALF_OPEN:
            self.state = CircuitState.CLOSED
            logger.info("Circuit breaker transitioning to CLOSED")
        self.failure_count = 0

    def record_failure(self) -> None:
        """Record a failed call."""
        self.failure_count += 1
        self.last_failure_time = time.time()

        if self.state == CircuitState.HALF_OPEN:
            self.state = CircuitState.OPEN
            logger.warning("Circuit breaker transitioning to OPEN from HALF_OPEN")
        elif self.failure_count >= self.config.failure_threshold:
            self.state = CircuitState.OPEN
            logger.warning(f"Circuit breaker OPEN after {self.failure_count} failures")


class CircuitOpenError(Exception):
    """Raised when circuit breaker is open and rejecting requests."""

    pass


def calculate_delay(attempt: int, config: RetryConfig) -> float:
    """Calculate delay for a retry attempt with exponential backoff."""
    delay = min(config.base_delay * (config.exponential_base ** attempt), config.max_delay)

    if config.jitter:
        # ±25% of delay
        jitter_range = delay * 0.25
        delay = delay + random.uniform(-jitter_range, jitter_range)

    return max(0, delay)


def with_retry(
    config: Optional[RetryConfig] = None,
    circuit_breaker: Optional[CircuitBreaker] = None,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """Decorate a coroutine function with retry and an optional circuit breaker.

    Exceptions for which ``config.should_retry`` is False are re-raised
    immediately. After the final attempt the last exception is re-raised
    unchanged so callers can still classify it.

    Example:
        @with_retry(RetryConfig(max_attempts=3))
        async def call_api():
            ...
    """
    if config is None:
        config = RetryConfig()

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            if circuit_breaker and not circuit_breaker.can_execute():
                raise CircuitOpenError(f"Circuit breaker is OPEN for {func.__name__}")

            for attempt in range(config.max_attempts):
                try:
                    result = await func(*args, **kwargs)
                except asyncio.CancelledError:
                    # A cancelled half-open call must not leave the breaker stuck
                    if circuit_breaker:
                        circuit_breaker.record_failure()
                    raise
                except Exception as e:
                    if circuit_breaker:
                        circuit_breaker.record_failure()
                    last_attempt = attempt == config.max_attempts - 1
                    if last_attempt or not config.should_retry(e):
                        raise
                    if circuit_breaker and circuit_breaker.state == CircuitState.OPEN:
                        raise CircuitOpenError(
                            f"Circuit breaker opened for {func.__name__}"
                        ) from e

                    delay = calculate_delay(attempt, config)
                    logger.warning(
                        f"Retry {attempt + 1}/{config.max_attempts} for "
                        f"{func.__name__} after error: {e}. Waiting {delay:.2f}s"
                    )
                    await asyncio.sleep(delay)
                else:
                    if circuit_breaker:
                        circuit_breaker.record_success()
                    return result

            raise RuntimeError("with_retry requires max_attempts >= 1")

        return wrapper

    return decorator
