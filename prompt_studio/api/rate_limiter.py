"""Rate limiting for the endpoints that reach the remote model."""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from prompt_studio.utils.logger import get_logger

logger = get_logger()


class RateLimitExceededError(Exception):
    """Raised when rate limit is exceeded."""

    def __init__(self, message: str, retry_after: float):
        super().__init__(message)
        self.retry_after = retry_after


@dataclass
class RateLimitConfig:
    """Configuration for rate limiting."""

    requests_per_minute: int = 20
    requests_per_hour: int = 200
    burst_size: int = 5  # Max burst allowed


@dataclass
class TokenBucket:
    """Token bucket allowing bursts up to capacity at a sustained fill rate."""

    capacity: float
    fill_rate: float  # Tokens per second
    clock: Callable[[], float] = time.monotonic
    tokens: float = field(init=False)
    last_update: float = field(init=False)

    def __post_init__(self):
        self.tokens = self.capacity
        self.last_update = self.clock()

    def _refill(self) -> None:
        now = self.clock()
        self.tokens = min(self.capacity, self.tokens + (now - self.last_update) * self.fill_rate)
        self.last_update = now

    def consume(self, tokens: float = 1.0) -> bool:
        """Take tokens if available; False when the bucket is short."""
        self._refill()
        if self.tokens >= tokens:
            self.tokens -= tokens
            return True
        return False

    def time_until_available(self, tokens: float = 1.0) -> float:
        self._refill()
        if self.tokens >= tokens:
            return 0.0
        return (tokens - self.tokens) / self.fill_rate


@dataclass
class SlidingWindowCounter:
    """Counts requests within a trailing time window."""

    window_size: float  # seconds
    max_requests: int
    clock: Callable[[], float] = time.monotonic
    timestamps: list[float] = field(default_factory=list)

    def _clean_old(self) -> None:
        cutoff = self.clock() - self.window_size
        self.timestamps = [ts for ts in self.timestamps if ts > cutoff]

    def check_and_increment(self) -> bool:
        """Record a request if the window has room."""
        self._clean_old()
        if len(self.timestamps) < self.max_requests:
            self.timestamps.append(self.clock())
            return True
        return False

    def time_until_available(self) -> float:
        self._clean_old()
        if len(self.timestamps) < self.max_requests:
            return 0.0
        return (min(self.timestamps) + self.window_size) - self.clock()


class RateLimiter:
    """Burst bucket plus per-minute and per-hour windows."""

    def __init__(
        self,
        config: Optional[RateLimitConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config or RateLimitConfig()
        self.bucket = TokenBucket(
            capacity=float(self.config.burst_size),
            fill_rate=self.config.requests_per_minute / 60.0,
            clock=clock,
        )
        self.minute_window = SlidingWindowCounter(60.0, self.config.requests_per_minute, clock)
        self.hour_window = SlidingWindowCounter(3600.0, self.config.requests_per_hour, clock)

    def check(self) -> None:
        """Admit one request.

        Raises:
            RateLimitExceededError: If any limit is reached.
        """
        if not self.bucket.consume():
            raise RateLimitExceededError(
                "Burst rate limit exceeded", self.bucket.time_until_available()
            )
        if not self.minute_window.check_and_increment():
            raise RateLimitExceededError(
                f"Rate limit exceeded: {self.config.requests_per_minute}/minute",
                self.minute_window.time_until_available(),
            )
        if not self.hour_window.check_and_increment():
            raise RateLimitExceededError(
                f"Rate limit exceeded: {self.config.requests_per_hour}/hour",
                self.hour_window.time_until_available(),
            )


class ClientRateLimiter:
    """Per-client limits plus one global limit across clients."""

    def __init__(
        self,
        per_client_config: Optional[RateLimitConfig] = None,
        global_config: Optional[RateLimitConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the limiter.

        Args:
            per_client_config: Limits applied to each client key.
            global_config: Limits applied to all clients together.
            clock: Monotonic time source.
        """
        self.per_client_config = per_client_config or RateLimitConfig()
        self.global_config = global_config or RateLimitConfig(
            requests_per_minute=60,
            requests_per_hour=1000,
            burst_size=15,
        )
        self._clock = clock
        self._clients: dict[str, RateLimiter] = {}
        self._global = RateLimiter(self.global_config, clock)
        self._lock = threading.Lock()

    def check(self, client_id: str) -> None:
        """Admit one request for a client.

        Raises:
            RateLimitExceededError: If the global or the client limit is reached.
        """
        with self._lock:
            try:
                self._global.check()
            except RateLimitExceededError as e:
                raise RateLimitExceededError("Global rate limit exceeded", e.retry_after) from e

            if client_id not in self._clients:
                self._clients[client_id] = RateLimiter(self.per_client_config, self._clock)
            try:
                self._clients[client_id].check()
            except RateLimitExceededError:
                logger.warning(f"Rate limit hit for client {client_id}")
                raise

    def reset(self, client_id: Optional[str] = None) -> None:
        """Forget one client's history, or every client's when None."""
        with self._lock:
            if client_id is None:
                self._clients.clear()
            else:
                self._clients.pop(client_id, None)
