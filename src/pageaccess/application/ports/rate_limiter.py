"""Rate limiter port - sliding window request counting."""

from typing import Protocol


class RateLimiter(Protocol):
    """Port for evaluating a request against a sliding window."""

    async def hit(self, key: str, window_seconds: int, max_requests: int) -> bool:
        """Consume one slot for key. Return False if the window is full."""
        ...
