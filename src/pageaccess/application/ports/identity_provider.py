"""Identity provider port - resolves bearer tokens to callers."""

from dataclasses import dataclass
from typing import Protocol


@dataclass
class Identity:
    """Caller resolved from a bearer token."""

    user_id: str
    email: str | None = None
    username: str | None = None


class IdentityProvider(Protocol):
    """Port for resolving a bearer token to an identity."""

    def resolve(self, token: str) -> Identity | None: ...
