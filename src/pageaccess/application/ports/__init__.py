"""Application ports - interfaces for external adapters."""

from pageaccess.application.ports.identity_provider import Identity, IdentityProvider
from pageaccess.application.ports.rate_limiter import RateLimiter
from pageaccess.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "Identity",
    "IdentityProvider",
    "RateLimiter",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
