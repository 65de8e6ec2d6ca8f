"""Auth middleware - resolves the bearer token into req.context.user."""

import asyncio

import falcon.asgi

from pageaccess.application.ports import IdentityProvider


class AuthMiddleware:
    """Sets req.context.user (Identity or None) and req.context.auth_error.

    ``auth_error`` is ``"missing_auth"`` when no token was sent and
    ``"invalid_auth"`` when the token could not be resolved. Resources that
    require a caller check it; public resources ignore it.
    """

    def __init__(self, identity_provider: IdentityProvider | None = None) -> None:
        self._identity = identity_provider

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        req.context.user = None
        req.context.auth_error = None

        auth = (req.get_header("Authorization") or "").strip()
        scheme, _, credentials = auth.partition(" ")
        token = credentials.strip() if scheme.lower() == "bearer" else auth
        if not token:
            req.context.auth_error = "missing_auth"
            return

        user = None
        if self._identity:
            user = await asyncio.to_thread(self._identity.resolve, token)
        if user:
            req.context.user = user
        else:
            req.context.auth_error = "invalid_auth"
