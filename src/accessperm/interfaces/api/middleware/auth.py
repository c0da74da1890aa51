"""Auth middleware - resolves the caller from the bearer token or allows anonymous."""

import falcon.asgi

from accessperm.application.security_context import reset_current_subject, set_current_subject
from accessperm.domain.value_objects import Subject
from accessperm.logging import bind_log_context, clear_log_context

ANONYMOUS = Subject(user_id="anonymous")


class AuthMiddleware:
    """Middleware that validates the bearer token and sets req.context.user.

    The caller is also published as the current subject so that the
    authorization service sees it for the rest of the request.
    """

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    def _resolve(self, req: falcon.asgi.Request) -> Subject | None:
        auth = req.get_header("Authorization")
        if not auth:
            return ANONYMOUS
        if auth.startswith("Bearer ") and self._keycloak:
            return self._keycloak.decode_token(auth[7:])
        return None

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Extract user from Authorization header."""
        clear_log_context()
        user = self._resolve(req)
        req.context.user = user
        req.context.subject_token = set_current_subject(user)
        if user:
            bind_log_context(user_id=user.user_id)

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        token = getattr(req.context, "subject_token", None)
        if token is not None:
            reset_current_subject(token)
