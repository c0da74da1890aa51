"""Keycloak OIDC provider for bearer token introspection."""

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

from accessperm.domain.value_objects import Subject
from accessperm.logging import get_logger

logger = get_logger(__name__)


class KeycloakProvider:
    """Keycloak OIDC - introspects bearer tokens and resolves the caller."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    def decode_token(self, token: str) -> Subject | None:
        """Introspect token, return the subject or None if the token is not active."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as e:
            logger.warning("keycloak.introspection_failed", error=str(e))
            return None
        if not token_info.get("active") or not token_info.get("sub"):
            return None
        return Subject(
            user_id=token_info["sub"],
            username=token_info.get("preferred_username"),
        )
