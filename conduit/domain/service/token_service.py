"""Token domain service."""

import logfire

from conduit.config import AuthSettings
from conduit.util.jwt import Claim, create_token, verify_token

from .base import Service


class TokenService(Service):
    """Domain service for issuing and verifying access tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize token service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def issue(self, username: str) -> str:
        """Issue a signed token for the user.

        Args:
            username: Token subject

        Returns:
            JWT token string
        """
        with logfire.span("token_service.issue", username=username):
            token = create_token(username, self.auth_settings)
            logfire.info("Token issued", username=username)
            return token

    def verify(self, token: str) -> Claim:
        """Verify a token and extract its claim.

        Does not check that the subject still exists.

        Args:
            token: JWT token string

        Returns:
            Verified claim

        Raises:
            InvalidTokenError: If token is malformed, badly signed or expired
        """
        with logfire.span("token_service.verify"):
            try:
                claim = verify_token(token, self.auth_settings)
            except Exception as e:
                logfire.warn("Token verification failed", error=str(e))
                raise
            logfire.info("Token verified", username=claim.username)
            return claim
