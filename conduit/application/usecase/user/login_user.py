"""Login use case."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase
from conduit.application.view import CamelModel, UserView, ViewAssembler
from conduit.domain.service import TokenService, UserService


class LoginUserRequest(BaseModel):
    """Login request."""

    email: str | None = None
    password: str | None = None


class LoginUserResponse(CamelModel):
    """Login response."""

    user: UserView


class LoginUserUseCase(BaseUseCase):
    """Use case for exchanging credentials for a token."""

    def __init__(self, user_service: UserService, token_service: TokenService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            token_service: Token domain service
        """
        self.user_service = user_service
        self.token_service = token_service

    async def execute(self, request: LoginUserRequest) -> LoginUserResponse:
        """Execute login flow.

        Raises:
            ValidationError: If the credentials don't match a user
        """
        user = await self.user_service.authenticate(
            email=request.email or "", password=request.password or ""
        )
        token = self.token_service.issue(user.username)
        return LoginUserResponse(user=ViewAssembler.user(user, token))
