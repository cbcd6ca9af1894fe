"""Register user use case."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase
from conduit.application.view import CamelModel, UserView, ViewAssembler
from conduit.domain.service import TokenService, UserService


class RegisterUserRequest(BaseModel):
    """Register user request."""

    username: str | None = None
    email: str | None = None
    password: str | None = None


class RegisterUserResponse(CamelModel):
    """Register user response."""

    user: UserView


class RegisterUserUseCase(BaseUseCase):
    """Use case for signing up a new user."""

    def __init__(self, user_service: UserService, token_service: TokenService) -> None:
        """Initialize register user use case.

        Args:
            user_service: User domain service
            token_service: Token domain service
        """
        self.user_service = user_service
        self.token_service = token_service

    async def execute(self, request: RegisterUserRequest) -> RegisterUserResponse:
        """Execute registration flow.

        Args:
            request: Registration data

        Returns:
            The new user with a fresh token

        Raises:
            ValidationError: If fields are blank or username/email are taken
        """
        user = await self.user_service.register(
            username=request.username or "",
            email=request.email or "",
            password=request.password or "",
        )
        token = self.token_service.issue(user.username)
        return RegisterUserResponse(user=ViewAssembler.user(user, token))
