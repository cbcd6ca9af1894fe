"""Get current user use case."""

from pydantic import BaseModel

from conduit.application.usecase.base import BaseUseCase
from conduit.application.view import CamelModel, UserView, ViewAssembler
from conduit.domain.model import User


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user: User
    token: str  # Token presented on the request


class GetCurrentUserResponse(CamelModel):
    """Get current user response."""

    user: UserView


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for describing the authenticated user."""

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Echo the authenticated user with the token they presented."""
        return GetCurrentUserResponse(
            user=ViewAssembler.user(request.user, request.token)
        )
