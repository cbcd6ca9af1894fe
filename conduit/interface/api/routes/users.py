"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from conduit.application.usecase.user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginUserRequest,
    LoginUserResponse,
    LoginUserUseCase,
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)
from conduit.application.view import CamelModel
from conduit.interface.api.dependencies import CurrentUser

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class NewUser(CamelModel):
    username: str | None = None
    email: str | None = None
    password: str | None = None


class NewUserBody(CamelModel):
    """API request for registration."""

    user: NewUser


class Credentials(CamelModel):
    email: str | None = None
    password: str | None = None


class CredentialsBody(CamelModel):
    """API request for login."""

    user: Credentials


@router.post("", response_model=RegisterUserResponse)
async def register_user(
    body: NewUserBody,
    register_user_use_case: FromDishka[RegisterUserUseCase],
) -> RegisterUserResponse:
    """Register a user and return them with a token.

    Raises:
        ValidationError: If fields are blank or username/email are taken
    """
    return await register_user_use_case.execute(
        RegisterUserRequest(
            username=body.user.username,
            email=body.user.email,
            password=body.user.password,
        )
    )


@router.post("/login", response_model=LoginUserResponse)
async def login_user(
    body: CredentialsBody,
    login_user_use_case: FromDishka[LoginUserUseCase],
) -> LoginUserResponse:
    """Exchange email and password for a token.

    Raises:
        ValidationError: If the credentials don't match
    """
    return await login_user_use_case.execute(
        LoginUserRequest(email=body.user.email, password=body.user.password)
    )


@router.get("", response_model=GetCurrentUserResponse)
async def get_current_user(
    current: CurrentUser,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> GetCurrentUserResponse:
    """Return the authenticated user with the token they presented."""
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(user=current.user, token=current.token)
    )
