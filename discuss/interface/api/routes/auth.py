"""Authentication routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from discuss.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from discuss.interface.api.security import bearer_token
from discuss.interface.error import to_http_exception

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for registration."""

    email: str = Field(max_length=255)
    username: str = Field(min_length=3, max_length=50)
    password: str = Field(min_length=1, max_length=128)


class LoginAPIRequest(BaseModel):
    """API request for login."""

    email: str
    password: str


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthResponse:
    """Create an account and return an access token.

    Raises:
        HTTPException: 400 on malformed input, 409 if the email is taken
    """
    try:
        return await register_use_case.execute(
            RegisterRequest(
                email=request.email,
                username=request.username,
                password=request.password,
            )
        )
    except Exception as e:
        raise to_http_exception(e, "register") from e


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Exchange email and password for an access token.

    Raises:
        HTTPException: 401 on bad credentials
    """
    try:
        return await login_use_case.execute(
            LoginRequest(email=request.email, password=request.password)
        )
    except ValueError as e:
        # A malformed email cannot match an account
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        ) from e
    except Exception as e:
        raise to_http_exception(e, "log in") from e


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    token: str | None = Depends(bearer_token),
) -> GetCurrentUserResponse:
    """Get the authenticated user.

    Raises:
        HTTPException: 401 if not authenticated or the user no longer exists
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=token)
        )
    except Exception as e:
        error = to_http_exception(e, "load current user")
        if error.status_code == status.HTTP_404_NOT_FOUND:
            # Valid token for a user that no longer exists
            error = HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated"
            )
        raise error from e
