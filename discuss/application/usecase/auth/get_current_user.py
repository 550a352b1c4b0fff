"""Resolve the user behind an access token."""

from datetime import datetime

from pydantic import BaseModel

from discuss.domain.model import User
from discuss.domain.service import JWTService, UserService
from discuss.domain.value import UserId

from .login import UserInfo


class GetCurrentUserRequest(BaseModel):
    token: str


class GetCurrentUserResponse(UserInfo):
    """The authenticated user, with the account creation time."""

    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "GetCurrentUserResponse":
        return cls(**UserInfo.from_user(user).model_dump(), created_at=user.created_at)


class GetCurrentUserUseCase:
    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Load the token's user.

        Raises:
            JWTError: If the token is invalid or expired
            NotFoundError: If the user no longer exists
        """
        payload = self.jwt_service.verify_token(request.token)
        user = await self.user_service.get_by_id(UserId(payload.sub))
        return GetCurrentUserResponse.from_user(user)
