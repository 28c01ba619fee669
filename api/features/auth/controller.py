"""Controller for the Auth feature."""
from sqlalchemy.ext.asyncio import AsyncSession

from api.features.auth.dtos import CredentialsRequest
from api.features.auth.service import AuthService
from api.shared.dtos import MessageResponse


class AuthController:
    """Controller handling signup and login."""

    def __init__(self, auth_service: AuthService):
        self.auth_service = auth_service

    async def signup(
        self, request: CredentialsRequest, *, db_session: AsyncSession
    ) -> MessageResponse:
        await self.auth_service.register(
            request.email, request.password, db_session=db_session
        )
        return MessageResponse(message="User registered successfully")

    async def login(
        self, request: CredentialsRequest, *, db_session: AsyncSession
    ) -> MessageResponse:
        await self.auth_service.authenticate(
            request.email, request.password, db_session=db_session
        )
        return MessageResponse(message="Login successful")
