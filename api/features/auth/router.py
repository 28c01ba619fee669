"""Router for the Auth feature."""
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.features.auth.controller import AuthController
from api.features.auth.dtos import CredentialsRequest
from api.shared.db import get_db_session
from api.shared.dtos import MessageResponse
from di.container import ApplicationContainer as DependencyContainer

router = APIRouter()


@router.post(
    "/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED
)
@inject
async def signup(
    request: CredentialsRequest,
    controller: AuthController = Depends(
        Provide[DependencyContainer.controllers.auth_controller]
    ),
    db_session: AsyncSession = Depends(get_db_session),
):
    """Register a new account."""
    return await controller.signup(request, db_session=db_session)


@router.post("/login", response_model=MessageResponse)
@inject
async def login(
    request: CredentialsRequest,
    controller: AuthController = Depends(
        Provide[DependencyContainer.controllers.auth_controller]
    ),
    db_session: AsyncSession = Depends(get_db_session),
):
    """Verify credentials. Nothing is issued on success."""
    return await controller.login(request, db_session=db_session)
