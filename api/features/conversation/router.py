"""Router for the Conversation feature."""
from typing import List, Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.features.conversation.controller import ConversationController
from api.features.conversation.dtos import (
    ChatDTO,
    CreateChatRequest,
    UpdateChatRequest,
)
from api.shared.db import get_db_session
from api.shared.dtos import MessageResponse
from di.container import ApplicationContainer as DependencyContainer

router = APIRouter()


@router.get("", response_model=List[ChatDTO])
@inject
async def list_chats(
    email: Optional[str] = Query(None, description="Owner email"),
    controller: ConversationController = Depends(
        Provide[DependencyContainer.controllers.conversation_controller]
    ),
    db_session: AsyncSession = Depends(get_db_session),
):
    """List the account's chats, most recently updated first."""
    return await controller.list_chats(email=email, db_session=db_session)


@router.get("/{chat_id}", response_model=ChatDTO)
@inject
async def get_chat(
    chat_id: int,
    email: Optional[str] = Query(None, description="Owner email"),
    controller: ConversationController = Depends(
        Provide[DependencyContainer.controllers.conversation_controller]
    ),
    db_session: AsyncSession = Depends(get_db_session),
):
    return await controller.get_chat(
        chat_id=chat_id, email=email, db_session=db_session
    )


@router.post("", response_model=ChatDTO, status_code=status.HTTP_201_CREATED)
@inject
async def create_chat(
    request: CreateChatRequest,
    controller: ConversationController = Depends(
        Provide[DependencyContainer.controllers.conversation_controller]
    ),
    db_session: AsyncSession = Depends(get_db_session),
):
    """Store a question/answer pair for the account."""
    return await controller.create_chat(request=request, db_session=db_session)


@router.put("/{chat_id}", response_model=ChatDTO)
@inject
async def update_chat(
    chat_id: int,
    request: UpdateChatRequest,
    controller: ConversationController = Depends(
        Provide[DependencyContainer.controllers.conversation_controller]
    ),
    db_session: AsyncSession = Depends(get_db_session),
):
    """Update any of title / userInput / adviceOutput."""
    return await controller.update_chat(
        chat_id=chat_id, request=request, db_session=db_session
    )


@router.delete("/{chat_id}", response_model=MessageResponse)
@inject
async def delete_chat(
    chat_id: int,
    email: Optional[str] = Query(None, description="Owner email"),
    controller: ConversationController = Depends(
        Provide[DependencyContainer.controllers.conversation_controller]
    ),
    db_session: AsyncSession = Depends(get_db_session),
):
    return await controller.delete_chat(
        chat_id=chat_id, email=email, db_session=db_session
    )
