"""
Conversations API Router - FastAPI endpoints for conversations and messages.

- Receives ConversationService via Dependency Injection (Dishka)
- Thin layer: validates input, checks existence, maps results to envelopes
- Business logic lives in the application layer

Flow:
  HTTP Request → Router → ConversationService → Repository → Store
                                   ↓
  HTTP Response ← Router ← Result ←
"""

from logging import getLogger
from typing import Annotated, Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, StringConstraints

from chat_backend.application.dto.chat import MessageDTO, SendMessageResultDTO
from chat_backend.application.dto.conversation import ConversationDTO
from chat_backend.application.dto.pagination import PaginationDTO
from chat_backend.application.services import ConversationService
from chat_backend.config.settings import Config
from chat_backend.domain.entities.conversation import Conversation
from chat_backend.domain.value_objects.conversation_id import ConversationId
from chat_backend.presentation.errors import (
    BadRequestError,
    NotFoundError,
    UnprocessableEntityError,
)
from chat_backend.presentation.responses import ApiResponse, PaginatedResponse

logger = getLogger(__name__)


# ==================== REQUEST MODELS ====================

Title = Annotated[
    str,
    StringConstraints(
        strict=True,
        strip_whitespace=True,
        min_length=1,
        max_length=Config.TITLE_MAX_LENGTH,
    ),
]

Content = Annotated[
    str,
    StringConstraints(
        strict=True,
        strip_whitespace=True,
        min_length=1,
        max_length=Config.CONTENT_MAX_LENGTH,
    ),
]


class CreateConversationRequest(BaseModel):
    """Request body for creating a conversation. Title is optional."""

    title: Optional[Title] = None


class RenameConversationRequest(BaseModel):
    title: Title


class SendMessageRequest(BaseModel):
    content: Content


class PaginationParams(BaseModel):
    offset: int
    limit: int


def get_pagination(
    offset: Annotated[int, Query(ge=0)] = 0,
    limit: Annotated[
        int, Query(ge=1, le=Config.PAGINATION_MAX_LIMIT)
    ] = Config.PAGINATION_DEFAULT_LIMIT,
) -> PaginationParams:
    return PaginationParams(offset=offset, limit=limit)


# ==================== HELPERS ====================


def _parse_id(conversation_id: str) -> ConversationId:
    try:
        return ConversationId(conversation_id)
    except ValueError as e:
        raise BadRequestError(str(e)) from e


async def _require_conversation(
    service: ConversationService, conversation_id: ConversationId
) -> Conversation:
    conversation = await service.get_by_id(conversation_id)
    if conversation is None:
        raise NotFoundError(f"Conversation {conversation_id.value} not found")
    return conversation


# ==================== ROUTER ====================

router = APIRouter(prefix="/v1/conversations", tags=["conversations"])


# ==================== ENDPOINTS ====================


@router.post(
    "",
    response_model=ApiResponse[ConversationDTO],
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_conversation(
    service: FromDishka[ConversationService],
    request: Optional[CreateConversationRequest] = None,
):
    """Create a new conversation. Missing title falls back to the default."""
    title = request.title if request and request.title else None
    conversation = await service.create(title or Config.DEFAULT_CONVERSATION_TITLE)
    return ApiResponse(data=ConversationDTO.from_entity(conversation))


@router.get(
    "",
    response_model=PaginatedResponse[ConversationDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_conversations(
    service: FromDishka[ConversationService],
    pagination: PaginationParams = Depends(get_pagination),
):
    """List conversations, most recently active first."""
    page = await service.list(pagination.offset, pagination.limit)
    return PaginatedResponse(
        data=[ConversationDTO.from_entity(c) for c in page.data],
        pagination=PaginationDTO.from_page(page),
    )


@router.get(
    "/{conversation_id}",
    response_model=ApiResponse[ConversationDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def get_conversation(
    conversation_id: str,
    service: FromDishka[ConversationService],
):
    conversation = await _require_conversation(service, _parse_id(conversation_id))
    return ApiResponse(data=ConversationDTO.from_entity(conversation))


@router.patch(
    "/{conversation_id}",
    response_model=ApiResponse[ConversationDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def rename_conversation(
    conversation_id: str,
    request: RenameConversationRequest,
    service: FromDishka[ConversationService],
):
    """
    Rename a conversation.

    Request: {"title": "New title"}
    Renaming to the current title is rejected with 422.
    """
    conv_id = _parse_id(conversation_id)
    conversation = await _require_conversation(service, conv_id)
    if conversation.title == request.title:
        raise UnprocessableEntityError("New title must differ from the current title")

    renamed = await service.rename(conv_id, request.title)
    if renamed is None:
        # Conversation vanished between the lookup and the update
        raise NotFoundError(f"Conversation {conv_id.value} not found")
    return ApiResponse(data=ConversationDTO.from_entity(renamed))


@router.get(
    "/{conversation_id}/messages",
    response_model=PaginatedResponse[MessageDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def get_messages(
    conversation_id: str,
    service: FromDishka[ConversationService],
    pagination: PaginationParams = Depends(get_pagination),
):
    """Page through a conversation's messages, oldest first."""
    conv_id = _parse_id(conversation_id)
    await _require_conversation(service, conv_id)
    page = await service.get_messages(conv_id, pagination.offset, pagination.limit)
    return PaginatedResponse(
        data=[MessageDTO.from_entity(m) for m in page.data],
        pagination=PaginationDTO.from_page(page),
    )


@router.post(
    "/{conversation_id}/messages",
    response_model=ApiResponse[SendMessageResultDTO],
    status_code=status.HTTP_201_CREATED,
)
@inject
async def send_message(
    conversation_id: str,
    request: SendMessageRequest,
    service: FromDishka[ConversationService],
):
    """
    Send a user message and receive the assistant's reply.

    Response data: {"userMessage": {...}, "assistantMessage": {...}}
    """
    conv_id = _parse_id(conversation_id)
    await _require_conversation(service, conv_id)
    result = await service.send_message(conv_id, request.content)
    return ApiResponse(
        data=SendMessageResultDTO(
            user_message=MessageDTO.from_entity(result.user_message),
            assistant_message=MessageDTO.from_entity(result.assistant_message),
        )
    )
