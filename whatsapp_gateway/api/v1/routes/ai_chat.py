"""AI chat proxy endpoint."""

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from whatsapp_gateway.api.deps import get_chat_service
from whatsapp_gateway.schemas.chat import ChatRequest, ChatResponse
from whatsapp_gateway.services.chat_service import ChatService

router = APIRouter()


@router.post("/ai-chat", response_model=ChatResponse)
async def ai_chat(
    payload: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse | StreamingResponse:
    messages = [message.to_message() for message in payload.messages]
    context = payload.context.model_dump(exclude_none=True) if payload.context is not None else None

    if payload.stream:
        lines = await chat_service.stream(messages, context)
        return StreamingResponse(lines, media_type="text/event-stream")

    reply = await chat_service.reply(messages, context)
    return ChatResponse(
        message=reply.message,
        needsHumanTransfer=reply.needs_human_transfer,
        usage=reply.usage,
    )
