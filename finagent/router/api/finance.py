from fastapi import APIRouter, Depends, Request

from finagent.router.controller.chat import ChatController, get_chat_controller
from finagent.router.streamer import ChatEventSourceResponse

router = APIRouter(
    tags=["finance"],
    prefix="/api/finance",
)


@router.post("/chat")
async def chat(
    request: Request,
    chat_controller: ChatController = Depends(get_chat_controller),
) -> ChatEventSourceResponse:
    # The body is validated by the controller so that bad input is reported as an error frame
    body = await request.body()
    return ChatEventSourceResponse(
        chat_controller.chat(body),
        ping=chat_controller.config.sse_ping_interval,
    )
