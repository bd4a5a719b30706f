# chatgen/chat/router.py
from fastapi import APIRouter, Depends, Request

from chatgen.chat.schemas import ChatIn, ChatOut
from chatgen.chat.service import ChatClient

router = APIRouter(tags=["chat"])


def get_chat_client(request: Request) -> ChatClient:
    return request.app.state.chat_client


@router.post("/chat", response_model=ChatOut)
async def chat(payload: ChatIn, client: ChatClient = Depends(get_chat_client)):
    return ChatOut(reply=await client.reply(payload.message))
