"""Chat widget endpoints - FAQ catalog and bot conversations"""

import random
import time
import logging
from dataclasses import asdict
from fastapi import APIRouter, Depends, HTTPException, Request, Response

from altscore_gateway.api.v1.schemas import (
    ChatMessageRequest,
    ChatMessageSchema,
    ChatReplyResponse,
    ChatSessionResponse,
    FAQEntrySchema,
    FAQResponse,
)
from altscore_gateway.api.dependencies import get_request_id, get_session_store
from altscore_gateway.config import settings
from altscore_gateway.domain.chat import ChatSession
from altscore_gateway.domain.faq import FAQ_CATALOG, SUGGESTED_QUESTIONS
from altscore_gateway.domain.exceptions import (
    ChatSessionLimitError,
    ChatSessionNotFoundError,
    EmptyMessageError,
)
from altscore_gateway.infrastructure.sessions import ChatSessionStore
from altscore_gateway.infrastructure.observability.metrics import record_chat_reply
from altscore_gateway.infrastructure.observability.logging import log_chat_reply

router = APIRouter()


def _session_response(session: ChatSession) -> ChatSessionResponse:
    return ChatSessionResponse(
        session_id=session.session_id,
        messages=[ChatMessageSchema(**asdict(m)) for m in session.messages],
        is_typing=session.is_typing,
        show_suggestions=session.show_suggestions,
        suggestions=list(SUGGESTED_QUESTIONS),
    )


def _get_session(store: ChatSessionStore, session_id: str) -> ChatSession:
    try:
        return store.get(session_id)
    except ChatSessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/faq", response_model=FAQResponse)
def get_faq():
    """Knowledge base the chat bot answers from, plus suggested questions"""
    return FAQResponse(
        faqs=[FAQEntrySchema(**asdict(faq)) for faq in FAQ_CATALOG],
        suggestions=list(SUGGESTED_QUESTIONS),
    )


@router.post("/chat/sessions", response_model=ChatSessionResponse, status_code=201)
def create_session(store: ChatSessionStore = Depends(get_session_store)):
    """Open the chat widget fresh: new session greeted by the bot"""
    try:
        session = store.create()
    except ChatSessionLimitError as e:
        logging.warning(f"Chat session limit reached: {e}")
        raise HTTPException(status_code=503, detail="Chat is busy, try again later")

    return _session_response(session)


@router.get("/chat/sessions/{session_id}", response_model=ChatSessionResponse)
def get_session(session_id: str, store: ChatSessionStore = Depends(get_session_store)):
    """Current conversation, typing indicator and suggestion visibility"""
    return _session_response(_get_session(store, session_id))


@router.post("/chat/sessions/{session_id}/messages", response_model=ChatReplyResponse)
async def send_message(
    session_id: str,
    request_body: ChatMessageRequest,
    request: Request,
    store: ChatSessionStore = Depends(get_session_store),
):
    """
    Post a user message and return it with the bot's reply.

    The reply is held back by a random 'typing' delay.
    """
    start_time = time.time()
    request_id = get_request_id(request)
    session = _get_session(store, session_id)

    delay = random.uniform(settings.chat_reply_delay_min, settings.chat_reply_delay_max)

    try:
        user_message, bot_message, match = await session.send(request_body.text, delay_seconds=delay)
    except EmptyMessageError as e:
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_chat_reply(match.tier)
    log_chat_reply(request_id, session_id, match.tier, duration_ms)

    return ChatReplyResponse(
        user_message=ChatMessageSchema(**asdict(user_message)),
        bot_message=ChatMessageSchema(**asdict(bot_message)),
    )


@router.delete("/chat/sessions/{session_id}", status_code=204)
def close_session(session_id: str, store: ChatSessionStore = Depends(get_session_store)):
    """Close the widget and drop the conversation"""
    try:
        store.close(session_id)
    except ChatSessionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return Response(status_code=204)
