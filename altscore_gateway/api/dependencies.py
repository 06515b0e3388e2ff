"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from altscore_gateway.infrastructure.sessions import ChatSessionStore


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_session_store(request: Request) -> ChatSessionStore:
    """Provide the app's chat session store"""
    return request.app.state.chat_sessions
