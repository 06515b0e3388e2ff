"""Chat widget session - ordered conversation with the FAQ bot"""

import asyncio
import itertools
from typing import List, Tuple
from altscore_gateway.domain.models import ChatMessage, FAQMatch
from altscore_gateway.domain.faq import match_question
from altscore_gateway.domain.exceptions import EmptyMessageError

WELCOME_MESSAGE = (
    "Hi! I'm here to help you understand alternative credit scoring. Ask me anything about how our system works, "
    "how to improve your score, or what makes us different from traditional credit scoring!"
)


class ChatSession:
    """
    One conversation with the FAQ bot.

    Messages are append-only. Sends are serialized so each bot reply
    lands right after the user message it answers.
    """

    def __init__(self, session_id: str):
        self.session_id = session_id
        self.messages: List[ChatMessage] = []
        self.is_typing = False
        self.show_suggestions = True
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    def _append(self, text: str, is_bot: bool) -> ChatMessage:
        message = ChatMessage(id=next(self._ids), text=text, is_bot=is_bot)
        self.messages.append(message)
        return message

    def open(self) -> None:
        """Greet the user the first time the widget is shown"""
        if not self.messages:
            self._append(WELCOME_MESSAGE, is_bot=True)

    async def send(self, text: str, delay_seconds: float = 0.0) -> Tuple[ChatMessage, ChatMessage, FAQMatch]:
        """
        Post a user message and wait for the bot reply.

        Returns the user message, the bot reply and the FAQ match behind it.

        Raises:
            EmptyMessageError: If text is blank
        """
        text = text.strip()
        if not text:
            raise EmptyMessageError("Message text is empty")

        async with self._lock:
            user_message = self._append(text, is_bot=False)
            self.show_suggestions = False
            self.is_typing = True
            try:
                # Typing indicator
                if delay_seconds > 0:
                    await asyncio.sleep(delay_seconds)

                match = match_question(text)
                bot_message = self._append(match.answer, is_bot=True)
            finally:
                self.is_typing = False

        return user_message, bot_message, match
