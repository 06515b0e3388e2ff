"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class EmptyMessageError(DomainException):
    """Chat message has no text after stripping whitespace"""

    pass


class ChatSessionNotFoundError(DomainException):
    """Chat session does not exist or was already closed"""

    pass


class ChatSessionLimitError(DomainException):
    """Too many chat sessions are open at once"""

    pass
