"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "altscore-gateway"


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_score(
    request_id: str,
    score: int,
    risk_category: str,
    approved: bool,
    duration_ms: float,
) -> None:
    """Log structured score outcome; applicant details stay out of the logs"""
    logging.info(
        "Score calculated",
        extra={
            "request_id": request_id,
            "step": "score_complete",
            "score": score,
            "risk_category": risk_category,
            "approval_outcome": "approved" if approved else "declined",
            "duration_ms": duration_ms,
        },
    )


def log_chat_reply(
    request_id: str,
    session_id: str,
    tier: int,
    duration_ms: float,
) -> None:
    """Log which FAQ tier answered a chat message"""
    logging.info(
        "Chat reply sent",
        extra={
            "request_id": request_id,
            "session_id": session_id,
            "step": "chat_reply",
            "faq_tier": tier,
            "duration_ms": duration_ms,
        },
    )
