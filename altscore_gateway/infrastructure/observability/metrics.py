"""Prometheus metrics for monitoring score outcomes and chat usage"""

from prometheus_client import Counter, Histogram, Gauge

# Score metrics
score_counter = Counter(
    "altscore_score_total",
    "Total credit scores calculated",
    ["risk_category"],  # low | medium | high
)

score_value_histogram = Histogram(
    "altscore_score_value",
    "Distribution of calculated credit scores",
    buckets=[300, 400, 500, 600, 650, 700, 750, 800, 850],
)

# Chat metrics
chat_message_counter = Counter(
    "altscore_chat_messages_total",
    "User messages answered by the FAQ bot",
)

faq_match_counter = Counter(
    "altscore_faq_match_total",
    "FAQ answers by matching tier",
    ["tier"],  # 1 = question overlap ... 6 = generic fallback
)

chat_sessions_gauge = Gauge(
    "altscore_chat_sessions_active",
    "Chat sessions currently held in memory",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_score(score: int, risk_category: str) -> None:
    """Record score metrics for monitoring the approval mix"""
    score_counter.labels(risk_category=risk_category).inc()
    score_value_histogram.observe(score)


def record_chat_reply(tier: int) -> None:
    """Record which cascade tier answered a chat message"""
    chat_message_counter.inc()
    faq_match_counter.labels(tier=str(tier)).inc()
