"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional
from altscore_gateway.utils.coercion import RawNumber


@dataclass
class ApplicantProfile:
    """Calculator form input, alive for the duration of one calculation"""

    name: Optional[str] = ""
    age: RawNumber = None
    gender: Optional[str] = ""
    education_qualification: Optional[str] = ""  # below-high-school | high-school | diploma | graduate | postgraduate
    monthly_income: RawNumber = None
    monthly_expenditure: RawNumber = None
    employment_status: Optional[str] = ""  # full-time | part-time | self-employed | contract | unemployed
    employment_duration: Optional[str] = ""  # <6 | 6-12 | 1-2 | 2+
    rent_payment_history: Optional[str] = ""  # excellent | good | fair | poor
    utility_payment_history: Optional[str] = ""  # excellent | good | fair | poor
    savings_amount: RawNumber = None
    debt_to_income: RawNumber = None  # percentage


@dataclass
class ScoreFactors:
    """Normalized 0-100 sub-scores for display, not used by the score itself"""

    income: float
    employment: float
    payment_history: float
    savings: float
    debt_ratio: float


@dataclass
class ScoreResult:
    """Output of the score calculator"""

    score: int
    risk_category: str  # low | medium | high
    approved: bool
    advice: List[str]
    factors: ScoreFactors


@dataclass(frozen=True)
class FAQEntry:
    """Canned question/answer pair from the chat knowledge base"""

    question: str
    answer: str
    category: str  # general | scoring | improvement


@dataclass(frozen=True)
class FAQMatch:
    """Answer picked by the FAQ matcher and the cascade tier that produced it"""

    answer: str
    tier: int


@dataclass
class ChatMessage:
    """Single message in a chat session"""

    id: int
    text: str
    is_bot: bool
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

