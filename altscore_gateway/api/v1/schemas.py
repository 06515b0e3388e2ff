"""Pydantic schemas for API request/response validation"""

from datetime import datetime
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Form numbers arrive as typed by the user; the score engine coerces them
FormNumber = Optional[Union[bool, int, float, str]]


class CamelModel(BaseModel):
    """Serialize as camelCase for the web client, accept either case on input"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScoreRequest(CamelModel):
    """Request body for POST /v1/score"""

    name: Optional[str] = ""
    age: FormNumber = None
    gender: Optional[str] = ""
    education_qualification: Optional[str] = ""
    monthly_income: FormNumber = None
    monthly_expenditure: FormNumber = None
    employment_status: Optional[str] = ""
    employment_duration: Optional[str] = ""
    rent_payment_history: Optional[str] = ""
    utility_payment_history: Optional[str] = ""
    savings_amount: FormNumber = None
    debt_to_income: FormNumber = None


class ScoreFactorsSchema(CamelModel):
    """Display-only sub-scores (0-100)"""

    income: float
    employment: float
    payment_history: float
    savings: float
    debt_ratio: float


class ScoreResponse(CamelModel):
    """Response for POST /v1/score"""

    score: int
    risk_category: str
    approved: bool
    advice: List[str]
    factors: ScoreFactorsSchema


class FAQEntrySchema(CamelModel):
    question: str
    answer: str
    category: str


class FAQResponse(CamelModel):
    """Response for GET /v1/faq"""

    faqs: List[FAQEntrySchema]
    suggestions: List[str]


class ChatMessageSchema(CamelModel):
    """Single message in a chat session"""

    id: int
    text: str
    is_bot: bool
    timestamp: datetime


class ChatSessionResponse(CamelModel):
    """Response for chat session endpoints"""

    session_id: str
    messages: List[ChatMessageSchema]
    is_typing: bool
    show_suggestions: bool
    suggestions: List[str]


class ChatMessageRequest(CamelModel):
    """Request body for POST /v1/chat/sessions/{session_id}/messages"""

    text: str = Field(..., max_length=2000, description="User message")


class ChatReplyResponse(CamelModel):
    """User message and the bot reply it produced"""

    user_message: ChatMessageSchema
    bot_message: ChatMessageSchema


class FeatureCardSchema(CamelModel):
    title: str
    description: str


class DataPointSchema(CamelModel):
    label: str
    value: str
    tone: str


class LandingContentResponse(CamelModel):
    """Response for GET /v1/content/landing"""

    headline: str
    tagline: str
    subheadline: str
    features: List[FeatureCardSchema]
    benefits: List[str]
    data_points: List[DataPointSchema]


class FeatureImportanceSchema(CamelModel):
    name: str
    value: int
    description: str


class RiskShareSchema(CamelModel):
    name: str
    value: int
    color: str


class ImprovementTipSchema(CamelModel):
    title: str
    description: str
    impact: str


class ExplanationContentResponse(CamelModel):
    """Response for GET /v1/content/explanation"""

    feature_importance: List[FeatureImportanceSchema]
    risk_distribution: List[RiskShareSchema]
    improvement_tips: List[ImprovementTipSchema]
