"""Static content for the landing and explanation pages"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class FeatureCard:
    title: str
    description: str


@dataclass(frozen=True)
class DataPoint:
    label: str
    value: str
    tone: str  # green | yellow | red


@dataclass(frozen=True)
class FeatureImportance:
    """Illustrative weight of a factor group; mock data, not derived from the score formula"""

    name: str
    value: int  # percent
    description: str


@dataclass(frozen=True)
class RiskShare:
    name: str
    value: int  # percent
    color: str


@dataclass(frozen=True)
class ImprovementTip:
    title: str
    description: str
    impact: str


HERO_HEADLINE = "Unlock Fairer Loans with Smarter Scoring"
HERO_TAGLINE = "Powered by Alternative Data"
HERO_SUBHEADLINE = (
    "Get credit scores that reflect your true financial responsibility. We consider rent payments, utility bills, "
    "and employment stability - not just traditional credit history."
)

FEATURES: Tuple[FeatureCard, ...] = (
    FeatureCard("Fair & Inclusive", "Uses alternative data points for more accurate credit assessment"),
    FeatureCard("Real-time Scoring", "Get instant credit scores based on your actual financial behavior"),
    FeatureCard("Underbanked Friendly", "Helps those with limited credit history access fair lending"),
)

BENEFITS: Tuple[str, ...] = (
    "No credit card required to check your score",
    "Uses rent payments and utility bills as positive factors",
    "Considers employment stability and income consistency",
    "Transparent scoring methodology with explanations",
)

HERO_DATA_POINTS: Tuple[DataPoint, ...] = (
    DataPoint("Rent Payments", "100% On-time", "green"),
    DataPoint("Employment", "Stable (2+ years)", "green"),
    DataPoint("Income Trend", "Increasing", "green"),
    DataPoint("Expense Ratio", "68%", "yellow"),
)

FEATURE_IMPORTANCE: Tuple[FeatureImportance, ...] = (
    FeatureImportance("Payment History", 35, "Rent and utility payment consistency"),
    FeatureImportance("Income Stability", 25, "Monthly income and employment duration"),
    FeatureImportance("Expense Management", 20, "Expense-to-income ratio control"),
    FeatureImportance("Employment Status", 15, "Current employment situation"),
    FeatureImportance("Savings Buffer", 5, "Available emergency funds"),
)

RISK_DISTRIBUTION: Tuple[RiskShare, ...] = (
    RiskShare("Low Risk", 45, "#10b981"),
    RiskShare("Medium Risk", 35, "#f59e0b"),
    RiskShare("High Risk", 20, "#ef4444"),
)

IMPROVEMENT_TIPS: Tuple[ImprovementTip, ...] = (
    ImprovementTip("Payment Consistency", "Make all rent and utility payments on time", "High Impact"),
    ImprovementTip("Income Documentation", "Maintain stable employment and document income sources", "High Impact"),
    ImprovementTip("Expense Control", "Keep monthly expenses below 70% of income", "Medium Impact"),
    ImprovementTip("Emergency Fund", "Build savings equal to 3-6 months of expenses", "Medium Impact"),
)
