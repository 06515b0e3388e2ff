"""Alternative credit score engine - point-based heuristic for the score calculator"""

from typing import List, Tuple
from altscore_gateway.domain.models import ApplicantProfile, ScoreFactors, ScoreResult
from altscore_gateway.utils.coercion import to_int, to_number, to_text, round_half_up

BASE_SCORE = 600
MIN_SCORE = 300
MAX_SCORE = 850

EDUCATION_POINTS = {
    "postgraduate": 50,
    "graduate": 40,
    "diploma": 30,
    "high-school": 20,
    "below-high-school": 10,
}

EMPLOYMENT_STATUS_POINTS = {
    "full-time": 100,
    "self-employed": 75,
    "contract": 60,
    "part-time": 50,
}

EMPLOYMENT_DURATION_POINTS = {
    "2+": 50,
    "1-2": 35,
    "6-12": 20,
}

RENT_HISTORY_POINTS = {
    "excellent": 100,
    "good": 75,
    "fair": 25,
}

UTILITY_HISTORY_POINTS = {
    "excellent": 50,
    "good": 35,
    "fair": 15,
}

# Income earns 10 points per $1000/month, capped
INCOME_POINTS_CAP = 150

ADVICE_REDUCE_EXPENSES = "Consider reducing monthly expenses to improve your debt-to-income ratio"
ADVICE_EMPLOYMENT_HISTORY = "Building longer employment history will positively impact your score"
ADVICE_RENT_ON_TIME = "Focus on making all rent payments on time moving forward"
ADVICE_EMERGENCY_FUND = "Building an emergency fund shows financial stability to lenders"
ADVICE_PAY_DOWN_DEBT = "Work on paying down existing debt to improve your approval chances"
ADVICE_STRONG_PROFILE = "Great job! Your financial profile shows strong creditworthiness"


def age_points(age: int) -> int:
    if 25 <= age <= 65:
        return 25
    elif 18 <= age < 25:
        return 15
    elif age > 65:
        return 20
    return 0


def income_points(income: float) -> float:
    if income <= 0:
        return 0
    return min(income / 1000 * 10, INCOME_POINTS_CAP)


def expense_ratio_points(income: float, expenses: float) -> int:
    """
    Reward spending well below income, penalize spending above 70% of it.

    Only evaluated when both income and expenses are positive.
    """
    if income <= 0 or expenses <= 0:
        return 0

    ratio = expenses / income
    if ratio < 0.3:
        return 50
    elif ratio < 0.5:
        return 25
    elif ratio < 0.7:
        return 0
    return -50


def savings_points(income: float, savings: float) -> int:
    """Savings buffer measured in months of income; skipped when income is 0"""
    if income == 0:
        return 0

    if savings > income * 3:
        return 50
    elif savings > income:
        return 30
    elif savings > income * 0.5:
        return 15
    return 0


def debt_to_income_points(debt_ratio: float) -> int:
    if debt_ratio < 20:
        return 25
    elif debt_ratio < 36:
        return 0
    elif debt_ratio < 50:
        return -25
    return -75


def calculate_points(profile: ApplicantProfile) -> float:
    """
    Sum the point deltas of every factor on top of the base score.

    Factors are independent, so evaluation order does not matter.
    The result is unrounded and unclamped.
    """
    income = to_number(profile.monthly_income)
    expenses = to_number(profile.monthly_expenditure)
    savings = to_number(profile.savings_amount)
    debt_ratio = to_number(profile.debt_to_income)

    return (
        BASE_SCORE
        + age_points(to_int(profile.age))
        + EDUCATION_POINTS.get(to_text(profile.education_qualification), 0)
        + income_points(income)
        + expense_ratio_points(income, expenses)
        + EMPLOYMENT_STATUS_POINTS.get(to_text(profile.employment_status), 0)
        + EMPLOYMENT_DURATION_POINTS.get(to_text(profile.employment_duration), 0)
        + RENT_HISTORY_POINTS.get(to_text(profile.rent_payment_history), 0)
        + UTILITY_HISTORY_POINTS.get(to_text(profile.utility_payment_history), 0)
        + savings_points(income, savings)
        + debt_to_income_points(debt_ratio)
    )


def determine_risk_category(score: int) -> Tuple[str, bool]:
    """
    Map score to risk category and approval.

    Score bands (fixed cutoffs, not calibrated against default data):
    - 700+:     low risk, approved
    - 600-699:  medium risk, approved
    - below 600: high risk, declined

    Returns: (risk_category, approved)
    """
    if score >= 700:
        return "low", True
    elif score >= 600:
        return "medium", True
    else:
        return "high", False


def generate_advice(profile: ApplicantProfile) -> List[str]:
    """Personalized tips in fixed priority order; never empty"""
    income = to_number(profile.monthly_income)
    expenses = to_number(profile.monthly_expenditure)
    savings = to_number(profile.savings_amount)
    debt_ratio = to_number(profile.debt_to_income)

    advice = []
    if income != 0 and expenses / income > 0.7:
        advice.append(ADVICE_REDUCE_EXPENSES)
    if profile.employment_duration == "<6":
        advice.append(ADVICE_EMPLOYMENT_HISTORY)
    if profile.rent_payment_history in ("fair", "poor"):
        advice.append(ADVICE_RENT_ON_TIME)
    if savings < income:
        advice.append(ADVICE_EMERGENCY_FUND)
    if debt_ratio > 36:
        advice.append(ADVICE_PAY_DOWN_DEBT)

    if not advice:
        advice.append(ADVICE_STRONG_PROFILE)

    return advice


def compute_factors(profile: ApplicantProfile) -> ScoreFactors:
    """Display-only sub-scores for the result chart (0-100 each for non-negative input)"""
    income = to_number(profile.monthly_income)
    savings = to_number(profile.savings_amount)
    debt_ratio = to_number(profile.debt_to_income)

    if profile.employment_status == "full-time":
        employment = 95
    elif profile.employment_status == "part-time":
        employment = 70
    else:
        employment = 80

    if profile.rent_payment_history == "excellent":
        payment_history = 95
    elif profile.rent_payment_history == "good":
        payment_history = 80
    else:
        payment_history = 60

    savings_factor = min(100.0, savings / (income * 3) * 100) if income != 0 else 0.0

    return ScoreFactors(
        income=min(100.0, income / 5000 * 100),
        employment=employment,
        payment_history=payment_history,
        savings=savings_factor,
        debt_ratio=max(0.0, 100 - debt_ratio * 2),
    )


def compute_score(profile: ApplicantProfile) -> ScoreResult:
    """
    Main entry point: score an applicant profile.

    Pure and total: invalid numeric input counts as 0 and unknown
    categorical values earn no points.
    """
    score = max(MIN_SCORE, min(MAX_SCORE, round_half_up(calculate_points(profile))))
    risk_category, approved = determine_risk_category(score)

    return ScoreResult(
        score=score,
        risk_category=risk_category,
        approved=approved,
        advice=generate_advice(profile),
        factors=compute_factors(profile),
    )
