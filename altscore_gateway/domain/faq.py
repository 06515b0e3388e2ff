"""Rule-based FAQ matcher behind the chat widget"""

from typing import Optional, Tuple
from altscore_gateway.domain.models import FAQEntry, FAQMatch

FAQ_CATALOG: Tuple[FAQEntry, ...] = (
    FAQEntry(
        question="What is alternative credit scoring?",
        answer=(
            "Alternative credit scoring uses non-traditional data points like rent payments, utility bills, "
            "employment history, and banking behavior to assess creditworthiness. This approach helps people "
            "with limited credit history or thin credit files access fair lending opportunities."
        ),
        category="general",
    ),
    FAQEntry(
        question="Why is my score low?",
        answer=(
            "A low score typically results from factors like irregular payment history, high expense-to-income "
            "ratio, short employment duration, or limited savings. The good news is that these factors can be "
            "improved over time with consistent financial habits."
        ),
        category="scoring",
    ),
    FAQEntry(
        question="How can I improve my approval chances?",
        answer=(
            "Focus on: 1) Making all rent and utility payments on time, 2) Maintaining stable employment, "
            "3) Keeping expenses below 70% of income, 4) Building an emergency fund, and 5) Documenting all "
            "income sources consistently."
        ),
        category="improvement",
    ),
    FAQEntry(
        question="How is this different from traditional credit scores?",
        answer=(
            "Traditional credit scores focus mainly on credit card and loan payment history. We consider rent "
            "payments, utility bills, employment stability, income trends, and expense management - giving a "
            "more complete picture of your financial responsibility."
        ),
        category="general",
    ),
    FAQEntry(
        question="Will checking my score affect my credit?",
        answer=(
            "No! Our alternative credit scoring system doesn't perform hard credit checks. We use banking data, "
            "payment history, and employment information to calculate your score without impacting your "
            "traditional credit score."
        ),
        category="general",
    ),
    FAQEntry(
        question="How quickly can I improve my score?",
        answer=(
            "You can see improvements within 1-3 months by consistently paying bills on time and managing "
            "expenses well. Major improvements typically occur over 3-6 months of sustained good financial habits."
        ),
        category="improvement",
    ),
)

SUGGESTED_QUESTIONS: Tuple[str, ...] = (
    "What is alternative credit scoring?",
    "How can I improve my score?",
    "Why is my score low?",
    "How is this different from FICO?",
)

IMPROVEMENT_FALLBACK = (
    "To improve your score, focus on consistent rent and utility payments, maintain stable employment, and keep "
    "your expenses manageable. Small consistent improvements make a big difference over time!"
)
LOW_SCORE_FALLBACK = (
    "Low scores usually indicate areas for improvement like payment consistency, employment stability, or "
    "expense management. The good news is these can all be improved with time and consistent habits!"
)
DIFFERENCE_FALLBACK = (
    "Unlike traditional credit scores that mainly look at credit cards and loans, we consider rent payments, "
    "utility bills, employment history, and overall financial behavior for a more complete picture."
)
GENERIC_FALLBACK = (
    "I'd be happy to help! I can explain how alternative credit scoring works, why your score might be low, how "
    "to improve it, or how it's different from traditional credit scoring. What would you like to know more about?"
)

# An entry matches when at least this many input words overlap its question
MIN_WORD_MATCHES = 2

IMPROVEMENT_KEYWORDS = ("improve", "better", "increase")
LOW_SCORE_KEYWORDS = ("low", "bad", "poor")
DIFFERENCE_KEYWORDS = ("different", "traditional", "fico")
EXPLAIN_KEYWORDS = ("what", "how", "explain")


def count_word_matches(input_words: list[str], question: str) -> int:
    """
    Count input words that overlap some question word.

    Overlap is substring containment in either direction, so "score"
    matches "score" and "i" matches "scoring?". Deliberately loose.
    """
    question_words = question.lower().split()
    return sum(
        1 for word in input_words
        if any(q_word in word or word in q_word for q_word in question_words)
    )


def _first_entry(predicate) -> Optional[FAQEntry]:
    return next((faq for faq in FAQ_CATALOG if predicate(faq)), None)


def _contains_any(text: str, keywords: Tuple[str, ...]) -> bool:
    return any(keyword in text for keyword in keywords)


def match_question(user_input: str) -> FAQMatch:
    """
    Pick a canned answer for free-text input.

    Cascade, first rule that fires wins:
    1. Catalog question sharing >= 2 words with the input (catalog order breaks ties)
    2. "improve"/"better"/"increase" -> first improvement entry
    3. "low"/"bad"/"poor" -> entry asking about a low score
    4. "different"/"traditional"/"fico" -> entry comparing with traditional scores
    5. "what"/"how"/"explain" -> first catalog entry
    6. Generic fallback
    """
    text = user_input.lower()
    input_words = text.split()

    matched = _first_entry(lambda faq: count_word_matches(input_words, faq.question) >= MIN_WORD_MATCHES)
    if matched:
        return FAQMatch(answer=matched.answer, tier=1)

    if _contains_any(text, IMPROVEMENT_KEYWORDS):
        entry = _first_entry(lambda faq: faq.category == "improvement")
        return FAQMatch(answer=entry.answer if entry else IMPROVEMENT_FALLBACK, tier=2)

    if _contains_any(text, LOW_SCORE_KEYWORDS):
        entry = _first_entry(lambda faq: "low" in faq.question)
        return FAQMatch(answer=entry.answer if entry else LOW_SCORE_FALLBACK, tier=3)

    if _contains_any(text, DIFFERENCE_KEYWORDS):
        entry = _first_entry(lambda faq: "different" in faq.question)
        return FAQMatch(answer=entry.answer if entry else DIFFERENCE_FALLBACK, tier=4)

    if _contains_any(text, EXPLAIN_KEYWORDS):
        return FAQMatch(answer=FAQ_CATALOG[0].answer, tier=5)

    return FAQMatch(answer=GENERIC_FALLBACK, tier=6)


def find_best_answer(user_input: str) -> str:
    """Best canned answer for the input; always non-empty"""
    return match_question(user_input).answer
