"""Unit tests for the FAQ matcher cascade"""

import pytest
from altscore_gateway.domain import faq
from altscore_gateway.domain.faq import (
    DIFFERENCE_FALLBACK,
    FAQ_CATALOG,
    GENERIC_FALLBACK,
    IMPROVEMENT_FALLBACK,
    LOW_SCORE_FALLBACK,
    SUGGESTED_QUESTIONS,
    count_word_matches,
    find_best_answer,
    match_question,
)
from altscore_gateway.domain.models import FAQEntry

WHAT_IS_ANSWER = FAQ_CATALOG[0].answer
LOW_SCORE_ANSWER = FAQ_CATALOG[1].answer
IMPROVE_ANSWER = FAQ_CATALOG[2].answer
DIFFERENT_ANSWER = FAQ_CATALOG[3].answer


def test_catalog_shape():
    """Test fixed knowledge base of 6 entries and 4 suggestions"""
    assert len(FAQ_CATALOG) == 6
    assert [f.category for f in FAQ_CATALOG] == [
        "general",
        "scoring",
        "improvement",
        "general",
        "general",
        "improvement",
    ]
    assert len(SUGGESTED_QUESTIONS) == 4
    assert all(f.answer for f in FAQ_CATALOG)


def test_count_word_matches_bidirectional_substring():
    """Test overlap counts containment either way, not equality"""
    assert count_word_matches(["why", "is"], "Why is my score low?") == 2
    # "score" equals a question word, "scor" sits inside it
    assert count_word_matches(["score", "scor"], "Why is my score low?") == 2
    # "scores" contains question word "score"
    assert count_word_matches(["scores"], "Why is my score low?") == 1
    assert count_word_matches(["xyz"], "Why is my score low?") == 0


def test_exact_question_matches_its_answer():
    """Test asking a catalog question verbatim"""
    assert find_best_answer("What is alternative credit scoring?") == WHAT_IS_ANSWER
    assert match_question("What is alternative credit scoring?").tier == 1


def test_near_question_matches_on_two_words():
    """Test 'why' and 'is' overlap pick the low-score entry"""
    match = match_question("why is my score so low")
    assert match.tier == 1
    assert match.answer == LOW_SCORE_ANSWER


def test_matching_is_case_insensitive():
    assert find_best_answer("WHAT IS ALTERNATIVE CREDIT SCORING?") == WHAT_IS_ANSWER


def test_short_tokens_produce_false_positives():
    """Test loose substring overlap: 'i' sits in 'is', 'it' sits in 'credit'"""
    match = match_question("i like it")
    assert match.tier == 1
    assert match.answer == WHAT_IS_ANSWER

    # 'is' and 'this' overlap the first entry before the comparison entry is reached
    assert find_best_answer("How is this different from FICO?") == WHAT_IS_ANSWER


@pytest.mark.parametrize(
    "text,tier,answer",
    [
        ("better?", 2, IMPROVE_ANSWER),
        ("make it better", 2, IMPROVE_ANSWER),
        ("increase", 2, IMPROVE_ANSWER),
        ("bad", 3, LOW_SCORE_ANSWER),
        ("slowly", 3, LOW_SCORE_ANSWER),
        ("fico", 4, DIFFERENT_ANSWER),
        ("traditional", 4, DIFFERENT_ANSWER),
        ("explain", 5, WHAT_IS_ANSWER),
        ("how?", 5, WHAT_IS_ANSWER),
    ],
)
def test_keyword_tiers(text, tier, answer):
    """Test keyword fallbacks once no question overlaps twice"""
    match = match_question(text)
    assert match.tier == tier
    assert match.answer == answer


def test_keyword_tiers_respect_priority():
    """Test improvement keywords win over low-score keywords"""
    assert match_question("poor->better").tier == 2


@pytest.mark.parametrize("text", ["xyz nonsense query", "hello", "", "   "])
def test_unmatched_input_gets_generic_fallback(text):
    match = match_question(text)
    assert match.tier == 6
    assert match.answer == GENERIC_FALLBACK


def test_fallback_texts_without_matching_entries(monkeypatch):
    """Test built-in texts when the catalog lacks the entry a tier looks for"""
    only_general = (FAQEntry(question="Anything else?", answer="General answer", category="general"),)
    monkeypatch.setattr(faq, "FAQ_CATALOG", only_general)

    assert find_best_answer("increase") == IMPROVEMENT_FALLBACK
    assert find_best_answer("bad") == LOW_SCORE_FALLBACK
    assert find_best_answer("fico") == DIFFERENCE_FALLBACK
    assert find_best_answer("explain") == "General answer"
