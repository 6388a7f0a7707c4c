import pytest

from services.text_metrics import (
    analyze_sentiment,
    count_sentences,
    count_syllables,
    readability_score,
)


@pytest.mark.parametrize("word,expected", [
    ("cat", 1),
    ("code", 1),  # silent trailing e
    ("python", 2),
    ("engineer", 3),
    ("machine", 2),
    ("rhythm", 1),
    ("queue", 1),  # floor of one syllable
])
def test_count_syllables(word, expected):
    assert count_syllables(word) == expected


def test_analyze_sentiment():
    sentiment = analyze_sentiment("Excellent and proven results but failed once")
    assert sentiment.score == 1
    assert sentiment.comparative == pytest.approx(1 / 6)


def test_analyze_sentiment_negative():
    sentiment = analyze_sentiment("Struggled with poor tooling")
    assert sentiment.score == -2


def test_analyze_sentiment_empty():
    sentiment = analyze_sentiment("")
    assert sentiment.score == 0
    assert sentiment.comparative == 0.0


def test_count_sentences_discards_empty_fragments():
    assert count_sentences("One. Two!! Three?") == 3
    assert count_sentences("...!!!") == 0


def test_readability_score():
    assert readability_score("Python AWS Docker. React SQL Git.") == pytest.approx(90.99, abs=0.01)


def test_readability_score_no_sentences_or_words():
    assert readability_score("") == 0.0
    assert readability_score("...!!!") == 0.0
    assert readability_score("The. A.") == 0.0  # only stop-words


def test_readability_score_clamped_at_zero():
    text = "Internationalization infrastructure responsibilities characterization."
    assert readability_score(text) == 0.0


@pytest.mark.parametrize("text", [
    "Go. Do. Be.",
    "Experienced engineer. Built scalable distributed systems for payments.",
    "a",
    "Cat sat mat. Dog ran fast.",
])
def test_readability_score_bounded(text):
    assert 0.0 <= readability_score(text) <= 100.0
