"""Lexicon sentiment and Flesch reading-ease scoring."""

import re

from models.schemas.text_analysis import Sentiment
from services.lexicon import NEGATIVE_WORDS, POSITIVE_WORDS
from services.text_normalizer import tokenize

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_VOWELS = "aeiouy"

# Flesch Reading Ease coefficients
FLESCH_BASE = 206.835
FLESCH_SENTENCE_WEIGHT = 1.015
FLESCH_SYLLABLE_WEIGHT = 84.6


def analyze_sentiment(text: str) -> Sentiment:
    """Positive minus negative lexicon hits, plus the per-token ratio."""
    words = tokenize(text)
    positive = 0
    negative = 0
    for word in words:
        if word in POSITIVE_WORDS:
            positive += 1
        elif word in NEGATIVE_WORDS:
            negative += 1

    score = positive - negative
    comparative = score / len(words) if words else 0.0
    return Sentiment(score=score, comparative=comparative)


def count_syllables(word: str) -> int:
    """Estimate syllables by counting vowel groups.

    Words of three letters or fewer count as one syllable; a trailing "e"
    is treated as silent.
    """
    word = word.lower()
    if len(word) <= 3:
        return 1

    count = 0
    previous_was_vowel = False
    for char in word:
        is_vowel = char in _VOWELS
        if is_vowel and not previous_was_vowel:
            count += 1
        previous_was_vowel = is_vowel

    if word.endswith("e"):
        count -= 1
    return max(1, count)


def count_sentences(text: str) -> int:
    return sum(1 for fragment in _SENTENCE_SPLIT_RE.split(text) if fragment.strip())


def readability_score(text: str) -> float:
    """Flesch Reading Ease clamped to 0-100; 0 for text without sentences or words."""
    sentences = count_sentences(text)
    words = tokenize(text)
    if sentences == 0 or not words:
        return 0.0

    syllables = sum(count_syllables(word) for word in words)
    avg_sentence_length = len(words) / sentences
    avg_syllables_per_word = syllables / len(words)

    score = (
        FLESCH_BASE
        - FLESCH_SENTENCE_WEIGHT * avg_sentence_length
        - FLESCH_SYLLABLE_WEIGHT * avg_syllables_per_word
    )
    return max(0.0, min(100.0, score))
