"""Keyword and key-phrase extraction for resume-JD analysis.

Keywords are the most frequent normalized tokens; key phrases are
adjacent-token bigrams and trigrams that pass a significance filter.
"""

import logging
from collections import Counter

from services.lexicon import STOP_WORDS
from services.text_normalizer import tokenize

logger = logging.getLogger(__name__)

MAX_KEYWORDS = 20
MAX_KEY_PHRASES = 15
MIN_KEYWORD_LENGTH = 3


def extract_keywords(text: str, top_n: int = MAX_KEYWORDS) -> list[str]:
    """Return the top_n most frequent tokens longer than two characters.

    Ties keep first-seen order.
    """
    frequency = Counter(
        word for word in tokenize(text) if len(word) >= MIN_KEYWORD_LENGTH
    )
    return [word for word, _ in frequency.most_common(top_n)]


def _is_significant_phrase(phrase: str) -> bool:
    """Keep phrases of 2+ words, all longer than 2 chars, not all stop-words."""
    words = phrase.split(" ")
    return (
        len(words) >= 2
        and all(len(word) > 2 for word in words)
        and any(word not in STOP_WORDS for word in words)
    )


def extract_key_phrases(text: str, limit: int = MAX_KEY_PHRASES) -> list[str]:
    """Extract significant bigrams and trigrams in text order.

    The window stop-word checks overlap with the significance filter and
    with the tokenizer itself; both are applied regardless.
    """
    words = tokenize(text)
    phrases: dict[str, None] = {}

    for i in range(len(words) - 1):
        if words[i] not in STOP_WORDS and words[i + 1] not in STOP_WORDS:
            bigram = f"{words[i]} {words[i + 1]}"
            if _is_significant_phrase(bigram):
                phrases.setdefault(bigram)

        if i < len(words) - 2 and words[i + 2] not in STOP_WORDS:
            trigram = f"{words[i]} {words[i + 1]} {words[i + 2]}"
            if _is_significant_phrase(trigram):
                phrases.setdefault(trigram)

    return list(phrases)[:limit]
