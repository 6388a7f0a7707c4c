"""Lower-casing tokenizer shared by every lexical stage."""

import re

from services.lexicon import STOP_WORDS

_NON_WORD_RE = re.compile(r"[^\w\s]")


def tokenize(text: str) -> list[str]:
    """Split text into lower-case word tokens without stop-words.

    Punctuation is replaced by whitespace, so "node.js" becomes the two
    tokens "node" and "js".
    """
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    return [word for word in cleaned.split() if word and word not in STOP_WORDS]
