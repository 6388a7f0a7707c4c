import pytest

from services.lexicon import STOP_WORDS
from services.text_normalizer import tokenize


def test_tokenize_lowercases_and_drops_stop_words():
    assert tokenize("The Python developer, with AWS!") == ["python", "developer", "aws"]


def test_tokenize_empty():
    assert tokenize("") == []
    assert tokenize("   \n\t ") == []


def test_tokenize_splits_on_punctuation():
    assert tokenize("Node.js/React") == ["node", "js", "react"]


def test_tokenize_only_stop_words():
    assert tokenize("the and of to") == []


@pytest.mark.parametrize("text", [
    "Senior engineer with 5+ years of experience in Python.",
    "!!! ... ???",
    "It is what it is, and that was that.",
    "C++ / C# -- CI/CD (GitHub Actions)",
])
def test_tokenize_has_no_stop_words_or_empty_tokens(text):
    tokens = tokenize(text)
    assert all(tokens)
    assert not any(token in STOP_WORDS for token in tokens)
