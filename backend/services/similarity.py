"""Token-overlap similarity engine for resume-JD matching."""

from services.text_normalizer import tokenize


def jaccard_similarity(tokens_a: set[str], tokens_b: set[str]) -> float:
    """|A ∩ B| / |A ∪ B|, or 0.0 when both sets are empty."""
    union = tokens_a | tokens_b
    if not union:
        return 0.0
    return len(tokens_a & tokens_b) / len(union)


def semantic_similarity(text_a: str, text_b: str) -> float:
    """Jaccard similarity of the two texts' normalized token sets."""
    return jaccard_similarity(set(tokenize(text_a)), set(tokenize(text_b)))
