"""
Token frequency counting over normalized text.
"""

from collections import Counter

from vocab_analyzer.config import MIN_TOKEN_LENGTH


def tokenize(normalized: str, min_length: int = MIN_TOKEN_LENGTH) -> list[str]:
    """
    Split normalized text on whitespace runs and drop trivial tokens.

    The length check runs on the raw token, so phrase tokens such as
    "GIVE_UP" are measured with their underscore.
    """
    return [token for token in normalized.split() if len(token) >= min_length]


def count_frequencies(normalized: str, min_length: int = MIN_TOKEN_LENGTH) -> dict[str, int]:
    """
    Count exact occurrences of each distinct token.

    Args:
        normalized: Output of normalize() (already case-folded)
        min_length: Tokens shorter than this are discarded (default drops single letters)

    Returns:
        Mapping of token to count. Callers must not rely on its order;
        ranking imposes the order.
    """
    return dict(Counter(tokenize(normalized, min_length)))
