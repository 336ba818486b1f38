"""Keyword extraction for free-text CRM instructions."""

from __future__ import annotations

STOP_WORDS = frozenset(
    {
        "a", "an", "the", "and", "or", "but", "if", "is", "are", "was", "were",
        "be", "been", "to", "of", "in", "on", "at", "by", "for", "with", "from",
        "as", "it", "its", "this", "that", "these", "those", "all", "any", "can",
        "could", "should", "would", "will", "you", "your", "our", "out", "has",
        "have", "had", "his", "her", "him", "they", "them", "their", "there",
        "then", "than", "not", "who", "what", "which", "when", "how", "into",
        "about", "some", "only", "please",
    }
)

MIN_KEYWORD_LENGTH = 3


def extract_keywords(instruction: str) -> list[str]:
    """Return the significant lower-case words of ``instruction`` in order.

    Tokens are split on single spaces only, so punctuation stays attached to
    the word it touches. Duplicates are kept.
    """

    keywords: list[str] = []
    for raw in instruction.lower().split(" "):
        token = raw.strip()
        if len(token) < MIN_KEYWORD_LENGTH or token in STOP_WORDS:
            continue
        keywords.append(token)
    return keywords
