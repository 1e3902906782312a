"""
Word tokenizer.

Splits document text into identifier-like words and counts how often each
one occurs. Words present in the keyword table are not counted: there will
always be plenty of those, and document variables are more interesting.
"""

from __future__ import annotations

from collections.abc import Container


def is_identifier_char(c: str) -> bool:
    """Letters, decimal digits and underscore make up a word."""
    return c == "_" or c.isalpha() or c.isdecimal()


def tokenize(text: str, keywords: Container[str] = ()) -> dict[str, int]:
    """
    Count word occurrences in text.

    Args:
        text: Full document content
        keywords: Words that are never counted

    Returns:
        Mapping of word to number of occurrences, in first-seen order
    """
    words: dict[str, int] = {}
    start = 0

    for index, c in enumerate(text):
        if is_identifier_char(c):
            continue

        if index > start:
            _count(words, text[start:index], keywords)
        start = index + 1

    # No trailing delimiter
    if len(text) > start:
        _count(words, text[start:], keywords)

    return words


def _count(words: dict[str, int], word: str, keywords: Container[str]) -> None:
    if word in keywords:
        return
    words[word] = words.get(word, 0) + 1
