"""
Tokenizer for corpus text.

Tokenization pipeline:
1. Lowercase conversion
2. Drop possessive "'s" ("author's" → "author")
3. Replace every non-letter with a space (digits, punctuation, hyphens)
4. Split on whitespace

Tokens are plain lowercase ASCII words, ready for stemming. Stopwords are
kept: every word is counted.
"""

import re
from collections import Counter
from typing import Iterable, List

_NON_LETTERS = re.compile(r"[^a-z]+")


def tokenize(text: str) -> List[str]:
    """
    Split text into lowercase alphabetic words.

    Args:
        text: Input text (sentence, line, spreadsheet cell)

    Returns:
        List of lowercase ASCII words

    Examples:
        >>> tokenize("The student's essays, re-written twice!")
        ['the', 'student', 'essays', 're', 'written', 'twice']

        >>> tokenize("TPO 54: 3 passages")
        ['tpo', 'passages']

        >>> tokenize("   ")
        []
    """
    if not text:
        return []

    text = text.lower()
    text = text.replace("'s", "")
    text = _NON_LETTERS.sub(" ", text)

    return text.split()


def count_tokens(tokens: Iterable[str]) -> Counter:
    """
    Count occurrences per token.

    The Counter keeps first-seen order, so ingestion is deterministic.
    """
    return Counter(tokens)
