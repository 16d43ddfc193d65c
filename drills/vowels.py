"""Sum of the highest vowel frequency and the highest consonant frequency."""

from __future__ import annotations

from collections import Counter

VOWELS = frozenset("aeiou")


def max_freq_sum(s: str) -> int:
    """Return the top vowel count plus the top count of any other character."""
    counts = Counter(s)
    top_vowel = max((n for c, n in counts.items() if c in VOWELS), default=0)
    top_other = max((n for c, n in counts.items() if c not in VOWELS), default=0)
    return top_vowel + top_other