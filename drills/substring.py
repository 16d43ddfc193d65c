"""Find every start of a concatenation of all given words within a string."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def find_substring(s: str, words: Sequence[str]) -> list[int]:
    """Return the start indices of substrings of ``s`` made of every word once.

    All words must have the same length. A word listed several times must
    appear that many times. Indices are grouped by their offset modulo the
    word length and rise within each group.
    """
    if not words:
        return []

    word_len = len(words[0])
    word_count = len(words)
    if len(s) < word_len * word_count:
        return []

    target = Counter(words)
    result: list[int] = []

    for offset in range(word_len):
        left = offset
        count = 0
        window: Counter[str] = Counter()

        for right in range(offset, len(s) - word_len + 1, word_len):
            word = s[right:right + word_len]
            if word not in target:
                window.clear()
                count = 0
                left = right + word_len
                continue

            window[word] += 1
            count += 1

            while window[word] > target[word]:
                window[s[left:left + word_len]] -= 1
                count -= 1
                left += word_len

            if count == word_count:
                result.append(left)
                window[s[left:left + word_len]] -= 1
                count -= 1
                left += word_len

    return result