"""Regular-expression matching with ``.`` and ``*`` over a whole string."""

from __future__ import annotations


def match_char(sc: str, pc: str) -> bool:
    """Return whether pattern character ``pc`` matches string character ``sc``."""
    return sc == pc or pc == "."


def is_match(s: str, p: str) -> bool:
    """Return whether pattern ``p`` matches all of ``s``.

    ``.`` matches any single character and ``*`` matches zero or more of the
    element before it.
    """
    if p.startswith("*"):
        raise ValueError("pattern may not start with '*'")

    # previous[j] tells whether the characters consumed so far match p[:j].
    previous = [False] * (len(p) + 1)
    previous[0] = True
    for j, pc in enumerate(p, start=1):
        if pc == "*":
            previous[j] = previous[j - 2]

    for sc in s:
        row = [False] * (len(p) + 1)
        for j, pc in enumerate(p, start=1):
            if pc == "*":
                row[j] = row[j - 2] or (match_char(sc, p[j - 2]) and previous[j])
            elif match_char(sc, pc):
                row[j] = previous[j - 1]
        previous = row

    return previous[-1]