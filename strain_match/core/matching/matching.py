"""
String metrics used by candidate filtering.

- Normalization (strip non-alphanumerics, lowercase)
- Levenshtein edit distance (unit costs, no transpositions)
- Similarity ratio derived from the edit distance

All functions are pure and have no I/O dependencies.
"""

from __future__ import annotations

import re

_NON_ALNUM = re.compile(r"[^A-Za-z0-9]+")


def clean(value: str) -> str:
    """
    Normalize a label for comparison.

    Only ASCII letters and digits survive; everything else, including
    accented letters and whitespace, is dropped.

    Examples:
        "AK-47" → "ak47"
        "Mr. Grimm" → "mrgrimm"
    """
    return _NON_ALNUM.sub("", value).lower()


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance between ``a`` and ``b``.

    Uses a single reusable row sized to the shorter string. ``diagonal``
    holds the previous row's value at ``j - 1`` since that cell has
    already been overwritten when it is needed.
    """
    if len(a) < len(b):
        a, b = b, a
    row = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        diagonal = row[0]
        row[0] = i
        for j, char_b in enumerate(b, start=1):
            above = row[j]
            if char_a == char_b:
                row[j] = diagonal
            else:
                row[j] = min(diagonal, above, row[j - 1]) + 1
            diagonal = above
    return row[-1]


def similarity(s1: str, s2: str) -> float:
    """
    Similarity ratio of two labels in [0, 1].

    Both labels are normalized first. The ratio is
    ``(len(longer) - distance) / len(longer)``; two empty labels are
    identical and score 1.0.
    """
    first = clean(s1)
    second = clean(s2)
    if len(first) <= len(second):
        longer, shorter = second, first
    else:
        longer, shorter = first, second
    if not longer:
        return 1.0
    return (len(longer) - edit_distance(longer, shorter)) / len(longer)
