"""
Candidate filtering over the catalog.

Every catalog name is run through three gates, stopping at the first one
that fails:

1. First letter: normalized label and name start with the same character.
2. Length ratio: ``len(label) / len(name) >= 1 - max_length_diff``.
   The ratio is one-directional, so labels longer than the name always pass.
3. Similarity: ``similarity(label, name) >= confidence_threshold``.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .matching import clean, similarity
from .models import Candidate

logger = logging.getLogger(__name__)


def passes_first_letter(cleaned_label: str, cleaned_name: str) -> bool:
    if not cleaned_label or not cleaned_name:
        return False
    return cleaned_label[0] == cleaned_name[0]


def passes_length_ratio(cleaned_label: str, cleaned_name: str, max_length_diff: float) -> bool:
    if not cleaned_name:
        return False
    return abs(len(cleaned_label) / len(cleaned_name)) >= 1 - max_length_diff


def find_candidates(
    label: str,
    catalog: Iterable[str],
    confidence_threshold: float,
    max_length_diff: float,
) -> frozenset[Candidate]:
    """
    Score every catalog name that passes all three gates.

    Args:
        label: Raw, unnormalized label
        catalog: Canonical names
        confidence_threshold: Minimum similarity ratio
        max_length_diff: Maximum relative length shortfall of the label

    Returns:
        Unordered set of qualifying candidates with their scores
    """
    cleaned_label = clean(label)
    found: set[Candidate] = set()
    for name in catalog:
        cleaned_name = clean(name)
        if not passes_first_letter(cleaned_label, cleaned_name):
            continue
        if not passes_length_ratio(cleaned_label, cleaned_name, max_length_diff):
            logger.debug("Length gate rejected %r for %r", name, label)
            continue
        score = similarity(cleaned_label, name)
        if score < confidence_threshold:
            logger.debug("Similarity %.3f too low for %r against %r", score, name, label)
            continue
        found.add(Candidate(name=name, score=score))
    return frozenset(found)
