"""
Priority-ordered classification of a single label.

The first rule that applies decides the outcome:

1. Exact catalog entry (raw, case-sensitive)      → ExistingStrain
2. Exact alias table key (raw, case-sensitive)    → KnownAlias
3. Exactly one fuzzy candidate                    → NewAlias
4. Several candidates, best score shared          → AmbiguousMatches
5. Anything else                                  → NewStrain
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from .candidates import find_candidates
from .models import (
    AmbiguousMatches,
    Candidate,
    ConfigurationError,
    ExistingStrain,
    KnownAlias,
    NewAlias,
    NewStrain,
    Outcome,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE_THRESHOLD = 0.75
DEFAULT_MAX_LENGTH_DIFF = 0.25


def validate_threshold(name: str, value: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"{name} must be a number, got {value!r}") from exc
    if not math.isfinite(number) or not 0.0 <= number <= 1.0:
        raise ConfigurationError(f"{name} must be within [0, 1], got {value!r}")
    return number


def decide(candidates: Iterable[Candidate]) -> Outcome:
    """Turn scored candidates into NewAlias, AmbiguousMatches or NewStrain."""
    scored = list(candidates)
    if len(scored) == 1:
        return NewAlias(canonical=scored[0].name)
    if len(scored) > 1:
        best = max(candidate.score for candidate in scored)
        # Exact equality: scores come from the same rational arithmetic.
        tied = frozenset(candidate.name for candidate in scored if candidate.score == best)
        if tied:
            return AmbiguousMatches(candidates=tied)
    return NewStrain()


def classify(
    label: str,
    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
    max_length_diff: float = DEFAULT_MAX_LENGTH_DIFF,
    *,
    catalog: Iterable[str],
    aliases: Mapping[str, str],
) -> Outcome:
    """
    Classify ``label`` against a catalog and alias table.

    Args:
        label: Raw label as entered
        confidence_threshold: Minimum similarity for a fuzzy match, in [0, 1]
        max_length_diff: Allowed relative length shortfall, in [0, 1]
        catalog: Canonical names
        aliases: Normalized alias → canonical name

    Returns:
        Exactly one outcome

    Raises:
        ConfigurationError: a threshold is non-finite or outside [0, 1]
    """
    confidence_threshold = validate_threshold("confidence_threshold", confidence_threshold)
    max_length_diff = validate_threshold("max_length_diff", max_length_diff)
    names = catalog if isinstance(catalog, (set, frozenset)) else frozenset(catalog)

    if label in names:
        return ExistingStrain()
    if label in aliases:
        return KnownAlias(canonical=aliases[label])

    candidates = find_candidates(label, names, confidence_threshold, max_length_diff)
    outcome = decide(candidates)
    logger.debug(
        "Classified %r as %s from %d candidate(s)", label, outcome.kind, len(candidates)
    )
    return outcome


@dataclass(frozen=True)
class StrainClassifier:
    """
    Classifier bound to one immutable catalog and alias table.

    Usage:
        classifier = StrainClassifier.build(["AK-47"], {"ak47": "AK-47"})
        outcome = classifier.classify("AK 47")
    """

    catalog: frozenset[str]
    aliases: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD
    max_length_diff: float = DEFAULT_MAX_LENGTH_DIFF

    def __post_init__(self) -> None:
        validate_threshold("confidence_threshold", self.confidence_threshold)
        validate_threshold("max_length_diff", self.max_length_diff)

    @classmethod
    def build(
        cls,
        catalog: Iterable[str],
        aliases: Mapping[str, str],
        confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
        max_length_diff: float = DEFAULT_MAX_LENGTH_DIFF,
    ) -> "StrainClassifier":
        return cls(
            catalog=frozenset(catalog),
            aliases=MappingProxyType(dict(aliases)),
            confidence_threshold=confidence_threshold,
            max_length_diff=max_length_diff,
        )

    def classify(
        self,
        label: str,
        confidence_threshold: float | None = None,
        max_length_diff: float | None = None,
    ) -> Outcome:
        return classify(
            label,
            self.confidence_threshold if confidence_threshold is None else confidence_threshold,
            self.max_length_diff if max_length_diff is None else max_length_diff,
            catalog=self.catalog,
            aliases=self.aliases,
        )
