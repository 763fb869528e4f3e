"""
Domain models for label classification.

These are pure data models with no dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


class ConfigurationError(ValueError):
    """Raised when thresholds or seed data are unusable."""


class EmptyQueryError(ValueError):
    """Raised at the application boundary for a blank label."""


@dataclass(frozen=True, slots=True)
class Candidate:
    """A catalog name that passed every candidate gate."""

    name: str
    """Canonical catalog name, exactly as stored"""

    score: float
    """Similarity ratio in [0, 1]"""


@dataclass(frozen=True, slots=True)
class ExistingStrain:
    """The label is already a canonical catalog entry."""

    kind = "existing_strain"


@dataclass(frozen=True, slots=True)
class KnownAlias:
    """The label is a recorded alias of ``canonical``."""

    canonical: str
    kind = "known_alias"


@dataclass(frozen=True, slots=True)
class NewAlias:
    """The label is unknown but a single strong match for ``canonical``."""

    canonical: str
    kind = "new_alias"


@dataclass(frozen=True, slots=True)
class AmbiguousMatches:
    """Several names qualified; ``candidates`` share the best score."""

    candidates: frozenset[str]
    kind = "ambiguous_matches"


@dataclass(frozen=True, slots=True)
class NewStrain:
    """No catalog name qualifies."""

    kind = "new_strain"


Outcome = Union[ExistingStrain, KnownAlias, NewAlias, AmbiguousMatches, NewStrain]
