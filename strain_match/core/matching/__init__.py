"""
Label matching and classification.

This module handles:
- Label normalization
- Levenshtein edit distance and the similarity ratio built on it
- Candidate filtering against a catalog of canonical names
- The priority-ordered decision that yields one outcome per label

All logic is pure and free of I/O.
"""

from __future__ import annotations

from .candidates import find_candidates
from .classifier import StrainClassifier, classify
from .matching import clean, edit_distance, similarity
from .models import (
    AmbiguousMatches,
    Candidate,
    ConfigurationError,
    EmptyQueryError,
    ExistingStrain,
    KnownAlias,
    NewAlias,
    NewStrain,
    Outcome,
)

__all__ = [
    "AmbiguousMatches",
    "Candidate",
    "ConfigurationError",
    "EmptyQueryError",
    "ExistingStrain",
    "KnownAlias",
    "NewAlias",
    "NewStrain",
    "Outcome",
    "StrainClassifier",
    "classify",
    "clean",
    "edit_distance",
    "find_candidates",
    "similarity",
]
