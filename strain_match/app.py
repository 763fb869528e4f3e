from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .config import Settings
from .core.matching import EmptyQueryError, Outcome, StrainClassifier
from .seed import SeedData

logger = logging.getLogger(__name__)


@dataclass
class StrainMatchApp:
    settings: Settings
    seed: SeedData
    classifier: StrainClassifier

    @classmethod
    def create(cls, settings: Settings) -> "StrainMatchApp":
        seed = SeedData.from_settings(settings.seed)
        classifier = StrainClassifier.build(
            seed.catalog,
            seed.aliases,
            confidence_threshold=settings.matching.confidence_threshold,
            max_length_diff=settings.matching.max_length_diff,
        )
        return cls(settings=settings, seed=seed, classifier=classifier)

    def classify(
        self,
        label: str,
        confidence_threshold: Optional[float] = None,
        max_length_diff: Optional[float] = None,
    ) -> Outcome:
        if not label or not label.strip():
            raise EmptyQueryError("Label must contain at least one non-whitespace character")
        outcome = self.classifier.classify(label, confidence_threshold, max_length_diff)
        logger.debug("%r -> %s", label, outcome)
        return outcome
