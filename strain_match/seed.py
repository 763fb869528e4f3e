from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

from pydantic import BaseModel, Field, ValidationError

from .config import SeedSettings, read_yaml
from .core.matching.matching import clean
from .core.matching.models import ConfigurationError

logger = logging.getLogger(__name__)


class _SeedFile(BaseModel):
    strains: list[str] = Field(default_factory=list)
    aliases: dict[str, str] = Field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class SeedProblem:
    severity: str
    message: str


@dataclass(frozen=True)
class SeedData:
    """Catalog of canonical names plus the alias table, both read-only."""

    catalog: frozenset[str]
    aliases: Mapping[str, str]
    duplicates: tuple[str, ...] = ()

    @classmethod
    def build(cls, strains: Iterable[str], aliases: Mapping[str, str]) -> "SeedData":
        strain_list = list(strains)
        counts = Counter(strain_list)
        duplicates = tuple(sorted(name for name, count in counts.items() if count > 1))
        seed = cls(
            catalog=frozenset(strain_list),
            aliases=MappingProxyType(dict(aliases)),
            duplicates=duplicates,
        )
        for problem in seed.problems():
            logger.warning("Seed data: %s", problem.message)
        return seed

    @classmethod
    def load(cls, path: Path) -> "SeedData":
        raw = read_yaml(path)
        try:
            parsed = _SeedFile.model_validate(raw or {})
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid seed data in {path}: {exc}") from exc
        logger.debug(
            "Loaded %d strain(s) and %d alias(es) from %s",
            len(parsed.strains),
            len(parsed.aliases),
            path,
        )
        return cls.build(parsed.strains, parsed.aliases)

    @classmethod
    def from_settings(cls, settings: SeedSettings) -> "SeedData":
        if settings.path is not None:
            return cls.load(settings.path)
        return cls.build(settings.strains, settings.aliases)

    def problems(self) -> list[SeedProblem]:
        problems: list[SeedProblem] = []
        for name in self.duplicates:
            problems.append(SeedProblem("warning", f"strain {name!r} is listed more than once"))
        for name in sorted(self.catalog):
            if not clean(name):
                problems.append(
                    SeedProblem("warning", f"strain {name!r} has no letters or digits and can never match")
                )
        for alias, canonical in sorted(self.aliases.items()):
            if clean(alias) != alias:
                problems.append(
                    SeedProblem("warning", f"alias {alias!r} is not normalized (expected {clean(alias)!r})")
                )
            if alias in self.catalog:
                problems.append(
                    SeedProblem("warning", f"alias {alias!r} is also a strain and will never be reported as an alias")
                )
            if canonical not in self.catalog:
                problems.append(
                    SeedProblem("error", f"alias {alias!r} points to unknown strain {canonical!r}")
                )
        return problems
