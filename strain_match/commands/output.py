from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.matching import (
    AmbiguousMatches,
    ExistingStrain,
    KnownAlias,
    NewAlias,
    NewStrain,
    Outcome,
    clean,
)


@dataclass(frozen=True, slots=True)
class CheckLine:
    label: str
    status: str
    detail: Optional[str] = None

    def render(self) -> str:
        if self.detail:
            return f"{self.label}: {self.status} ({self.detail})"
        return f"{self.label}: {self.status}"


def ok(label: str, detail: Optional[str] = None) -> str:
    return CheckLine(label, "OK", detail).render()


def warning(label: str, detail: Optional[str] = None) -> str:
    return CheckLine(label, "WARNING", detail).render()


def error(label: str, detail: Optional[str] = None) -> str:
    return CheckLine(label, "ERROR", detail).render()


def render(label: str, outcome: Outcome) -> str:
    if isinstance(outcome, ExistingStrain):
        return f"{label} is a strain that already exists in the library"
    if isinstance(outcome, KnownAlias):
        return f"{label} is a known alias for {outcome.canonical}, which already exists in the library"
    if isinstance(outcome, NewAlias):
        return f"{clean(label)} is a new alias for {outcome.canonical}"
    if isinstance(outcome, AmbiguousMatches):
        return "I need help deciding between these: " + ", ".join(sorted(outcome.candidates))
    if isinstance(outcome, NewStrain):
        return f"{label} not found in strains or aliases. {label} is a new strain"
    raise TypeError(f"Unknown outcome {outcome!r}")


def outcome_to_record(label: str, outcome: Outcome) -> dict[str, object]:
    record: dict[str, object] = {"label": label, "kind": outcome.kind}
    if isinstance(outcome, (KnownAlias, NewAlias)):
        record["canonical"] = outcome.canonical
    elif isinstance(outcome, AmbiguousMatches):
        record["candidates"] = sorted(outcome.candidates)
    return record
