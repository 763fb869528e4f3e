from __future__ import annotations

from dataclasses import dataclass

from ..config import Settings
from ..core.matching import ConfigurationError
from ..seed import SeedData
from .output import error, ok as ok_line, warning


@dataclass(slots=True)
class DoctorReport:
    ok: bool
    checks: list[str]


def run(settings: Settings) -> DoctorReport:
    checks: list[str] = []
    ok = True

    matching = settings.matching
    checks.append(
        ok_line(
            "Thresholds",
            f"confidence {matching.confidence_threshold:.2f}, max length diff {matching.max_length_diff:.2f}",
        )
    )

    source = str(settings.seed.path) if settings.seed.path else "inline"
    try:
        seed = SeedData.from_settings(settings.seed)
    except (ConfigurationError, OSError) as exc:
        checks.append(error("Seed data", str(exc)))
        return DoctorReport(ok=False, checks=checks)

    if seed.catalog:
        checks.append(ok_line("Catalog", f"{len(seed.catalog)} strain(s), {source}"))
    else:
        checks.append(warning("Catalog", "no strains; every label will be a new strain"))
    checks.append(ok_line("Aliases", f"{len(seed.aliases)} alias(es)"))

    for problem in seed.problems():
        if problem.severity == "error":
            ok = False
            checks.append(error("Seed data", problem.message))
        else:
            checks.append(warning("Seed data", problem.message))

    return DoctorReport(ok=ok, checks=checks)
