from __future__ import annotations

import math
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.matching.classifier import DEFAULT_CONFIDENCE_THRESHOLD, DEFAULT_MAX_LENGTH_DIFF
from .core.matching.models import ConfigurationError

DEFAULT_STRAINS: List[str] = [
    "Mr. Grimm",
    "Forbidden Fruit",
    "Chemdog",
    "AK-47",
    "Mrs. Grim",
    "Super Lemon Haze",
]

# Keys are already normalized.
DEFAULT_ALIASES: Dict[str, str] = {
    "mrgrim": "Mr. Grimm",
    "mrgrimms": "Mr. Grimm",
    "ka74": "AK-47",
    "ak47": "AK-47",
}

CONFIG_NAMES = ("strain-match.yaml", "strain-match.yml")


class MatchSettings(BaseModel):
    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD
    max_length_diff: float = DEFAULT_MAX_LENGTH_DIFF

    @field_validator("confidence_threshold", "max_length_diff")
    @classmethod
    def _unit_interval(cls, value: float) -> float:
        if not math.isfinite(value) or not 0.0 <= value <= 1.0:
            raise ValueError("must be a finite number within [0, 1]")
        return value


class SeedSettings(BaseModel):
    path: Optional[Path] = None
    strains: List[str] = Field(default_factory=lambda: list(DEFAULT_STRAINS))
    aliases: Dict[str, str] = Field(default_factory=lambda: dict(DEFAULT_ALIASES))

    @field_validator("path", mode="before")
    @classmethod
    def _expand_path(cls, value: Optional[str | Path]) -> Optional[Path]:
        if value is None:
            return None
        return Path(value).expanduser().resolve()


class Settings(BaseModel):
    matching: MatchSettings = MatchSettings()
    seed: SeedSettings = SeedSettings()

    @classmethod
    def load(cls, path: Path) -> "Settings":
        raw = read_yaml(path)
        try:
            return cls.model_validate(raw or {})
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration in {path}: {exc}") from exc


def read_yaml(path: Path) -> object:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Could not parse {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Could not read {path}: {exc}") from exc


def find_config(explicit_path: Optional[Path]) -> Optional[Path]:
    if explicit_path:
        if not explicit_path.exists():
            raise FileNotFoundError(f"Config file {explicit_path} does not exist.")
        return explicit_path
    cwd = Path.cwd()
    for name in CONFIG_NAMES:
        candidate = cwd / name
        if candidate.exists():
            return candidate
    return None


def load_settings(explicit_path: Optional[Path] = None) -> Settings:
    path = find_config(explicit_path)
    if path is None:
        return Settings()
    return Settings.load(path)
