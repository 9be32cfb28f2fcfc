from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .core.models import FuzzyAlgorithm, NormalizationConfig

CONFIG_FILENAMES = ("fuzzy-engine.yaml", "fuzzy-engine.yml")


class NormalizationSettings(BaseModel):
    preset: str = "default"
    lowercase: Optional[bool] = None
    trim_whitespace: Optional[bool] = None
    collapse_whitespace: Optional[bool] = None
    remove_accents: Optional[bool] = None
    remove_punctuation: Optional[bool] = None
    remove_numbers: Optional[bool] = None
    preserve_case: Optional[bool] = None

    @field_validator("preset")
    @classmethod
    def _known_preset(cls, value: str) -> str:
        NormalizationConfig.preset(value)
        return value.strip().lower()

    def to_config(self) -> NormalizationConfig:
        base = NormalizationConfig.preset(self.preset)
        overrides = {
            name: value
            for name, value in self.model_dump(exclude={"preset"}).items()
            if value is not None
        }
        return replace(base, **overrides)


class MatchingSettings(BaseModel):
    algorithm: FuzzyAlgorithm = FuzzyAlgorithm.AUTO
    normalize: bool = True
    ngram_size: int = Field(default=2, ge=1)
    prefix_scale: float = Field(default=0.1, ge=0.0, le=0.25)
    max_results: int = Field(default=5, ge=0)
    min_similarity: float = Field(default=0.5, ge=0.0, le=1.0)
    workers: int = Field(default=1, ge=1)

    @field_validator("algorithm", mode="before")
    @classmethod
    def _parse_algorithm(cls, value: str | FuzzyAlgorithm) -> FuzzyAlgorithm:
        return FuzzyAlgorithm.parse(value)


class Settings(BaseModel):
    normalization: NormalizationSettings = NormalizationSettings()
    matching: MatchingSettings = MatchingSettings()

    @classmethod
    def load(cls, path: Path) -> "Settings":
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
        return cls.model_validate(raw or {})


def find_config(explicit_path: Optional[Path]) -> Optional[Path]:
    if explicit_path:
        if not explicit_path.exists():
            raise FileNotFoundError(f"Config file not found: {explicit_path}")
        return explicit_path
    cwd = Path.cwd()
    for name in CONFIG_FILENAMES:
        candidate = cwd / name
        if candidate.exists():
            return candidate
    return None


def load_settings(explicit_path: Optional[Path] = None) -> Settings:
    """Settings from the config file if one is found, defaults otherwise."""
    path = find_config(explicit_path)
    if path is None:
        return Settings()
    return Settings.load(path)
