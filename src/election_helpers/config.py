"""Configuration models and helpers.

Data contract:
- vote_percent_decimal_places: digits kept by candidate_vote_percentage
- party_map: custom cleaned-label -> party code overrides
- name_cleaning: options for clean_candidate_name / clean_candidate_names
- name_splitting: options for split_name
- display: options for format_name_for_display

Every option model carries the library defaults, so callers may pass a
partial (even nested) mapping and get the rest filled in.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Literal, Optional, Type, TypeVar, Union

import yaml
from pydantic import BaseModel, Field

Capitalization = Literal["title", "upper", "lower", "preserve"]
PeriodPolicy = Literal["keep", "remove", "smart"]
CommaPolicy = Literal["keep", "remove", "reorder"]
ConflictStrategy = Literal["preserve", "merge", "number"]

ModelT = TypeVar("ModelT", bound=BaseModel)


class SeparatorOptions(BaseModel):
    """How separators inside a candidate name are treated."""

    hyphenated_names: bool = True
    apostrophes: bool = True
    periods: PeriodPolicy = "smart"
    commas: CommaPolicy = "reorder"


class SecurityOptions(BaseModel):
    """Profanity detection is on by default, censoring is opt-in."""

    detect_profanity: bool = True
    censor_profanity: bool = False


class NameCleanConfig(BaseModel):
    """Options for candidate name cleaning."""

    capitalize: Capitalization = "title"
    normalize_spaces: bool = True
    trim_spaces: bool = True
    separators: SeparatorOptions = Field(default_factory=SeparatorOptions)
    detect_non_candidates: bool = True
    conflict_strategy: ConflictStrategy = "preserve"
    security: SecurityOptions = Field(default_factory=SecurityOptions)


class SplitOptions(BaseModel):
    """Options for first/last name splitting."""

    keep_particles: bool = True
    handle_suffixes: bool = True
    max_first_names: int = Field(default=2, ge=1)
    confidence_threshold: float = Field(default=0.5, ge=0, le=1)


class DisplayOptions(BaseModel):
    """Options for display formatting of a split name."""

    include_suffix: bool = False
    max_length: Optional[int] = Field(default=None, ge=1)
    fallback_to_full: bool = True
    split: SplitOptions = Field(default_factory=SplitOptions)


class Config(BaseModel):
    """Root configuration model for election_helpers."""

    vote_percent_decimal_places: int = Field(default=1, ge=0, le=10)
    party_map: Dict[str, str] = Field(default_factory=dict)
    name_cleaning: NameCleanConfig = Field(default_factory=NameCleanConfig)
    name_splitting: SplitOptions = Field(default_factory=SplitOptions)
    display: DisplayOptions = Field(default_factory=DisplayOptions)


def coerce_options(
    model: Type[ModelT], options: Optional[Union[ModelT, Mapping[str, Any]]]
) -> ModelT:
    """Return ``options`` as ``model``: instances pass through, mappings are validated."""
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    if isinstance(options, Mapping):
        return model.model_validate(dict(options))
    raise TypeError(
        f"Expected {model.__name__} or a mapping of options, got {type(options).__name__}."
    )


def default_config() -> Config:
    """Return the library defaults."""
    return Config()


def load_config(path: Path) -> Config:
    """Load and validate a YAML config file from disk."""
    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return Config.model_validate(data)


def save_config(config: Config, path: Path) -> None:
    """Save a config as YAML."""
    payload = config.model_dump()
    path.write_text(yaml.safe_dump(payload, sort_keys=False, allow_unicode=True), encoding="utf-8")
