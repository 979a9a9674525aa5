from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml


@dataclass(slots=True)
class ScoreWeights:
    """Relative weight of each metric in the improvement score."""

    flesch_reading_ease: float = 0.30
    flesch_kincaid_grade: float = 0.25
    avg_sentence_length: float = 0.20
    passive_voice_count: float = 0.15
    adverb_count: float = 0.10


@dataclass(slots=True)
class ComparerConfig:
    """Tunable knobs for text analysis, scoring and CLI rendering."""

    words_per_minute: int = 200
    long_sentence_threshold: float = 20.0
    highlight: bool = True
    weights: ScoreWeights = field(default_factory=ScoreWeights)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(ComparerConfig)}
    kwargs = {key: data[key] for key in data if key in allowed}
    if "weights" in data:
        weights_value = data["weights"]
        if isinstance(weights_value, ScoreWeights):
            kwargs["weights"] = weights_value
        elif isinstance(weights_value, Mapping):
            kwargs["weights"] = _build_weights(weights_value)
        else:
            kwargs.pop("weights")
    return kwargs


def _build_weights(data: Mapping[str, Any]) -> ScoreWeights:
    weight_names = {field.name for field in fields(ScoreWeights)}
    filtered = {key: float(data[key]) for key in data if key in weight_names}
    return ScoreWeights(**filtered)


def config_from_dict(data: Mapping[str, Any] | None) -> ComparerConfig:
    """Build a ComparerConfig from a dictionary-like input."""
    if data is None:
        return ComparerConfig()
    kwargs = _build_kwargs(data)
    if "words_per_minute" in kwargs:
        kwargs["words_per_minute"] = int(kwargs["words_per_minute"])
    config = ComparerConfig(**kwargs)
    if config.words_per_minute <= 0:
        raise ValueError("words_per_minute must be a positive number.")
    return config


def config_from_yaml(path: str | Path) -> ComparerConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ComparerConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ComparerConfig()
    return config_from_yaml(path)
