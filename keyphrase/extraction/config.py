"""Configuration helpers for keyword extraction."""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

import yaml

from keyphrase import paths

__all__ = [
    "ExtractorConfig",
    "load_extractor_config",
]

_SECTION_KEY = "keywords"


@dataclass(frozen=True, slots=True)
class ExtractorConfig:
    """Immutable settings shared by every extraction call of an extractor."""

    ngram_size: int = 3
    remove_duplicates: bool = True
    window_size: int = 2
    dedupe_lim: float = 0.8
    top_n: int = 10
    minimum_length: int = 3
    minimum_word_size: int = 2
    maximum_word_number: int = 5
    valid_punctuation: str = "-"
    only_alphanumeric: bool = False
    ignore_urls: bool = True
    expand_contractions: bool = True
    stopwords_path: Path | None = None

    def __post_init__(self) -> None:
        if self.ngram_size < 1:
            raise ValueError(f"ngram_size must be at least 1, got {self.ngram_size}")
        if self.window_size < 1:
            raise ValueError(f"window_size must be at least 1, got {self.window_size}")
        if self.top_n < 0:
            raise ValueError(f"top_n must not be negative, got {self.top_n}")
        if not 0.0 <= self.dedupe_lim <= 1.0:
            raise ValueError(f"dedupe_lim must be between 0 and 1, got {self.dedupe_lim}")
        if self.maximum_word_number < 1:
            raise ValueError(
                f"maximum_word_number must be at least 1, got {self.maximum_word_number}"
            )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], *, base_path: Path | None = None) -> "ExtractorConfig":
        known = {item.name: item for item in fields(cls)}
        unknown = sorted(str(key) for key in mapping if str(key) not in known)
        if unknown:
            raise ValueError(f"Unknown keyword extraction settings: {', '.join(unknown)}")

        values: dict[str, Any] = {}
        defaults = cls()
        for key, value in mapping.items():
            name = str(key)
            default = getattr(defaults, name)
            if name == "stopwords_path":
                values[name] = _coerce_path(value, base=base_path)
            elif isinstance(default, bool):
                values[name] = _coerce_bool(name, value)
            elif isinstance(default, int):
                values[name] = _coerce_int(name, value)
            elif isinstance(default, float):
                values[name] = _coerce_float(name, value)
            else:
                values[name] = "" if value is None else str(value)
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> "ExtractorConfig":
        """Return a copy with every non-``None`` override applied."""

        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes) if changes else self


def load_extractor_config(path: Path | None) -> ExtractorConfig:
    """Load keyword extraction settings from YAML, defaulting when absent."""

    if path is None:
        return _load_default_config()

    resolved = Path(path).expanduser()
    if not resolved.exists():
        raise FileNotFoundError(f"Keyword config '{resolved}' does not exist")
    return _load_yaml(resolved)


def _load_default_config() -> ExtractorConfig:
    default_path = paths.get_config_file()
    if not default_path.exists():
        return ExtractorConfig()
    return _load_yaml(default_path)


def _load_yaml(path: Path) -> ExtractorConfig:
    raw = path.read_text(encoding="utf-8")
    data = yaml.safe_load(raw) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Keyword config must be a mapping at the top level.")
    section = data.get(_SECTION_KEY, data)
    if not isinstance(section, Mapping):
        raise ValueError(f"Keyword config section '{_SECTION_KEY}' must be a mapping.")
    return ExtractorConfig.from_mapping(section, base_path=path.parent)


def _coerce_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Setting '{name}' must be an integer.")
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Setting '{name}' must be an integer.") from exc


def _coerce_float(name: str, value: object) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Setting '{name}' must be a number.") from exc


def _coerce_bool(name: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "1", "yes", "y"}:
            return True
        if lowered in {"false", "0", "no", "n"}:
            return False
    if isinstance(value, int):
        return bool(value)
    raise ValueError(f"Setting '{name}' must be a boolean.")


def _coerce_path(value: object, *, base: Path | None) -> Path | None:
    if value is None or value == "":
        return None
    candidate = Path(str(value)).expanduser()
    if base is not None and not candidate.is_absolute():
        candidate = base / candidate
    return candidate
