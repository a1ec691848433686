"""Hunt configuration loaded from YAML."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .generators.merge import STRATEGIES, canonical_strategy

DEFAULT_CONFIG_PATH = "config/config.yaml"


class ConfigError(Exception):
    """Configuration file is missing or invalid."""


def _normalize_tld(tld: str) -> str:
    tld = tld.strip().lower()
    return tld if tld.startswith('.') else '.' + tld


def _string_list(raw: Dict[str, Any], key: str) -> List[str]:
    value = raw.get(key) or []
    if isinstance(value, str):
        value = value.split(',')
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' must be a list of strings")
    return [v.strip().lower() for v in value if v.strip()]


def _number(raw: Dict[str, Any], key: str, default):
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        raise ConfigError(f"'{key}' must be a non-negative number")
    return value


@dataclass
class HuntConfig:
    """Settings for a hunt run."""
    tlds: List[str]
    strategies: List[str]
    max_price_per_year: float = 15
    keywords: List[str] = field(default_factory=list)
    personal_names: List[str] = field(default_factory=list)
    request_delay_ms: int = 1500
    save_every: int = 50
    results_file: str = "data/results/hunt_results.json"
    words_file: Optional[str] = None

    @property
    def request_delay(self) -> float:
        return self.request_delay_ms / 1000.0

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> 'HuntConfig':
        if not isinstance(raw, dict):
            raise ConfigError("Configuration must be a mapping")

        tlds = [_normalize_tld(t) for t in _string_list(raw, 'tlds')]
        if not tlds:
            raise ConfigError("At least one TLD is required")

        strategies = _string_list(raw, 'strategies') or list(STRATEGIES)
        unknown = [s for s in strategies if canonical_strategy(s) not in STRATEGIES]
        if unknown:
            raise ConfigError(f"Unknown strategies: {', '.join(unknown)}")

        save_every = int(_number(raw, 'save_every', cls.save_every))
        if save_every < 1:
            raise ConfigError("'save_every' must be at least 1")

        words_file = raw.get('words_file')
        if words_file is not None and not isinstance(words_file, str):
            raise ConfigError("'words_file' must be a path")
        if words_file is not None and not Path(words_file).is_file():
            raise ConfigError(f"Word list not found: {words_file}")

        return cls(
            tlds=list(dict.fromkeys(tlds)),
            strategies=strategies,
            max_price_per_year=_number(raw, 'max_price_per_year', cls.max_price_per_year),
            keywords=_string_list(raw, 'keywords'),
            personal_names=_string_list(raw, 'personal_names'),
            request_delay_ms=int(_number(raw, 'request_delay_ms', cls.request_delay_ms)),
            save_every=save_every,
            results_file=str(raw.get('results_file') or cls.results_file),
            words_file=words_file,
        )


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> HuntConfig:
    """Load configuration from YAML file."""
    config_file = Path(config_path)
    if not config_file.exists():
        raise ConfigError(f"Config file not found: {config_file}")

    try:
        with open(config_file) as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Could not read {config_file}: {e}") from e

    return HuntConfig.from_dict(raw or {})
