from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from config import ConfigurationSet, config_from_dict, config_from_env, config_from_yaml

from hitting_tracker.exceptions import TrackerConfigError

logger = logging.getLogger(__name__)

N = TypeVar("N", int, float)

_DEFAULTS: dict[str, object] = {
    "data": {
        "path": "outings.json",
    },
    "stats": {
        "hard_hit_mph": 95.0,
    },
    "trends": {
        "window": 3,
    },
    "heatmap": {
        "rows": 5,
        "cols": 5,
    },
}


@dataclass(frozen=True)
class TrackerSettings:
    data_path: Path
    hard_hit_mph: float
    trend_window: int
    heatmap_rows: int
    heatmap_cols: int


def create_config(
    yaml_path: str = "hitting.yaml",
    env_prefix: str = "HITTING",
    defaults: dict[str, object] | None = None,
    *,
    data_path: str | None = None,
) -> ConfigurationSet:
    """Create a layered configuration.

    Priority (highest to lowest): explicit overrides > env vars > YAML file > defaults dict.

    Args:
        yaml_path: Path to the YAML config file.
        env_prefix: Prefix for environment variables, e.g. ``HITTING__DATA__PATH``.
        defaults: Default configuration values.
        data_path: Override the export file path.
    """
    if defaults is None:
        defaults = _DEFAULTS

    layers = [
        config_from_env(env_prefix, separator="__", lowercase_keys=True),
        config_from_yaml(yaml_path, read_from_file=True, ignore_missing_paths=True),
        config_from_dict(defaults),
    ]
    if data_path is not None:
        layers.insert(0, config_from_dict({"data": {"path": data_path}}))

    return ConfigurationSet(*layers)


def _parse_number(cfg: ConfigurationSet, key: str, kind: type[N], minimum: N) -> N:
    raw = cfg[key]
    try:
        value = kind(str(raw))
    except ValueError:
        raise TrackerConfigError(f"'{key}' must be a number, got {raw!r}") from None
    if value < minimum:
        raise TrackerConfigError(f"'{key}' must be >= {minimum}, got {value}")
    return value


def load_settings(cfg: ConfigurationSet | None = None) -> TrackerSettings:
    if cfg is None:
        cfg = create_config()
    settings = TrackerSettings(
        data_path=Path(str(cfg["data.path"])).expanduser(),
        hard_hit_mph=_parse_number(cfg, "stats.hard_hit_mph", float, 0.0),
        trend_window=_parse_number(cfg, "trends.window", int, 1),
        heatmap_rows=_parse_number(cfg, "heatmap.rows", int, 1),
        heatmap_cols=_parse_number(cfg, "heatmap.cols", int, 1),
    )
    logger.debug("Loaded settings: %s", settings)
    return settings
