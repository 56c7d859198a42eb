"""Demonstration inputs: random sample data and the demo configuration.

``DemoConfig`` bundles every knob of the ``tree-balance`` command.  Values
come from the built-in defaults, optionally overlaid by a JSON or YAML file
and finally by command-line flags.  Every field is validated eagerly and
problems surface as :class:`DemoConfigError`.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
import json
import logging
from pathlib import Path
import random
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

import yaml

from .rendering import RENDERERS

logger = logging.getLogger(__name__)

DEFAULT_COUNT = 15
DEFAULT_UPPER_BOUND = 100
DEFAULT_STYLE = "sideways"
DEFAULT_UNBALANCING_VALUES: Tuple[int, ...] = (150, 200, 250, 300, 350)

__all__ = [
    "DEFAULT_UNBALANCING_VALUES",
    "DemoConfig",
    "DemoConfigError",
    "load_demo_config",
    "random_distinct_values",
]


class DemoConfigError(ValueError):
    """Raised when demo configuration values or files are invalid."""


def _require_int(name: str, value: object) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise DemoConfigError(f"{name} must be an integer")
    return value


@dataclass(frozen=True)
class DemoConfig:
    """Settings for a demonstration run."""

    count: int = DEFAULT_COUNT
    upper_bound: int = DEFAULT_UPPER_BOUND
    seed: Optional[int] = None
    style: str = DEFAULT_STYLE
    unbalancing_values: Tuple[int, ...] = DEFAULT_UNBALANCING_VALUES

    def __post_init__(self) -> None:
        _require_int("count", self.count)
        _require_int("upper_bound", self.upper_bound)
        if self.seed is not None:
            _require_int("seed", self.seed)
        if self.count <= 0:
            raise DemoConfigError("count must be positive")
        if self.upper_bound <= 0:
            raise DemoConfigError("upper_bound must be positive")
        if self.count > self.upper_bound:
            raise DemoConfigError(
                f"cannot draw {self.count} distinct values below {self.upper_bound}"
            )
        if not isinstance(self.style, str) or self.style not in RENDERERS:
            raise DemoConfigError(
                f"style must be one of {', '.join(sorted(RENDERERS))}, got {self.style!r}"
            )
        if isinstance(self.unbalancing_values, (str, bytes)) or not isinstance(
            self.unbalancing_values, Sequence
        ):
            raise DemoConfigError("unbalancing_values must be a list of integers")
        values = tuple(
            _require_int("unbalancing_values entries", item)
            for item in self.unbalancing_values
        )
        object.__setattr__(self, "unbalancing_values", values)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DemoConfig":
        """Build a config from *data*, rejecting keys that are not fields."""

        if not isinstance(data, Mapping):
            raise DemoConfigError("configuration must be a mapping")
        known = {field.name for field in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise DemoConfigError(f"unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)

    def with_overrides(self, **overrides: Any) -> "DemoConfig":
        """Return a copy where every non-``None`` override replaces the field."""

        changes = {name: value for name, value in overrides.items() if value is not None}
        if not changes:
            return self
        return replace(self, **changes)


def load_demo_config(path: Union[str, Path, None]) -> DemoConfig:
    """Load a :class:`DemoConfig` from a ``.json``, ``.yaml`` or ``.yml`` file.

    ``None`` returns the defaults.  An empty file is treated as an empty
    mapping so a placeholder config does not break the command.
    """

    if path is None:
        return DemoConfig()

    config_path = Path(path)
    suffix = config_path.suffix.lower()
    if suffix not in {".json", ".yaml", ".yml"}:
        raise DemoConfigError(f"unsupported configuration format: {config_path.name}")

    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DemoConfigError(f"cannot read configuration {config_path}: {exc}") from exc

    try:
        if suffix == ".json":
            data = json.loads(text) if text.strip() else {}
        else:
            data = yaml.safe_load(text) or {}
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise DemoConfigError(f"malformed configuration {config_path}: {exc}") from exc

    logger.debug("Loaded demo configuration from %s: %s", config_path, data)
    return DemoConfig.from_mapping(data)


def random_distinct_values(
    count: int, upper_bound: int, rng: Optional[random.Random] = None
) -> List[int]:
    """Return *count* distinct integers drawn uniformly from ``[0, upper_bound)``."""

    if count > upper_bound:
        raise DemoConfigError(
            f"cannot draw {count} distinct values below {upper_bound}"
        )
    generator = rng if rng is not None else random.Random()
    return generator.sample(range(upper_bound), count)
