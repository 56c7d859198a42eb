"""Tests for the demo configuration loader and sample data helpers."""

from __future__ import annotations

import json
import random
from pathlib import Path

import pytest

from ordered_tree.demo import (
    DEFAULT_UNBALANCING_VALUES,
    DemoConfig,
    DemoConfigError,
    load_demo_config,
    random_distinct_values,
)


def test_load_demo_config_defaults() -> None:
    config = load_demo_config(None)
    assert config == DemoConfig()
    assert config.count == 15
    assert config.upper_bound == 100
    assert config.unbalancing_values == DEFAULT_UNBALANCING_VALUES


def test_load_demo_config_from_json(tmp_path: Path) -> None:
    config_path = tmp_path / "demo.json"
    payload = {"count": 5, "seed": 3, "unbalancing_values": [500, 600]}
    config_path.write_text(json.dumps(payload), encoding="utf-8")

    config = load_demo_config(config_path)

    assert config.count == 5
    assert config.seed == 3
    assert config.upper_bound == 100
    assert config.unbalancing_values == (500, 600)


def test_load_demo_config_from_yaml(tmp_path: Path) -> None:
    config_path = tmp_path / "demo.yaml"
    config_path.write_text(
        """
        count: 8
        upper_bound: 20
        style: levels
        """,
        encoding="utf-8",
    )

    config = load_demo_config(str(config_path))

    assert config.count == 8
    assert config.upper_bound == 20
    assert config.style == "levels"


def test_load_demo_config_empty_yaml_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")
    assert load_demo_config(config_path) == DemoConfig()


@pytest.mark.parametrize(
    "name, config_text, expected_message",
    [
        ("bad.yaml", "count: [1, 2", "malformed"),
        ("bad.json", "{not json", "malformed"),
        ("bad.yaml", "- 1\n- 2\n", "mapping"),
        ("bad.yaml", "colour: red\n", "unknown configuration keys"),
        ("bad.yaml", "count: 200\n", "distinct values"),
        ("bad.yaml", "count: -1\n", "positive"),
        ("bad.yaml", "count: 0\n", "count must be positive"),
        ("bad.yaml", "style: [levels]\n", "style must be one of"),
        ("bad.json", "{\"style\": {\"a\": 1}}", "style must be one of"),
        ("bad.yaml", "count: many\n", "integer"),
        ("bad.yaml", "style: spiral\n", "style must be one of"),
        ("bad.yaml", "unbalancing_values: [1, two]\n", "integer"),
        ("bad.toml", "count = 3\n", "unsupported"),
    ],
)
def test_load_demo_config_validation(
    tmp_path: Path, name: str, config_text: str, expected_message: str
) -> None:
    config_path = tmp_path / name
    config_path.write_text(config_text, encoding="utf-8")

    with pytest.raises(DemoConfigError) as excinfo:
        load_demo_config(config_path)

    assert expected_message in str(excinfo.value)


def test_load_demo_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(DemoConfigError):
        load_demo_config(tmp_path / "missing.yaml")


def test_with_overrides_ignores_unset_values() -> None:
    config = DemoConfig(count=4, seed=1)
    updated = config.with_overrides(count=None, seed=9, style=None)
    assert updated.count == 4
    assert updated.seed == 9
    assert config.with_overrides() is config


def test_with_overrides_validates_result() -> None:
    with pytest.raises(DemoConfigError):
        DemoConfig().with_overrides(upper_bound=0)


def test_random_distinct_values_are_unique_and_bounded() -> None:
    values = random_distinct_values(15, 100, random.Random(7))
    assert len(values) == 15
    assert len(set(values)) == 15
    assert all(0 <= value < 100 for value in values)
    assert values == random_distinct_values(15, 100, random.Random(7))


def test_random_distinct_values_rejects_impossible_requests() -> None:
    with pytest.raises(DemoConfigError):
        random_distinct_values(11, 10)
