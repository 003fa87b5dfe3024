from __future__ import annotations

import logging

import pytest

from vecalg.config import VectorConfig, configure, get_config, load_config


def test_defaults():
    config = VectorConfig()
    assert config.tolerance == 1e-9
    assert config.random_min == -1.0
    assert config.random_max == 1.0
    assert config.seed is None
    assert config.log_level is None
    assert get_config() == config


def test_load_config_from_mapping():
    config = load_config({"tolerance": 0.1, "random_min": 0, "random_max": 4, "seed": 3})
    assert config.tolerance == 0.1
    assert config.random_min == 0.0
    assert config.random_max == 4.0
    assert config.seed == 3


def test_load_config_accepts_vector_section():
    config = load_config({"vector": {"log_level": "debug"}})
    assert config.log_level == "debug"


def test_from_yaml(tmp_path):
    path = tmp_path / "vector.yaml"
    path.write_text("vector:\n  tolerance: 0.001\n  random_max: 2.5\n")

    config = VectorConfig.from_yaml(path)

    assert config.tolerance == 0.001
    assert config.random_max == 2.5
    assert config.random_min == -1.0


def test_from_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert VectorConfig.from_yaml(path) == VectorConfig()


@pytest.mark.parametrize(
    "raw",
    [
        {"tolerance": -1},
        {"random_min": 2, "random_max": 1},
        {"log_level": "LOUD"},
        {"precision": 3},
    ],
)
def test_invalid_config_rejected(raw):
    with pytest.raises(ValueError):
        load_config(raw)


def test_configure_applies_log_level_only_when_set():
    package_logger = logging.getLogger("vecalg")
    previous = package_logger.level
    try:
        configure(VectorConfig(log_level="debug", tolerance=0.5))
        assert get_config().tolerance == 0.5
        assert package_logger.level == logging.DEBUG

        package_logger.setLevel(logging.ERROR)
        configure()
        assert get_config() == VectorConfig()
        assert package_logger.level == logging.ERROR

        configure(VectorConfig(seed=1))
        assert package_logger.level == logging.ERROR
    finally:
        package_logger.setLevel(previous)
