import pytest

from bezierpad.core import ConfigurationError, EditorConfig, Key


def test_defaults_are_valid() -> None:
    config = EditorConfig()
    config.validate()
    assert (config.viewport_width, config.viewport_height) == (900, 600)
    assert config.hit_threshold == 10.0
    assert config.clear_keys == frozenset({Key.ENTER, Key.SPACE})


@pytest.mark.parametrize(
    "overrides",
    [
        {"viewport_width": 0},
        {"viewport_height": -10},
        {"sample_count": 0},
        {"sample_count": -1},
        {"hit_threshold": 0.0},
        {"max_points": 0},
        {"max_points": 1, "initial_points": ((0.0, 0.0), (1.0, 1.0))},
    ],
)
def test_invalid_configs_are_rejected(overrides) -> None:
    with pytest.raises(ConfigurationError):
        EditorConfig(**overrides).validate()


def test_configuration_error_is_a_value_error() -> None:
    assert issubclass(ConfigurationError, ValueError)
