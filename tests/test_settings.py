import numpy as np
import pytest

from errors import ConfigurationError
from settings import FieldConfig, FlockConfig


def test_weights_accept_scalars_and_lists():
    config = FieldConfig(surface_weight=2, separation_weight=[0.1, 0.2])
    assert config.surface_weight == (2.0, 2.0)
    assert config.separation_weight == (0.1, 0.2)


def test_from_dict_ignores_unknown_keys():
    config = FlockConfig.from_dict({"bird_count": 12, "colour": "grey"})
    assert config.bird_count == 12


def test_round_trip_through_dict():
    config = FlockConfig(seed=3, alignment_k=4)
    assert FlockConfig.from_dict(config.to_dict()) == config


def test_configs_are_immutable():
    config = FieldConfig()
    with pytest.raises(AttributeError):
        config.neighbours = 3


@pytest.mark.parametrize(
    "params",
    [{"particle_count": -1}, {"neighbours": -2}, {"time_scale": 0.0}, {"surface": {}},
     {"cohesion_weight": [1.0, 2.0, 3.0]}],
)
def test_invalid_field_configs(params):
    with pytest.raises(ConfigurationError):
        FieldConfig(**params)


@pytest.mark.parametrize(
    "params",
    [{"separation_k": -1}, {"half_extent": 0.0}, {"jitter": -0.1}, {"mass_range": -1.0}],
)
def test_invalid_flock_configs(params):
    with pytest.raises(ConfigurationError):
        FlockConfig(**params)


def test_weights_accept_numpy_scalars_and_arrays():
    config = FieldConfig(surface_weight=np.float32(0.5), alignment_weight=np.array([1, 2]))
    assert config.surface_weight == (0.5, 0.5)
    assert config.alignment_weight == (1.0, 2.0)


@pytest.mark.parametrize("weight", ["heavy", None, ["a", 1.0]])
def test_non_numeric_weights_are_configuration_errors(weight):
    with pytest.raises(ConfigurationError):
        FlockConfig(cohesion_weight=weight)
