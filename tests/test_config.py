import pytest

from decaysim import GeneratorConfig


def test_defaults():
    config = GeneratorConfig()
    assert config.particles_per_event == 100
    assert config.mean_momentum == 1.0
    assert config.species == ("Pi+", "Pi-", "K+", "K-", "p+", "p-", "K*")
    assert config.resonance == "K*"


@pytest.mark.parametrize(
    "kwargs,match",
    [
        ({"particles_per_event": 0}, "particles_per_event"),
        ({"mean_momentum": -1.0}, "mean_momentum"),
        ({"max_gaussian_tries": 0}, "max_gaussian_tries"),
        ({"abundances": (("Pi+", 0.5), ("Pi-", 0.4))}, "sum to 1"),
        ({"abundances": (("Pi+", 1.5), ("Pi-", -0.5))}, "non-negative"),
        ({"decay_channels": ((("Pi+", "K-", "K+"), 1.0),)}, "two daughters"),
        ({"decay_channels": ((("Pi+", "K-"), 0.3),)}, "sum to 1"),
    ],
)
def test_invalid_config_raises(kwargs, match):
    with pytest.raises(ValueError, match=match):
        GeneratorConfig(**kwargs)


def test_config_is_immutable():
    with pytest.raises(AttributeError):
        GeneratorConfig().particles_per_event = 5


def test_from_env(monkeypatch):
    monkeypatch.setenv("DECAYSIM_PARTICLES_PER_EVENT", "12")
    monkeypatch.setenv("DECAYSIM_MEAN_MOMENTUM", "2.5")
    config = GeneratorConfig.from_env()
    assert config.particles_per_event == 12
    assert config.mean_momentum == 2.5
    assert config.max_gaussian_tries == 1000


def test_from_env_keyword_overrides(monkeypatch):
    monkeypatch.setenv("DECAYSIM_PARTICLES_PER_EVENT", "12")
    config = GeneratorConfig.from_env(particles_per_event=3)
    assert config.particles_per_event == 3
