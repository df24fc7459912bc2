"""
Event generation and pair invariant-mass readback.
"""
import numpy as np
import pytest

from decaysim import (
    GeneratorConfig,
    ParticleTypeCatalog,
    TypeNotFound,
    generate_event,
    pair_invariant_masses,
    simulate_events,
    standard_catalog,
)


@pytest.fixture
def catalog():
    return standard_catalog()


@pytest.fixture
def small_config():
    return GeneratorConfig(particles_per_event=40)


def test_generate_event_primary_count(catalog, small_config):
    event = generate_event(catalog, small_config, np.random.default_rng(1))
    assert len(event.primaries) == 40
    assert len(event) == 40 + 2 * len(event.decay_products)
    assert all(p.is_set for p in event.particles)


def test_all_resonances_decay(catalog):
    config = GeneratorConfig(particles_per_event=200, abundances=(("K*", 1.0),))
    event = generate_event(catalog, config, np.random.default_rng(5))
    assert len(event.decay_products) + event.failed_decays == 200
    assert len(event.decay_products) > 190
    for d1, d2 in event.decay_products:
        assert {d1.name, d2.name} in ({"Pi+", "K-"}, {"Pi-", "K+"})
        assert d1.charge + d2.charge == 0


def test_momentum_table_shape(catalog, small_config):
    event = generate_event(catalog, small_config, np.random.default_rng(2))
    table = event.momentum_table()
    assert table.shape == (len(event), 4)
    m2 = table[:, 0] ** 2 - np.sum(table[:, 1:] ** 2, axis=1)
    masses = np.array([p.mass for p in event.particles])
    assert np.allclose(m2, masses**2, atol=1e-9)


def test_pair_invariant_masses_categories(catalog):
    config = GeneratorConfig(particles_per_event=60)
    event = generate_event(catalog, config, np.random.default_rng(11))
    n = len(event)
    masses = pair_invariant_masses(event)

    assert set(masses) == {"all", "same_charge", "opposite_charge", "kpi_opposite", "kpi_same", "decay"}
    assert len(masses["all"]) == n * (n - 1) // 2
    assert np.all(masses["all"] >= 0.0)
    assert len(masses["same_charge"]) + len(masses["opposite_charge"]) <= len(masses["all"])
    assert len(masses["kpi_opposite"]) <= len(masses["opposite_charge"])
    assert len(masses["kpi_same"]) <= len(masses["same_charge"])
    assert len(masses["decay"]) == len(event.decay_products)


def test_pair_masses_match_particle_method(catalog):
    config = GeneratorConfig(particles_per_event=5)
    event = generate_event(catalog, config, np.random.default_rng(3))
    particles = event.particles
    expected = [
        particles[i].invariant_mass(particles[j])
        for i in range(len(particles))
        for j in range(i + 1, len(particles))
    ]
    assert pair_invariant_masses(event)["all"] == pytest.approx(expected)


def test_decay_pairs_peak_at_resonance(catalog):
    config = GeneratorConfig(particles_per_event=500, abundances=(("K*", 1.0),))
    event = generate_event(catalog, config, np.random.default_rng(21))
    decay = pair_invariant_masses(event)["decay"]
    assert np.mean(decay) == pytest.approx(0.89166, abs=0.01)
    assert np.std(decay) == pytest.approx(0.050, rel=0.2)


def test_simulate_events_stats():
    config = GeneratorConfig(particles_per_event=30)
    stats = simulate_events(20, config=config, seed=42)
    assert stats["total"] == 20
    assert len(stats["events"]) == 20
    assert sum(stats["species_counts"].values()) == 20 * 30
    assert stats["decays"] == sum(len(e.decay_products) for e in stats["events"])
    assert stats["failed_decays"] == sum(e.failed_decays for e in stats["events"])


def test_simulate_events_reproducible():
    config = GeneratorConfig(particles_per_event=25)
    a = simulate_events(3, config=config, seed=7)
    b = simulate_events(3, config=config, seed=7)
    c = simulate_events(3, config=config, seed=8)
    for ea, eb in zip(a["events"], b["events"]):
        assert np.array_equal(ea.momentum_table(), eb.momentum_table())
    assert not np.array_equal(a["events"][0].momentum_table(), c["events"][0].momentum_table())


def test_simulate_events_freezes_catalog():
    cat = ParticleTypeCatalog()
    for t in standard_catalog():
        cat.add_type(t.name, t.mass, t.charge, t.width if t.width else None)
    simulate_events(1, config=GeneratorConfig(particles_per_event=5), catalog=cat, seed=0)
    assert cat.frozen


def test_missing_species_raises():
    cat = ParticleTypeCatalog()
    cat.add_type("Pi+", 0.13957, 1)
    with pytest.raises(TypeNotFound):
        generate_event(cat, GeneratorConfig(particles_per_event=5), np.random.default_rng(0))


# -------------------------- Failed decays ---------------------------------
@pytest.fixture
def forbidden_catalog():
    cat = ParticleTypeCatalog()
    cat.add_type("R", 0.5, 0)
    cat.add_type("H", 0.4, 0)
    return cat.freeze()


@pytest.fixture
def forbidden_config():
    return GeneratorConfig(
        particles_per_event=10,
        abundances=(("R", 1.0),),
        resonance="R",
        decay_channels=((("H", "H"), 1.0),),
    )


def test_forbidden_channel_counts_failed_decays(forbidden_catalog, forbidden_config):
    event = generate_event(forbidden_catalog, forbidden_config, np.random.default_rng(0))
    assert event.failed_decays == 10
    assert event.decay_products == []
    assert len(event) == 10
    assert len(pair_invariant_masses(event)["decay"]) == 0


def test_simulate_events_sums_failed_decays(forbidden_catalog, forbidden_config):
    stats = simulate_events(4, config=forbidden_config, catalog=forbidden_catalog, seed=1)
    assert stats["failed_decays"] == 4 * 10
    assert stats["decays"] == 0
    assert stats["species_counts"] == {"R": 40}
