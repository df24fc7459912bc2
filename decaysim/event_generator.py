import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import numpy as np

from .catalog import ParticleTypeCatalog, standard_catalog
from .config import GeneratorConfig
from .particles import Particle
from .sampling import production_direction
from .exceptions import DecayError


logger = logging.getLogger(__name__)

KAONS = frozenset({"K+", "K-"})
PIONS = frozenset({"Pi+", "Pi-"})


@dataclass
class Event:
    """One collision: primary particles plus the daughters of decayed resonances."""

    primaries: List[Particle] = field(default_factory=list)
    decay_products: List[Tuple[Particle, Particle]] = field(default_factory=list)
    failed_decays: int = 0

    @property
    def particles(self) -> List[Particle]:
        daughters = [d for pair in self.decay_products for d in pair]
        return self.primaries + daughters

    def momentum_table(self) -> np.ndarray:
        """(N, 4) array of (E, px, py, pz), primaries first."""
        return np.array([p.fourvec.to_tuple() for p in self.particles], dtype=float).reshape(-1, 4)

    def __len__(self):
        return len(self.primaries) + 2 * len(self.decay_products)


def _resolve(catalog: ParticleTypeCatalog, config: GeneratorConfig):
    """Catalog indices and probabilities for the configured species and channels."""
    species = np.array([catalog.index_of(name) for name in config.species])
    abundances = np.array([p for _, p in config.abundances], dtype=float)
    channels = [
        (catalog.index_of(d1), catalog.index_of(d2))
        for (d1, d2), _ in config.decay_channels
    ]
    fractions = np.array([p for _, p in config.decay_channels], dtype=float)
    resonance = catalog.index_of(config.resonance)
    return species, abundances, channels, fractions, resonance


def generate_event(catalog: ParticleTypeCatalog,
                   config: Optional[GeneratorConfig] = None,
                   rng: Optional[np.random.Generator] = None) -> Event:
    """
    Generate one event.

    Steps:
      1. Draw |p| ~ Exp(mean_momentum) and a direction for each primary
      2. Pick its species from the abundance table
      3. Decay each resonance into one of the configured channels
    """
    config = config or GeneratorConfig()
    rng = rng or np.random.default_rng()
    species, abundances, channels, fractions, resonance = _resolve(catalog, config)

    event = Event()
    for _ in range(config.particles_per_event):
        p = rng.exponential(config.mean_momentum)
        px, py, pz = p * production_direction(rng)

        particle = Particle(catalog, px=px, py=py, pz=pz)
        particle.set_index(int(species[rng.choice(len(species), p=abundances)]))
        event.primaries.append(particle)

        if particle.index != resonance:
            continue

        i1, i2 = channels[rng.choice(len(channels), p=fractions)]
        dau1, dau2 = Particle(catalog), Particle(catalog)
        dau1.set_index(i1)
        dau2.set_index(i2)
        try:
            particle.decay_into(dau1, dau2, rng=rng, max_tries=config.max_gaussian_tries)
        except DecayError as e:
            logger.debug(f"Decay skipped: {e}")
            event.failed_decays += 1
            continue
        event.decay_products.append((dau1, dau2))

    return event


def pair_invariant_masses(event: Event) -> Dict[str, np.ndarray]:
    """
    Invariant masses of every unordered pair of particles in the event,
    split by charge and species combination.

    Keys: all, same_charge, opposite_charge, kpi_opposite, kpi_same, decay.
    ``decay`` holds only pairs of daughters of the same resonance. The
    original K* analysis driver instead paired every decay product in the
    event with every other one, mixing daughters of different resonances;
    those cross pairs are not included here.
    """
    particles = event.particles
    table = event.momentum_table()
    charges = np.array([p.charge for p in particles], dtype=int).reshape(-1)
    names = [p.name for p in particles]

    i, j = np.triu_indices(len(particles), k=1)
    total = table[i] + table[j]
    m2 = total[:, 0] ** 2 - np.sum(total[:, 1:] ** 2, axis=1)
    masses = np.sqrt(np.clip(m2, 0.0, None))

    charge_product = charges[i] * charges[j]
    is_kaon = np.array([n in KAONS for n in names], dtype=bool)
    is_pion = np.array([n in PIONS for n in names], dtype=bool)
    kpi = (is_kaon[i] & is_pion[j]) | (is_pion[i] & is_kaon[j])

    decay = np.array([d1.invariant_mass(d2) for d1, d2 in event.decay_products], dtype=float)

    return {
        "all": masses,
        "same_charge": masses[charge_product > 0],
        "opposite_charge": masses[charge_product < 0],
        "kpi_opposite": masses[kpi & (charge_product < 0)],
        "kpi_same": masses[kpi & (charge_product > 0)],
        "decay": decay,
    }


def simulate_events(n_events: int,
                    config: Optional[GeneratorConfig] = None,
                    catalog: Optional[ParticleTypeCatalog] = None,
                    seed: Optional[int] = None,
                    verbose: bool = False) -> dict:
    """
    Generate ``n_events`` events.

    Each event draws from its own child stream of ``SeedSequence(seed)``,
    so a given event is reproducible from the run seed alone.

    Returns:
        Dict with keys: events, total, decays, failed_decays, species_counts
    """
    config = config or GeneratorConfig()
    if catalog is None:
        catalog = standard_catalog()
    if not catalog.frozen:
        catalog.freeze()

    streams = np.random.SeedSequence(seed).spawn(n_events)
    events = []
    species_counts = Counter()
    decays = 0
    failed = 0

    for k, stream in enumerate(streams):
        event = generate_event(catalog, config, np.random.default_rng(stream))
        events.append(event)
        species_counts.update(p.name for p in event.primaries)
        decays += len(event.decay_products)
        failed += event.failed_decays

        if verbose and (k + 1) % max(1, n_events // 10) == 0:
            logger.info(f"[PROGRESS] {k + 1}/{n_events} events ({decays} decays, {failed} failed)")

    stats = {
        "events": events,
        "total": n_events,
        "decays": decays,
        "failed_decays": failed,
        "species_counts": dict(species_counts),
    }

    logger.info(
        f"Generated {n_events} events: {decays} resonance decays, {failed} failed"
    )
    return stats
