"""
decaysim: relativistic particle kinematics and two-body decay sampling.

Usage:
    from decaysim import ParticleTypeCatalog, Particle, invariant_mass

    catalog = ParticleTypeCatalog()
    catalog.add_type("K*", 0.89166, 0, width=0.050)
    catalog.add_type("Pi+", 0.13957, 1)
    catalog.add_type("K-", 0.49367, -1)
    catalog.freeze()

    kstar = Particle(catalog, "K*", 0.0, 0.0, 1.0)
    pi, k = Particle(catalog, "Pi+"), Particle(catalog, "K-")
    kstar.decay_into(pi, k)
    m = invariant_mass(pi, k)
"""
from .exceptions import (
    DecaySimError,
    TypeNotFound,
    CatalogFrozen,
    InvalidState,
    DomainError,
    DecayError,
    ZeroMassParent,
    KinematicallyForbidden,
    SamplingError,
)
from .particle_types import ParticleType, ResonanceType
from .catalog import ParticleTypeCatalog, standard_catalog
from .kinematics import FourVector, invariant_mass
from .particles import Particle
from .decays import decay_into
from .conservation import (
    check_conservation,
    check_energy_conservation,
    check_energy_momentum,
    check_momentum_conservation,
)
from .config import GeneratorConfig
from .event_generator import Event, generate_event, pair_invariant_masses, simulate_events

__all__ = [
    "DecaySimError",
    "TypeNotFound",
    "CatalogFrozen",
    "InvalidState",
    "DomainError",
    "DecayError",
    "ZeroMassParent",
    "KinematicallyForbidden",
    "SamplingError",
    "ParticleType",
    "ResonanceType",
    "ParticleTypeCatalog",
    "standard_catalog",
    "FourVector",
    "invariant_mass",
    "Particle",
    "decay_into",
    "check_conservation",
    "check_energy_conservation",
    "check_energy_momentum",
    "check_momentum_conservation",
    "GeneratorConfig",
    "Event",
    "generate_event",
    "pair_invariant_masses",
    "simulate_events",
]
