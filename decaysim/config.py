"""
Configuration for the event generator.

Defaults reproduce the reference simulation: 100 primaries per event with an
exponential momentum spectrum of mean 1 GeV, mostly pions, and a 1% K*
fraction decaying to K pi.
"""

import os
import math
from dataclasses import dataclass, field, replace
from typing import Tuple

DEFAULT_ABUNDANCES: Tuple[Tuple[str, float], ...] = (
    ("Pi+", 0.40),
    ("Pi-", 0.40),
    ("K+", 0.05),
    ("K-", 0.05),
    ("p+", 0.045),
    ("p-", 0.045),
    ("K*", 0.01),
)

DEFAULT_DECAY_CHANNELS: Tuple[Tuple[Tuple[str, str], float], ...] = (
    (("Pi+", "K-"), 0.5),
    (("Pi-", "K+"), 0.5),
)


@dataclass(frozen=True)
class GeneratorConfig:
    """Event generation settings."""

    particles_per_event: int = 100
    mean_momentum: float = 1.0  # GeV
    abundances: Tuple[Tuple[str, float], ...] = field(default=DEFAULT_ABUNDANCES)
    resonance: str = "K*"
    decay_channels: Tuple[Tuple[Tuple[str, str], float], ...] = field(default=DEFAULT_DECAY_CHANNELS)
    max_gaussian_tries: int = 1000

    def __post_init__(self):
        if self.particles_per_event <= 0:
            raise ValueError("particles_per_event must be positive")
        if self.mean_momentum <= 0:
            raise ValueError("mean_momentum must be positive")
        if self.max_gaussian_tries <= 0:
            raise ValueError("max_gaussian_tries must be positive")
        if not self.abundances:
            raise ValueError("abundances must not be empty")
        if any(p < 0 for _, p in self.abundances):
            raise ValueError("abundances must be non-negative")
        if not math.isclose(sum(p for _, p in self.abundances), 1.0, abs_tol=1e-9):
            raise ValueError("abundances must sum to 1")
        if not self.decay_channels:
            raise ValueError("decay_channels must not be empty")
        if any(len(daughters) != 2 for daughters, _ in self.decay_channels):
            raise ValueError("decay channels must have exactly two daughters")
        if not math.isclose(sum(p for _, p in self.decay_channels), 1.0, abs_tol=1e-9):
            raise ValueError("decay channel fractions must sum to 1")

    @property
    def species(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self.abundances)

    @classmethod
    def from_env(cls, **overrides) -> "GeneratorConfig":
        """
        Defaults, overridden by DECAYSIM_* environment variables, overridden
        by keyword arguments.
        """
        base = cls()
        config = replace(
            base,
            particles_per_event=int(os.getenv("DECAYSIM_PARTICLES_PER_EVENT", base.particles_per_event)),
            mean_momentum=float(os.getenv("DECAYSIM_MEAN_MOMENTUM", base.mean_momentum)),
            max_gaussian_tries=int(os.getenv("DECAYSIM_MAX_GAUSSIAN_TRIES", base.max_gaussian_tries)),
        )
        return replace(config, **overrides) if overrides else config
