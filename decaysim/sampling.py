"""
Random sampling used by the decay generator.

All functions take an explicit numpy Generator so independent streams can be
handed to independent events.
"""

from __future__ import annotations
import math
from typing import Optional, Tuple
import numpy as np

from .exceptions import SamplingError

DEFAULT_MAX_TRIES = 1000


def box_muller_gaussian(rng: Optional[np.random.Generator] = None,
                        max_tries: int = DEFAULT_MAX_TRIES) -> float:
    """
    Standard normal sample via the polar Box–Muller method.

    Draws x1, x2 uniformly in [-1, 1] until w = x1² + x2² lies in (0, 1),
    then returns x1 * sqrt(-2 ln(w) / w). The second sample is discarded.
    """
    rng = rng or np.random.default_rng()
    for _ in range(max_tries):
        x1 = rng.uniform(-1.0, 1.0)
        x2 = rng.uniform(-1.0, 1.0)
        w = x1 * x1 + x2 * x2
        if 0.0 < w < 1.0:
            return x1 * math.sqrt(-2.0 * math.log(w) / w)
    raise SamplingError(f"Box-Muller rejection exceeded {max_tries} tries")


def decay_angles(rng: Optional[np.random.Generator] = None) -> Tuple[float, float]:
    """
    (phi, theta) for the first decay daughter.

    phi ~ U[0, 2π), theta ~ U[-π/2, π/2]. Theta is flat in angle, not in
    cos(theta), so directions are not uniform over the sphere.
    """
    rng = rng or np.random.default_rng()
    phi = rng.uniform(0.0, 2.0 * math.pi)
    theta = rng.uniform(-0.5 * math.pi, 0.5 * math.pi)
    return phi, theta


def production_direction(rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Unit vector for a primary particle: phi ~ U[0, 2π), theta ~ U[0, π].
    Flat in theta, like decay_angles.
    """
    rng = rng or np.random.default_rng()
    phi = rng.uniform(0.0, 2.0 * math.pi)
    theta = rng.uniform(0.0, math.pi)
    sint = math.sin(theta)
    return np.array([sint * math.cos(phi), sint * math.sin(phi), math.cos(theta)], dtype=float)
