"""
Kinematics helpers for decaysim.

Units: GeV (natural units c = 1).
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Tuple
import numpy as np

from .exceptions import DomainError

# -----------------------------
# FourVector
# -----------------------------
@dataclass
class FourVector:
    E: float
    px: float
    py: float
    pz: float

    @property
    def p(self) -> np.ndarray:
        return np.array([self.px, self.py, self.pz], dtype=float)

    @property
    def magnitude(self) -> float:
        return float(np.linalg.norm(self.p))

    @property
    def mass(self) -> float:
        # Cancellation in nearly collinear massless pairs can push m2 slightly
        # below zero; clamp rather than raise.
        m2 = self.E * self.E - self.magnitude * self.magnitude
        return math.sqrt(max(m2, 0.0))

    def beta(self) -> np.ndarray:
        if self.E == 0.0:
            return np.zeros(3, dtype=float)
        return self.p / self.E

    def boost(self, beta: np.ndarray) -> "FourVector":
        p4 = np.array([self.E, self.px, self.py, self.pz], dtype=float)
        boosted = lorentz_boost_array(p4, beta)
        return FourVector(float(boosted[0]), float(boosted[1]), float(boosted[2]), float(boosted[3]))

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.E, self.px, self.py, self.pz)

    def __add__(self, other: "FourVector") -> "FourVector":
        return FourVector(self.E + other.E, self.px + other.px, self.py + other.py, self.pz + other.pz)

    def __repr__(self) -> str:
        return f"FourVector(E={self.E:.6f}, px={self.px:.6f}, py={self.py:.6f}, pz={self.pz:.6f})"


def energy(mass: float, px: float, py: float, pz: float) -> float:
    """On-shell energy sqrt(m² + |p|²)."""
    return math.sqrt(mass * mass + px * px + py * py + pz * pz)


def invariant_mass(a, b) -> float:
    """
    Invariant mass of a pair of particles (anything exposing ``fourvec``).

    Computed from the summed four-momentum. A negative m² from rounding is
    clamped to zero, see FourVector.mass.
    """
    return (a.fourvec + b.fourvec).mass


# -----------------------------
# Lorentz boost
# -----------------------------
def lorentz_boost_array(p4: np.ndarray, beta: np.ndarray) -> np.ndarray:
    """
    Boost (E, px, py, pz) by velocity ``beta``.

    With ``beta`` the velocity of a parent in the lab, this takes a
    rest-frame four-momentum into the lab frame.
    """
    beta = np.asarray(beta, dtype=float)
    p4 = np.asarray(p4, dtype=float)
    beta2 = float(np.dot(beta, beta))
    if beta2 >= 1.0:
        raise DomainError(f"beta^2 < 1 required, got {beta2:.6f}")
    if beta2 <= 1e-18:
        return p4.copy()
    gamma = 1.0 / math.sqrt(1.0 - beta2)
    bp = float(np.dot(beta, p4[1:]))
    Eprime = gamma * (p4[0] + bp)
    factor = ((gamma - 1.0) * bp / beta2) + gamma * p4[0]
    pprime = p4[1:] + factor * beta
    return np.array([Eprime, pprime[0], pprime[1], pprime[2]], dtype=float)


def two_body_momentum(parent_mass: float, m1: float, m2: float) -> float:
    """Daughter momentum magnitude in the parent rest frame."""
    term1 = parent_mass * parent_mass - (m1 + m2) ** 2
    term2 = parent_mass * parent_mass - (m1 - m2) ** 2
    return math.sqrt(max(term1 * term2, 0.0)) / (2.0 * parent_mass)
