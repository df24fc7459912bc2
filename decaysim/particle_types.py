"""
Particle type descriptors.

A ParticleType is the immutable description of a species. ResonanceType adds a
decay width, used to smear the mother mass when sampling two-body decays.
Callers never branch on the concrete class: they ask for ``width`` and
``describe()`` and let each variant answer.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class ParticleType:
    name: str
    mass: float
    charge: int

    def __post_init__(self):
        if self.mass < 0:
            raise ValueError(f"mass must be non-negative, got {self.mass}")

    @property
    def width(self) -> float:
        return 0.0

    def describe(self) -> str:
        return f"Name: \t{self.name}\n\tMass = {self.mass}\n\tCharge = {self.charge}"

    def __repr__(self) -> str:
        return f"ParticleType(name={self.name}, mass={self.mass:.5f} GeV/c², charge={self.charge:+d}e)"


@dataclass(frozen=True)
class ResonanceType(ParticleType):
    resonance_width: float = 0.0

    def __post_init__(self):
        super().__post_init__()
        if self.resonance_width < 0:
            raise ValueError(f"width must be non-negative, got {self.resonance_width}")

    @property
    def width(self) -> float:
        return self.resonance_width

    def describe(self) -> str:
        return f"{super().describe()}\n\tWidth: {self.resonance_width}"

    def __repr__(self) -> str:
        return (
            f"ResonanceType(name={self.name}, mass={self.mass:.5f} GeV/c², "
            f"charge={self.charge:+d}e, width={self.resonance_width:.5f} GeV)"
        )
