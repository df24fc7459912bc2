"""
Catalog of particle species.

The catalog is an explicit object: build it once, ``freeze()`` it, and hand it
to every Particle. Particles refer to species by their position in the
catalog, so entries are only ever appended.
"""

from __future__ import annotations
import logging
from typing import Iterator, List, Optional

from .particle_types import ParticleType, ResonanceType
from .exceptions import CatalogFrozen, TypeNotFound

logger = logging.getLogger(__name__)


class ParticleTypeCatalog:
    """Ordered registry of ParticleType descriptors, indexed by insertion order."""

    def __init__(self):
        self._types: List[ParticleType] = []
        self._frozen = False

    # -------------------- Registration --------------------

    def add_type(self, name: str, mass: float, charge: int, width: Optional[float] = None) -> bool:
        """
        Register a species.

        ``width=None`` registers a plain ParticleType. Passing any width,
        including 0.0, registers a ResonanceType.

        Returns True if the type was added, False if the name already exists
        (the duplicate is logged and otherwise ignored).
        """
        if self._frozen:
            raise CatalogFrozen(f"Cannot register '{name}': catalog is frozen")

        if self.find_index(name) is not None:
            logger.warning(f"Particle type '{name}' already exists, ignoring duplicate registration")
            return False

        if width is None:
            ptype = ParticleType(name, float(mass), int(charge))
        else:
            ptype = ResonanceType(name, float(mass), int(charge), float(width))
        self._types.append(ptype)
        return True

    def freeze(self) -> "ParticleTypeCatalog":
        """Make the catalog read-only. Returns self for chaining."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -------------------- Lookup --------------------

    def find_index(self, name: str) -> Optional[int]:
        """Index of the first type named exactly ``name``, or None."""
        for i, ptype in enumerate(self._types):
            if ptype.name == name:
                return i
        return None

    def index_of(self, name: str) -> int:
        index = self.find_index(name)
        if index is None:
            raise TypeNotFound(f"There is no particle type named '{name}'")
        return index

    def describe_all(self) -> List[str]:
        return [f"Particle {i}:\n{ptype.describe()}" for i, ptype in enumerate(self._types)]

    def __getitem__(self, index: int) -> ParticleType:
        if not 0 <= index < len(self._types):
            raise TypeNotFound(f"There is no particle type at index {index}")
        return self._types[index]

    def __contains__(self, name: str) -> bool:
        return self.find_index(name) is not None

    def __len__(self) -> int:
        return len(self._types)

    def __iter__(self) -> Iterator[ParticleType]:
        return iter(self._types)

    def __repr__(self) -> str:
        names = ", ".join(t.name for t in self._types)
        return f"ParticleTypeCatalog([{names}], frozen={self._frozen})"


def standard_catalog() -> ParticleTypeCatalog:
    """
    Pions, kaons, protons and the K* resonance, in the order the event
    generator expects. Masses and width in GeV.
    """
    catalog = ParticleTypeCatalog()
    catalog.add_type("Pi+", 0.13957, 1)
    catalog.add_type("Pi-", 0.13957, -1)
    catalog.add_type("K+", 0.49367, 1)
    catalog.add_type("K-", 0.49367, -1)
    catalog.add_type("p+", 0.93827, 1)
    catalog.add_type("p-", 0.93827, -1)
    catalog.add_type("K*", 0.89166, 0, 0.050)
    return catalog.freeze()
