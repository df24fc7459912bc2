import logging
import operator
from typing import Optional, Tuple
import numpy as np

from .catalog import ParticleTypeCatalog
from .particle_types import ParticleType
from .kinematics import FourVector, energy, invariant_mass
from .decays import decay_into
from .exceptions import InvalidState, TypeNotFound

logger = logging.getLogger(__name__)


class Particle:
    """
    A particle instance: a species index into a ParticleTypeCatalog plus a
    3-momentum (GeV/c).

    The particle does not own its type. The catalog must outlive it. An
    index of None means the type is unset, in which case name, mass,
    charge, width and energy raise InvalidState.
    """

    def __init__(self, catalog: ParticleTypeCatalog, name: Optional[str] = None,
                 px: float = 0.0, py: float = 0.0, pz: float = 0.0):
        self.catalog = catalog
        self._index: Optional[int] = None
        self.set_momentum(px, py, pz)
        if name is not None:
            self.set_index_by_name(name)

    # -------------------- Type --------------------

    @property
    def index(self) -> Optional[int]:
        return self._index

    def set_index(self, index: Optional[int]):
        """Point at catalog entry ``index``; None resets to unset."""
        if index is not None:
            try:
                index = operator.index(index)
            except TypeError:
                raise TypeNotFound(f"Particle type index must be an integer, got {index!r}") from None
            self.catalog[index]  # raises TypeNotFound when out of range
        self._index = index

    def set_index_by_name(self, name: str):
        """Look ``name`` up in the catalog. Unknown names leave the particle unset."""
        self._index = self.catalog.find_index(name)
        if self._index is None:
            logger.warning(f"There is no particle type named '{name}'; particle left unset")

    @property
    def is_set(self) -> bool:
        return self._index is not None

    @property
    def ptype(self) -> ParticleType:
        if self._index is None:
            raise InvalidState("Particle type is unset")
        return self.catalog[self._index]

    @property
    def name(self) -> str:
        return self.ptype.name

    @property
    def mass(self) -> float:
        return self.ptype.mass

    @property
    def charge(self) -> int:
        return self.ptype.charge

    @property
    def width(self) -> float:
        return self.ptype.width

    # -------------------- Momentum --------------------

    @property
    def px(self) -> float:
        return self._px

    @property
    def py(self) -> float:
        return self._py

    @property
    def pz(self) -> float:
        return self._pz

    @property
    def momentum(self) -> Tuple[float, float, float]:
        return (self._px, self._py, self._pz)

    def set_momentum(self, px: float, py: float, pz: float):
        self._px = float(px)
        self._py = float(py)
        self._pz = float(pz)

    # -------------------- Physics Methods --------------------

    @property
    def energy(self) -> float:
        return energy(self.mass, self._px, self._py, self._pz)

    @property
    def fourvec(self) -> FourVector:
        return FourVector(self.energy, self._px, self._py, self._pz)

    def invariant_mass(self, other: "Particle") -> float:
        return invariant_mass(self, other)

    def boost(self, bx: float, by: float, bz: float):
        """
        Boost this particle's momentum in place by velocity (bx, by, bz),
        using its own energy. Raises DomainError when |beta| >= 1.
        """
        boosted = self.fourvec.boost(np.array([bx, by, bz], dtype=float))
        self.set_momentum(boosted.px, boosted.py, boosted.pz)

    def decay_into(self, dau1: "Particle", dau2: "Particle",
                   rng: Optional[np.random.Generator] = None, **kwargs):
        """Two-body decay of this particle; see decays.decay_into."""
        decay_into(self, dau1, dau2, rng=rng, **kwargs)

    # -------------------- Representation --------------------

    def describe(self) -> str:
        return (
            f"Particle {self._index}:\n{self.ptype.describe()}\n"
            f"Momentum = ({self._px}, {self._py}, {self._pz})"
        )

    def __repr__(self):
        if self._index is None:
            return f"Particle(unset, p=({self._px:.4f}, {self._py:.4f}, {self._pz:.4f}))"
        return (
            f"Particle(name={self.name}, index={self._index}, mass={self.mass:.5f} GeV/c², "
            f"charge={self.charge:+d}e, fv={self.fourvec})"
        )
