"""
Two-body decay sampling.

The mother keeps its momentum. Both daughters have their momenta overwritten
with lab-frame values; their types must already be set.
"""

import math
from typing import Optional
import numpy as np

from .kinematics import FourVector, energy, two_body_momentum
from .sampling import DEFAULT_MAX_TRIES, box_muller_gaussian, decay_angles
from .exceptions import KinematicallyForbidden, ZeroMassParent


def decay_into(mother, dau1, dau2,
               rng: Optional[np.random.Generator] = None,
               max_tries: int = DEFAULT_MAX_TRIES):
    """
    Decay ``mother`` into ``dau1`` + ``dau2``.

    Steps:
      1. Reject a massless mother (ZeroMassParent)
      2. Smear the mother mass by width * N(0, 1) (Box–Muller)
      3. Reject if the smeared mass is below m1 + m2 (KinematicallyForbidden)
      4. Back-to-back daughters in the rest frame with the two-body momentum
      5. Boost both daughters by the mother's velocity

    Raises InvalidState if any of the three particles has no type.
    """
    rng = rng or np.random.default_rng()

    nominal_mass = mother.mass
    if nominal_mass == 0.0:
        raise ZeroMassParent(f"{mother.name} has zero mass and cannot decay")

    m1 = dau1.mass
    m2 = dau2.mass

    # Plain types report width 0, so the draw leaves their mass unchanged.
    mass = nominal_mass + mother.width * box_muller_gaussian(rng, max_tries)

    if mass <= 0.0 or mass < m1 + m2:
        raise KinematicallyForbidden(
            f"{mother.name} (M={mass:.5f}) -> {dau1.name} {dau2.name} "
            f"(m1+m2={m1 + m2:.5f}) is kinematically forbidden"
        )

    p = two_body_momentum(mass, m1, m2)

    phi, theta = decay_angles(rng)
    px = p * math.sin(theta) * math.cos(phi)
    py = p * math.sin(theta) * math.sin(phi)
    pz = p * math.cos(theta)
    dau1.set_momentum(px, py, pz)
    dau2.set_momentum(-px, -py, -pz)

    # Mother energy uses the smeared mass, not the catalog mass.
    mpx, mpy, mpz = mother.momentum
    mother_p4 = FourVector(energy(mass, mpx, mpy, mpz), mpx, mpy, mpz)
    bx, by, bz = mother_p4.beta()

    dau1.boost(bx, by, bz)
    dau2.boost(bx, by, bz)
