# conservation.py
# Four-momentum conservation checks for decays.
#
# Inputs may be FourVectors or anything exposing ``fourvec`` (Particles), so a
# decay can be checked directly: check_conservation([mother], [d1, d2]).
import numpy as np

from .kinematics import FourVector


def _as_array(vectors):
    """Stack inputs into an (N, 4) array of (E, px, py, pz)."""
    rows = []
    for v in vectors:
        fv = v if isinstance(v, FourVector) else v.fourvec
        rows.append(fv.to_tuple())
    return np.array(rows, dtype=float).reshape(-1, 4)


def check_energy_momentum(initial_vectors, final_vectors, tol=1e-6):
    """Return diagnostic dict for full 4-momentum conservation.

    Returns dict with deltas for energy and momentum components and a
    boolean 'conserved' key summarizing result within tolerance.

    Examples
    --------
    >>> p_initial = FourVector(10, 0, 0, 0)
    >>> d = check_energy_momentum([p_initial], [FourVector(5, 3, 0, 0), FourVector(5, -3, 0, 0)])
    >>> d['conserved']
    True
    """
    total_i = _as_array(initial_vectors).sum(axis=0)
    total_f = _as_array(final_vectors).sum(axis=0)
    dE, dPx, dPy, dPz = (float(x) for x in total_i - total_f)
    conserved = bool(np.all(np.abs(total_i - total_f) < tol))
    return {
        'conserved': conserved,
        'deltaE': dE,
        'deltaPx': dPx,
        'deltaPy': dPy,
        'deltaPz': dPz,
        'E_initial': float(total_i[0]),
        'E_final': float(total_f[0]),
    }


def check_energy_conservation(initial_vectors, final_vectors, tol=1e-6):
    """True if |E_initial - E_final| < tol."""
    return abs(check_energy_momentum(initial_vectors, final_vectors, tol)['deltaE']) < tol


def check_momentum_conservation(initial_vectors, final_vectors, tol=1e-6):
    """True if px, py and pz are each conserved within tol."""
    d = check_energy_momentum(initial_vectors, final_vectors, tol)
    return all(abs(d[k]) < tol for k in ('deltaPx', 'deltaPy', 'deltaPz'))


def check_conservation(initial_vectors, final_vectors, tol=1e-6):
    """
    Full 4-momentum conservation (energy + momentum).

    Notes
    -----
    For a resonance mother the daughters conserve the four-momentum built
    from the smeared mass, not the catalog mass, so only zero-width mothers
    are expected to pass.
    """
    return check_energy_momentum(initial_vectors, final_vectors, tol)['conserved']
