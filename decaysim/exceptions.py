"""
Error types raised by decaysim.

Every error derives from DecaySimError, and also from the builtin exception
that matches its meaning, so callers may catch either.
"""


class DecaySimError(Exception):
    """Base class for all decaysim errors."""


class TypeNotFound(DecaySimError, LookupError):
    """No particle type with the requested name or index."""


class CatalogFrozen(DecaySimError, RuntimeError):
    """Registration attempted on a frozen catalog."""


class InvalidState(DecaySimError, RuntimeError):
    """Type query on a particle whose type index is unset."""


class DomainError(DecaySimError, ValueError):
    """Numerical argument outside the physical domain (e.g. |beta| >= 1)."""


class DecayError(DecaySimError, ValueError):
    """A two-body decay could not be performed."""


class ZeroMassParent(DecayError):
    """The decaying particle has zero rest mass."""


class KinematicallyForbidden(DecayError):
    """Effective mother mass is below the sum of daughter masses."""


class SamplingError(DecaySimError, RuntimeError):
    """A rejection sampler exceeded its retry budget."""
