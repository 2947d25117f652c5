"""Stateless deterministic pseudo-randomness keyed by an identifier.

Not cryptographically secure. Anyone who knows an identifier can
recompute every value derived from it.
"""

from collections.abc import Iterator

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
HASH_MAX = 0xFFFFFFFF

LCG_MULTIPLIER = 1664525
LCG_INCREMENT = 1013904223
LCG_MODULUS = 2**32


def _code_units(identifier: str) -> Iterator[int]:
    """Yield UTF-16 code units, matching how the mobile client reads strings."""
    encoded = identifier.encode("utf-16-le", errors="surrogatepass")
    for i in range(0, len(encoded), 2):
        yield encoded[i] | (encoded[i + 1] << 8)


def fnv1a_32(identifier: str) -> int:
    """32-bit FNV-1a hash of an identifier."""
    h = FNV_OFFSET_BASIS
    for unit in _code_units(identifier):
        h = ((h ^ unit) * FNV_PRIME) % LCG_MODULUS
    return h


def hash_to_unit_interval(identifier: object) -> float:
    """Map an identifier to a float in [0, 1].

    Non-string identifiers (ints, UUIDs) are hashed through ``str()``.
    The empty string maps to the offset basis and never raises.
    """
    return fnv1a_32(str(identifier)) / HASH_MAX


def lcg_stream(seed: float) -> Iterator[float]:
    """Infinite stream of uniform floats in [0, 1) seeded from ``seed``.

    Uses the Numerical Recipes LCG constants. The stream owns its state, so
    two streams built from the same seed yield identical sequences.
    """
    state = int(seed * LCG_MODULUS) % LCG_MODULUS
    while True:
        state = (LCG_MULTIPLIER * state + LCG_INCREMENT) % LCG_MODULUS
        yield state / LCG_MODULUS
