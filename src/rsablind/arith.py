"""
Modular arithmetic primitives for textbook RSA.

All functions work on Python ints of arbitrary size. They are pure and hold
no state, so they are safe to call from any thread.
"""

from typing import Tuple

from rsablind.errors import NoModularInverse


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Compute base^exponent mod modulus by left-to-right square-and-multiply.

    Every intermediate product is reduced mod modulus, so operands never
    grow past modulus^2.
    """
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if modulus == 1:
        return 0

    base %= modulus
    result = 1
    for bit in bin(exponent)[2:]:
        result = (result * result) % modulus
        if bit == "1":
            result = (result * base) % modulus
    return result


def gcd(a: int, b: int) -> int:
    """Greatest common divisor (always non-negative)."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def extended_gcd(a: int, m: int) -> Tuple[int, int]:
    """Iterative extended Euclid.

    Returns (g, x) with g = gcd(a, m) and a*x == g (mod m). The coefficient
    for m is not tracked since only inverses are needed.
    """
    old_r, r = a, m
    old_x, x = 1, 0
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
    return old_r, old_x


def mod_inverse(a: int, m: int) -> int:
    """Return a^-1 mod m, normalised into [0, m).

    Raises NoModularInverse when gcd(a, m) != 1.
    """
    if m <= 0:
        raise ValueError("modulus must be positive")
    if m == 1:
        # every residue is 0 mod 1
        return 0

    g, x = extended_gcd(a % m, m)
    if g != 1:
        raise NoModularInverse(m)
    if x < 0:
        x += m
    return x
