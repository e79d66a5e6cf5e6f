"""Integer number theory used by the polynomial root routines.

Two remainder conventions live here side by side and must not be mixed up:

  trunc_rem  -- sign follows the dividend (C-style ``%``):  trunc_rem(-7, 5) == -2
  euclid_rem -- always in [0, |n|):                        euclid_rem(-7, 5) == 3

Python's own ``%`` is neither: it follows the sign of the divisor.
"""

import math


def trunc_rem(a: int, n: int) -> int:
    """Remainder of truncating division a / n. Raises ZeroDivisionError for n == 0."""
    r = abs(a) % abs(n)
    return -r if a < 0 else r


def euclid_rem(a: int, n: int) -> int:
    """Non-negative remainder of a by n, in [0, |n|)."""
    return a % abs(n)


def is_prime(p: int) -> bool:
    """Trial division over 2, 3 and the 6k +/- 1 candidates up to isqrt(p)."""
    if p < 2:
        return False
    if p < 4:
        return True
    if p % 2 == 0 or p % 3 == 0:
        return False
    limit = math.isqrt(p)
    i = 5
    while i <= limit:
        # i = 6k - 1, i + 2 = 6k + 1
        if p % i == 0 or p % (i + 2) == 0:
            return False
        i += 6
    return True


def inv_mod_p(a: int, p: int) -> int:
    """Multiplicative inverse of a modulo prime p via the extended Euclidean algorithm.

    Tracks only the Bezout coefficient of a; the result is normalized into
    [0, p). The caller guarantees p is prime. A residue of zero has no
    inverse and raises ZeroDivisionError.
    """
    residue = euclid_rem(a, p)
    if residue == 0:
        raise ZeroDivisionError(f"{a} has no inverse modulo {p}")
    r0, r1 = residue, p
    s0, s1 = 1, 0
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
    if r0 != 1:
        raise ZeroDivisionError(f"{a} is not invertible modulo {p} (gcd {r0})")
    return euclid_rem(s0, p)
