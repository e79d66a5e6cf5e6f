"""Synthetic division by a linear factor (x - a), over Z and over GF(p).

Both routines take and return raw coefficient lists (ascending degree) and
return None when the division is not defined: a is not a root, or the
modulus is not prime. Factoring over a composite modulus is refused because
factorization there is not unique, e.g. mod 4

    x^2 = x^2 + 4x + 4 = (x + 2)^2.
"""

import logging

from intpoly.coeffs import euclid_rem_into, horner, shift_down, trim
from intpoly.modular import euclid_rem, inv_mod_p, is_prime

_logger = logging.getLogger(__name__)


def factor_root(coeffs: list, a: int):
    """Return q with coeffs == q * (x - a) over the integers, or None.

    With c the input and b the output, b[0] = -c[0] / a and
    b[n] = (b[n-1] - c[n]) / a. The root check guarantees every division is
    exact; a remainder means the input broke that guarantee and raises
    ArithmeticError instead of silently truncating.
    """
    if horner(coeffs, a) != 0:
        _logger.debug("factor_root: %d is not a root", a)
        return None
    if not coeffs:
        return []
    if a == 0:
        return shift_down(coeffs)

    out = []
    acc = 0
    for n, c in enumerate(coeffs[:-1]):
        acc, r = divmod(acc - c, a)
        if r != 0:
            raise ArithmeticError(
                f"synthetic division by (x - {a}) is not exact at degree {n}"
            )
        out.append(acc)
    _logger.debug("factor_root: divided degree %d by (x - %d)", len(coeffs) - 1, a)
    return out


def factor_root_mod(coeffs: list, a: int, p: int):
    """Return q with coeffs == q * (x - a) over GF(p), or None.

    p must be prime and a must be a root mod p. The input is reduced into
    [0, p) first; every output coefficient is in [0, p). Division by a
    becomes multiplication by its inverse mod p.
    """
    if not is_prime(p):
        _logger.debug("factor_root_mod: modulus %d is not prime", p)
        return None
    if euclid_rem(horner(coeffs, a), p) != 0:
        _logger.debug("factor_root_mod: %d is not a root mod %d", a, p)
        return None

    reduced = list(coeffs)
    euclid_rem_into(reduced, p)
    trim(reduced)
    if not reduced:
        return []

    a = euclid_rem(a, p)
    if a == 0:
        return shift_down(reduced)

    a_inv = inv_mod_p(a, p)
    out = []
    acc = 0
    for c in reduced[:-1]:
        acc = euclid_rem((acc - c) * a_inv, p)
        out.append(acc)
    _logger.debug(
        "factor_root_mod: divided degree %d by (x - %d) mod %d", len(reduced) - 1, a, p
    )
    return out
