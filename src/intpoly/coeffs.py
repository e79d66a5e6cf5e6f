"""Coefficient-list primitives for integer polynomials.

Every function works on plain lists of ints in ascending-degree order
(coeffs[i] is the coefficient of x^i). Functions ending in ``_into`` mutate
their first argument; the rest return fresh lists. None of them normalize
except ``trim`` itself, so callers trim once after a batch of edits.
"""

from intpoly.modular import euclid_rem, trunc_rem


def trim(coeffs: list) -> list:
    """Pop trailing zero coefficients in place and return the same list.

    Idempotent. An all-zero list collapses to [].
    """
    while coeffs and coeffs[-1] == 0:
        coeffs.pop()
    return coeffs


def add_into(dst: list, src: list, sign: int = 1):
    """dst += sign * src, coefficient-wise. Extends dst when src is longer."""
    if dst is src:
        src = list(src)
    for i, c in enumerate(src):
        if i < len(dst):
            dst[i] += sign * c
        else:
            dst.append(sign * c)


def add_scalar_into(dst: list, n: int):
    """dst += n on the constant term only."""
    if dst:
        dst[0] += n
    else:
        dst.append(n)


def neg_into(dst: list):
    for i, c in enumerate(dst):
        dst[i] = -c


def scale_into(dst: list, n: int):
    """dst *= n. Scaling by 0 empties the list."""
    if n == 0:
        dst.clear()
        return
    for i, c in enumerate(dst):
        dst[i] = c * n


def convolve(lhs: list, rhs: list) -> list:
    """Schoolbook product of two coefficient lists.

    r[i] = sum_n lhs[n] * rhs[i - n] over 0 <= n < len(lhs), 0 <= i - n < len(rhs).
    An empty operand gives [].
    """
    if not lhs or not rhs:
        return []
    out = [0] * (len(lhs) + len(rhs) - 1)
    for n, a in enumerate(lhs):
        if a == 0:
            continue
        for m, b in enumerate(rhs):
            out[n + m] += a * b
    return out


def trunc_rem_into(dst: list, n: int):
    """Truncating remainder of each coefficient (sign follows the coefficient)."""
    for i, c in enumerate(dst):
        dst[i] = trunc_rem(c, n)


def euclid_rem_into(dst: list, n: int):
    """Euclidean remainder of each coefficient, in [0, |n|)."""
    for i, c in enumerate(dst):
        dst[i] = euclid_rem(c, n)


def horner(coeffs: list, x: int) -> int:
    """Evaluate a_0 + a_1 x + ... + a_d x^d at x using Horner's method.

    Same scheme as the field version, minus the reduction: accumulate from
    the highest degree down, acc = acc * x + c.
    """
    acc = 0
    for c in reversed(coeffs):
        acc = acc * x + c
    return acc


def derivative(coeffs: list) -> list:
    """d/dx: result[i] = (i + 1) * coeffs[i + 1]. Constants differentiate to []."""
    return trim([i * c for i, c in enumerate(coeffs)][1:])


def shift_up(coeffs: list) -> list:
    """Multiply by x. The empty list stays empty rather than becoming [0]."""
    if not coeffs:
        return []
    return [0] + coeffs


def shift_down(coeffs: list) -> list:
    """Drop the constant term (exact division by x when coeffs[0] == 0)."""
    return coeffs[1:]
