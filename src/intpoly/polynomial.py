"""Univariate polynomials with integer coefficients.

A Polynomial wraps a list of ints in ascending-degree order with no trailing
zeros; the zero polynomial is the empty list and has degree -1. Arithmetic
operators return new normalized polynomials, augmented assignment mutates in
place, and both forms go through the same routine so they cannot drift.

    >>> quadratic = poly(1, 2, 1)      # x^2 + 2x + 1
    >>> linear = poly(-6, 1)           # x - 6
    >>> str(quadratic * linear)
    'x^3 - 4x^2 - 11x - 6'
    >>> (quadratic * linear) % 5
    Polynomial([-1, -1, -4, 1])
    >>> (quadratic * linear).rem_euclid(5)
    Polynomial([4, 4, 1, 1])
"""

import operator

from intpoly import coeffs as _c
from intpoly import roots

INDETERMINATE = "x"


class Polynomial:
    """Polynomial over Z. coeffs[0] = constant term."""

    __slots__ = ('_coeffs',)

    def __init__(self, coeffs=()):
        self._coeffs = [operator.index(c) for c in coeffs]
        self._reduce()

    @classmethod
    def zero(cls) -> 'Polynomial':
        return cls()

    @classmethod
    def constant(cls, value: int) -> 'Polynomial':
        """Constant polynomial; constant(0) is zero()."""
        return cls((value,))

    def copy(self) -> 'Polynomial':
        out = Polynomial.__new__(Polynomial)
        out._coeffs = list(self._coeffs)
        return out

    def _reduce(self):
        _c.trim(self._coeffs)

    # --- representation ---

    @property
    def degree(self) -> int:
        """Highest power with a nonzero coefficient; -1 for the zero polynomial."""
        return len(self._coeffs) - 1

    def is_zero(self) -> bool:
        return self.degree == -1

    @property
    def coeffs(self) -> tuple:
        """Coefficients in ascending degree (coeffs[n] is the x^n coefficient)."""
        return tuple(self._coeffs)

    def coeffs_mut(self) -> list:
        """The live coefficient list.

        Writes through this list skip normalization: leaving a trailing zero
        behind breaks degree and equality until the next arithmetic operation.
        """
        return self._coeffs

    # --- additive family ---

    def _add(self, other, sign: int, in_place: bool):
        if isinstance(other, Polynomial):
            target = self if in_place else self.copy()
            _c.add_into(target._coeffs, other._coeffs, sign)
        elif isinstance(other, int):
            target = self if in_place else self.copy()
            _c.add_scalar_into(target._coeffs, sign * other)
        else:
            return NotImplemented
        target._reduce()
        return target

    def __add__(self, other):
        return self._add(other, 1, in_place=False)

    def __radd__(self, other):
        return self._add(other, 1, in_place=False)

    def __iadd__(self, other):
        return self._add(other, 1, in_place=True)

    def __sub__(self, other):
        return self._add(other, -1, in_place=False)

    def __rsub__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return (-self)._add(other, 1, in_place=True)

    def __isub__(self, other):
        return self._add(other, -1, in_place=True)

    def __neg__(self):
        out = self.copy()
        _c.neg_into(out._coeffs)
        return out

    # --- multiplicative family ---

    def _mul(self, other, in_place: bool):
        target = self if in_place else self.copy()
        if isinstance(other, Polynomial):
            target._coeffs[:] = _c.convolve(self._coeffs, other._coeffs)
        elif isinstance(other, int):
            _c.scale_into(target._coeffs, other)
        else:
            return NotImplemented
        target._reduce()
        return target

    def __mul__(self, other):
        return self._mul(other, in_place=False)

    def __rmul__(self, other):
        return self._mul(other, in_place=False)

    def __imul__(self, other):
        return self._mul(other, in_place=True)

    # --- modular reduction ---

    def _rem(self, n, euclid: bool, in_place: bool):
        if not isinstance(n, int):
            return NotImplemented
        target = self if in_place else self.copy()
        if euclid:
            _c.euclid_rem_into(target._coeffs, n)
        else:
            _c.trunc_rem_into(target._coeffs, n)
        target._reduce()
        return target

    def __mod__(self, n):
        """Truncating remainder of every coefficient: poly(-7) % 5 == poly(-2)."""
        return self._rem(n, euclid=False, in_place=False)

    def __imod__(self, n):
        return self._rem(n, euclid=False, in_place=True)

    def rem_euclid(self, n: int) -> 'Polynomial':
        """Euclidean remainder of every coefficient, each in [0, |n|).

        >>> poly(6, -5, 3, -7, 4).rem_euclid(5)
        Polynomial([1, 0, 3, 3, 4])
        """
        if not isinstance(n, int):
            raise TypeError(f"modulus must be an int, got {type(n).__name__}")
        return self._rem(n, euclid=True, in_place=False)

    # --- number theory ---

    def derivative(self) -> 'Polynomial':
        return Polynomial(_c.derivative(self._coeffs))

    def eval(self, x: int) -> int:
        """Evaluate at x using Horner's method."""
        return _c.horner(self._coeffs, x)

    def has_root(self, x: int) -> bool:
        return self.eval(x) == 0

    def has_root_mod(self, x: int, div: int) -> bool:
        """True if x is a root of this polynomial taken modulo div."""
        return self.eval(x) % abs(div) == 0

    def times_x(self) -> 'Polynomial':
        return Polynomial(_c.shift_up(self._coeffs))

    def factor_root(self, a: int):
        """If a is a root, return p with self == p * (x - a); otherwise None.

        >>> poly(12, -8, 1).factor_root(2)
        Polynomial([-6, 1])
        >>> poly(12, -8, 1).factor_root(5) is None
        True
        """
        out = roots.factor_root(self._coeffs, a)
        return None if out is None else Polynomial(out)

    def factor_root_mod(self, a: int, p: int):
        """Factor (x - a) out of self over the integers mod a prime p.

        Returns None if p is not prime or a is not a root mod p. Coefficients
        of the result are in [0, p).

        >>> poly(12, -8, 1).factor_root_mod(2, 5)
        Polynomial([4, 1])
        >>> poly(12, -8, 1).factor_root_mod(2, 4) is None
        True
        """
        out = roots.factor_root_mod(self._coeffs, a, p)
        return None if out is None else Polynomial(out)

    # --- presentation / traversal ---

    def to_string(self, var: str = INDETERMINATE) -> str:
        if self.is_zero():
            return "0"
        parts = []
        for n in range(self.degree, -1, -1):
            c = self._coeffs[n]
            if c == 0:
                continue
            if parts:
                parts.append(" - " if c < 0 else " + ")
                c = abs(c)
            if n == 0:
                parts.append(str(c))
                continue
            power = var if n == 1 else f"{var}^{n}"
            if c == 1:
                parts.append(power)
            elif c == -1:
                parts.append(f"-{power}")
            else:
                parts.append(f"{c}{power}")
        return "".join(parts)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"Polynomial({self._coeffs!r})"

    def __eq__(self, other):
        if isinstance(other, Polynomial):
            return self._coeffs == other._coeffs
        return NotImplemented

    __hash__ = None

    def __bool__(self):
        return not self.is_zero()

    def __len__(self):
        return len(self._coeffs)

    def __iter__(self):
        return iter(self._coeffs)

    def _check_index(self, index) -> int:
        index = operator.index(index)
        if not 0 <= index < len(self._coeffs):
            raise IndexError(
                f"coefficient index {index} out of range for degree {self.degree}"
            )
        return index

    def __getitem__(self, index) -> int:
        return self._coeffs[self._check_index(index)]

    def __setitem__(self, index, value: int):
        """Raw write of the x^index coefficient; see coeffs_mut()."""
        self._coeffs[self._check_index(index)] = operator.index(value)


def poly(*coeffs: int) -> Polynomial:
    """Literal helper: poly(1, 2, 1) is x^2 + 2x + 1, poly() is zero."""
    return Polynomial(coeffs)
