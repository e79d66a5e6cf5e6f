"""Shared fixtures for intpoly tests."""

import random
import pytest
from intpoly.polynomial import Polynomial


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(42)


@pytest.fixture
def sample_polys(rng):
    """12 random polynomials of degree -1..6, small coefficients, zero included."""
    polys = [Polynomial.zero()]
    for _ in range(11):
        degree = rng.randint(0, 6)
        coeffs = [rng.randint(-20, 20) for _ in range(degree)]
        coeffs.append(rng.choice([-3, -2, -1, 1, 2, 3]))
        polys.append(Polynomial(coeffs))
    return polys


@pytest.fixture
def primes():
    return [2, 3, 5, 7, 11, 13, 101]
