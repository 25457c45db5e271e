"""Shared fixtures for melon KZG tests."""

import random

import pytest

from melon.kzg.field import FR
from melon.kzg.polynomial import Polynomial
from melon.kzg.srs import setup


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: marks tests as slow (BLS12-381 pairings)")


@pytest.fixture
def rng():
    """Deterministic RNG for reproducible tests."""
    return random.Random(69)


@pytest.fixture
def random_scalar(rng):
    """64비트 난수 스칼라 생성기."""
    def _random_scalar():
        return FR(rng.getrandbits(64))
    return _random_scalar


@pytest.fixture
def random_polynomial(rng):
    """계수 min_coeffs..max_coeffs-1개의 난수 다항식 생성기 (영 다항식은 나오지 않음)."""
    def _random_polynomial(min_coeffs, max_coeffs):
        num_coeffs = rng.randrange(min_coeffs, max_coeffs)
        coeffs = [FR(0)] * max_coeffs
        for i in range(num_coeffs):
            coeffs[i] = FR(rng.getrandbits(64) or 1)
        poly = Polynomial.from_coeffs_unchecked(coeffs, num_coeffs - 1)
        poly.shrink_degree()
        return poly
    return _random_polynomial


@pytest.fixture(scope="session")
def trapdoor():
    """SRS 트랩도어 s. 테스트에서는 s를 알고 있으므로 p(s)·g 를 직접 비교할 수 있다."""
    return FR(random.Random(1234).getrandbits(64))


@pytest.fixture(scope="session")
def params(trapdoor):
    """Session-wide BN128 SRS with 13 powers."""
    return setup(trapdoor, 13)
