"""
EvaluationDomain / FFT tests: domain construction, round trips, fast multiplication.
"""
import pytest
from py_ecc.fields.field_elements import FQ

from melon.kzg.errors import PolynomialDegreeTooLargeError
from melon.kzg.fft import EvaluationDomain, bitreverse, serial_fft
from melon.kzg.field import FR, inverse
from melon.kzg.polynomial import Polynomial


class TinyField(FQ):
    """GF(13): 12 = 2^2 · 3 이므로 최대 4차 단위근까지만 지원한다."""
    field_modulus = 13
    TWO_ADICITY = 2
    MULTIPLICATIVE_GENERATOR = 2

    @classmethod
    def root_of_unity(cls):
        return cls(cls.MULTIPLICATIVE_GENERATOR) ** ((cls.field_modulus - 1) >> cls.TWO_ADICITY)


def random_coeffs(rng, n):
    return [FR(rng.getrandbits(250)) for _ in range(n)]


# ─────────────────────────────────────────────────────────────────────
# Domain construction
# ─────────────────────────────────────────────────────────────────────

class TestComputeOmega:
    def test_trivial_domain(self):
        m, exp, omega = EvaluationDomain.compute_omega(1, FR)
        assert (m, exp) == (1, 0)
        assert omega == FR(1)

    def test_rounds_up_to_power_of_two(self):
        m, exp, omega = EvaluationDomain.compute_omega(5, FR)
        assert (m, exp) == (8, 3)
        assert omega ** 8 == FR(1)
        assert omega ** 4 != FR(1)

    def test_exact_power_of_two(self):
        m, exp, _ = EvaluationDomain.compute_omega(16, FR)
        assert (m, exp) == (16, 4)

    def test_tiny_field_largest_domain(self):
        m, exp, omega = EvaluationDomain.compute_omega(4, TinyField)
        assert (m, exp) == (4, 2)
        assert omega == TinyField(8)
        assert omega ** 2 == TinyField(12)

    def test_degree_too_large(self):
        with pytest.raises(PolynomialDegreeTooLargeError):
            EvaluationDomain.compute_omega(5, TinyField)


class TestFromCoeffs:
    def test_zero_padding(self):
        domain = EvaluationDomain.from_coeffs([1, 2, 3])
        assert len(domain) == 4
        assert domain.coeffs == [FR(1), FR(2), FR(3), FR(0)]
        assert domain.exp == 2

    def test_constants(self):
        domain = EvaluationDomain.from_coeffs([1] * 8)
        assert domain.omega * domain.omegainv == FR(1)
        assert domain.minv * FR(8) == FR(1)
        assert domain.geninv * FR(FR.MULTIPLICATIVE_GENERATOR) == FR(1)

    def test_empty_input(self):
        domain = EvaluationDomain.from_coeffs([])
        assert len(domain) == 1
        assert domain.coeffs == [FR(0)]

    def test_too_large_for_field(self):
        with pytest.raises(PolynomialDegreeTooLargeError):
            EvaluationDomain.from_coeffs([1] * 5, field=TinyField)


# ─────────────────────────────────────────────────────────────────────
# FFT
# ─────────────────────────────────────────────────────────────────────

class TestFFT:
    def test_bitreverse(self):
        assert bitreverse(1, 3) == 4
        assert bitreverse(6, 3) == 3
        assert bitreverse(0, 0) == 0

    def test_fft_matches_direct_evaluation(self, rng):
        coeffs = random_coeffs(rng, 8)
        poly = Polynomial(coeffs)
        domain = EvaluationDomain.from_coeffs(coeffs)
        domain.fft()
        for i, value in enumerate(domain.coeffs):
            assert value == poly.evaluate(domain.omega ** i)

    def test_fft_tiny_field(self):
        # p(x) = 1 + 2x + 3x² + 4x³ over GF(13), ω = 8
        domain = EvaluationDomain.from_coeffs([1, 2, 3, 4], field=TinyField)
        domain.fft()
        expected = []
        for i in range(4):
            x = TinyField(8) ** i
            expected.append(TinyField(1) + TinyField(2) * x + TinyField(3) * x * x + TinyField(4) * x * x * x)
        assert domain.coeffs == expected

    @pytest.mark.parametrize("log_size", range(0, 7))
    def test_round_trip_power_of_two(self, rng, log_size):
        v = random_coeffs(rng, 1 << log_size)
        domain = EvaluationDomain.from_coeffs(v)
        domain.ifft()
        domain.fft()
        assert domain.coeffs == v
        domain.fft()
        domain.ifft()
        assert domain.coeffs == v

    @pytest.mark.parametrize("size", [3, 5, 7, 12])
    def test_round_trip_padded(self, rng, size):
        v = random_coeffs(rng, size)
        domain = EvaluationDomain.from_coeffs(v)
        padded = list(domain.coeffs)
        domain.fft()
        domain.ifft()
        assert domain.coeffs == padded
        assert domain.coeffs[:size] == v

    def test_coset_round_trip(self, rng):
        v = random_coeffs(rng, 8)
        domain = EvaluationDomain.from_coeffs(v)
        domain.coset_fft()
        domain.icoset_fft()
        assert domain.coeffs == v

    def test_coset_fft_evaluates_on_coset(self, rng):
        coeffs = random_coeffs(rng, 4)
        poly = Polynomial(coeffs)
        domain = EvaluationDomain.from_coeffs(coeffs)
        g = FR(FR.MULTIPLICATIVE_GENERATOR)
        domain.coset_fft()
        for i, value in enumerate(domain.coeffs):
            assert value == poly.evaluate(g * domain.omega ** i)

    def test_serial_fft_length_check(self):
        with pytest.raises(ValueError):
            serial_fft([FR(1), FR(2), FR(3)], FR(1), 2)

    def test_inverse_omega_relation(self):
        domain = EvaluationDomain.from_coeffs([0] * 16)
        assert domain.omegainv == inverse(domain.omega)
        assert domain.omega ** 15 == domain.omegainv


class TestMulAssign:
    def test_pointwise(self):
        a = EvaluationDomain.from_coeffs([1, 2, 3, 4])
        b = EvaluationDomain.from_coeffs([5, 6, 7, 8])
        a.mul_assign(b)
        assert a.coeffs == [FR(5), FR(12), FR(21), FR(32)]

    def test_length_mismatch(self):
        a = EvaluationDomain.from_coeffs([1, 2, 3, 4])
        b = EvaluationDomain.from_coeffs([1, 2])
        with pytest.raises(ValueError):
            a.mul_assign(b)


# ─────────────────────────────────────────────────────────────────────
# Fast multiplication
# ─────────────────────────────────────────────────────────────────────

class TestFFTMul:
    """FFT 곱셈은 나이브 곱셈과 정확히 같아야 한다."""

    @pytest.mark.parametrize("coeffs_a", [1, 5, 10, 50])
    @pytest.mark.parametrize("coeffs_b", [1, 5, 10, 50])
    def test_matches_naive(self, rng, coeffs_a, coeffs_b):
        a = Polynomial.from_coeffs_unchecked(random_coeffs(rng, coeffs_a), coeffs_a - 1)
        b = Polynomial.from_coeffs_unchecked(random_coeffs(rng, coeffs_b), coeffs_b - 1)
        assert a.fft_mul(b) == a * b

    def test_zero_operand(self):
        a = Polynomial.zero()
        b = Polynomial([1, 2, 3])
        assert a.fft_mul(b) == a * b

    def test_degree_field_matches_naive(self):
        a = Polynomial([1, 1])
        b = Polynomial([FR(0) - FR(1), 1])   # (1 + x)(x - 1) = x² - 1
        product = a.fft_mul(b)
        assert product.degree == 2
        assert product.slice_coeffs() == [FR(0) - FR(1), FR(0), FR(1)]
