"""
Evaluation-form tests: Lagrange basis SRS, commitments and openings on the domain.

평가 형식 결과는 같은 다항식의 계수 형식 결과와 같은 G1 점이어야 한다.
"""
import pytest

from melon.kzg.curve import BN128
from melon.kzg.eval_form import KZGProverEvalForm, compute_lagrange_basis
from melon.kzg.fft import EvaluationDomain
from melon.kzg.field import FR, get_roots_of_unity
from melon.kzg.kzg import KZGProver, KZGVerifier
from melon.kzg.polynomial import Polynomial


@pytest.fixture(scope="module")
def basis(params):
    return compute_lagrange_basis(params, 4)


@pytest.fixture
def prover(params, basis):
    return KZGProverEvalForm(params, basis)


@pytest.fixture
def evals(rng):
    return [FR(rng.getrandbits(64)) for _ in range(4)]


def coefficient_form(evals):
    domain = EvaluationDomain.from_coeffs(evals)
    domain.ifft()
    return Polynomial.from_evaluation_domain(domain)


# ─────────────────────────────────────────────────────────────────────
# Lagrange basis
# ─────────────────────────────────────────────────────────────────────

class TestLagrangeBasis:
    def test_matches_lagrange_polynomials(self, params, prover, basis):
        coefficient_prover = KZGProver(params)
        for i in range(4):
            unit = [FR(1) if j == i else FR(0) for j in range(4)]
            lagrange = Polynomial.lagrange_interpolation(list(prover.domain), unit)
            assert basis[i] == coefficient_prover.commit(lagrange)

    def test_default_size(self, params):
        assert len(compute_lagrange_basis(params)) == 8

    def test_size_not_power_of_two(self, params):
        with pytest.raises(ValueError):
            compute_lagrange_basis(params, 6)

    def test_size_larger_than_srs(self, params):
        with pytest.raises(ValueError):
            compute_lagrange_basis(params, 16)


# ─────────────────────────────────────────────────────────────────────
# Prover
# ─────────────────────────────────────────────────────────────────────

class TestKZGProverEvalForm:
    def test_domain(self, prover):
        omega = prover.domain[1]
        assert prover.domain[0] == FR(1)
        assert omega ** 4 == FR(1)
        assert omega ** 2 == FR(0) - FR(1)
        assert list(prover.domain) == get_roots_of_unity(4)

    def test_basis_length_not_power_of_two(self, params, basis):
        with pytest.raises(ValueError):
            KZGProverEvalForm(params, basis[:3])

    def test_commit_matches_coefficient_form(self, params, prover, evals):
        poly = coefficient_form(evals)
        assert prover.commit(evals) == KZGProver(params).commit(poly)

    def test_commit_accepts_evaluation_domain(self, prover, evals):
        assert prover.commit(EvaluationDomain.from_coeffs(evals)) == prover.commit(evals)

    def test_constant_evals(self, prover):
        assert prover.commit([5, 5, 5, 5]) == BN128.mul(BN128.g1, 5)

    def test_opening_point(self, prover, evals):
        assert prover.opening_point(evals, 2) == (prover.domain[2], evals[2])

    @pytest.mark.parametrize("index", range(4))
    def test_inner_witness_matches_coefficient_form(self, params, prover, evals, index):
        poly = coefficient_form(evals)
        point = prover.opening_point(evals, index)
        assert poly.evaluate(point[0]) == point[1]
        expected = KZGProver(params).create_witness(poly, point)
        assert prover.create_witness(evals, index) == expected

    def test_outer_witness_matches_coefficient_form(self, params, prover, evals, random_scalar):
        poly = coefficient_form(evals)
        x = random_scalar()
        y, witness = prover.create_witness_at(evals, x)
        assert y == poly.evaluate(x)
        assert witness == KZGProver(params).create_witness(poly, (x, y))

    def test_witness_at_domain_point_delegates(self, prover, evals):
        y, witness = prover.create_witness_at(evals, prover.domain[3])
        assert y == evals[3]
        assert witness == prover.create_witness(evals, 3)

    def test_verify_with_coefficient_verifier(self, params, prover, evals):
        commitment = prover.commit(evals)
        witness = prover.create_witness(evals, 1)
        point = prover.opening_point(evals, 1)
        assert KZGVerifier(params).verify_eval(point, commitment, witness)

    def test_index_out_of_range(self, prover, evals):
        with pytest.raises(IndexError):
            prover.create_witness(evals, 4)

    def test_wrong_number_of_evals(self, prover):
        with pytest.raises(ValueError):
            prover.commit([1, 2, 3])
