"""
KZG 다항식 커밋먼트 스킴
=========================

Kate-Zaverucha-Goldberg (KZG) 커밋먼트의 Prover와 Verifier.

**커밋먼트**:
  C = Σᵢ cᵢ · gs[i] = p(s)·g
  s를 모르는 채로 SRS의 G1 거듭제곱에 계수를 곱해 더한다.
  - 바인딩(binding): 차수 제한 안의 서로 다른 다항식은 (무시할 확률을 빼면)
    서로 다른 커밋먼트를 가진다.
  - 하이딩(hiding)은 제공하지 않는다.

**열기 증명 (witness)**:
  "p(x) = y" 임을 증명한다.
  1. 몫 다항식 q(X) = (p(X) - y) / (X - x) 를 조립제법(synthetic division)으로 계산
  2. 증명 π = q(s)·g

**검증**:
  p(X) - y = q(X)·(X - x) 는 다항식 항등식이다. X에 s를 넣고 지수로 올리면
  e(π, hs[1] - x·hs[0]) == e(C - y·gs[0], hs[0])
  페어링 두 번으로 끝나므로 다항식 차수와 무관하게 O(1)이다.

사용 예시:
    >>> prover, verifier = KZGProver(params), KZGVerifier(params)
    >>> C = prover.commit(p)
    >>> y = p.evaluate(x)
    >>> pi = prover.create_witness(p, (x, y))
    >>> verifier.verify_eval((x, y), C, pi)   # True
"""

from melon.kzg.errors import (
    NoPolynomialError,
    PointNotOnPolynomialError,
    PolynomialDegreeTooLargeError,
    SRSTooShortError,
)
from melon.kzg.field import to_field
from melon.kzg.polynomial import Polynomial


def _commit(params, polynomial):
    """Σ coeffs[i] · gs[i] (i < num_coeffs)."""
    if polynomial is None:
        raise NoPolynomialError()
    num_coeffs = polynomial.num_coeffs()
    if num_coeffs > params.max_coeffs:
        raise PolynomialDegreeTooLargeError(
            f"다항식 계수 {num_coeffs}개가 SRS 최대 {params.max_coeffs}개를 초과합니다"
        )
    return params.backend.msm(params.gs[:num_coeffs], polynomial.slice_coeffs())


class KZGProver:
    """커밋먼트와 열기 증명을 만드는 Prover.

    KZGParams에 대한 참조만 가지며 상태가 없다.
    """

    def __init__(self, params):
        self._params = params

    @property
    def params(self):
        return self._params

    def commit(self, polynomial):
        """다항식을 KZG 커밋한다.

        Returns:
            G1 점 (아핀 좌표, 영 다항식이면 무한원점 None)

        Raises:
            PolynomialDegreeTooLargeError: num_coeffs() > N
            NoPolynomialError: polynomial is None
        """
        return _commit(self._params, polynomial)

    def create_witness(self, polynomial, point):
        """(x, y)에 대한 열기 증명을 만든다.

        조립제법:
            r ← p의 계수 복사본, r[0] ← r[0] - y
            i = degree .. 1 에 대해
                q[i-1] ← r[i]
                r[i-1] ← r[i-1] + x·r[i]
        끝나면 r[0] = p(x) - y 이다.

        몫이 상수(원래 차수 1)이면 MSM 없이 q[0]·gs[0]을 바로 계산한다.
        차수 0 다항식의 몫은 0이므로 증명은 무한원점이다.

        Args:
            polynomial: 열어볼 다항식 p(X)
            point: (x, y) 튜플

        Returns:
            G1 점: 증명 π

        Raises:
            PointNotOnPolynomialError: p(x) != y (나머지 r[0] ≠ 0)
            NoPolynomialError: polynomial is None
        """
        if polynomial is None:
            raise NoPolynomialError()
        field = polynomial.field
        x = to_field(point[0], field)
        y = to_field(point[1], field)
        backend = self._params.backend

        degree = polynomial.degree
        remainder = polynomial.slice_coeffs()
        remainder[0] = remainder[0] - y

        if degree == 0:
            if remainder[0] != 0:
                raise PointNotOnPolynomialError()
            return backend.identity

        quotient = Polynomial.from_coeffs_unchecked(
            [field(0)] * degree, degree - 1, field
        )
        for i in range(degree, 0, -1):
            factor = remainder[i]
            quotient.coeffs[i - 1] = factor
            remainder[i - 1] = remainder[i - 1] + x * factor

        if remainder[0] != 0:
            raise PointNotOnPolynomialError(
                f"p({int(x)}) != {int(y)}: 나머지가 0이 아닙니다"
            )

        if quotient.num_coeffs() == 1:
            return backend.mul(self._params.gs[0], quotient.coeffs[0])
        return self.commit(quotient)


class KZGVerifier:
    """커밋먼트와 열기 증명을 검증하는 Verifier. 상태가 없다."""

    def __init__(self, params):
        self._params = params

    @property
    def params(self):
        return self._params

    def verify_poly(self, commitment, polynomial):
        """커밋먼트를 다시 계산하여 비교한다.

        다항식 전체가 필요하고 O(n)이므로 간결한 검증이 아니라
        테스트용 정합성 검사이다.

        Returns:
            bool: 다시 계산한 커밋먼트가 commitment와 같은지 여부

        Raises:
            NoPolynomialError: polynomial is None
            PolynomialDegreeTooLargeError: num_coeffs() > N (커밋 자체가 불가능하다)
        """
        return _commit(self._params, polynomial) == commitment

    def verify_eval(self, point, commitment, witness):
        """페어링 검사로 p(x) = y 를 확인한다.

        e(π, [s - x]₂) == e(C - [y]₁, [1]₂)

        Args:
            point: (x, y) 튜플
            commitment: 커밋먼트 C (G1 점)
            witness: 증명 π (G1 점)

        Returns:
            bool: 검증 성공 여부

        Raises:
            SRSTooShortError: SRS 길이가 1이라 hs[1]이 없을 때
        """
        x, y = point
        backend = self._params.backend
        gs = self._params.gs
        hs = self._params.hs
        if len(hs) < 2:
            raise SRSTooShortError()

        # [s - x]₂ = hs[1] - x·hs[0]
        s_minus_x = backend.sub(hs[1], backend.mul(hs[0], x))
        # C - [y]₁ = C - y·gs[0]
        c_minus_y = backend.sub(commitment, backend.mul(gs[0], y))

        lhs = backend.pairing(witness, s_minus_x)
        rhs = backend.pairing(c_minus_y, hs[0])
        return lhs == rhs
