"""
평가 형식(Lagrange 기저) KZG 커밋먼트
======================================

다항식을 계수 대신 도메인 H = {1, ω, ..., ω^(n-1)} 위의 값 f(ωⁱ)로 다룬다.
SRS를 Lagrange 기저로 바꿔 두면 계수로 되돌리지 않고 바로 커밋할 수 있다.

**Lagrange 기저 SRS**:
  Lᵢ(X) = (1/n) Σⱼ ω^(-ij) Xʲ 이므로
  [Lᵢ(s)]₁ = (1/n) Σⱼ ω^(-ij) gs[j]
  즉 gs[:n]에 G1 위의 역 FFT를 적용한 것이다.

**커밋먼트**:
  C = Σᵢ f(ωⁱ) · [Lᵢ(s)]₁ = f(s)·g  (계수 형식 커밋먼트와 같은 점)

**도메인 안의 점 z = ωᵐ에서의 몫 (inner quotient)**:
  qᵢ = (fᵢ - y) / (ωⁱ - ωᵐ)                 (i ≠ m)
  qₘ = -Σ_{i≠m} qᵢ · ω^(i-m)                (= f'(ωᵐ))

**도메인 밖의 점 z에서의 몫 (outer quotient)**:
  y = (zⁿ - 1)/n · Σᵢ fᵢ·ωⁱ / (z - ωⁱ)       (barycentric 공식)
  qᵢ = (fᵢ - y) / (ωⁱ - z)

만들어진 커밋먼트와 증명은 KZGVerifier로 그대로 검증된다.

사용 예시:
    >>> basis = compute_lagrange_basis(params, 8)
    >>> prover = KZGProverEvalForm(params, basis)
    >>> C = prover.commit(evals)
    >>> pi = prover.create_witness(evals, 3)
    >>> KZGVerifier(params).verify_eval(prover.opening_point(evals, 3), C, pi)
"""

import logging

from melon.kzg.fft import EvaluationDomain, bitreverse_permute
from melon.kzg.field import get_root_of_unity, get_roots_of_unity, inverse, to_field


logger = logging.getLogger(__name__)


def compute_lagrange_basis(params, size=None):
    """크기 size 도메인의 Lagrange 기저 [L₀(s)]₁, ..., [L_{n-1}(s)]₁ 를 계산한다.

    Args:
        params: KZGParams
        size: 도메인 크기 (2의 거듭제곱, ≤ N). None이면 N 이하의 최대 2의 거듭제곱.

    Returns:
        list: G1 점 리스트 (길이 size)

    Raises:
        ValueError: size가 2의 거듭제곱이 아니거나 N을 넘을 때
    """
    backend = params.backend
    field = backend.scalar_field
    if size is None:
        size = 1 << (params.max_coeffs.bit_length() - 1)
    _check_domain_size(size)
    if size > params.max_coeffs:
        raise ValueError(
            f"도메인 크기 {size}가 SRS 길이 {params.max_coeffs}를 초과합니다"
        )

    logger.debug("computing %s Lagrange basis of size %d", backend.name, size)
    log_n = size.bit_length() - 1
    omega = get_root_of_unity(size, field)

    points = list(params.gs[:size])
    _group_fft(points, inverse(omega), log_n, backend)
    n_inv = inverse(field(size))
    return [backend.mul(point, n_inv) for point in points]


def _check_domain_size(size):
    if size < 1 or (size & (size - 1)) != 0:
        raise ValueError(f"도메인 크기는 2의 거듭제곱이어야 합니다: {size}")


def _group_fft(points, omega, log_n, backend):
    """G1 점 위의 radix-2 FFT (제자리). serial_fft와 같은 버터플라이 구조."""
    n = len(points)
    bitreverse_permute(points, log_n)

    one = type(omega)(1)
    half = 1
    for _ in range(log_n):
        w_m = omega ** (n // (2 * half))
        for k in range(0, n, 2 * half):
            w = one
            for j in range(half):
                t = backend.mul(points[k + j + half], w)
                points[k + j + half] = backend.sub(points[k + j], t)
                points[k + j] = backend.add(points[k + j], t)
                w = w * w_m
        half *= 2


class KZGProverEvalForm:
    """평가 형식 다항식을 위한 Prover.

    속성:
        params: KZGParams
        lagrange_basis: compute_lagrange_basis()의 결과
        domain: [1, ω, ..., ω^(n-1)]

    lagrange_basis의 길이가 도메인 크기 n이므로 2의 거듭제곱이어야 한다 (아니면 ValueError).
    """

    def __init__(self, params, lagrange_basis):
        self._params = params
        self._lagrange_basis = tuple(lagrange_basis)
        _check_domain_size(len(self._lagrange_basis))
        field = params.backend.scalar_field
        self._domain = tuple(get_roots_of_unity(len(self._lagrange_basis), field))

    @property
    def params(self):
        return self._params

    @property
    def lagrange_basis(self):
        return self._lagrange_basis

    @property
    def domain(self):
        return self._domain

    def _values(self, evals):
        if isinstance(evals, EvaluationDomain):
            evals = evals.coeffs
        field = self._params.backend.scalar_field
        values = [to_field(v, field) for v in evals]
        if len(values) != len(self._domain):
            raise ValueError(
                f"평가값 {len(values)}개가 도메인 크기 {len(self._domain)}와 다릅니다"
            )
        return values

    def commit(self, evals):
        """C = Σᵢ evals[i] · [Lᵢ(s)]₁."""
        values = self._values(evals)
        return self._params.backend.msm(self._lagrange_basis, values)

    def opening_point(self, evals, index):
        """도메인 index번째 점의 (ω^index, evals[index])."""
        values = self._values(evals)
        return self._domain[index], values[index]

    def create_witness(self, evals, index):
        """도메인 점 ω^index에서의 열기 증명 (inner quotient).

        Raises:
            IndexError: index가 도메인 범위를 벗어날 때
        """
        values = self._values(evals)
        n = len(values)
        if not 0 <= index < n:
            raise IndexError(f"도메인 인덱스 {index}가 범위 [0, {n})를 벗어났습니다")

        field = self._params.backend.scalar_field
        domain = self._domain
        z = domain[index]
        y = values[index]

        quotient = [field(0)] * n
        for i in range(n):
            if i == index:
                continue
            quotient[i] = (values[i] - y) * inverse(domain[i] - z)
            quotient[index] = quotient[index] - quotient[i] * domain[(i - index) % n]

        return self._params.backend.msm(self._lagrange_basis, quotient)

    def create_witness_at(self, evals, x):
        """임의의 점 x에서 값을 계산하고 열기 증명을 만든다.

        x가 도메인 위의 점이면 create_witness(evals, index)로 위임한다.

        Returns:
            tuple: (y, witness)
        """
        values = self._values(evals)
        field = self._params.backend.scalar_field
        x = to_field(x, field)
        domain = self._domain
        n = len(domain)

        for index, root in enumerate(domain):
            if root == x:
                return values[index], self.create_witness(values, index)

        # barycentric: f(x) = (xⁿ - 1)/n · Σ fᵢ·ωⁱ/(x - ωⁱ)
        total = field(0)
        for value, root in zip(values, domain):
            total = total + value * root * inverse(x - root)
        y = (x ** n - field(1)) * inverse(field(n)) * total

        quotient = [(value - y) * inverse(root - x) for value, root in zip(values, domain)]
        return y, self._params.backend.msm(self._lagrange_basis, quotient)
