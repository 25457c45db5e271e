"""
KZG 기반 모듈: 평가 도메인(Evaluation Domain)과 FFT
====================================================

다항식을 2의 거듭제곱 크기 m의 단위근 {1, ω, ..., ω^(m-1)} 위의 값으로 표현한다.
계수 ↔ 평가값 변환은 O(m log m)이며, 평가 표현에서의 곱셈은 점별(pointwise) 곱이다.
Polynomial.fft_mul이 이 표현을 사용한다.

**반복형 radix-2 Cooley-Tukey**:
  1. 비트 반전(bit-reversal) 순열로 버퍼를 재배치
  2. log m 단계의 버터플라이: 단계마다 반폭 h = 1, 2, 4, ...
     회전 인자 w_h = ω^(m / 2h)
       a[k+j]   ← a[k+j] + w·a[k+j+h]
       a[k+j+h] ← a[k+j] - w·a[k+j+h]
  IFFT는 ω^(-1)로 같은 변환을 한 뒤 m^(-1)을 곱한다.

**왕복(round-trip) 법칙**:
  유한체 산술은 정확하므로 ifft(fft(v)) == v, fft(ifft(v)) == v 가 항상 성립한다.

사용 예시:
    >>> domain = EvaluationDomain.from_coeffs([FR(1), FR(2), FR(3)])
    >>> len(domain)   # 4 (2의 거듭제곱으로 패딩)
    >>> domain.fft()
    >>> domain.ifft()
    >>> domain.coeffs  # [1, 2, 3, 0]
"""

from melon.kzg.config import resolve_field
from melon.kzg.errors import PolynomialDegreeTooLargeError
from melon.kzg.field import get_root_of_unity, inverse, to_field


class EvaluationDomain:
    """2의 거듭제곱 길이로 패딩된 계수(또는 평가값) 버퍼와 도메인 상수.

    속성:
        coeffs: 길이 m의 필드 원소 리스트 (fft/ifft가 제자리에서 변환)
        m: 도메인 크기 2^exp
        exp: log2(m)
        omega: m차 원시 단위근
        omegainv: omega^(-1)
        geninv: 필드 곱셈 생성자의 역원 (코셋 역변환용)
        minv: m^(-1)
        field: 스칼라 필드 클래스
    """

    def __init__(self, coeffs, m, exp, omega, field=None):
        self.field = type(omega) if field is None else field
        self.coeffs = coeffs
        self.m = m
        self.exp = exp
        self.omega = omega
        self.omegainv = inverse(omega)
        self.geninv = inverse(self.field(self.field.MULTIPLICATIVE_GENERATOR))
        self.minv = inverse(self.field(m))

    @staticmethod
    def compute_omega(d, field=None):
        """d개 이상의 계수를 담는 도메인 크기와 원시 단위근을 계산한다.

        Args:
            d: 필요한 최소 길이
            field: 스칼라 필드 클래스

        Returns:
            tuple: (m, exp, omega). m = 2^exp ≥ d 중 최소,
                   omega = ω_S^(2^(S - exp))

        Raises:
            PolynomialDegreeTooLargeError: exp가 필드의 2-adicity S를 넘을 때
        """
        field = resolve_field(field=field)
        m = 1
        exp = 0
        while m < d:
            m *= 2
            exp += 1
            if exp > field.TWO_ADICITY:
                raise PolynomialDegreeTooLargeError(
                    f"평가 도메인 크기 2^{exp}가 필드의 최대 2^{field.TWO_ADICITY}를 초과합니다"
                )

        omega = get_root_of_unity(m, field)
        return m, exp, omega

    @classmethod
    def from_coeffs(cls, coeffs, field=None):
        """계수 리스트를 0으로 패딩하여 도메인을 만든다."""
        coeffs = list(coeffs)
        field = resolve_field(coeffs, field)
        coeffs = [to_field(c, field) for c in coeffs]
        m, exp, omega = cls.compute_omega(len(coeffs), field)
        coeffs.extend([field(0)] * (m - len(coeffs)))
        return cls(coeffs, m, exp, omega, field)

    def fft(self):
        """계수 → 평가값 (제자리 변환)."""
        serial_fft(self.coeffs, self.omega, self.exp)

    def ifft(self):
        """평가값 → 계수 (제자리 변환)."""
        serial_fft(self.coeffs, self.omegainv, self.exp)
        minv = self.minv
        self.coeffs = [v * minv for v in self.coeffs]

    def coset_fft(self):
        """코셋 g·H = {g, g·ω, g·ω², ...} 위에서 평가한다.

        p(g·x)의 계수는 cᵢ·gⁱ 이므로, 계수에 g의 거듭제곱을 곱한 뒤 FFT한다.
        """
        _distribute_powers(self.coeffs, self.field(self.field.MULTIPLICATIVE_GENERATOR))
        self.fft()

    def icoset_fft(self):
        """coset_fft의 역변환."""
        self.ifft()
        _distribute_powers(self.coeffs, self.geninv)

    def mul_assign(self, other):
        """점별 곱셈. 두 도메인은 같은 길이여야 한다.

        결과가 순환(wraparound)하지 않도록 두 피연산자를
        (차수 합 + 1) 이상으로 미리 패딩하는 것은 호출자의 책임이다.

        Raises:
            ValueError: 길이가 다를 때
        """
        if len(self.coeffs) != len(other.coeffs):
            raise ValueError(
                f"도메인 길이가 다릅니다: {len(self.coeffs)} != {len(other.coeffs)}"
            )
        self.coeffs = [a * b for a, b in zip(self.coeffs, other.coeffs)]

    def __len__(self):
        return len(self.coeffs)

    def __iter__(self):
        return iter(self.coeffs)

    def __eq__(self, other):
        if not isinstance(other, EvaluationDomain):
            return NotImplemented
        return self.m == other.m and self.coeffs == other.coeffs

    def __repr__(self):
        return f"EvaluationDomain(m={self.m}, coeffs={[int(c) for c in self.coeffs]})"


# ─────────────────────────────────────────────────────────────────────
# FFT 커널
# ─────────────────────────────────────────────────────────────────────

def bitreverse(n, bits):
    """bits 비트 정수 n의 비트 순서를 뒤집는다."""
    r = 0
    for _ in range(bits):
        r = (r << 1) | (n & 1)
        n >>= 1
    return r


def bitreverse_permute(a, log_n):
    """a[k] ↔ a[bitreverse(k)] 제자리 교환."""
    for k in range(len(a)):
        rk = bitreverse(k, log_n)
        if k < rk:
            a[k], a[rk] = a[rk], a[k]


def serial_fft(a, omega, log_n):
    """반복형 radix-2 FFT (제자리).

    Args:
        a: 길이 2^log_n의 필드 원소 리스트
        omega: 2^log_n차 원시 단위근 (IFFT는 역원을 넘긴다)
        log_n: log2(len(a))

    Raises:
        ValueError: len(a) != 2^log_n
    """
    n = len(a)
    if n != 1 << log_n:
        raise ValueError(f"버퍼 길이 {n}가 2^{log_n}이 아닙니다")

    bitreverse_permute(a, log_n)

    one = type(omega)(1)
    half = 1
    for _ in range(log_n):
        w_m = omega ** (n // (2 * half))
        for k in range(0, n, 2 * half):
            w = one
            for j in range(half):
                t = a[k + j + half] * w
                a[k + j + half] = a[k + j] - t
                a[k + j] = a[k + j] + t
                w = w * w_m
        half *= 2


def _distribute_powers(coeffs, g):
    """coeffs[i] *= g^i (제자리)."""
    power = type(g)(1)
    for i in range(len(coeffs)):
        coeffs[i] = coeffs[i] * power
        power = power * g
