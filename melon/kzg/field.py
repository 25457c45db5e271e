"""
KZG 기반 모듈: 스칼라 유한체(Finite Field)
==========================================

KZG 커밋먼트의 모든 다항식 연산은 페어링 곡선의 스칼라 필드 위에서 이루어진다.
이 모듈은 py_ecc의 소수체 클래스를 상속하여 두 곡선의 스칼라 필드를 정의하고,
FFT에 필요한 2-adic 구조(단위근)를 함께 노출한다.

**스칼라 필드**:
  - FR: bn128 곡선의 스칼라 필드. p - 1 = 2^28 × (홀수), 곱셈 생성자 5
  - BLS12_381_FR: BLS12-381 곡선의 스칼라 필드. p - 1 = 2^32 × (홀수), 곱셈 생성자 7

**2-adic 구조**:
  p - 1 = 2^S × t (t 홀수)이면 FR*는 위수 2^S의 부분군을 가진다.
  그 생성원 ω_S = g^t 를 거듭제곱하여 임의의 2^k (k ≤ S)차 원시 단위근을 얻는다.

사용 예시:
    >>> from melon.kzg.field import FR, inverse
    >>> a = FR(3)
    >>> inverse(a) * a == FR(1)   # True
    >>> omega = get_root_of_unity(8)
    >>> omega ** 8 == FR(1)       # True
"""

from py_ecc.fields import bn128_FQ, bls12_381_FQ
from py_ecc.fields.field_elements import FQ
from py_ecc import bn128, bls12_381


# ─────────────────────────────────────────────────────────────────────
# 스칼라 필드
# ─────────────────────────────────────────────────────────────────────

class FR(bn128_FQ):
    """bn128 스칼라 필드 위의 유한체 원소.

    py_ecc의 FQ를 상속하여 +, -, *, /, ** 연산을 그대로 사용한다.

    속성:
        field_modulus: bn128 곡선 위수 (소수 r)
        TWO_ADICITY: r - 1을 나누는 2의 최대 지수 S
        MULTIPLICATIVE_GENERATOR: FR*의 생성원
    """
    field_modulus = bn128.curve_order
    TWO_ADICITY = 28
    MULTIPLICATIVE_GENERATOR = 5

    @classmethod
    def root_of_unity(cls):
        """2^S차 원시 단위근 ω_S = g^((r-1) / 2^S)."""
        exponent = (cls.field_modulus - 1) >> cls.TWO_ADICITY
        return cls(cls.MULTIPLICATIVE_GENERATOR) ** exponent


class BLS12_381_FR(bls12_381_FQ):
    """BLS12-381 스칼라 필드 위의 유한체 원소."""
    field_modulus = bls12_381.curve_order
    TWO_ADICITY = 32
    MULTIPLICATIVE_GENERATOR = 7

    @classmethod
    def root_of_unity(cls):
        exponent = (cls.field_modulus - 1) >> cls.TWO_ADICITY
        return cls(cls.MULTIPLICATIVE_GENERATOR) ** exponent


# ─────────────────────────────────────────────────────────────────────
# 필드 헬퍼
# ─────────────────────────────────────────────────────────────────────

def inverse(value):
    """곱셈 역원 value^(-1)을 반환한다.

    py_ecc의 나눗셈은 0으로 나누면 조용히 0을 돌려주므로,
    보간·FFT처럼 역원이 반드시 존재해야 하는 곳에서는 이 함수를 쓴다.

    Raises:
        ZeroDivisionError: value == 0
    """
    if value == 0:
        raise ZeroDivisionError("0의 역원은 존재하지 않습니다")
    return type(value)(1) / value


def to_field(value, field):
    """정수를 field 원소로 변환한다. 이미 field 원소이면 그대로 돌려준다.

    py_ecc의 FQ 생성자는 다른 필드 원소의 값을 법으로 줄이지 않고 그대로
    복사하므로, 다른 필드의 원소는 변환하지 않고 거부한다.

    Raises:
        TypeError: value가 다른 필드의 원소일 때
    """
    if isinstance(value, field):
        return value
    if isinstance(value, FQ):
        raise TypeError(
            f"{type(value).__name__} 원소를 {field.__name__}로 변환할 수 없습니다"
        )
    return field(value)


def get_root_of_unity(n, field=FR):
    """n차 원시 단위근 ω를 반환한다.

    ω = ω_S^(2^S / n) 이므로 ω^n = 1, ω^(n/2) = -1 을 만족한다.

    Args:
        n: 단위근의 차수 (2의 거듭제곱, ≤ 2^S)
        field: 스칼라 필드 클래스

    Raises:
        ValueError: n이 2의 거듭제곱이 아니거나 2^S를 초과할 때
    """
    if n < 1 or (n & (n - 1)) != 0:
        raise ValueError(f"n은 2의 거듭제곱이어야 합니다: {n}")
    log_n = n.bit_length() - 1
    if log_n > field.TWO_ADICITY:
        raise ValueError(f"n은 2^{field.TWO_ADICITY} 이하여야 합니다: {n}")
    return field.root_of_unity() ** (1 << (field.TWO_ADICITY - log_n))


def get_roots_of_unity(n, field=FR):
    """평가 도메인 [1, ω, ω², ..., ω^(n-1)]을 반환한다."""
    omega = get_root_of_unity(n, field)
    roots = []
    current = field(1)
    for _ in range(n):
        roots.append(current)
        current = current * omega
    return roots
