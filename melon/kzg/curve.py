"""
KZG 기반 모듈: 타원곡선 그룹 연산과 페어링
==========================================

Polynomial/FFT/Prover/Verifier 로직은 특정 곡선에 의존하지 않는다.
곡선 연산은 CurveBackend 인터페이스 뒤에 두고, py_ecc가 제공하는
bn128과 BLS12-381 구현을 PyEccBackend로 감싼다.

**CurveBackend가 제공하는 능력**:
  - scalar_field: 스칼라 필드 클래스 (FR, BLS12_381_FR)
  - g1, g2: 고정 생성자
  - identity: 무한원점 (py_ecc에서는 None)
  - add / neg / sub / mul: 그룹 연산
  - msm: 다중 스칼라 곱 Σ sᵢ·Pᵢ
  - pairing: 쌍선형 페어링 e: G1 × G2 → GT

사용 예시:
    >>> from melon.kzg.curve import BN128
    >>> P = BN128.mul(BN128.g1, 5)          # 5·G1
    >>> e = BN128.pairing(P, BN128.g2)      # e(5·G1, G2)
"""

from py_ecc import bn128, bls12_381

from melon.kzg.field import FR, BLS12_381_FR


class CurveBackend:
    """페어링 곡선 연산의 추상 인터페이스.

    하위 클래스는 name, scalar_field, base_field, g1, g2와
    add, neg, mul, pairing, is_on_curve를 구현해야 한다.
    """

    name = None
    scalar_field = None
    base_field = None
    g1 = None
    g2 = None
    identity = None

    def add(self, p1, p2):
        raise NotImplementedError

    def neg(self, point):
        raise NotImplementedError

    def mul(self, point, scalar):
        raise NotImplementedError

    def pairing(self, g1_point, g2_point):
        raise NotImplementedError

    def is_on_curve(self, point):
        raise NotImplementedError

    def sub(self, p1, p2):
        """p1 - p2."""
        return self.add(p1, self.neg(p2))

    def msm(self, points, scalars):
        """다중 스칼라 곱(MSM): Σᵢ scalars[i] · points[i].

        스칼라가 0인 항은 건너뛴다.

        Raises:
            ValueError: points와 scalars의 길이가 다를 때
        """
        if len(points) != len(scalars):
            raise ValueError(
                f"점 개수 {len(points)}와 스칼라 개수 {len(scalars)}가 다릅니다"
            )
        result = self.identity
        for point, scalar in zip(points, scalars):
            if scalar == 0:
                continue
            result = self.add(result, self.mul(point, scalar))
        return result

    @property
    def scalar_bytes(self):
        """스칼라 하나의 big-endian 바이트 길이."""
        return (self.scalar_field.field_modulus.bit_length() + 7) // 8

    @property
    def coordinate_bytes(self):
        """G1 좌표 하나의 big-endian 바이트 길이."""
        return (self.base_field.field_modulus.bit_length() + 7) // 8

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r})"


class PyEccBackend(CurveBackend):
    """py_ecc 곡선 모듈(bn128, bls12_381)을 감싼 백엔드.

    py_ecc의 비최적화 모듈은 아핀 좌표 튜플을 쓰며 무한원점은 None이다.
    따라서 커밋먼트/증명은 그대로 아핀 형태가 된다.
    """

    def __init__(self, name, curve, scalar_field):
        self.name = name
        self.curve = curve
        self.scalar_field = scalar_field
        self.base_field = curve.FQ
        self.g1 = curve.G1
        self.g2 = curve.G2
        self.order = curve.curve_order

    def add(self, p1, p2):
        return self.curve.add(p1, p2)

    def neg(self, point):
        if point is None:
            return None
        return self.curve.neg(point)

    def mul(self, point, scalar):
        """스칼라 곱 scalar · point (scalar는 정수 또는 필드 원소)."""
        scalar = int(scalar) % self.order
        if point is None or scalar == 0:
            return None
        return self.curve.multiply(point, scalar)

    def pairing(self, g1_point, g2_point):
        """e(g1_point, g2_point).

        주의:
            py_ecc의 pairing 인자 순서는 (G2, G1)이다.
        """
        return self.curve.pairing(g2_point, g1_point)

    def is_on_curve(self, point):
        return self.curve.is_on_curve(point, self.curve.b)


BN128 = PyEccBackend("bn128", bn128, FR)

BLS12_381 = PyEccBackend("bls12_381", bls12_381, BLS12_381_FR)
