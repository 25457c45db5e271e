"""
KZG 기반 모듈: 밀집 계수(Dense Coefficient) 다항식
==================================================

p(x) = c₀ + c₁·x + c₂·x² + ... 를 계수 리스트와 명시적인 차수(degree)로 표현한다.

**차수 불변식 (soft invariant)**:
  coeffs[degree] ≠ 0 (단, degree == 0인 경우 제외).
  영 다항식은 degree = 0, coeffs = [0].
  계수 리스트가 degree + 1보다 길 수 있으며, 앞의 num_coeffs()개만 의미가 있다.

  from_coeffs_unchecked()는 호출자가 준 차수를 그대로 믿는다.
  알고리즘 중간의 작업 버퍼에만 쓰고, 불변식이 필요해지기 전에
  shrink_degree()로 차수를 다시 계산해야 한다.

**덧셈과 뺄셈의 비대칭**:
  - p + q: 최고차 계수가 상쇄되어도 차수를 줄이지 않는다.
  - p - q: 항상 shrink_degree()를 호출하여 상쇄를 즉시 반영한다.
  num_coeffs()/slice_coeffs() 결과가 달라지므로 관찰 가능한 동작이다.

**곱셈**:
  - p * q: O(n·m) 나이브 합성곱. 차수 = deg p + deg q (축소하지 않음)
  - p.fft_mul(q): 평가 도메인에서의 점별 곱. 나이브 곱셈과 항상 같은 결과

사용 예시:
    >>> p = Polynomial([34, 0, 7, 4, 0, 1])   # x⁵ + 4x³ + 7x² + 34
    >>> p.evaluate(5)                          # FR(3834)
    >>> p.degree                               # 5
"""

from py_ecc.fields.field_elements import FQ

from melon.kzg.config import resolve_field
from melon.kzg.fft import EvaluationDomain
from melon.kzg.field import inverse, to_field


class Polynomial:
    """스칼라 필드 위의 밀집 계수 다항식.

    속성:
        coeffs: 필드 원소 리스트 [c₀, c₁, ...] (낮은 차수부터)
        degree: 차수. coeffs[degree]가 최고차 계수
        field: 스칼라 필드 클래스 (FR, BLS12_381_FR)

    예시:
        >>> p = Polynomial([FR(1), FR(2)])   # 1 + 2x
        >>> q = Polynomial([FR(3), FR(4)])   # 3 + 4x
        >>> (p * q).slice_coeffs()           # [3, 10, 8]
    """

    def __init__(self, coeffs=None, field=None):
        """계수에서 다항식을 만들고 위에서부터 훑어 차수를 계산한다.

        Args:
            coeffs: 정수 또는 필드 원소의 리스트. None/빈 리스트는 영 다항식.
            field: 스칼라 필드 클래스. None이면 계수 타입이나 기본 백엔드에서 결정한다.
        """
        coeffs = [] if coeffs is None else list(coeffs)
        self.field = resolve_field(coeffs, field)
        self.coeffs = [to_field(c, self.field) for c in coeffs] or [self.field(0)]
        self.degree = Polynomial.compute_degree(self.coeffs, len(self.coeffs) - 1)

    @classmethod
    def from_coeffs_unchecked(cls, coeffs, degree, field=None):
        """호출자가 지정한 차수를 검사 없이 믿는 생성자.

        coeffs[degree]가 0일 수 있다. 이런 다항식은 다른 연산이 불변식에
        의존하기 전에 shrink_degree()로 정리해야 한다.

        Raises:
            ValueError: 계수 리스트가 degree + 1보다 짧을 때
        """
        coeffs = list(coeffs)
        if len(coeffs) <= degree:
            raise ValueError(
                f"계수 {len(coeffs)}개로는 차수 {degree} 다항식을 표현할 수 없습니다"
            )
        poly = cls.__new__(cls)
        poly.field = resolve_field(coeffs, field)
        poly.coeffs = [to_field(c, poly.field) for c in coeffs]
        poly.degree = degree
        return poly

    @classmethod
    def zero(cls, field=None):
        """영 다항식 p(x) = 0."""
        field = resolve_field(field=field)
        return cls.from_coeffs_unchecked([field(0)], 0, field)

    @classmethod
    def from_scalar(cls, scalar, field=None):
        """상수 다항식 p(x) = scalar."""
        field = resolve_field([scalar], field)
        return cls.from_coeffs_unchecked([scalar], 0, field)

    @classmethod
    def monic_of_degree(cls, degree, field=None):
        """모든 계수가 1인 degree차 다항식 1 + x + ... + x^degree."""
        field = resolve_field(field=field)
        return cls.from_coeffs_unchecked([field(1)] * (degree + 1), degree, field)

    @classmethod
    def zero_with_size(cls, size, field=None):
        """길이 size의 0 버퍼를 가진 영 다항식 (작업 버퍼용)."""
        field = resolve_field(field=field)
        return cls.from_coeffs_unchecked([field(0)] * max(size, 1), 0, field)

    @classmethod
    def from_evaluation_domain(cls, domain):
        """도메인 버퍼(계수 표현)를 다항식으로 변환한다. 차수는 새로 계산한다."""
        return cls(domain.coeffs, field=domain.field)

    # ─────────────────────────────────────────────────────────────────
    # 차수 관리
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def compute_degree(coeffs, upper_bound):
        """upper_bound부터 아래로 훑어 첫 0이 아닌 계수의 인덱스를 반환한다.

        인덱스 1까지 모두 0이면 0을 반환한다.
        """
        for i in range(upper_bound, 0, -1):
            if coeffs[i] != 0:
                return i
        return 0

    def shrink_degree(self):
        """현재 차수에서 시작해 차수를 다시 계산한다 (제자리)."""
        self.degree = Polynomial.compute_degree(self.coeffs, self.degree)

    def num_coeffs(self):
        return self.degree + 1

    def lead(self):
        """최고차 계수 coeffs[degree]."""
        return self.coeffs[self.degree]

    def is_zero(self):
        return self.degree == 0 and self.coeffs[0] == 0

    def slice_coeffs(self):
        """의미 있는 계수 coeffs[:num_coeffs()]의 복사본."""
        return self.coeffs[:self.num_coeffs()]

    def iter_coeffs(self):
        return iter(self.coeffs[:self.num_coeffs()])

    def truncated_coeffs(self):
        """뒤쪽 여분을 잘라낸 계수 리스트 (새 리스트)."""
        return list(self.slice_coeffs())

    # ─────────────────────────────────────────────────────────────────
    # 평가
    # ─────────────────────────────────────────────────────────────────

    def evaluate(self, point):
        """Horner's method로 p(point)를 계산한다.

        최고차 계수에서 시작하여 result = result·x + cᵢ 를 반복한다.
        degree번의 곱셈과 덧셈, 부동소수점 없음.

        예시:
            >>> Polynomial([34, 0, 7, 4, 0, 1]).evaluate(1)   # FR(46)
        """
        x = to_field(point, self.field)
        result = self.coeffs[self.degree]
        for i in range(self.degree - 1, -1, -1):
            result = result * x + self.coeffs[i]
        return result

    # ─────────────────────────────────────────────────────────────────
    # 산술
    # ─────────────────────────────────────────────────────────────────

    def _lift(self, other):
        if isinstance(other, (int, FQ)):
            return Polynomial.from_scalar(to_field(other, self.field), self.field)
        return other

    def __add__(self, other):
        """p(x) + q(x). 결과 차수는 큰 쪽의 차수이며 축소하지 않는다."""
        other = self._lift(other)
        if not isinstance(other, Polynomial):
            return NotImplemented
        if other.degree > self.degree:
            longer, shorter = other, self
        else:
            longer, shorter = self, other

        coeffs = list(longer.coeffs)
        for i in range(shorter.num_coeffs()):
            coeffs[i] = coeffs[i] + shorter.coeffs[i]
        return Polynomial.from_coeffs_unchecked(coeffs, longer.degree, self.field)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        """p(x) - q(x). 결과는 항상 shrink_degree()로 정리된다."""
        other = self._lift(other)
        if not isinstance(other, Polynomial):
            return NotImplemented
        if other.num_coeffs() > self.num_coeffs():
            extra = other.num_coeffs() - self.num_coeffs()
            coeffs = self.slice_coeffs() + [self.field(0)] * extra
            degree = other.degree
        else:
            coeffs = list(self.coeffs)
            degree = self.degree

        for i in range(other.num_coeffs()):
            coeffs[i] = coeffs[i] - other.coeffs[i]

        result = Polynomial.from_coeffs_unchecked(coeffs, degree, self.field)
        result.shrink_degree()
        return result

    def __rsub__(self, other):
        other = self._lift(other)
        if not isinstance(other, Polynomial):
            return NotImplemented
        return other.__sub__(self)

    def __neg__(self):
        return Polynomial.from_coeffs_unchecked(
            [-c for c in self.coeffs], self.degree, self.field
        )

    def __mul__(self, other):
        """스칼라곱 또는 나이브 다항식 곱셈.

        스칼라가 0이면 오래된 길이의 0 벡터가 아니라 표준 영 다항식을 반환한다.
        다항식 곱의 차수는 deg p + deg q로 두고 축소하지 않는다.
        """
        if isinstance(other, (int, FQ)):
            scalar = to_field(other, self.field)
            if scalar == 0:
                return Polynomial.zero(self.field)
            return Polynomial.from_coeffs_unchecked(
                [c * scalar for c in self.coeffs], self.degree, self.field
            )
        if not isinstance(other, Polynomial):
            return NotImplemented

        result = [self.field(0)] * (self.degree + other.degree + 1)
        for i in range(self.num_coeffs()):
            a = self.coeffs[i]
            for j in range(other.num_coeffs()):
                result[i + j] = result[i + j] + a * other.coeffs[j]
        return Polynomial.from_coeffs_unchecked(
            result, self.degree + other.degree, self.field
        )

    def __rmul__(self, other):
        return self.__mul__(other)

    def fft_mul(self, other):
        """FFT 기반 곱셈.

        두 피연산자를 deg p + deg q + 1 길이로 패딩한 뒤 같은 단위근의
        평가 도메인으로 옮겨 점별 곱하고 역변환한다.
        결과(차수 포함)는 p * q와 정확히 같다.
        """
        size = self.degree + other.degree + 1
        zero = self.field(0)
        a = EvaluationDomain.from_coeffs(
            self.slice_coeffs() + [zero] * (size - self.num_coeffs()), self.field
        )
        b = EvaluationDomain.from_coeffs(
            other.slice_coeffs() + [zero] * (size - other.num_coeffs()), self.field
        )
        a.fft()
        b.fft()
        a.mul_assign(b)
        a.ifft()
        return Polynomial.from_coeffs_unchecked(a.coeffs[:size], size - 1, self.field)

    # ─────────────────────────────────────────────────────────────────
    # 보간
    # ─────────────────────────────────────────────────────────────────

    @classmethod
    def lagrange_interpolation(cls, xs, ys, field=None):
        """점 (xᵢ, yᵢ)를 모두 지나는 최소 차수 다항식 (Newton 형식의 점진적 보간).

        poly: 지금까지 처리한 점을 모두 지나는 다항식
        base: 지금까지의 xᵢ에서 모두 0이 되는 모닉 다항식 ∏(X - xᵢ)

        새 점 (x, y)마다:
            diff = (y - poly(x)) / base(x)
            poly ← poly + base · diff      (이전 점의 값은 유지, x에서 y가 됨)
            base ← base · (X - x)

        Args:
            xs: 서로 다른 x 좌표들 (정렬 불필요)
            ys: 대응하는 y 값들

        Raises:
            ValueError: 길이가 다르거나 비어 있을 때
            ZeroDivisionError: x 좌표가 중복될 때 (base(x) == 0)

        예시:
            >>> p = Polynomial.lagrange_interpolation([2, 5, 7], [8, 1, 43])
            >>> p.evaluate(5)   # FR(1)
        """
        xs = list(xs)
        ys = list(ys)
        if len(xs) != len(ys):
            raise ValueError(f"xs와 ys의 길이가 다릅니다: {len(xs)} != {len(ys)}")
        if not xs:
            raise ValueError("보간할 점이 없습니다")

        field = resolve_field(xs + ys, field)
        xs = [to_field(x, field) for x in xs]
        ys = [to_field(y, field) for y in ys]
        one = field(1)

        poly = cls.from_coeffs_unchecked([ys[0]], 0, field)
        base = cls.from_coeffs_unchecked([-xs[0], one], 1, field)

        for x, y in zip(xs[1:], ys[1:]):
            diff = (y - poly.evaluate(x)) * inverse(base.evaluate(x))
            poly = poly + base * diff
            base = base * cls.from_coeffs_unchecked([-x, one], 1, field)

        return poly

    # ─────────────────────────────────────────────────────────────────
    # 비교 / 표시
    # ─────────────────────────────────────────────────────────────────

    def __eq__(self, other):
        """차수와 의미 있는 계수가 모두 같으면 같은 다항식이다."""
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.degree == other.degree and self.slice_coeffs() == other.slice_coeffs()

    def __repr__(self):
        terms = []
        for i, c in enumerate(self.slice_coeffs()):
            if c == 0:
                continue
            if i == 0:
                terms.append(str(int(c)))
            elif i == 1:
                terms.append(f"{int(c)}*x")
            else:
                terms.append(f"{int(c)}*x^{i}")
        return "Poly(" + " + ".join(terms) + ")" if terms else "Poly(0)"
