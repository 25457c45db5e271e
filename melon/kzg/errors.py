"""KZG 오류 계층.

모든 오류는 호출자에게 그대로 전달되며 내부에서 재시도하거나 삼키지 않는다.
프로토콜 오용은 ValueError 계열로 표현한다.
"""


class KZGError(ValueError):
    """KZG 연산 오류의 공통 기반 클래스."""

    default_message = "KZG 오류"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class NoPolynomialError(KZGError):
    """다항식 없이 커밋/증명/검증을 호출했다."""

    default_message = "다항식이 없습니다"


class PointNotOnPolynomialError(KZGError):
    """(x, y)가 다항식 위의 점이 아니다: p(x) != y."""

    default_message = "점이 다항식 위에 있지 않습니다"


class BatchOpeningZeroRemainderError(KZGError):
    """다중 점 일괄 열기(batch opening)에서 나머지가 0이다.

    일괄 열기는 구현하지 않으므로 현재 발생하지 않는다.
    """

    default_message = "일괄 열기 나머지가 0입니다"


class PolynomialDegreeTooLargeError(KZGError):
    """다항식 차수가 평가 도메인 또는 SRS가 지원하는 범위를 넘는다."""

    default_message = "다항식 차수가 너무 큽니다"


class SRSTooShortError(KZGError):
    """SRS에 hs[1]이 없어 평가 증명을 검증할 수 없다 (N < 2)."""

    default_message = "평가 증명 검증에는 SRS 길이가 2 이상이어야 합니다"
