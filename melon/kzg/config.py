"""
KZG 설정: 곡선 백엔드 선택
==========================

기본 곡선은 환경 변수 MELON_CURVE로 고른다 (기본값 "bn128").
다항식·도메인·SRS 생성 함수는 backend/field 인자가 없으면 여기서 기본값을 얻는다.

사용 예시:
    >>> get_backend().name          # "bn128"
    >>> get_backend("bls12_381")    # BLS12_381 백엔드
"""

import os

from py_ecc.fields.field_elements import FQ

from melon.kzg.curve import CurveBackend, BN128, BLS12_381


DEFAULT_CURVE = "bn128"

BACKENDS = {
    BN128.name: BN128,
    BLS12_381.name: BLS12_381,
}


def get_backend(name=None):
    """이름(또는 백엔드 객체)으로 CurveBackend를 찾는다.

    Args:
        name: "bn128", "bls12_381", CurveBackend 또는 None.
              None이면 MELON_CURVE 환경 변수, 그다음 DEFAULT_CURVE를 쓴다.

    Raises:
        ValueError: 등록되지 않은 곡선 이름
    """
    if isinstance(name, CurveBackend):
        return name
    if name is None:
        name = os.environ.get("MELON_CURVE", DEFAULT_CURVE)
    try:
        return BACKENDS[name.lower()]
    except KeyError:
        raise ValueError(
            f"지원하지 않는 곡선입니다: {name} (가능: {', '.join(BACKENDS)})"
        ) from None


def resolve_field(values=(), field=None):
    """값들이 속한 스칼라 필드를 결정한다.

    field가 주어지면 그대로, 아니면 첫 FQ 원소의 타입,
    그마저 없으면 기본 백엔드의 스칼라 필드를 반환한다.
    """
    if field is not None:
        return field
    for value in values:
        if isinstance(value, FQ):
            return type(value)
    return get_backend().scalar_field
