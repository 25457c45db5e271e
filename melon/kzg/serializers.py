"""
KZG 데이터 직렬화/역직렬화 헬퍼
================================

커밋먼트와 열기 증명을 JSON에 넣을 수 있는 dict로 바꾼다.
모든 값은 "0x" 접두사가 붙은 big-endian 16진수 문자열이다.

  커밋먼트: {"x": "0x..", "y": "0x..", "i": "0x", "value": "0x"}
  열기 증명: {"x": "0x..", "y": "0x..", "i": "0x<x>", "value": "0x<y>"}

무한원점은 좌표 (0, 0)으로 표현한다. 파일 입출력은 하지 않는다.
"""

from melon.kzg.config import get_backend, resolve_field


# ─── 스칼라 ───

def scalar_to_hex(value, width=32):
    """FR → "0x" + width바이트 big-endian hex"""
    return "0x" + int(value).to_bytes(width, "big").hex()


def hex_to_scalar(data, field=None):
    """"0x..." → FR"""
    field = resolve_field(field=field)
    return field(int(data, 16))


# ─── G1 점 ───

def g1_to_hex(point, backend=None):
    """G1 점 → {"x": hex, "y": hex}"""
    backend = get_backend(backend)
    width = backend.coordinate_bytes
    if point is None:
        x, y = 0, 0
    else:
        x, y = int(point[0]), int(point[1])
    return {"x": scalar_to_hex(x, width), "y": scalar_to_hex(y, width)}


def hex_to_g1(data, backend=None):
    """{"x": hex, "y": hex} → G1 점

    Raises:
        ValueError: 곡선 위의 점이 아닐 때
    """
    backend = get_backend(backend)
    x = int(data["x"], 16)
    y = int(data["y"], 16)
    if x == 0 and y == 0:
        return None
    point = (backend.base_field(x), backend.base_field(y))
    if not backend.is_on_curve(point):
        raise ValueError(f"G1 곡선 위의 점이 아닙니다: {data}")
    return point


# ─── 커밋먼트 / 열기 증명 ───

def commitment_to_json(commitment, backend=None):
    """커밋먼트 → dict (i, value는 비어 있음)"""
    data = g1_to_hex(commitment, backend)
    data["i"] = "0x"
    data["value"] = "0x"
    return data


def witness_to_json(witness, point, backend=None):
    """열기 증명과 열린 점 (x, y) → dict"""
    backend = get_backend(backend)
    data = g1_to_hex(witness, backend)
    data["i"] = scalar_to_hex(point[0], backend.scalar_bytes)
    data["value"] = scalar_to_hex(point[1], backend.scalar_bytes)
    return data


def json_to_point(data, backend=None):
    """dict → (G1 점, (x, y) 또는 None)

    i/value가 "0x"이면 커밋먼트로 보고 열린 점을 None으로 돌려준다.
    """
    backend = get_backend(backend)
    point = hex_to_g1(data, backend)
    if data.get("i", "0x") == "0x" or data.get("value", "0x") == "0x":
        return point, None
    field = backend.scalar_field
    return point, (hex_to_scalar(data["i"], field), hex_to_scalar(data["value"], field))
