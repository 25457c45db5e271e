"""
KZG Structured Reference String (SRS)
=====================================

신뢰 설정(trusted setup)으로 공개 파라미터를 만든다.

**SRS란?**
  비밀 값 s ("toxic waste")의 거듭제곱을 두 그룹의 지수로 올린 두 수열이다.

  KZGParams = {
      gs: [g, s·g, s²·g, ..., s^(N-1)·g]      (G1)
      hs: [h, s·h, s²·h, ..., s^(N-1)·h]      (G2)
  }

  N은 커밋할 수 있는 다항식의 최대 계수 개수이다 (차수 ≤ N - 1).

**보안**:
  s를 아는 사람은 임의의 거짓 증명을 만들 수 있다.
  setup()은 s를 직접 받으며 폐기하지 않는다. 실제 배포에서는 다자간 의식
  (ceremony)으로 s를 만들어 아무도 보관하지 않음을 보장해야 하며,
  이는 이 라이브러리의 범위 밖이다. 여기서의 setup/generate는 테스트·데모용이다.

사용 예시:
    >>> params = setup(FR(1234), 8)
    >>> len(params.gs)      # 8
    >>> params.max_degree   # 7
"""

import hashlib
import logging
import secrets

from melon.kzg.config import get_backend


logger = logging.getLogger(__name__)


class KZGParams:
    """setup()이 만든 불변 공개 파라미터.

    생성 후에는 바뀌지 않으므로 여러 Prover/Verifier가 동시에 공유해도 된다.

    속성:
        gs: G1 거듭제곱 튜플 (길이 N)
        hs: G2 거듭제곱 튜플 (길이 N)
        backend: 이 파라미터가 만들어진 CurveBackend
    """

    def __init__(self, gs, hs, backend):
        if len(gs) != len(hs):
            raise ValueError(f"gs({len(gs)})와 hs({len(hs)})의 길이가 다릅니다")
        self.gs = tuple(gs)
        self.hs = tuple(hs)
        self.backend = backend

    @property
    def max_coeffs(self):
        """커밋 가능한 최대 계수 개수 N."""
        return len(self.gs)

    @property
    def max_degree(self):
        return len(self.gs) - 1

    @classmethod
    def generate(cls, num_coeffs, seed=None, backend=None):
        """s를 직접 만들어 setup()을 호출한다 (테스트·데모 전용).

        Args:
            num_coeffs: SRS 길이 N
            seed: 결정론적 생성을 위한 시드. sha256(str(seed)) mod r 를 s로 쓴다.
                  None이면 secrets로 무작위 s를 뽑는다.
            backend: 곡선 이름 또는 CurveBackend

        예시:
            >>> params = KZGParams.generate(16, seed=42)
        """
        backend = get_backend(backend)
        order = backend.scalar_field.field_modulus
        if seed is not None:
            digest = hashlib.sha256(str(seed).encode()).digest()
            s = int.from_bytes(digest, "big") % order
        else:
            s = secrets.randbelow(order - 1) + 1
        return setup(backend.scalar_field(s), num_coeffs, backend)

    def __repr__(self):
        return f"KZGParams(backend={self.backend.name!r}, max_coeffs={self.max_coeffs})"


def setup(s, num_coeffs, backend=None):
    """트랩도어 s로 SRS를 만든다.

    gs[0] = g, gs[i] = s · gs[i-1]  (i = 1..N-1)
    hs[0] = h, hs[i] = s · hs[i-1]

    같은 (s, N)이면 항상 같은 결과를 낸다. 난수를 쓰지 않고 s를 폐기하지도 않는다.

    Args:
        s: 트랩도어 스칼라 (정수 또는 필드 원소)
        num_coeffs: SRS 길이 N (1 이상). N = 1이면 상수 다항식의 커밋만 가능하고
            verify_eval은 hs[1]이 없어 쓸 수 없다.
        backend: 곡선 이름 또는 CurveBackend

    Raises:
        ValueError: num_coeffs < 1
    """
    if num_coeffs < 1:
        raise ValueError(f"SRS 길이는 1 이상이어야 합니다: {num_coeffs}")
    backend = get_backend(backend)
    logger.debug("generating %s SRS with %d powers", backend.name, num_coeffs)

    gs = [backend.g1]
    hs = [backend.g2]
    for _ in range(1, num_coeffs):
        gs.append(backend.mul(gs[-1], s))
        hs.append(backend.mul(hs[-1], s))

    return KZGParams(gs, hs, backend)
