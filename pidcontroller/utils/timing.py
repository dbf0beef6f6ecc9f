"""제어 루프 틱 간격 측정 유틸리티."""

from __future__ import annotations

import time
from typing import Callable, Optional


class ElapsedTimer:
    """연속한 lap() 호출 사이의 경과 시간(초)을 돌려준다.

    호출 시점을 정하지는 않는다. 측정만 하고 PIDController.compute_output()
    의 elapsed 인자로 넘기는 용도. 첫 lap() 은 기준 시각만 잡고 None 을
    돌려주므로 그 틱은 계산을 건너뛴다.
    """

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self._clock = clock
        self._last: Optional[float] = None

    def reset(self) -> None:
        self._last = None

    def lap(self) -> Optional[float]:
        now = self._clock()
        last, self._last = self._last, now
        if last is None:
            return None
        # 0 이하 간격도 그대로 돌려준다(compute_output 이 ValueError 로 거부)
        return now - last
