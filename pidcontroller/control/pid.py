"""PID 제어기 구현.

적분항 클램프(anti-windup)와 측정값 미분(derivative on measurement)을 쓰는
이산 시간 PID 제어기. 출력 경계를 주지 않으면 오차 부호가 바뀔 때 적분을
0으로 되돌리는 레거시 누적 방식으로 동작한다.
"""

from __future__ import annotations

import math
from typing import Optional, Tuple


def _require_finite(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value):
        raise ValueError(f"{name} 값이 유한하지 않습니다: {value}")
    return value


class PIDController:
    """(P)비례 (I)적분 (D)미분 제어기.

    output_limits=(min, max) 를 주면 적분항과 최종 출력을 같은 범위로 각각
    클램프한다. None 이면 출력 제한이 없고 적분은 레거시 부호 리셋 방식으로
    누적된다(정밀도가 낮은 모드, 기존 튜닝 재현용).

    compute_output() 에 경과 시간을 주지 않으면 호출 1회를 1초로 본다.
    스레드 안전하지 않으므로 제어 루프 하나당 인스턴스 하나를 쓴다.
    """

    def __init__(
        self,
        kp: float,
        ki: float,
        kd: float,
        output_limits: Optional[Tuple[float, float]] = None,
    ) -> None:
        self.kp = kp
        self.ki = ki
        self.kd = kd

        if output_limits is None:
            self._bounded = False
            self._min_output, self._max_output = -math.inf, math.inf
        else:
            min_output, max_output = (float(v) for v in output_limits)
            if math.isnan(min_output) or math.isnan(max_output):
                raise ValueError(f"출력 경계에 NaN 이 있습니다: {output_limits}")
            if min_output > max_output:
                raise ValueError(f"출력 하한이 상한보다 큽니다: {min_output} > {max_output}")
            self._bounded = True
            self._min_output, self._max_output = min_output, max_output

        self._set_point = 0.0
        self._process_variable = 0.0
        self._process_variable_last = 0.0
        self._integral_term = 0.0
        self._error_accumulated = 0.0

        # 마지막 계산의 항별 기여(튜닝 확인용)
        self.proportional_term = 0.0
        self.derivative_term = 0.0
        self.output = 0.0

    @classmethod
    def unbounded(cls, kp: float = 1.0, ki: float = 0.5, kd: float = 0.0) -> "PIDController":
        """출력 제한 없는 레거시 모드 제어기."""
        return cls(kp, ki, kd)

    @property
    def kp(self) -> float:
        return self._kp

    @kp.setter
    def kp(self, value: float) -> None:
        self._kp = _require_finite("kp", value)

    @property
    def ki(self) -> float:
        return self._ki

    @ki.setter
    def ki(self, value: float) -> None:
        # 누적된 적분항은 그대로 두고 다음 계산부터 반영
        self._ki = _require_finite("ki", value)

    @property
    def kd(self) -> float:
        return self._kd

    @kd.setter
    def kd(self, value: float) -> None:
        self._kd = _require_finite("kd", value)

    @property
    def bounded(self) -> bool:
        return self._bounded

    @property
    def min_output(self) -> float:
        return self._min_output

    @property
    def max_output(self) -> float:
        return self._max_output

    @property
    def set_point(self) -> float:
        return self._set_point

    @set_point.setter
    def set_point(self, value: float) -> None:
        self._set_point = _require_finite("set_point", value)

    @property
    def process_variable(self) -> float:
        return self._process_variable

    @process_variable.setter
    def process_variable(self, value: float) -> None:
        value = _require_finite("process_variable", value)
        self._process_variable_last = self._process_variable
        self._process_variable = value

    @property
    def process_variable_last(self) -> float:
        return self._process_variable_last

    @property
    def error(self) -> float:
        return self._set_point - self._process_variable

    @property
    def integral_term(self) -> float:
        return self._integral_term

    @property
    def error_accumulated(self) -> float:
        return self._error_accumulated

    @staticmethod
    def _clamp(value: float, min_value: float, max_value: float) -> float:
        return max(min_value, min(max_value, value))

    def reset(self) -> None:
        """적분 상태를 비우고 다음 계산의 미분 킥을 없앤다. 게인/경계/목표값은 유지."""
        self._integral_term = 0.0
        self._error_accumulated = 0.0
        self._process_variable_last = self._process_variable
        self.proportional_term = 0.0
        self.derivative_term = 0.0
        self.output = 0.0

    def compute_output(self, elapsed: Optional[float] = None) -> float:
        """현재 오차로 제어 출력을 계산한다.

        elapsed: 이전 호출 이후 경과 시간(초). None 이면 틱 모드(1 틱 = 1).
        0 이하, NaN, 무한대는 상태를 건드리기 전에 ValueError 로 거부한다.
        유한한 입력이라도 계산 중 오버플로로 inf/NaN 이 생기면 역시 상태를
        바꾸지 않고 ValueError 를 낸다.
        """
        if elapsed is None:
            dt = 1.0
        else:
            dt = float(elapsed)
            # NaN 은 비교가 모두 False 라서 여기서 함께 걸러진다
            if not dt > 0 or math.isinf(dt):
                raise ValueError(f"경과 시간은 0보다 큰 유한한 값이어야 합니다: {elapsed}")

        error = _require_finite("error", self.error)

        if self._bounded:
            error_accumulated = self._error_accumulated
            integral_term = self._clamp(
                _require_finite("integral_term", self._integral_term + self._ki * error * dt),
                self._min_output,
                self._max_output,
            )
        else:
            error_accumulated, integral_term = self._accumulate_sign_reset(error, dt)

        proportional_term = _require_finite("proportional_term", self._kp * error)
        # 오차가 아닌 측정값의 변화율: 목표값 변경 시 미분 킥이 없다
        derivative_term = _require_finite(
            "derivative_term",
            self._kd * (self._process_variable - self._process_variable_last) / dt,
        )
        output = _require_finite("output", proportional_term + integral_term - derivative_term)

        # 모든 항이 유한할 때만 상태 반영
        self._error_accumulated = error_accumulated
        self._integral_term = integral_term
        self.proportional_term = proportional_term
        self.derivative_term = derivative_term
        self.output = float(self._clamp(output, self._min_output, self._max_output))
        return self.output

    def _accumulate_sign_reset(self, error: float, dt: float) -> Tuple[float, float]:
        # 오차가 0이 되거나 누적값과 부호가 엇갈리면 누적을 새로 시작
        acc = self._error_accumulated
        integral = self._integral_term
        if error == 0 or (error < 0 < acc) or (error > 0 > acc):
            acc = 0.0
            integral = 0.0
        acc = _require_finite("error_accumulated", acc + error * dt)
        integral = _require_finite("integral_term", integral + self._ki * error * dt)
        return acc, integral
