"""설정 딕셔너리/YAML 로부터 PID 제어기 생성."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from pidcontroller.control.pid import PIDController
from pidcontroller.utils import load_config

KNOWN_KEYS = ("kp", "ki", "kd", "output_limits", "output_limit")


def _to_float(name: str, value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} 는 숫자여야 합니다: {value!r}") from None


@dataclass
class PIDConfig:
    kp: float = 1.0
    ki: float = 0.5
    kd: float = 0.0
    output_limits: Optional[Tuple[float, float]] = None

    @classmethod
    def from_dict(cls, control_cfg: Optional[Mapping]) -> "PIDConfig":
        control_cfg = control_cfg or {}
        if not isinstance(control_cfg, Mapping):
            raise ValueError(f"control 설정은 매핑이어야 합니다: {control_cfg!r}")

        unknown = sorted(str(k) for k in control_cfg if k not in KNOWN_KEYS)
        if unknown:
            print(f"[WARN] 알 수 없는 PID 설정 키를 무시합니다: {', '.join(unknown)}")

        return cls(
            kp=_to_float("kp", control_cfg.get("kp", 1.0)),
            ki=_to_float("ki", control_cfg.get("ki", 0.5)),
            kd=_to_float("kd", control_cfg.get("kd", 0.0)),
            output_limits=_parse_limits(control_cfg),
        )

    def build(self) -> PIDController:
        return PIDController(self.kp, self.ki, self.kd, output_limits=self.output_limits)


def _parse_limits(control_cfg: Mapping) -> Optional[Tuple[float, float]]:
    if "output_limits" in control_cfg:
        if control_cfg.get("output_limit") is not None:
            print("[WARN] output_limits 와 output_limit 이 모두 있어 output_limits 를 사용합니다.")
        limits = control_cfg["output_limits"]
        if limits is None:
            return None
        if isinstance(limits, (str, bytes)) or not isinstance(limits, Sequence) or len(limits) != 2:
            raise ValueError(f"output_limits 는 [min, max] 형식이어야 합니다: {limits!r}")
        return _to_float("output_limits[0]", limits[0]), _to_float("output_limits[1]", limits[1])

    # steer_limit 처럼 대칭 한계 하나만 주는 형식
    limit = control_cfg.get("output_limit")
    if limit is None:
        return None
    limit = _to_float("output_limit", limit)
    return -limit, limit


def build_pid(control_cfg: Optional[Mapping[str, Any]]) -> PIDController:
    return PIDConfig.from_dict(control_cfg).build()


def load_pid(path: str, section: str = "control") -> PIDController:
    """YAML 파일의 section 항목으로 제어기를 만든다."""
    return build_pid(load_config(path, section=section))
