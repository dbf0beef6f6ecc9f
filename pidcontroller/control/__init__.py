"""제어 로직 패키지."""

from .pid import PIDController
from .config import PIDConfig, build_pid, load_pid

__all__ = ["PIDController", "PIDConfig", "build_pid", "load_pid"]
