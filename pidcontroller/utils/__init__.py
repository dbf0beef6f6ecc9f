"""공통 유틸리티 모음."""

from .config_loader import load_config
from .timing import ElapsedTimer

__all__ = ["load_config", "ElapsedTimer"]
