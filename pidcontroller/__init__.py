"""
pidcontroller 패키지 루트 모듈.

폐루프 제어에 재사용할 수 있는 이산 시간 PID 제어기와 설정/타이밍 유틸리티를 노출한다.
"""

__all__ = ["control", "utils"]
