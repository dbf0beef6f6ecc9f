"""YAML 설정 로더."""

from __future__ import annotations

import yaml
from pathlib import Path
from typing import Any, Dict, Optional


def load_config(path: str, section: Optional[str] = None) -> Dict[str, Any]:
    """YAML 파일을 읽어 딕셔너리로 돌려준다.

    section 을 주면 해당 최상위 항목만 돌려준다. 항목이 없거나 비어 있으면 {}.
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"설정 파일을 찾을 수 없습니다: {config_path}")
    with config_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"설정 파일 최상위는 매핑이어야 합니다: {config_path}")
    if section is None:
        return data

    section_data = data.get(section) or {}
    if not isinstance(section_data, dict):
        raise ValueError(f"'{section}' 항목은 매핑이어야 합니다: {config_path}")
    return section_data
