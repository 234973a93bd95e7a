"""
moai-time Configuration
레이어 교체 시간 등 추정 상수 설정
"""
import os
from typing import Optional

import dotenv
from pydantic import BaseModel, Field

dotenv.load_dotenv()


LAYER_CHANGE_SECONDS = 9.5  # 레이어당 고정 오버헤드 (플랫폼 분리/복귀)
PLACEHOLDER_ESTIMATE = 6666  # Peopoly 슬라이서가 넣는 가짜 ;TIME: 값


class EstimatorConfig(BaseModel):
    """추정 설정"""
    layer_change_seconds: float = Field(LAYER_CHANGE_SECONDS, ge=0, allow_inf_nan=False)


def get_default_config(layer_change_seconds: Optional[float] = None) -> EstimatorConfig:
    """
    기본 설정 반환

    우선순위: 인자 > MOAI_LAYER_CHANGE_SECONDS 환경변수(.env 포함) > 기본값

    Raises:
        pydantic.ValidationError: 숫자가 아니거나 음수/nan/inf인 경우
    """
    if layer_change_seconds is None:
        layer_change_seconds = os.getenv("MOAI_LAYER_CHANGE_SECONDS") or None
    if layer_change_seconds is None:
        return EstimatorConfig()
    return EstimatorConfig(layer_change_seconds=layer_change_seconds)
