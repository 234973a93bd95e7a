from datetime import timedelta
from typing import Optional, Tuple

from pydantic import BaseModel

from .config import LAYER_CHANGE_SECONDS
from .duration import seconds_to_duration


# --- From Parser ---
class LayerStats(BaseModel):
    distance: float = 0.0   # 누적 이동 거리 (mm)
    time: float = 0.0       # 누적 이동 시간 (s)


class ParseResult(BaseModel):
    """
    G-code 파싱 결과

    layers[i]는 레이어 i의 통계. 중간에 건너뛴 레이어도 0 값으로 채워져 있음.
    slicer_estimated_duration은 유효한 ;TIME: 값이 있을 때만 존재.
    """
    layers: Tuple[LayerStats, ...] = ()
    slicer_estimated_duration: Optional[timedelta] = None

    model_config = {"frozen": True}

    @property
    def layer_count(self) -> int:
        return len(self.layers)

    @property
    def total_distance(self) -> float:
        return sum(layer.distance for layer in self.layers)

    def laser_time(self) -> timedelta:
        return seconds_to_duration(sum(layer.time for layer in self.layers))

    def layer_change_time(self, seconds_per_layer: float = LAYER_CHANGE_SECONDS) -> timedelta:
        # 빈 레이어도 레이어 교체 비용은 동일하게 발생
        return seconds_to_duration(seconds_per_layer * len(self.layers))

    def total_time(self, seconds_per_layer: float = LAYER_CHANGE_SECONDS) -> timedelta:
        return self.layer_change_time(seconds_per_layer) + self.laser_time()


# --- From Report ---
class TimeReport(BaseModel):
    """파일 하나에 대한 시간 추정 결과 (CLI --json 출력용)"""
    file: str
    layer_count: int
    total_distance_mm: float
    slicer_estimated_seconds: Optional[float]
    slicer_estimated: Optional[str]
    total_seconds: float
    total: str
    laser_seconds: float
    laser: str
    layer_change_seconds: float
    layer_change: str
