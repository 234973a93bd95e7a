"""
Duration helpers
초 단위 실수 → timedelta 변환과 사람이 읽을 수 있는 문자열 포맷
"""
import math
from datetime import timedelta
from typing import List

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
SECONDS_PER_HOUR = SECONDS_PER_MINUTE * MINUTES_PER_HOUR
HOURS_PER_DAY = 24
SECONDS_PER_DAY = SECONDS_PER_HOUR * HOURS_PER_DAY


def seconds_to_duration(seconds: float) -> timedelta:
    """Split float seconds into whole seconds plus floored microseconds."""
    whole = math.floor(seconds)
    micros = math.floor((seconds - whole) * 1_000_000)
    return timedelta(seconds=whole, microseconds=micros)


def _unit(value: int, name: str) -> str:
    if value == 1:
        return f"1 {name}"
    return f"{value} {name}s"


def _join(parts: List[str]) -> str:
    if len(parts) == 1:
        return parts[0]
    if len(parts) == 2:
        return f"{parts[0]} and {parts[1]}"
    return ", ".join(parts[:-1]) + ", and " + parts[-1]


def format_duration(duration: timedelta) -> str:
    """
    Render a duration as an English phrase.

    Examples:
        0s      -> "0 seconds"
        1.5s    -> "1.5000 seconds"
        61s     -> "1 minute and 1 second"
        3661s   -> "1 hour and 1 minute"
        176461s -> "2 days, 1 hour, and 1 minute"

    Fractional seconds only appear when the duration is under a minute.
    Seconds are dropped once hours or days are present.
    """
    total_secs = duration.days * SECONDS_PER_DAY + duration.seconds
    micros = duration.microseconds

    days, rest = divmod(total_secs, SECONDS_PER_DAY)
    hours, rest = divmod(rest, SECONDS_PER_HOUR)
    minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)

    # 1분 미만: 초 단위만 (소수점 4자리)
    if days == 0 and hours == 0 and minutes == 0:
        if seconds == 0 and micros == 0:
            return "0 seconds"
        if seconds == 1 and micros == 0:
            return "1 second"
        return f"{seconds}.{micros // 100:04d} seconds"

    # 1시간 미만: 분 + 정수 초
    if days == 0 and hours == 0:
        parts = [_unit(minutes, "minute")]
        if seconds:
            parts.append(_unit(seconds, "second"))
        return _join(parts)

    # 시간/일 단위: 분이 가장 작은 단위
    parts = []
    if days:
        parts.append(_unit(days, "day"))
    if hours:
        parts.append(_unit(hours, "hour"))
    if minutes:
        parts.append(_unit(minutes, "minute"))
    return _join(parts)
