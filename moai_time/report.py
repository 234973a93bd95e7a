from typing import List

from colorama import Fore, Style

from .duration import format_duration
from .models import ParseResult, TimeReport


def build_report(file_name: str, parsed: ParseResult, layer_change_seconds: float) -> TimeReport:
    """ParseResult → TimeReport (초 단위 값 + 포맷된 문자열)"""
    estimate = parsed.slicer_estimated_duration
    laser = parsed.laser_time()
    layer_change = parsed.layer_change_time(layer_change_seconds)
    total = parsed.total_time(layer_change_seconds)

    return TimeReport(
        file=file_name,
        layer_count=parsed.layer_count,
        total_distance_mm=round(parsed.total_distance, 3),
        slicer_estimated_seconds=estimate.total_seconds() if estimate is not None else None,
        slicer_estimated=format_duration(estimate) if estimate is not None else None,
        total_seconds=total.total_seconds(),
        total=format_duration(total),
        laser_seconds=laser.total_seconds(),
        laser=format_duration(laser),
        layer_change_seconds=layer_change.total_seconds(),
        layer_change=format_duration(layer_change),
    )


def render_text(report: TimeReport, color: bool = True) -> str:
    """터미널 출력용 텍스트"""
    total = report.total
    if color:
        total = f"{Fore.GREEN}{total}{Style.RESET_ALL}"

    lines: List[str] = [f"For {report.file}:"]
    if report.slicer_estimated is not None:
        lines.append(f"\tSlicer estimated print time: {report.slicer_estimated}")
    lines.append(f"\tEstimated print time: {total}")
    lines.append(f"\t\t       Laser: {report.laser}")
    lines.append(f"\t\tLayer change: {report.layer_change}")
    return "\n".join(lines)
