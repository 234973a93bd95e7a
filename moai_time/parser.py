"""
G-code Parser / Accumulator
SLA(레이저/DLP) G-code를 한 줄씩 읽어 레이어별 이동 거리와 시간을 누적
"""
import logging
import math
import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Iterable, List, Optional, TextIO

from .config import PLACEHOLDER_ESTIMATE
from .errors import GCodeParseError, ZeroFeedrateError
from .models import LayerStats, ParseResult

logger = logging.getLogger(__name__)

TIME_PREFIX = ";TIME:"
LAYER_PREFIX = ";LAYER:"
MOVE_PREFIXES = ("G0 ", "G1 ")

_UINT = re.compile(r"\d+", re.ASCII)

LayerCallback = Callable[[int], None]


@dataclass
class HeadState:
    """파싱 중 헤드 상태 (X/Y/F는 명시되지 않으면 이전 값 유지)"""
    x: float = 0.0
    y: float = 0.0
    feedrate: float = 0.0           # mm/s
    layer: Optional[int] = None     # 첫 ;LAYER: 이전에는 None


def _parse_uint(text: str, directive: str, line_number: int) -> int:
    if not _UINT.fullmatch(text):
        raise GCodeParseError(f"invalid '{directive}' value: {text!r}", line_number)
    return int(text)


def _parse_real(text: str, axis: str, line_number: int) -> float:
    try:
        value = float(text)
    except ValueError:
        raise GCodeParseError(f"invalid {axis} value: {text!r}", line_number) from None
    # nan/inf는 float()가 받아주지만 좌표/속도로는 무효
    if not math.isfinite(value):
        raise GCodeParseError(f"invalid {axis} value: {text!r}", line_number)
    return value


def _layer_stats(layers: List[LayerStats], index: int) -> LayerStats:
    # 필요한 인덱스까지 0 값 레코드로 채움
    while len(layers) <= index:
        layers.append(LayerStats())
    return layers[index]


def _apply_move(line: str, head: HeadState, layers: List[LayerStats], line_number: int) -> None:
    x = y = f = None
    for part in line.split():
        key, value = part[0], part[1:]
        if key == "X":
            x = _parse_real(value, "X", line_number)
        elif key == "Y":
            y = _parse_real(value, "Y", line_number)
        elif key == "F":
            f = _parse_real(value, "F", line_number)
            if f < 0:
                raise GCodeParseError(f"negative F value: {value!r}", line_number)
            # F는 mm/min → mm/s
            f = f / 60.0

    old_x, old_y = head.x, head.y
    if x is not None:
        head.x = x
    if y is not None:
        head.y = y
    if f is not None:
        head.feedrate = f

    distance = math.hypot(head.x - old_x, head.y - old_y)
    if distance == 0.0:
        elapsed = 0.0
    elif head.feedrate == 0.0:
        raise ZeroFeedrateError(f"move of {distance:.4f} mm with zero feedrate", line_number)
    else:
        elapsed = distance / head.feedrate

    stats = _layer_stats(layers, head.layer)
    stats.distance += distance
    stats.time += elapsed


def parse_lines(lines: Iterable[str], on_layer: Optional[LayerCallback] = None) -> ParseResult:
    """
    Fold G-code lines into a ParseResult.

    Only ``;TIME:``, ``;LAYER:`` and ``G0``/``G1`` lines are interpreted;
    everything else is ignored. Moves before the first layer marker are
    skipped.

    Args:
        lines: G-code text lines (trailing newlines allowed)
        on_layer: optional callback invoked with each layer index (progress)

    Raises:
        GCodeParseError: malformed ;TIME:/;LAYER: integer or X/Y/F value
        ZeroFeedrateError: non-zero move while feedrate is zero
    """
    head = HeadState()
    layers: List[LayerStats] = []
    slicer_estimate: Optional[timedelta] = None

    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")

        if line.startswith(TIME_PREFIX):
            seconds = _parse_uint(line[len(TIME_PREFIX):], TIME_PREFIX, line_number)
            if seconds == PLACEHOLDER_ESTIMATE:
                logger.debug("Ignoring placeholder slicer estimate at line %d", line_number)
            else:
                slicer_estimate = timedelta(seconds=seconds)

        elif line.startswith(LAYER_PREFIX):
            head.layer = _parse_uint(line[len(LAYER_PREFIX):], LAYER_PREFIX, line_number)
            if on_layer is not None:
                on_layer(head.layer)

        elif line.startswith(MOVE_PREFIXES):
            if head.layer is None:
                continue
            _apply_move(line, head, layers, line_number)

    logger.debug("Parsed %d layers, slicer estimate: %s", len(layers), slicer_estimate)
    return ParseResult(layers=tuple(layers), slicer_estimated_duration=slicer_estimate)


def parse_stream(stream: TextIO, on_layer: Optional[LayerCallback] = None) -> ParseResult:
    """Parse an already-open text stream."""
    return parse_lines(stream, on_layer=on_layer)


def parse_gcode(file_path: str, on_layer: Optional[LayerCallback] = None) -> ParseResult:
    """Open a G-code file and parse it line by line.

    Directives are ASCII, so undecodable bytes are replaced rather than
    failing the whole file.
    """
    with open(file_path, "r", encoding="utf-8", errors="replace", newline="") as f:
        return parse_stream(f, on_layer=on_layer)
