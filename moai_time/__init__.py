from .duration import format_duration, seconds_to_duration
from .errors import GCodeError, GCodeParseError, ZeroFeedrateError
from .models import LayerStats, ParseResult, TimeReport
from .parser import parse_gcode, parse_lines, parse_stream

__all__ = [
    'format_duration',
    'seconds_to_duration',
    'GCodeError',
    'GCodeParseError',
    'ZeroFeedrateError',
    'LayerStats',
    'ParseResult',
    'TimeReport',
    'parse_gcode',
    'parse_lines',
    'parse_stream',
]
