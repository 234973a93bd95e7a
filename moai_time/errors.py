from typing import Optional


class GCodeError(Exception):
    """G-code 처리 중 발생한 치명적 오류 (해당 파일의 처리를 중단)"""
    def __init__(self, message: str, line_number: Optional[int] = None, error_code: str = "gcode_error"):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.error_code = error_code


class GCodeParseError(GCodeError):
    """;TIME: / ;LAYER: 정수 또는 X/Y/F 실수 값 파싱 실패"""
    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message, line_number=line_number, error_code="malformed_directive")


class ZeroFeedrateError(GCodeError):
    """이동 거리가 있는데 feedrate가 0인 경우"""
    def __init__(self, message: str, line_number: Optional[int] = None):
        super().__init__(message, line_number=line_number, error_code="zero_feedrate")
