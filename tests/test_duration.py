"""
Duration 포맷 테스트
"""
from datetime import timedelta

import pytest

from moai_time.duration import format_duration, seconds_to_duration


class TestSecondsToDuration:
    """초(float) → timedelta 변환"""

    def test_whole_seconds(self):
        """정수 초"""
        assert seconds_to_duration(61.0) == timedelta(seconds=61)

    def test_fraction_floored_to_microseconds(self):
        """소수부는 마이크로초로 내림"""
        assert seconds_to_duration(1.5) == timedelta(seconds=1, microseconds=500000)
        assert seconds_to_duration(0.0000019) == timedelta(microseconds=1)

    def test_zero(self):
        """0초"""
        assert seconds_to_duration(0.0) == timedelta(0)


class TestFormatDuration:
    """사람이 읽는 문자열 포맷"""

    @pytest.mark.parametrize("seconds, expected", [
        (0, "0 seconds"),
        (1, "1 second"),
        (1.5, "1.5000 seconds"),
        (61, "1 minute and 1 second"),
        (3661, "1 hour and 1 minute"),
        (90000, "1 day and 1 hour"),
        (176461, "2 days, 1 hour, and 1 minute"),
    ])
    def test_reference_cases(self, seconds, expected):
        """기준 문구"""
        assert format_duration(seconds_to_duration(seconds)) == expected

    @pytest.mark.parametrize("seconds, expected", [
        (2, "2.0000 seconds"),
        (0.25, "0.2500 seconds"),
        (1.0625, "1.0625 seconds"),
        (59, "59.0000 seconds"),
    ])
    def test_under_a_minute(self, seconds, expected):
        """1분 미만은 소수점 4자리 (정확히 1초만 단수)"""
        assert format_duration(seconds_to_duration(seconds)) == expected

    @pytest.mark.parametrize("seconds, expected", [
        (60, "1 minute"),
        (60.5, "1 minute"),
        (62, "1 minute and 2 seconds"),
        (120, "2 minutes"),
        (121, "2 minutes and 1 second"),
        (125.75, "2 minutes and 5 seconds"),
    ])
    def test_minutes(self, seconds, expected):
        """분 단위가 있으면 초는 정수로만"""
        assert format_duration(seconds_to_duration(seconds)) == expected

    @pytest.mark.parametrize("seconds, expected", [
        (3600, "1 hour"),
        (3659, "1 hour"),
        (3720, "1 hour and 2 minutes"),
        (7200, "2 hours"),
        (7260, "2 hours and 1 minute"),
        (9000, "2 hours and 30 minutes"),
    ])
    def test_hours(self, seconds, expected):
        """시간 단위가 있으면 초는 생략"""
        assert format_duration(seconds_to_duration(seconds)) == expected

    @pytest.mark.parametrize("seconds, expected", [
        (86400, "1 day"),
        (86460, "1 day and 1 minute"),
        (86400 + 300, "1 day and 5 minutes"),
        (86400 + 3600 + 300, "1 day, 1 hour, and 5 minutes"),
        (86400 + 3 * 3600, "1 day and 3 hours"),
        (86400 + 3 * 3600 + 60, "1 day, 3 hours, and 1 minute"),
        (2 * 86400, "2 days"),
        (2 * 86400 + 3 * 3600, "2 days and 3 hours"),
        (2 * 86400 + 3600, "2 days and 1 hour"),
        (2 * 86400 + 60, "2 days and 1 minute"),
        (3 * 86400 + 5 * 3600 + 7 * 60 + 59, "3 days, 5 hours, and 7 minutes"),
    ])
    def test_days(self, seconds, expected):
        """일 단위: 일/시간/분까지만"""
        assert format_duration(seconds_to_duration(seconds)) == expected

    def test_accepts_plain_timedelta(self):
        """timedelta 직접 전달"""
        assert format_duration(timedelta(days=1, hours=1)) == "1 day and 1 hour"
