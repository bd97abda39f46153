"""
Unit tests for session duration derivation and total time formatting
"""
from datetime import datetime, timedelta, timezone

from craftlib.models import WorkSession, derive_duration
from craftlib.services.project_service import format_total_duration


class TestDeriveDuration:
    """Test derive_duration on unsaved sessions"""

    def test_duration_is_end_minus_start(self):
        work_session = WorkSession(
            start_time=datetime(2023, 10, 17, 10, 30),
            end_time=datetime(2023, 10, 17, 14, 0),
        )
        assert derive_duration(work_session) == 3 * 3600 + 30 * 60
        assert work_session.duration == timedelta(hours=3, minutes=30)

    def test_caller_supplied_duration_is_overwritten(self):
        work_session = WorkSession(
            start_time=datetime(2023, 10, 16, 20, 0),
            end_time=datetime(2023, 10, 16, 23, 0),
            duration_seconds=60,
        )
        derive_duration(work_session)
        assert work_session.duration_seconds == 3 * 3600

    def test_in_progress_session_has_no_duration(self):
        """No end time means NULL duration, even if one was supplied"""
        work_session = WorkSession(
            start_time=datetime(2023, 10, 16, 20, 0),
            duration_seconds=500,
        )
        assert derive_duration(work_session) is None
        assert work_session.duration is None
        assert work_session.in_progress is True

    def test_session_past_midnight(self):
        work_session = WorkSession(
            start_time=datetime(2023, 10, 16, 23, 0),
            end_time=datetime(2023, 10, 17, 1, 15),
        )
        assert derive_duration(work_session) == 2 * 3600 + 15 * 60

    def test_end_before_start_is_not_rejected(self):
        work_session = WorkSession(
            start_time=datetime(2023, 10, 16, 20, 0),
            end_time=datetime(2023, 10, 16, 19, 0),
        )
        assert derive_duration(work_session) == -3600

    def test_offset_timestamps_stored_as_naive_utc(self):
        work_session = WorkSession(
            start_time=datetime(2024, 1, 1, 10, 0, tzinfo=timezone(timedelta(hours=1))),
            end_time=datetime(2024, 1, 1, 12, 0),
        )
        assert work_session.start_time == datetime(2024, 1, 1, 9, 0)
        assert work_session.start_time.tzinfo is None
        assert derive_duration(work_session) == 3 * 3600


class TestFormatTotalDuration:
    """Test "<H> hours <MM> minutes" formatting"""

    def test_whole_hours(self):
        assert format_total_duration(95 * 3600) == "95 hours 00 minutes"

    def test_hours_and_minutes(self):
        assert format_total_duration(9 * 3600 + 30 * 60) == "9 hours 30 minutes"

    def test_hours_do_not_wrap_at_a_day(self):
        """Totals over 24 hours keep counting instead of acting like a clock"""
        assert format_total_duration(25 * 3600 + 5 * 60) == "25 hours 05 minutes"

    def test_seconds_are_dropped(self):
        assert format_total_duration(3600 + 59) == "1 hours 00 minutes"

    def test_zero(self):
        assert format_total_duration(0) == "0 hours 00 minutes"

    def test_negative_total(self):
        assert format_total_duration(-90 * 60) == "-1 hours 30 minutes"

    def test_negative_under_a_minute_has_no_sign(self):
        assert format_total_duration(-30) == "0 hours 00 minutes"
