"""
Integration tests for work session durations

The stored duration is derived on every insert and update, whatever the
caller sent.
"""
from datetime import datetime, timedelta, timezone

import pytest

from craftlib.db.seed import SESSIONS
from craftlib.exceptions import NotFoundError, ValidationError
from craftlib.models import WorkSession
from craftlib.services import session_service


class TestDurationOnInsert:
    """Test durations derived when a session is inserted"""

    def test_seeded_durations_match_timestamps(self, seeded_db):
        for work_session in seeded_db.query(WorkSession).all():
            expected = int((work_session.end_time - work_session.start_time).total_seconds())
            assert work_session.duration_seconds == expected

    def test_supplied_duration_overwritten(self, seeded_db):
        work_session = session_service.log_session(
            seeded_db,
            project_id=8,
            start_time=datetime(2024, 1, 1, 10, 0),
            end_time=datetime(2024, 1, 1, 12, 30),
            duration_seconds=1,
        )
        assert work_session.duration_seconds == 2 * 3600 + 30 * 60

    def test_direct_orm_insert_is_derived(self, seeded_db):
        """Rows added without the service still get the derived duration"""
        work_session = WorkSession(
            project_id=8,
            start_time=datetime(2024, 1, 2, 18, 0),
            end_time=datetime(2024, 1, 2, 19, 0),
            duration_seconds=42,
        )
        seeded_db.add(work_session)
        seeded_db.commit()
        seeded_db.refresh(work_session)
        assert work_session.duration_seconds == 3600

    def test_in_progress_session_stored(self, seeded_db):
        work_session = session_service.log_session(
            seeded_db, project_id=8, start_time=datetime(2024, 1, 3, 9, 0)
        )
        assert work_session.end_time is None
        assert work_session.duration_seconds is None
        assert work_session.in_progress is True

    def test_session_across_midnight(self, seeded_db):
        work_session = session_service.log_session(
            seeded_db,
            project_id=8,
            start_time=datetime(2024, 1, 3, 23, 30),
            end_time=datetime(2024, 1, 4, 0, 45),
        )
        assert work_session.duration_seconds == 75 * 60


class TestDurationOnUpdate:
    """Test durations re-derived when a session is updated"""

    def test_adding_end_time_sets_duration(self, seeded_db):
        work_session = session_service.log_session(
            seeded_db, project_id=8, start_time=datetime(2024, 1, 3, 9, 0)
        )
        updated = session_service.update_session(
            seeded_db, work_session.id, {"end_time": datetime(2024, 1, 3, 11, 15)}
        )
        assert updated.duration_seconds == 2 * 3600 + 15 * 60
        assert updated.in_progress is False

    def test_moving_start_time_recomputes(self, seeded_db):
        updated = session_service.update_session(
            seeded_db, 1, {"start_time": datetime(2023, 10, 16, 21, 0)}
        )
        assert updated.duration_seconds == 2 * 3600

    def test_supplied_duration_on_update_overwritten(self, seeded_db):
        updated = session_service.update_session(seeded_db, 1, {"duration_seconds": 5})
        assert updated.duration_seconds == 3 * 3600

    def test_removing_end_time_clears_duration(self, seeded_db):
        updated = session_service.update_session(seeded_db, 1, {"end_time": None})
        assert updated.duration_seconds is None

    def test_direct_orm_update_is_derived(self, seeded_db):
        work_session = seeded_db.query(WorkSession).filter(WorkSession.id == 2).one()
        work_session.end_time = datetime(2023, 10, 17, 15, 0)
        work_session.duration_seconds = 0
        seeded_db.commit()
        seeded_db.refresh(work_session)
        assert work_session.duration_seconds == 4 * 3600 + 30 * 60

    def test_empty_update_rejected(self, seeded_db):
        with pytest.raises(ValidationError):
            session_service.update_session(seeded_db, 1, {})

    def test_unknown_session(self, seeded_db):
        with pytest.raises(NotFoundError):
            session_service.update_session(seeded_db, 999, {"end_time": None})


class TestListSessions:
    """Test listing a project's sessions"""

    def test_sessions_in_start_order(self, seeded_db):
        sessions = session_service.list_sessions(seeded_db, 1)
        assert [s.start_time for s in sessions] == sorted(
            datetime.strptime(start, "%Y-%m-%d %H:%M") for pid, start, _ in SESSIONS if pid == 1
        )

    def test_project_without_sessions(self, seeded_db):
        assert session_service.list_sessions(seeded_db, 8) == []


class TestOffsetTimestamps:
    """Test timestamps sent with a UTC offset"""

    PLUS_ONE = timezone(timedelta(hours=1))

    def test_offsets_converted_before_storing(self, seeded_db):
        work_session = session_service.log_session(
            seeded_db,
            project_id=8,
            start_time=datetime(2024, 1, 1, 10, 0, tzinfo=self.PLUS_ONE),
            end_time=datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc),
        )
        assert work_session.start_time == datetime(2024, 1, 1, 9, 0)
        assert work_session.end_time == datetime(2024, 1, 1, 12, 0)
        stored = int((work_session.end_time - work_session.start_time).total_seconds())
        assert work_session.duration_seconds == stored == 3 * 3600

        updated = session_service.update_session(seeded_db, work_session.id, {"duration_seconds": 1})
        assert updated.duration_seconds == 3 * 3600

    def test_naive_start_with_offset_end(self, seeded_db):
        work_session = session_service.log_session(
            seeded_db,
            project_id=8,
            start_time=datetime(2024, 1, 1, 10, 0),
            end_time=datetime(2024, 1, 1, 12, 0, tzinfo=self.PLUS_ONE),
        )
        assert work_session.duration_seconds == 3600

    def test_offset_end_added_to_stored_session(self, seeded_db):
        work_session = session_service.log_session(
            seeded_db, project_id=8, start_time=datetime(2024, 1, 1, 10, 0)
        )
        updated = session_service.update_session(
            seeded_db,
            work_session.id,
            {"end_time": datetime(2024, 1, 1, 13, 30, tzinfo=self.PLUS_ONE)},
        )
        assert updated.end_time == datetime(2024, 1, 1, 12, 30)
        assert updated.duration_seconds == 2 * 3600 + 30 * 60
