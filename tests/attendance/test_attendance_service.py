from __future__ import annotations

from datetime import datetime

import pytest

from academy_system.attendance.model import AttendanceInput
from academy_system.attendance.upsert import clears_evaluations
from academy_system.core.enums import AttendanceStatus, EvaluationType, EventType
from academy_system.core.exceptions import BadRequestError, NotFoundError
from academy_system.evaluations.model import EvaluationBatch, EvaluationInput
from academy_system.events.model import Event, EventRef


def _evaluate(academy, training_id: int, player_id: int = 10):
    academy.evaluation_service.create_batch(
        EvaluationBatch(
            records=[
                EvaluationInput(player_id=player_id, type=EvaluationType.TECHNIQUE, rating=8),
                EvaluationInput(player_id=player_id, type=EvaluationType.TACTICS, rating=6),
            ],
            training_id=training_id,
        ),
        coach_user_id=50,
    )


def test_mark_batch_creates_rows(academy, training):
    saved = academy.attendance_service.mark_batch(
        training.training_id,
        EventType.TRAINING,
        [
            AttendanceInput(player_id=10, status=AttendanceStatus.PRESENT),
            AttendanceInput(player_id=11, status=AttendanceStatus.SICK, notes="flu"),
        ],
    )

    assert [a.status for a in saved] == [AttendanceStatus.PRESENT, AttendanceStatus.SICK]
    assert saved[1].notes == "flu"
    assert saved[0].event == EventRef.training(training.training_id)
    assert academy.conn.fake_session.commits == 1


def test_mark_batch_twice_keeps_one_row_per_player(academy, training):
    records = [AttendanceInput(player_id=10, status=AttendanceStatus.PRESENT)]

    first = academy.attendance_service.mark_batch(training.training_id, EventType.TRAINING, records)
    second = academy.attendance_service.mark_batch(training.training_id, EventType.TRAINING, records)

    assert first[0].attendance_id == second[0].attendance_id
    assert len(academy.attendance.rows) == 1


def test_empty_notes_are_stored_as_none(academy, training):
    saved = academy.attendance_service.mark_batch(
        training.training_id, EventType.TRAINING, [AttendanceInput(player_id=10, status=AttendanceStatus.LATE, notes="")]
    )

    assert saved[0].notes is None


def test_absent_on_training_deletes_player_evaluations(academy, training):
    academy.attendance_service.mark_batch(
        training.training_id, EventType.TRAINING, [AttendanceInput(player_id=10, status=AttendanceStatus.PRESENT)]
    )
    _evaluate(academy, training.training_id)
    _evaluate(academy, training.training_id, player_id=11)
    assert len(academy.evaluations.rows) == 4

    academy.attendance_service.mark_batch(
        training.training_id, EventType.TRAINING, [AttendanceInput(player_id=10, status=AttendanceStatus.ABSENT)]
    )

    assert {k[0] for k in academy.evaluations.rows} == {11}


def test_late_keeps_evaluations(academy, training):
    academy.attendance_service.mark_batch(
        training.training_id, EventType.TRAINING, [AttendanceInput(player_id=10, status=AttendanceStatus.PRESENT)]
    )
    _evaluate(academy, training.training_id)

    academy.attendance_service.mark_batch(
        training.training_id, EventType.TRAINING, [AttendanceInput(player_id=10, status=AttendanceStatus.LATE)]
    )

    assert len(academy.evaluations.rows) == 2


def test_first_mark_as_absent_does_not_touch_evaluations(academy, training):
    _evaluate(academy, training.training_id)

    academy.attendance_service.mark_batch(
        training.training_id, EventType.TRAINING, [AttendanceInput(player_id=10, status=AttendanceStatus.ABSENT)]
    )

    assert len(academy.evaluations.rows) == 2


def test_clears_evaluations_only_for_trainings():
    assert clears_evaluations(EventRef.training(1), AttendanceStatus.SICK)
    assert clears_evaluations(EventRef.training(1), AttendanceStatus.EXCUSED)
    assert not clears_evaluations(EventRef.training(1), AttendanceStatus.PRESENT)
    assert not clears_evaluations(EventRef.training(1), AttendanceStatus.LATE)
    assert not clears_evaluations(EventRef.match(1), AttendanceStatus.ABSENT)


def test_match_attendance_never_deletes_evaluations(academy):
    academy.events.matches[3] = Event(
        ref=EventRef.match(3), group_id=1, start_time=datetime(2024, 1, 13, 11, 0), end_time=None
    )
    academy.attendance_service.mark_batch(3, EventType.MATCH, [AttendanceInput(10, AttendanceStatus.PRESENT)])
    academy.evaluation_service.create_batch(
        EvaluationBatch(records=[EvaluationInput(10, EvaluationType.PHYSICAL, 7)], match_id=3), coach_user_id=50
    )

    academy.attendance_service.mark_batch(3, EventType.MATCH, [AttendanceInput(10, AttendanceStatus.ABSENT)])

    assert len(academy.evaluations.rows) == 1


def test_mark_batch_unknown_event(academy):
    with pytest.raises(NotFoundError, match="Training with ID 404 not found"):
        academy.attendance_service.mark_batch(404, EventType.TRAINING, [AttendanceInput(10, AttendanceStatus.PRESENT)])

    assert academy.conn.fake_session.rollbacks == 1


def test_mark_batch_unknown_player_rolls_back(academy, training):
    with pytest.raises(NotFoundError, match="Player with ID 77 not found"):
        academy.attendance_service.mark_batch(
            training.training_id,
            EventType.TRAINING,
            [AttendanceInput(10, AttendanceStatus.PRESENT), AttendanceInput(77, AttendanceStatus.PRESENT)],
        )

    assert academy.conn.fake_session.rollbacks == 1
    assert academy.conn.fake_session.commits == 0


def test_mark_batch_storage_failure_becomes_bad_request(academy, training):
    academy.attendance.fail_for_player = 11

    with pytest.raises(BadRequestError, match="Failed to mark attendance"):
        academy.attendance_service.mark_batch(
            training.training_id,
            EventType.TRAINING,
            [AttendanceInput(10, AttendanceStatus.PRESENT), AttendanceInput(11, AttendanceStatus.PRESENT)],
        )

    assert academy.conn.fake_session.rollbacks == 1


def test_mark_batch_rejects_empty_records(academy, training):
    with pytest.raises(BadRequestError):
        academy.attendance_service.mark_batch(training.training_id, EventType.TRAINING, [])


def test_find_by_event_for_players_filters(academy, training):
    academy.attendance_service.mark_batch(
        training.training_id,
        EventType.TRAINING,
        [AttendanceInput(10, AttendanceStatus.PRESENT), AttendanceInput(11, AttendanceStatus.ABSENT)],
    )

    rows = academy.attendance_service.find_by_event_for_players(training.training_id, EventType.TRAINING, [11])

    assert [r.player.player_id for r in rows] == [11]
    assert rows[0].event.start_time == training.start_time


def test_group_stats_per_player(academy, training):
    academy.attendance_service.mark_batch(
        training.training_id,
        EventType.TRAINING,
        [AttendanceInput(10, AttendanceStatus.PRESENT), AttendanceInput(11, AttendanceStatus.ABSENT)],
    )

    stats = {s.player_id: s for s in academy.attendance_service.get_group_stats(1)}

    assert stats[10].player_name == "Liam Novak"
    assert stats[10].stats.rate == 100
    assert stats[11].stats.rate == 0
    assert stats[11].stats.total_trainings == 1


def test_group_stats_unknown_group(academy):
    with pytest.raises(NotFoundError, match="Group with ID 99 not found"):
        academy.attendance_service.get_group_stats(99)
