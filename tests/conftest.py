from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta
from types import SimpleNamespace
from typing import Optional

import pytest

from academy_system.attendance.model import Attendance, AttendanceRow
from academy_system.attendance.service import AttendanceService
from academy_system.core.enums import AttendanceStatus, EvaluationType
from academy_system.evaluations.model import Evaluation, EvaluationRow
from academy_system.evaluations.service import EvaluationService
from academy_system.events.model import Event, EventRef, Group, Training
from academy_system.roster.model import Coach, Player
from academy_system.schedules.model import TrainingSchedule
from academy_system.schedules.service import ScheduleService


class FakeSession:
    def __init__(self):
        self.commits = 0
        self.rollbacks = 0

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1


class FakeConnection:
    def __init__(self):
        self.fake_session = FakeSession()

    def session(self):
        return self.fake_session


@dataclass
class InMemoryGroups:
    groups: dict[int, Group] = field(default_factory=dict)

    def get_by_id(self, tx, group_id: int) -> Optional[Group]:
        return self.groups.get(group_id)


@dataclass
class InMemoryPlayers:
    players: dict[int, Player] = field(default_factory=dict)

    def get_by_id(self, tx, player_id: int) -> Optional[Player]:
        return self.players.get(player_id)

    def list_by_group(self, tx, group_id: int):
        return [p for p in self.players.values() if p.group_id == group_id]


@dataclass
class InMemoryCoaches:
    coaches: dict[int, Coach] = field(default_factory=dict)

    def get_by_user_id(self, tx, user_id: int) -> Optional[Coach]:
        for coach in self.coaches.values():
            if coach.user_id == user_id:
                return coach
        return None


class InMemoryTrainings:
    def __init__(self):
        self.trainings: dict[int, Training] = {}
        self._id = 0

    def put(self, **kwargs) -> Training:
        self._id += 1
        training = Training(training_id=self._id, **kwargs)
        self.trainings[self._id] = training
        return training

    def list_for_group_between(self, tx, *, group_id: int, start: date, end: date):
        return [
            t
            for t in self.trainings.values()
            if t.group_id == group_id and start <= t.start_time.date() <= end
        ]

    def add_many(self, tx, trainings):
        return [
            self.put(
                group_id=t.group_id,
                start_time=t.start_time,
                end_time=t.end_time,
                location=t.location,
                topic=t.topic,
                schedule_id=t.schedule_id,
            )
            for t in trainings
        ]

    def list_future_generated(self, tx, *, group_id: int, now: datetime):
        return [
            t
            for t in self.trainings.values()
            if t.group_id == group_id and t.schedule_id is not None and t.start_time > now
        ]

    def delete_many(self, tx, training_ids):
        for training_id in training_ids:
            del self.trainings[training_id]
        return len(training_ids)


@dataclass
class InMemoryEvents:
    trainings: InMemoryTrainings
    matches: dict[int, Event] = field(default_factory=dict)

    def get_event(self, tx, ref: EventRef) -> Optional[Event]:
        if ref.training_id is not None:
            t = self.trainings.trainings.get(ref.id)
            if t is None:
                return None
            return Event(ref=t.ref, group_id=t.group_id, start_time=t.start_time, end_time=t.end_time)
        return self.matches.get(ref.id)


class InMemorySchedules:
    def __init__(self):
        self.slots: dict[int, list[TrainingSchedule]] = {}
        self._id = 0

    def list_for_group(self, tx, group_id: int):
        return sorted(self.slots.get(group_id, []), key=lambda s: s.day_of_week)

    def replace_for_group(self, tx, *, group_id: int, items):
        saved = []
        for item in items:
            self._id += 1
            saved.append(
                TrainingSchedule(
                    schedule_id=self._id,
                    group_id=group_id,
                    day_of_week=item.day_of_week,
                    start_time=item.start_time,
                    end_time=item.end_time,
                    location=item.location,
                )
            )
        self.slots[group_id] = saved
        return self.list_for_group(tx, group_id)


class InMemoryAttendance:
    def __init__(self, players: InMemoryPlayers, events: InMemoryEvents):
        self._players = players
        self._events = events
        self.rows: dict[tuple[int, str], Attendance] = {}
        self.fail_for_player: Optional[int] = None
        self._id = 0

    def get_for_player_and_event(self, tx, *, player_id: int, event: EventRef) -> Optional[Attendance]:
        return self.rows.get((player_id, event.key))

    def create(self, tx, *, player_id: int, event: EventRef, status: AttendanceStatus, notes=None) -> Attendance:
        if player_id == self.fail_for_player:
            raise RuntimeError("connection lost")
        self._id += 1
        now = datetime(2024, 1, 1, 12, 0) + timedelta(seconds=self._id)
        row = Attendance(
            attendance_id=self._id,
            player_id=player_id,
            event=event,
            status=status,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
        self.rows[(player_id, event.key)] = row
        return row

    def update(self, tx, *, attendance_id: int, status: AttendanceStatus, notes=None) -> Attendance:
        for key, row in self.rows.items():
            if row.attendance_id == attendance_id:
                self.rows[key] = replace(row, status=status, notes=notes)
                return self.rows[key]
        raise LookupError(attendance_id)

    def list_for_event(self, tx, event: EventRef):
        rows = [r for r in self.rows.values() if r.event == event]
        rows.sort(key=lambda r: (r.created_at, r.attendance_id), reverse=True)
        return [
            AttendanceRow(
                attendance=r,
                player=self._players.players[r.player_id],
                event=self._events.get_event(tx, r.event),
            )
            for r in rows
        ]

    def list_for_players(self, tx, player_ids):
        return [r for r in self.rows.values() if r.player_id in set(player_ids)]

    def count_for_event(self, tx, event: EventRef) -> int:
        return sum(1 for r in self.rows.values() if r.event == event)


class InMemoryEvaluations:
    def __init__(self, players: InMemoryPlayers, coaches: InMemoryCoaches, events: InMemoryEvents):
        self._players = players
        self._coaches = coaches
        self._events = events
        self.rows: dict[tuple[int, str, EvaluationType], Evaluation] = {}
        self.fail_for_player: Optional[int] = None
        self._id = 0

    def get_for_player_event_type(self, tx, *, player_id: int, event: EventRef, type: EvaluationType):
        return self.rows.get((player_id, event.key, type))

    def create(self, tx, *, player_id, coach_id, event, type, rating, comment=None) -> Evaluation:
        if player_id == self.fail_for_player:
            raise RuntimeError("connection lost")
        self._id += 1
        now = datetime(2024, 1, 1, 12, 0) + timedelta(seconds=self._id)
        row = Evaluation(
            evaluation_id=self._id,
            player_id=player_id,
            coach_id=coach_id,
            event=event,
            type=type,
            rating=rating,
            comment=comment,
            created_at=now,
            updated_at=now,
        )
        self.rows[(player_id, event.key, type)] = row
        return row

    def update(self, tx, *, evaluation_id, coach_id, rating, comment=None) -> Evaluation:
        for key, row in self.rows.items():
            if row.evaluation_id == evaluation_id:
                self.rows[key] = replace(row, coach_id=coach_id, rating=rating, comment=comment)
                return self.rows[key]
        raise LookupError(evaluation_id)

    def delete_for_player_and_event(self, tx, *, player_id: int, event: EventRef) -> int:
        keys = [k for k in self.rows if k[0] == player_id and k[1] == event.key]
        for key in keys:
            del self.rows[key]
        return len(keys)

    def _row(self, tx, e: Evaluation) -> EvaluationRow:
        return EvaluationRow(
            evaluation=e,
            player=self._players.players[e.player_id],
            coach=self._coaches.coaches[e.coach_id],
            event=self._events.get_event(tx, e.event),
        )

    def _sorted(self, evaluations, newest_first: bool):
        ordered = sorted(evaluations, key=lambda e: (e.created_at, e.evaluation_id), reverse=newest_first)
        return [self._row(None, e) for e in ordered]

    def list_for_event(self, tx, event: EventRef):
        return self._sorted((e for e in self.rows.values() if e.event == event), newest_first=True)

    def list_for_player(self, tx, player_id: int, *, newest_first: bool = True):
        return self._sorted((e for e in self.rows.values() if e.player_id == player_id), newest_first)


@pytest.fixture
def academy():
    """Wired services over in-memory repositories with one group, two players and a coach."""
    conn = FakeConnection()
    groups = InMemoryGroups({1: Group(group_id=1, name="U12", year_of_birth=2012)})
    players = InMemoryPlayers(
        {
            10: Player(player_id=10, first_name="Liam", last_name="Novak", group_id=1),
            11: Player(player_id=11, first_name="Mia", last_name="Kovac", group_id=1),
        }
    )
    coaches = InMemoryCoaches({5: Coach(coach_id=5, user_id=50, first_name="Ana", last_name="Coach")})
    trainings = InMemoryTrainings()
    events = InMemoryEvents(trainings)
    schedules = InMemorySchedules()
    attendance = InMemoryAttendance(players, events)
    evaluations = InMemoryEvaluations(players, coaches, events)

    return SimpleNamespace(
        conn=conn,
        groups=groups,
        players=players,
        coaches=coaches,
        trainings=trainings,
        events=events,
        schedules=schedules,
        attendance=attendance,
        evaluations=evaluations,
        schedule_service=ScheduleService(conn, groups, schedules, trainings, attendance),
        attendance_service=AttendanceService(conn, attendance, evaluations, events, players, groups),
        evaluation_service=EvaluationService(conn, evaluations, events, players, coaches),
    )


@pytest.fixture
def training(academy) -> Training:
    return academy.trainings.put(
        group_id=1,
        start_time=datetime(2024, 1, 8, 10, 0),
        end_time=datetime(2024, 1, 8, 12, 0),
        location="Field A",
    )
