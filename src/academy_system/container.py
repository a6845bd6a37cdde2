from __future__ import annotations

from dataclasses import dataclass

from flask_sqlalchemy import SQLAlchemy

from .attendance.service import AttendanceService
from .attendance.sql_attendance_repository import SQLAttendanceRepository
from .database.connection import DatabaseConnection
from .evaluations.service import EvaluationService
from .evaluations.sql_evaluation_repository import SQLEvaluationRepository
from .events.sql_event_repository import SQLEventRepository, SQLGroupRepository, SQLTrainingRepository
from .roster.sql_roster_repository import SQLCoachRepository, SQLPlayerRepository
from .schedules.service import ScheduleService
from .schedules.sql_schedule_repository import SQLScheduleRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    groups_repo: SQLGroupRepository
    events_repo: SQLEventRepository
    trainings_repo: SQLTrainingRepository
    players_repo: SQLPlayerRepository
    coaches_repo: SQLCoachRepository
    schedules_repo: SQLScheduleRepository
    attendance_repo: SQLAttendanceRepository
    evaluations_repo: SQLEvaluationRepository

    schedule_service: ScheduleService
    attendance_service: AttendanceService
    evaluation_service: EvaluationService


def build_container(*, db: SQLAlchemy) -> Container:
    conn = DatabaseConnection(db)

    groups_repo = SQLGroupRepository()
    events_repo = SQLEventRepository()
    trainings_repo = SQLTrainingRepository()
    players_repo = SQLPlayerRepository()
    coaches_repo = SQLCoachRepository()
    schedules_repo = SQLScheduleRepository()
    attendance_repo = SQLAttendanceRepository()
    evaluations_repo = SQLEvaluationRepository()

    schedule_service = ScheduleService(conn, groups_repo, schedules_repo, trainings_repo, attendance_repo)
    attendance_service = AttendanceService(conn, attendance_repo, evaluations_repo, events_repo, players_repo, groups_repo)
    evaluation_service = EvaluationService(conn, evaluations_repo, events_repo, players_repo, coaches_repo)

    return Container(
        conn=conn,
        groups_repo=groups_repo,
        events_repo=events_repo,
        trainings_repo=trainings_repo,
        players_repo=players_repo,
        coaches_repo=coaches_repo,
        schedules_repo=schedules_repo,
        attendance_repo=attendance_repo,
        evaluations_repo=evaluations_repo,
        schedule_service=schedule_service,
        attendance_service=attendance_service,
        evaluation_service=evaluation_service,
    )
