from __future__ import annotations

from datetime import datetime

from ..core.enums import AttendanceStatus, EvaluationType
from ..extensions import db


class GroupTable(db.Model):
    __tablename__ = "groups"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    year_of_birth = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)


class PlayerTable(db.Model):
    __tablename__ = "players"

    id = db.Column(db.Integer, primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    group_id = db.Column(db.Integer, db.ForeignKey("groups.id", ondelete="SET NULL"), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)


class CoachTable(db.Model):
    __tablename__ = "coaches"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, unique=True, nullable=False)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)


class TrainingScheduleTable(db.Model):
    __tablename__ = "training_schedules"

    id = db.Column(db.Integer, primary_key=True)
    group_id = db.Column(db.Integer, db.ForeignKey("groups.id", ondelete="CASCADE"), nullable=False, index=True)
    day_of_week = db.Column(db.Integer, nullable=False)  # 0 (Sunday) - 6 (Saturday)
    start_time = db.Column(db.String(5), nullable=False)  # "HH:MM"
    end_time = db.Column(db.String(5), nullable=False)  # "HH:MM"
    location = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)


class TrainingTable(db.Model):
    __tablename__ = "trainings"

    id = db.Column(db.Integer, primary_key=True)
    group_id = db.Column(db.Integer, db.ForeignKey("groups.id", ondelete="CASCADE"), nullable=False, index=True)
    schedule_id = db.Column(
        db.Integer, db.ForeignKey("training_schedules.id", ondelete="SET NULL"), nullable=True
    )
    start_time = db.Column(db.DateTime, nullable=False, index=True)
    end_time = db.Column(db.DateTime, nullable=False)
    location = db.Column(db.String(255), nullable=False)
    topic = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)


class MatchTable(db.Model):
    __tablename__ = "matches"

    id = db.Column(db.Integer, primary_key=True)
    group_id = db.Column(db.Integer, db.ForeignKey("groups.id", ondelete="CASCADE"), nullable=False, index=True)
    start_time = db.Column(db.DateTime, nullable=False)
    end_time = db.Column(db.DateTime, nullable=True)
    opponent_name = db.Column(db.String(255), nullable=False)
    is_home = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)


class AttendanceTable(db.Model):
    __tablename__ = "attendances"
    __table_args__ = (
        db.UniqueConstraint("player_id", "training_id", name="uq_attendance_player_training"),
        db.UniqueConstraint("player_id", "match_id", name="uq_attendance_player_match"),
        db.CheckConstraint(
            "(training_id IS NOT NULL AND match_id IS NULL) OR (training_id IS NULL AND match_id IS NOT NULL)",
            name="ck_attendance_one_event",
        ),
    )

    id = db.Column(db.Integer, primary_key=True)
    player_id = db.Column(db.Integer, db.ForeignKey("players.id", ondelete="CASCADE"), nullable=False)
    training_id = db.Column(db.Integer, db.ForeignKey("trainings.id", ondelete="CASCADE"), nullable=True)
    match_id = db.Column(db.Integer, db.ForeignKey("matches.id", ondelete="CASCADE"), nullable=True)
    status = db.Column(db.Enum(AttendanceStatus, name="attendance_status"), nullable=False)
    notes = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)

    player = db.relationship("PlayerTable")
    training = db.relationship("TrainingTable")
    match = db.relationship("MatchTable")


class EvaluationTable(db.Model):
    __tablename__ = "evaluations"
    __table_args__ = (
        db.UniqueConstraint("player_id", "training_id", "type", name="uq_evaluation_player_training_type"),
        db.UniqueConstraint("player_id", "match_id", "type", name="uq_evaluation_player_match_type"),
        db.CheckConstraint(
            "(training_id IS NOT NULL AND match_id IS NULL) OR (training_id IS NULL AND match_id IS NOT NULL)",
            name="ck_evaluation_one_event",
        ),
        db.CheckConstraint("rating BETWEEN 1 AND 10", name="ck_evaluation_rating"),
    )

    id = db.Column(db.Integer, primary_key=True)
    player_id = db.Column(db.Integer, db.ForeignKey("players.id", ondelete="CASCADE"), nullable=False)
    coach_id = db.Column(db.Integer, db.ForeignKey("coaches.id"), nullable=False)
    training_id = db.Column(db.Integer, db.ForeignKey("trainings.id", ondelete="CASCADE"), nullable=True)
    match_id = db.Column(db.Integer, db.ForeignKey("matches.id", ondelete="CASCADE"), nullable=True)
    type = db.Column(db.Enum(EvaluationType, name="evaluation_type"), nullable=False)
    rating = db.Column(db.Integer, nullable=False)
    comment = db.Column(db.Text, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.now)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.now, onupdate=datetime.now)

    player = db.relationship("PlayerTable")
    coach = db.relationship("CoachTable")
    training = db.relationship("TrainingTable")
    match = db.relationship("MatchTable")
