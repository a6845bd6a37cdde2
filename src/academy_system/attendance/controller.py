from __future__ import annotations

from typing import Any

from flask import Flask, jsonify, request

from ..common.access import roles_required
from ..common.serialization import event_json, iso, player_json
from ..common.validators import require_enum, require_int
from ..core.enums import AttendanceStatus, EventType, Role
from ..core.exceptions import BadRequestError
from ..container import Container
from .model import Attendance, AttendanceInput, AttendanceRow, AttendanceStats, PlayerAttendanceStats


def _attendance_json(a: Attendance) -> dict[str, Any]:
    return {
        "id": a.attendance_id,
        "playerId": a.player_id,
        "trainingId": a.event.training_id,
        "matchId": a.event.match_id,
        "status": a.status.value,
        "notes": a.notes,
        "createdAt": iso(a.created_at),
        "updatedAt": iso(a.updated_at),
    }


def _row_json(r: AttendanceRow) -> dict[str, Any]:
    out = _attendance_json(r.attendance)
    out["player"] = player_json(r.player)
    out["event"] = event_json(r.event)
    return out


def _stats_json(s: AttendanceStats) -> dict[str, Any]:
    return {
        "total": s.total,
        "present": s.present,
        "absent": s.absent,
        "late": s.late,
        "sick": s.sick,
        "excused": s.excused,
        "rate": s.rate,
        "totalTrainings": s.total_trainings,
        "totalMatches": s.total_matches,
    }


def _player_stats_json(s: PlayerAttendanceStats) -> dict[str, Any]:
    return {"playerId": s.player_id, "playerName": s.player_name, **_stats_json(s.stats)}


def _parse_records(raw: Any) -> list[AttendanceInput]:
    if not isinstance(raw, list) or not raw:
        raise BadRequestError("records must be a non-empty list")

    records: list[AttendanceInput] = []
    for item in raw:
        if not isinstance(item, dict):
            raise BadRequestError("each record must be an object")
        records.append(
            AttendanceInput(
                player_id=require_int(item.get("playerId"), "playerId"),
                status=require_enum(AttendanceStatus, item.get("status"), "status"),
                notes=item.get("notes"),
            )
        )
    return records


def _player_ids_arg() -> list[int]:
    raw = request.args.get("playerIds") or ""
    return [require_int(p, "playerIds") for p in raw.split(",") if p.strip()]


def _event_rows(container: Container, event_id: int, event_type: EventType):
    player_ids = _player_ids_arg()
    if player_ids:
        return container.attendance_service.find_by_event_for_players(event_id, event_type, player_ids)
    return container.attendance_service.find_by_event(event_id, event_type)


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance/batch", methods=["POST"], endpoint="attendance_mark_batch")
    @roles_required(Role.ADMIN, Role.COACH)
    def attendance_mark_batch():
        payload = request.get_json(silent=True) or {}
        event_id = require_int(payload.get("eventId"), "eventId")
        event_type = require_enum(EventType, payload.get("eventType"), "eventType")
        records = _parse_records(payload.get("records"))

        saved = container.attendance_service.mark_batch(event_id, event_type, records)
        return jsonify([_attendance_json(a) for a in saved])

    @app.route("/attendance/training/<int:training_id>", methods=["GET"], endpoint="attendance_by_training")
    @roles_required(Role.ADMIN, Role.COACH)
    def attendance_by_training(training_id: int):
        rows = _event_rows(container, training_id, EventType.TRAINING)
        return jsonify([_row_json(r) for r in rows])

    @app.route("/attendance/match/<int:match_id>", methods=["GET"], endpoint="attendance_by_match")
    @roles_required(Role.ADMIN, Role.COACH)
    def attendance_by_match(match_id: int):
        rows = _event_rows(container, match_id, EventType.MATCH)
        return jsonify([_row_json(r) for r in rows])

    @app.route("/attendance/stats", methods=["GET"], endpoint="attendance_stats")
    @roles_required(Role.ADMIN, Role.COACH)
    def attendance_stats():
        player_ids = _player_ids_arg()
        if not player_ids:
            raise BadRequestError("playerIds is required")
        return jsonify(_stats_json(container.attendance_service.get_player_stats(player_ids)))

    @app.route("/groups/<int:group_id>/attendance/stats", methods=["GET"], endpoint="attendance_group_stats")
    @roles_required(Role.ADMIN, Role.COACH)
    def attendance_group_stats(group_id: int):
        stats = container.attendance_service.get_group_stats(group_id)
        return jsonify([_player_stats_json(s) for s in stats])
