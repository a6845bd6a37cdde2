from __future__ import annotations

from dataclasses import asdict
from typing import Any, Optional

from flask import Flask, jsonify, request

from ..common.access import current_user_id, roles_required
from ..common.serialization import coach_json, event_json, iso, player_json
from ..common.validators import require_enum, require_int
from ..core.enums import EvaluationType, Role, StatsPeriod
from ..core.exceptions import BadRequestError
from ..container import Container
from .model import Evaluation, EvaluationBatch, EvaluationInput, EvaluationRow, RatingStats


def _evaluation_json(e: Evaluation) -> dict[str, Any]:
    return {
        "id": e.evaluation_id,
        "playerId": e.player_id,
        "coachId": e.coach_id,
        "trainingId": e.event.training_id,
        "matchId": e.event.match_id,
        "type": e.type.value,
        "rating": e.rating,
        "comment": e.comment,
        "createdAt": iso(e.created_at),
        "updatedAt": iso(e.updated_at),
    }


def _row_json(r: EvaluationRow) -> dict[str, Any]:
    out = _evaluation_json(r.evaluation)
    out["player"] = player_json(r.player)
    out["coach"] = coach_json(r.coach)
    out["event"] = event_json(r.event)
    return out


def _rating_stats_json(s: RatingStats) -> dict[str, Any]:
    return {
        "averageRating": s.average_rating,
        "totalEvents": s.total_events,
        "byCategory": asdict(s.by_category),
        "history": [
            {
                "date": h.date,
                "eventType": h.event_type,
                "eventId": h.event_id,
                "averageRating": h.average_rating,
                "ratings": asdict(h.ratings),
            }
            for h in s.history
        ],
    }


def _optional_id(value: Any, field_name: str) -> Optional[int]:
    if value is None:
        return None
    return require_int(value, field_name)


def _parse_batch(payload: dict) -> EvaluationBatch:
    raw = payload.get("records")
    if not isinstance(raw, list) or not raw:
        raise BadRequestError("records must be a non-empty list")

    records: list[EvaluationInput] = []
    for item in raw:
        if not isinstance(item, dict):
            raise BadRequestError("each record must be an object")
        records.append(
            EvaluationInput(
                player_id=require_int(item.get("playerId"), "playerId"),
                type=require_enum(EvaluationType, item.get("type"), "type"),
                rating=require_int(item.get("rating"), "rating"),
                comment=item.get("comment"),
            )
        )

    return EvaluationBatch(
        records=records,
        training_id=_optional_id(payload.get("trainingId"), "trainingId"),
        match_id=_optional_id(payload.get("matchId"), "matchId"),
    )


def register(app: Flask, container: Container) -> None:
    @app.route("/evaluations/batch", methods=["POST"], endpoint="evaluations_create_batch")
    @roles_required(Role.ADMIN, Role.COACH)
    def evaluations_create_batch():
        batch = _parse_batch(request.get_json(silent=True) or {})
        saved = container.evaluation_service.create_batch(batch, current_user_id())
        return jsonify([_evaluation_json(e) for e in saved])

    @app.route("/evaluations/training/<int:training_id>", methods=["GET"], endpoint="evaluations_by_training")
    @roles_required(Role.ADMIN, Role.COACH)
    def evaluations_by_training(training_id: int):
        return jsonify([_row_json(r) for r in container.evaluation_service.find_by_training(training_id)])

    @app.route("/evaluations/match/<int:match_id>", methods=["GET"], endpoint="evaluations_by_match")
    @roles_required(Role.ADMIN, Role.COACH)
    def evaluations_by_match(match_id: int):
        return jsonify([_row_json(r) for r in container.evaluation_service.find_by_match(match_id)])

    @app.route("/evaluations/player/<int:player_id>", methods=["GET"], endpoint="evaluations_by_player")
    @roles_required(Role.ADMIN, Role.COACH)
    def evaluations_by_player(player_id: int):
        return jsonify([_row_json(r) for r in container.evaluation_service.find_by_player(player_id)])

    @app.route("/evaluations/stats/<int:player_id>", methods=["GET"], endpoint="evaluations_rating_stats")
    @roles_required(Role.ADMIN, Role.COACH)
    def evaluations_rating_stats(player_id: int):
        period = require_enum(StatsPeriod, request.args.get("period") or StatsPeriod.ALL_TIME.value, "period")
        stats = container.evaluation_service.get_rating_stats_for_period(player_id, period)
        return jsonify(_rating_stats_json(stats))
