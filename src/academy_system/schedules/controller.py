from __future__ import annotations

from typing import Any

from flask import Flask, jsonify, request

from ..common.access import roles_required
from ..common.validators import require_date
from ..core.enums import Role
from ..core.exceptions import BadRequestError
from ..container import Container
from .model import ScheduleItem, TrainingSchedule


def _slot_json(s: TrainingSchedule) -> dict[str, Any]:
    return {
        "id": s.schedule_id,
        "groupId": s.group_id,
        "dayOfWeek": s.day_of_week,
        "startTime": s.start_time,
        "endTime": s.end_time,
        "location": s.location,
    }


def _parse_items(raw: Any) -> list[ScheduleItem]:
    if not isinstance(raw, list):
        raise BadRequestError("items must be a list")

    items: list[ScheduleItem] = []
    for item in raw:
        if not isinstance(item, dict):
            raise BadRequestError("each item must be an object")
        # Field checks happen in validate_schedule_items.
        items.append(
            ScheduleItem(
                day_of_week=item.get("dayOfWeek"),
                start_time=item.get("startTime"),
                end_time=item.get("endTime"),
                location=item.get("location"),
            )
        )
    return items


def register(app: Flask, container: Container) -> None:
    @app.route("/groups/<int:group_id>/schedule", methods=["GET"], endpoint="schedule_get")
    @roles_required(Role.ADMIN, Role.COACH)
    def schedule_get(group_id: int):
        return jsonify([_slot_json(s) for s in container.schedule_service.get_schedule(group_id)])

    @app.route("/groups/<int:group_id>/schedule", methods=["PUT"], endpoint="schedule_update")
    @roles_required(Role.ADMIN, Role.COACH)
    def schedule_update(group_id: int):
        payload = request.get_json(silent=True) or {}
        saved = container.schedule_service.update_schedule(group_id, _parse_items(payload.get("items")))
        return jsonify([_slot_json(s) for s in saved])

    @app.route("/groups/<int:group_id>/schedule/generate", methods=["POST"], endpoint="schedule_generate")
    @roles_required(Role.ADMIN, Role.COACH)
    def schedule_generate(group_id: int):
        payload = request.get_json(silent=True) or {}
        result = container.schedule_service.generate_trainings(
            group_id,
            from_date=require_date(payload.get("fromDate"), "fromDate"),
            to_date=require_date(payload.get("toDate"), "toDate"),
            default_topic=payload.get("defaultTopic") or None,
        )
        return jsonify({"created": result.created, "skipped": result.skipped})

    @app.route("/groups/<int:group_id>/schedule/trainings", methods=["DELETE"], endpoint="schedule_delete_trainings")
    @roles_required(Role.ADMIN, Role.COACH)
    def schedule_delete_trainings(group_id: int):
        result = container.schedule_service.delete_future_generated_trainings(group_id)
        return jsonify({"deleted": result.deleted, "kept": result.kept})
