from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from ..events.model import Event
from ..roster.model import Coach, Player


def iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def player_json(p: Player) -> dict[str, Any]:
    return {"id": p.player_id, "firstName": p.first_name, "lastName": p.last_name, "groupId": p.group_id}


def coach_json(c: Coach) -> dict[str, Any]:
    return {"id": c.coach_id, "firstName": c.first_name, "lastName": c.last_name}


def event_json(e: Event) -> dict[str, Any]:
    return {
        "id": e.ref.id,
        "type": e.ref.kind.value,
        "groupId": e.group_id,
        "startTime": iso(e.start_time),
        "endTime": iso(e.end_time),
    }
