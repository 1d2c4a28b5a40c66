from __future__ import annotations

import logging
from dataclasses import replace
from typing import Sequence

from ..common.validators import has_any, pick, require_enum, require_non_empty, require_number
from ..core.constants import MAX_NAME_LENGTH
from ..core.enums import Country
from ..core.exceptions import NotFoundError, ValidationError
from .model import TeamMember
from .repository import TeamMemberRepository

logger = logging.getLogger(__name__)


def _parse_bool(value, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in {"true", "false", "1", "0"}:
        return value.strip().lower() in {"true", "1"}
    raise ValidationError(f"{field_name} must be a boolean")


class TeamMemberService:
    def __init__(self, members: TeamMemberRepository):
        self._members = members

    def list(self, *, active_only: bool = False) -> Sequence[TeamMember]:
        return self._members.list_all(active_only=active_only)

    def get(self, member_id: int) -> TeamMember:
        member = self._members.get(member_id=int(member_id))
        if not member:
            raise NotFoundError("Team member not found")
        return member

    def create(self, payload: dict) -> TeamMember:
        name = require_non_empty(payload.get("name"), "Name", max_length=MAX_NAME_LENGTH)
        role = require_non_empty(payload.get("role"), "Role", max_length=MAX_NAME_LENGTH)
        country = require_enum(Country, payload.get("country"), "Country")

        allocated = pick(payload, "allocatedHours", "allocated_hours", default=0)
        allocated_hours = require_number(allocated, "Allocated hours", min_value=0) if allocated is not None else 0.0
        active = pick(payload, "isActive", "is_active", default=True)
        is_active = _parse_bool(active, "isActive")

        member_id = self._members.create(
            name=name, role=role, country=country, allocated_hours=allocated_hours, is_active=is_active
        )
        logger.info("Created team member %s (%s)", member_id, name)
        return self.get(member_id)

    def update(self, member_id: int, payload: dict) -> TeamMember:
        member = self.get(member_id)
        changes: dict = {}

        if "name" in payload:
            changes["name"] = require_non_empty(payload["name"], "Name", max_length=MAX_NAME_LENGTH)
        if "role" in payload:
            changes["role"] = require_non_empty(payload["role"], "Role", max_length=MAX_NAME_LENGTH)
        if "country" in payload:
            changes["country"] = require_enum(Country, payload["country"], "Country")
        if has_any(payload, "allocatedHours", "allocated_hours"):
            changes["allocated_hours"] = require_number(
                pick(payload, "allocatedHours", "allocated_hours"), "Allocated hours", min_value=0
            )
        if has_any(payload, "isActive", "is_active"):
            changes["is_active"] = _parse_bool(pick(payload, "isActive", "is_active"), "isActive")

        updated = replace(member, **changes)
        self._members.update(member=updated)
        return updated

    def delete(self, member_id: int) -> None:
        if not self._members.delete_cascade(member_id=int(member_id)):
            raise NotFoundError("Team member not found")
        logger.info("Deleted team member %s with allocations and vacations", member_id)
