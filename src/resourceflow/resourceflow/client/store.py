"""Client-side cache over the API.

Each entity store keeps the last fetched rows, refetches the whole collection
after a successful mutation and then notifies its listeners.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Dict, List, Optional

from ..allocations.conflicts import AllocationSpan, find_conflict
from ..common.validators import pick
from .api import ApiClient, Resource
from .errors import ApiError

logger = logging.getLogger(__name__)

Listener = Callable[[str, List[dict]], None]


class EntityStore:
    def __init__(self, name: str, resource: Resource):
        self.name = name
        self._resource = resource
        self._items: List[dict] = []
        self._loaded = False
        self._listeners: List[Listener] = []

    @property
    def items(self) -> List[dict]:
        return list(self._items)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def refresh(self) -> List[dict]:
        self._items = list(self._resource.list() or [])
        self._loaded = True
        for listener in list(self._listeners):
            listener(self.name, self.items)
        return self.items

    def find(self, item_id: int) -> Optional[dict]:
        for item in self._items:
            if item.get("id") == item_id:
                return item
        return None

    def create(self, data: dict) -> dict:
        created = self._resource.create(data)
        self.refresh()
        return created

    def update(self, item_id: int, data: dict) -> dict:
        updated = self._resource.update(item_id, data)
        self.refresh()
        return updated

    def delete(self, item_id: int) -> None:
        self._resource.delete(item_id)
        self.refresh()


class AllocationStore(EntityStore):
    """Rejects a create that overlaps a cached allocation of the same employee and project."""

    def conflict_for(self, data: dict, *, exclude_id: Optional[int] = None) -> Optional[dict]:
        start = pick(data, "startDate", "start_date", "date")
        end = pick(data, "endDate", "end_date", "date")
        candidate = AllocationSpan.from_row(
            {
                "id": exclude_id,
                "employee_id": pick(data, "employeeId", "employee_id"),
                "project_id": pick(data, "projectId", "project_id"),
                "start_date": start,
                "end_date": end,
            }
        )
        clash = find_conflict((AllocationSpan.from_row(r) for r in self._items), candidate)
        return self.find(clash.id) if clash else None

    def create(self, data: dict) -> dict:
        clash = self.conflict_for(data)
        if clash:
            raise ApiError(
                "Employee is already allocated to this project on the selected dates",
                status=409,
                error="Conflict",
                details=[f"Conflicts with allocation {clash['id']}"],
            )
        return super().create(data)

    def for_cell(self, employee_id: int, day: date) -> List[dict]:
        rows = []
        for row in self._items:
            span = AllocationSpan.from_row(row)
            if span.employee_id == employee_id and span.start_date <= day <= span.end_date:
                rows.append(row)
        return sorted(rows, key=lambda r: r["id"])


class DataStore:
    """All entity caches plus a cross-store refresh signal."""

    def __init__(self, client: ApiClient):
        self.client = client
        self.team_members = EntityStore("teamMembers", client.team_members)
        self.projects = EntityStore("projects", client.projects)
        self.holidays = EntityStore("holidays", client.holidays)
        self.vacations = EntityStore("vacations", client.vacations)
        self.allocations = AllocationStore("projectAllocations", client.allocations)
        self.settings: Dict[str, Any] = {}

    @property
    def stores(self) -> List[EntityStore]:
        return [self.team_members, self.projects, self.holidays, self.vacations, self.allocations]

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        unsubscribers = [store.subscribe(listener) for store in self.stores]

        def unsubscribe() -> None:
            for fn in unsubscribers:
                fn()

        return unsubscribe

    def load(self) -> None:
        for store in self.stores:
            store.refresh()
        self.settings = self.client.settings.get()
        logger.info("Loaded %s", ", ".join(f"{s.name}={len(s.items)}" for s in self.stores))

    def update_settings(self, data: dict) -> Dict[str, Any]:
        self.settings = self.client.settings.update(data)
        return dict(self.settings)

    def delete_member(self, member_id: int) -> None:
        """Server cascades to allocations and vacations, so those caches are refreshed too."""
        self.team_members.delete(member_id)
        self.allocations.refresh()
        self.vacations.refresh()

    def delete_project(self, project_id: int) -> None:
        self.projects.delete(project_id)
        self.allocations.refresh()
