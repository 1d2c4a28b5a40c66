from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Country
from .model import TeamMember


class TeamMemberRepository(Protocol):
    def list_all(self, *, active_only: bool = False) -> Sequence[TeamMember]:
        raise NotImplementedError

    def get(self, *, member_id: int) -> Optional[TeamMember]:
        raise NotImplementedError

    def create(self, *, name: str, role: str, country: Country, allocated_hours: float, is_active: bool) -> int:
        """Returns the new member id."""

        raise NotImplementedError

    def update(self, *, member: TeamMember) -> bool:
        raise NotImplementedError

    def delete_cascade(self, *, member_id: int) -> bool:
        """Delete the member together with their allocations and vacations (one transaction)."""

        raise NotImplementedError
