from __future__ import annotations

from typing import Mapping, Protocol


class SettingsRepository(Protocol):
    def get_all(self) -> Mapping[str, str]:
        raise NotImplementedError

    def upsert(self, *, key: str, value: str) -> None:
        raise NotImplementedError
