from __future__ import annotations

from typing import Optional, Protocol


class SettingsRepository(Protocol):
    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError
