"""In-memory site settings repository for testing."""

from typing import Any, Optional

from autohub.domain.model import SettingsKind
from autohub.domain.repository import SiteSettingsRepository


class InMemorySiteSettingsRepository(SiteSettingsRepository):
    def __init__(self) -> None:
        self._documents: dict[SettingsKind, dict[str, Any]] = {}

    async def get(self, kind: SettingsKind) -> Optional[dict[str, Any]]:
        document = self._documents.get(kind)
        return dict(document) if document is not None else None

    async def save(self, kind: SettingsKind, data: dict[str, Any]) -> dict[str, Any]:
        self._documents[kind] = dict(data)
        return data
