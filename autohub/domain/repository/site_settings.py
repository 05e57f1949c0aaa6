"""Site settings repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from autohub.domain.model import SettingsKind


class SiteSettingsRepository(ABC):
    """Stores one JSON document per settings kind."""

    @abstractmethod
    async def get(self, kind: SettingsKind) -> Optional[dict[str, Any]]:
        """Load the stored document, or None if it was never saved."""
        pass

    @abstractmethod
    async def save(self, kind: SettingsKind, data: dict[str, Any]) -> dict[str, Any]:
        """Replace the stored document."""
        pass
