"""Base entity with identity and audit timestamps."""
from datetime import datetime, timezone
from typing import Optional

from ..id_generator import default_id_generator


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseEntity:
    """
    Identity plus created/updated timestamps.

    ``id`` and ``created_at`` never change after construction;
    ``updated_at`` is refreshed by subclasses through ``_touch()``.
    """

    def __init__(self, entity_id: Optional[str] = None):
        self._id = entity_id or default_id_generator().generate()
        now = utc_now()
        self._created_at = now
        self._updated_at = now

    @property
    def id(self) -> str:
        return self._id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def _touch(self) -> None:
        self._updated_at = utc_now()

    def _restore_timestamps(self, created_at: datetime, updated_at: datetime) -> None:
        """Internal: reapply a persisted audit trail after reconstruction."""
        self._created_at = created_at
        self._updated_at = updated_at

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseEntity):
            return NotImplemented
        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._id))
