"""
Base Domain Event.

All domain events inherit from this base class.
"""
import json
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict


def _json_default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for all domain events.

    Events are immutable records of things that have happened.
    The event type is derived from the class name without the
    ``Event`` suffix (OrderCreatedEvent -> OrderCreated).
    """

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()), compare=False)
    occurred_at: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc), compare=False
    )

    @property
    def event_type(self) -> str:
        name = self.__class__.__name__
        if name.endswith("Event"):
            name = name[:-5]
        return name

    @property
    def aggregate_id(self) -> str:
        """Identifier of the aggregate the event belongs to."""
        return ""

    def metadata(self) -> Dict[str, Any]:
        """
        Transport metadata (message headers, log context).

        Returns:
            Dictionary with event id, type, aggregate id and timestamp
        """
        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "occurred_at": self.occurred_at.isoformat(),
        }

    def to_dict(self) -> Dict[str, Any]:
        """
        Event payload for serialization.

        Override in subclasses to provide the wire format.
        """
        return {"eventType": self.event_type}

    def to_json(self) -> str:
        """Serialize the payload to JSON (Decimal as number, datetime as ISO-8601)."""
        return json.dumps(self.to_dict(), default=_json_default)
