"""
Base class for Domain Events.

Events are immutable records of something that already happened to an
aggregate, e.g. a word list having its entries replaced. The application
layer collects them after persisting and logs them.

Example:
    @dataclass(frozen=True)
    class WordListCreated(DomainEvent):
        word_list_id: int
        owner_id: int
        word_count: int
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for Domain Events.

    Subclasses should be decorated with @dataclass(frozen=True), named in
    past tense and carry everything needed to understand what happened.
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def event_type(self) -> str:
        """Return the event type name for serialization."""
        return self.__class__.__name__

    def to_dict(self) -> dict[str, object]:
        """Convert event to dictionary for logging and serialization."""
        result: dict[str, object] = {}
        for key, value in self.__dict__.items():
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif isinstance(value, UUID):
                result[key] = str(value)
            elif hasattr(value, "to_primitive"):
                result[key] = value.to_primitive()
            else:
                result[key] = value
        result["event_type"] = self.event_type
        return result
