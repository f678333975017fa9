"""Models for reminders."""

from uuid import UUID, uuid4
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ReminderID:
    """Identity of a reminder. Equality and hashing use only the uuid."""

    description: str = field(compare=False)
    uuid: UUID

    @classmethod
    def new(cls, description: str = "") -> "ReminderID":
        """Allocate a fresh random id."""
        return cls(description=description, uuid=uuid4())

    def __str__(self) -> str:
        short = str(self.uuid)[:8]
        return f"{self.description} [{short}]" if self.description else short


@dataclass
class Reminder:
    """A message to deliver back to the chat it came from."""

    id: ReminderID
    chat_id: str  # channel chat identifier
    message: str = ""

    def to_dict(self) -> dict:
        """Convert reminder to dictionary for serialization."""
        return {
            "id": str(self.id.uuid),
            "description": self.id.description,
            "chat_id": self.chat_id,
            "message": self.message,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Reminder":
        """Create reminder from dictionary."""
        return cls(
            id=ReminderID(description=data.get("description", ""), uuid=UUID(data["id"])),
            chat_id=data["chat_id"],
            message=data["message"],
        )
