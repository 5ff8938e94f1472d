"""Event envelope delivered to reporter handlers."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field

from minver.models.messages import Message, MessageBase


class Event(BaseModel):
    """Immutable envelope around a single ``Message``."""

    model_config = ConfigDict(frozen=True)

    event_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    timestamp_utc: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    message: Message

    @classmethod
    def from_message(cls, message: MessageBase) -> Event:
        return cls(message=message)

    def is_final_result(self) -> bool:
        return self.message.is_final_result()
