"""Conversation data models."""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from .reasoning import ReasoningResult


class Role(str, Enum):
    """Author of a turn."""
    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


@dataclass(frozen=True)
class TurnMetadata:
    """Metadata attached to a turn. Only the reasoning flag is tracked."""
    is_reasoning: bool = False


@dataclass(frozen=True)
class Turn:
    """Represents a single message in a conversation."""
    role: Role
    content: str
    created_at: datetime
    metadata: Optional[TurnMetadata] = None

    @property
    def is_reasoning(self) -> bool:
        return self.metadata is not None and self.metadata.is_reasoning


@dataclass
class ChatResponse:
    """Result of one chat turn, returned to the caller and never stored."""
    message: str
    conversation_turns: int
    timestamp: datetime
    reasoning: Optional[ReasoningResult] = None
