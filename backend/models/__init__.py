"""Data models for the conversational reasoning orchestrator."""
from .reasoning import ReasoningStep, ReasoningResult
from .conversation import Role, TurnMetadata, Turn, ChatResponse
from .api import (
    ChatRequest,
    ChatReply,
    ReasoningPayload,
    ReasoningStepPayload,
    TurnPayload,
    HistoryResponse,
    SystemPromptRequest,
    ReasoningToggleRequest,
)

__all__ = [
    "ReasoningStep",
    "ReasoningResult",
    "Role",
    "TurnMetadata",
    "Turn",
    "ChatResponse",
    "ChatRequest",
    "ChatReply",
    "ReasoningPayload",
    "ReasoningStepPayload",
    "TurnPayload",
    "HistoryResponse",
    "SystemPromptRequest",
    "ReasoningToggleRequest",
]
