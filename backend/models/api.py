"""API request/response schemas for the chat service."""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .conversation import ChatResponse, Turn
from .reasoning import ReasoningResult


class ChatRequest(BaseModel):
    """Body of POST /chat."""
    message: str = Field(..., description="User message for this turn")


class ReasoningStepPayload(BaseModel):
    index: int
    thought: str
    action: str


class ReasoningPayload(BaseModel):
    """Serialized chain-of-thought result."""
    thinking: str
    final_answer: str
    steps: List[ReasoningStepPayload]
    execution_time_ms: int

    @classmethod
    def from_result(cls, result: ReasoningResult) -> "ReasoningPayload":
        return cls(
            thinking=result.thinking,
            final_answer=result.final_answer,
            steps=[
                ReasoningStepPayload(index=s.index, thought=s.thought, action=s.action)
                for s in result.steps
            ],
            execution_time_ms=result.execution_time_ms,
        )


class ChatReply(BaseModel):
    """Body returned by POST /chat."""
    message: str
    reasoning: Optional[ReasoningPayload] = None
    conversation_turns: int
    timestamp: datetime

    @classmethod
    def from_response(cls, response: ChatResponse) -> "ChatReply":
        return cls(
            message=response.message,
            reasoning=ReasoningPayload.from_result(response.reasoning) if response.reasoning else None,
            conversation_turns=response.conversation_turns,
            timestamp=response.timestamp,
        )


class TurnPayload(BaseModel):
    role: str
    content: str
    created_at: datetime
    is_reasoning: bool = False

    @classmethod
    def from_turn(cls, turn: Turn) -> "TurnPayload":
        return cls(
            role=turn.role.value,
            content=turn.content,
            created_at=turn.created_at,
            is_reasoning=turn.is_reasoning,
        )


class HistoryResponse(BaseModel):
    """Body returned by GET /history."""
    turns: List[TurnPayload]
    count: int


class SystemPromptRequest(BaseModel):
    system_prompt: str = Field(..., min_length=1)


class ReasoningToggleRequest(BaseModel):
    enabled: bool
