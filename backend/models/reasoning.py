"""Chain-of-thought reasoning data models."""
from dataclasses import dataclass, field
from typing import List


@dataclass
class ReasoningStep:
    """One non-empty line of the model's thinking section."""
    index: int  # 1-based
    thought: str
    action: str = "consider"


@dataclass
class ReasoningResult:
    """Parsed THINKING / FINAL ANSWER response."""
    thinking: str
    final_answer: str
    steps: List[ReasoningStep] = field(default_factory=list)
    execution_time_ms: int = 0
