"""Chain-of-thought reasoning over a remote chat model."""
import logging
import time
from typing import List, Optional

from models.reasoning import ReasoningResult, ReasoningStep
from services.llm_client import LLMClient

logger = logging.getLogger(__name__)

THINKING_MARKER = "THINKING:"
FINAL_ANSWER_MARKER = "FINAL ANSWER:"
NO_THINKING_PLACEHOLDER = "No explicit thinking provided"
STEP_ACTION = "consider"

REASONING_PROMPT_TEMPLATE = """You are a thoughtful AI assistant. When solving problems, think through them step-by-step.

Format your response as follows:
THINKING:
[Show your step-by-step reasoning here. Break down the problem, consider different angles, explain your logic.]

FINAL ANSWER:
[Provide your clear, concise final answer based on your reasoning above.]

Problem: {problem}
"""

CONTEXTUAL_PROBLEM_TEMPLATE = """Context from conversation:
{context}

Current problem: {problem}
"""


class ReasoningError(Exception):
    """Raised when the generation call behind a reasoning request fails."""

    def __init__(self, message: str):
        super().__init__(f"Reasoning failed: {message}")


def find_marker(text: str, marker: str, start: int = 0) -> int:
    """
    Find the first case-insensitive occurrence of ``marker`` at or after ``start``.

    Args:
        text: Text to scan
        marker: Upper-case marker such as "THINKING:"
        start: Index to start scanning from

    Returns:
        Index of the marker, or -1 if absent
    """
    width = len(marker)
    for i in range(start, len(text) - width + 1):
        if text[i:i + width].upper() == marker:
            return i
    return -1


def extract_steps(thinking: str) -> List[ReasoningStep]:
    """Turn every non-empty line of the thinking text into a reasoning step."""
    steps = []
    for line in thinking.split("\n"):
        trimmed = line.strip()
        if trimmed:
            steps.append(ReasoningStep(index=len(steps) + 1, thought=trimmed, action=STEP_ACTION))
    return steps


def parse_response(response: str) -> ReasoningResult:
    """
    Split a model response into its THINKING and FINAL ANSWER sections.

    The thinking section runs from the first THINKING: marker up to the first
    FINAL ANSWER: marker after it (or the end of the text). The final answer
    runs from the first FINAL ANSWER: marker to the end of the text. A missing
    THINKING: yields a placeholder; a missing FINAL ANSWER: makes the whole
    response the answer.

    Args:
        response: Raw model output

    Returns:
        ReasoningResult with trimmed sections and extracted steps
    """
    thinking_at = find_marker(response, THINKING_MARKER)
    if thinking_at >= 0:
        body_start = thinking_at + len(THINKING_MARKER)
        body_end = find_marker(response, FINAL_ANSWER_MARKER, body_start)
        if body_end < 0:
            body_end = len(response)
        thinking = response[body_start:body_end].strip()
    else:
        thinking = NO_THINKING_PLACEHOLDER

    answer_at = find_marker(response, FINAL_ANSWER_MARKER)
    if answer_at >= 0:
        final_answer = response[answer_at + len(FINAL_ANSWER_MARKER):].strip()
    else:
        final_answer = response.strip()

    return ReasoningResult(
        thinking=thinking,
        final_answer=final_answer,
        steps=extract_steps(thinking),
    )


class ReasoningEngine:
    """Elicits and parses step-by-step reasoning from the chat model."""

    def __init__(
        self,
        llm_client: LLMClient,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        verbose: bool = False
    ):
        """
        Initialize the reasoning engine.

        Args:
            llm_client: Client used for the single generation call per request
            model: Model override (defaults to the client's model)
            temperature: Temperature override (defaults to the client's)
            verbose: Log the full reasoning trace at INFO level
        """
        self.llm_client = llm_client
        self.model = model
        self.temperature = temperature
        self.verbose = verbose

    @staticmethod
    def build_prompt(problem: str) -> str:
        return REASONING_PROMPT_TEMPLATE.format(problem=problem)

    def reason(self, problem: str) -> ReasoningResult:
        """
        Reason about a problem using chain-of-thought prompting.

        Args:
            problem: Problem statement

        Returns:
            ReasoningResult with execution time in milliseconds

        Raises:
            ReasoningError: If the generation call fails
        """
        start_time = time.time()

        try:
            response = self.llm_client.generate(
                self.build_prompt(problem),
                model=self.model,
                temperature=self.temperature
            )
        except Exception as e:
            logger.error(f"Reasoning generation failed: {e}")
            raise ReasoningError(str(e)) from e

        result = parse_response(response.text)
        result.execution_time_ms = int((time.time() - start_time) * 1000)

        if self.verbose:
            logger.info(f"Reasoning problem: {problem}")
            logger.info(f"Reasoning thinking: {result.thinking}")
            logger.info(f"Reasoning final answer: {result.final_answer}")

        logger.info(
            f"Reasoning completed: steps={len(result.steps)}, time={result.execution_time_ms}ms"
        )
        return result

    def reason_with_context(self, problem: str, context: str) -> ReasoningResult:
        """Reason about a problem with the conversation summary prepended."""
        contextual_problem = CONTEXTUAL_PROBLEM_TEMPLATE.format(context=context, problem=problem)
        return self.reason(contextual_problem)
