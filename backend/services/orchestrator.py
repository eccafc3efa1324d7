"""Chat orchestrator combining conversation memory and chain-of-thought reasoning."""
import logging
from datetime import datetime
from typing import List, Optional

from config import DEFAULT_CONTEXT_WINDOW, DEFAULT_MAX_MEMORY_MESSAGES, DEFAULT_MODEL, DEFAULT_PROVIDER, DEFAULT_TEMPERATURE
from models.conversation import ChatResponse, Role, Turn, TurnMetadata
from models.reasoning import ReasoningResult
from services.conversation_store import ConversationStore
from services.llm_client import LLMClient
from services.query_router import QueryRouter
from services.reasoning_engine import ReasoningEngine

logger = logging.getLogger(__name__)

DEFAULT_SYSTEM_PROMPT = (
    "You are a helpful, thoughtful assistant. Provide clear and accurate responses. "
    "Use the conversation history to maintain context and consistency."
)

NO_CONTEXT_PLACEHOLDER = "(No prior context)"

ROLE_LABELS = {
    Role.USER: "User",
    Role.ASSISTANT: "Assistant",
    Role.SYSTEM: "System",
}


class ChatError(Exception):
    """Raised when a chat turn cannot be completed."""

    def __init__(self, message: str):
        super().__init__(f"Chat failed: {message}")


class ChatOrchestrator:
    """
    Conversational front end over a remote chat model.

    Each turn is recorded in memory, then either answered directly from the
    recent context window or, for complex queries when enabled, routed through
    the reasoning engine with the conversation summary as context.
    """

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        temperature: Optional[float] = None,
        context_window: int = DEFAULT_CONTEXT_WINDOW,
        max_memory_messages: int = DEFAULT_MAX_MEMORY_MESSAGES,
        use_reasoning_for_complex_queries: bool = False,
        system_prompt: Optional[str] = None,
        provider: str = DEFAULT_PROVIDER,
        llm_client: Optional[LLMClient] = None
    ):
        """
        Initialize the orchestrator.

        Args:
            api_key: Provider API key (required)
            model: Model name used for both paths
            temperature: Sampling temperature (defaults to 0.7)
            context_window: Recent turns supplied as context
            max_memory_messages: Turns retained in memory (0 = unbounded)
            use_reasoning_for_complex_queries: Route complex queries through reasoning
            system_prompt: System prompt for the direct path
            provider: Generation provider, "gemini" or "groq"
            llm_client: Prebuilt client to use instead of creating one

        Raises:
            ValueError: If api_key is missing
        """
        if not api_key:
            raise ValueError("API key is required")

        self.model = model
        self.temperature = DEFAULT_TEMPERATURE if temperature is None else temperature

        self.llm_client = llm_client or LLMClient(
            api_key=api_key,
            provider=provider,
            model=model,
            temperature=self.temperature
        )
        self._memory = ConversationStore(max_turns=max_memory_messages, window_size=context_window)
        self.router = QueryRouter()
        self.reasoner = ReasoningEngine(self.llm_client, model=model, temperature=self.temperature)

        self._system_prompt = system_prompt or DEFAULT_SYSTEM_PROMPT
        self._use_reasoning_for_complex = use_reasoning_for_complex_queries

        logger.info(
            f"ChatOrchestrator initialized: model={model}, context_window={self._memory.window_size}, "
            f"max_memory_messages={self._memory.max_turns}, reasoning={self._use_reasoning_for_complex}"
        )

    def chat(self, user_message: str) -> ChatResponse:
        """
        Process one user turn.

        The user message is recorded before generation and is kept even if
        generation fails.

        Args:
            user_message: Message from the user

        Returns:
            ChatResponse with the reply, optional reasoning and turn count

        Raises:
            ChatError: If generation fails on either path
        """
        self._memory.append(Role.USER, user_message)

        try:
            if self._use_reasoning_for_complex and self.router.is_complex(user_message):
                return self._reasoning_turn(user_message)
            return self._direct_turn(user_message)
        except Exception as e:
            logger.error(
                f"Chat turn failed: {e}",
                extra={"turn_count": self._memory.count()}
            )
            raise ChatError(str(e)) from e

    def _reasoning_turn(self, user_message: str) -> ChatResponse:
        reasoning = self.reasoner.reason_with_context(user_message, self._memory.summary())

        self._memory.append(
            Role.ASSISTANT,
            self._format_reasoning_turn(reasoning),
            TurnMetadata(is_reasoning=True)
        )
        logger.info(
            f"Reasoning turn completed: steps={len(reasoning.steps)}",
            extra={"path": "reasoning", "turn_count": self._memory.count()}
        )

        return ChatResponse(
            message=reasoning.final_answer,
            reasoning=reasoning,
            conversation_turns=self._memory.count(),
            timestamp=datetime.now()
        )

    def _direct_turn(self, user_message: str) -> ChatResponse:
        prompt = self.build_prompt(self._system_prompt, self._memory.window(), user_message)
        response = self.llm_client.generate(prompt, model=self.model, temperature=self.temperature)

        self._memory.append(Role.ASSISTANT, response.text)
        logger.info(
            "Direct turn completed",
            extra={"path": "direct", "turn_count": self._memory.count()}
        )

        return ChatResponse(
            message=response.text,
            conversation_turns=self._memory.count(),
            timestamp=datetime.now()
        )

    @staticmethod
    def _format_reasoning_turn(reasoning: ReasoningResult) -> str:
        return f"[Reasoning Summary]\n{reasoning.thinking}\n\n[Response]\n{reasoning.final_answer}"

    @staticmethod
    def build_prompt(system_prompt: str, context: List[Turn], user_message: str) -> str:
        """
        Build the direct-path prompt.

        Args:
            system_prompt: Active system prompt
            context: Context window turns, oldest first
            user_message: Current user message

        Returns:
            Complete prompt string
        """
        history = "\n".join(f"{ROLE_LABELS[turn.role]}: {turn.content}" for turn in context)

        return f"""{system_prompt}

Conversation history:
{history or NO_CONTEXT_PLACEHOLDER}

User: {user_message}

Respond thoughtfully and maintain conversational context."""

    @property
    def memory(self) -> ConversationStore:
        return self._memory

    def clear_memory(self) -> None:
        self._memory.clear()

    def get_conversation_history(self) -> List[Turn]:
        return self._memory.all()

    @property
    def system_prompt(self) -> str:
        return self._system_prompt

    def set_system_prompt(self, prompt: str) -> None:
        self._system_prompt = prompt

    @property
    def use_reasoning_for_complex(self) -> bool:
        return self._use_reasoning_for_complex

    def set_use_reasoning_for_complex(self, enabled: bool) -> None:
        self._use_reasoning_for_complex = enabled
