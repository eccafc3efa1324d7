"""In-memory conversation store with a sliding context window."""
import logging
from datetime import datetime
from typing import List, Optional, Union

from models.conversation import Role, Turn, TurnMetadata

logger = logging.getLogger(__name__)


class ConversationStore:
    """
    Append-only ordered log of conversation turns.

    The log keeps insertion order. When ``max_turns`` is positive the oldest
    turns are evicted first once the log grows past it; ``window_size`` picks
    how many of the most recent turns are used as generation context.
    """

    def __init__(self, max_turns: int = 0, window_size: int = 10):
        """
        Initialize an empty store.

        Args:
            max_turns: Maximum turns retained (0 = unbounded)
            window_size: Number of recent turns used as context (minimum 1)
        """
        self._turns: List[Turn] = []
        self._max_turns = max(0, max_turns)
        self._window_size = max(1, window_size)
        logger.debug(
            f"ConversationStore initialized: max_turns={self._max_turns}, "
            f"window_size={self._window_size}"
        )

    @property
    def max_turns(self) -> int:
        return self._max_turns

    @property
    def window_size(self) -> int:
        return self._window_size

    def append(
        self,
        role: Union[Role, str],
        content: str,
        metadata: Optional[TurnMetadata] = None
    ) -> Turn:
        """
        Append a turn stamped with the current time.

        Args:
            role: Author of the turn
            content: Message text
            metadata: Optional turn metadata

        Returns:
            The newly created Turn
        """
        turn = Turn(
            role=Role(role),
            content=content,
            created_at=datetime.now(),
            metadata=metadata
        )
        self._turns.append(turn)

        if self._max_turns > 0 and len(self._turns) > self._max_turns:
            evicted = len(self._turns) - self._max_turns
            self._turns = self._turns[evicted:]
            logger.debug(f"Evicted {evicted} oldest turn(s), max_turns={self._max_turns}")

        return turn

    def window(self) -> List[Turn]:
        """Return the most recent ``window_size`` turns in conversational order."""
        return self._turns[-self._window_size:]

    def all(self) -> List[Turn]:
        """Return a copy of every retained turn."""
        return list(self._turns)

    def last(self, n: int) -> List[Turn]:
        """Return the last ``n`` turns, or an empty list when ``n`` <= 0."""
        if n <= 0:
            return []
        return self._turns[-n:]

    def summary(self) -> str:
        """
        Render the context window for injection into reasoning prompts.

        Returns:
            One ``[ROLE]: content`` line per turn in the window
        """
        return "\n".join(
            f"[{turn.role.value.upper()}]: {turn.content}" for turn in self.window()
        )

    def count(self) -> int:
        return len(self._turns)

    def clear(self) -> None:
        self._turns = []
        logger.info("Conversation store cleared")

    def set_window_size(self, size: int) -> None:
        """Update the context window size, clamped to at least 1."""
        self._window_size = max(1, size)
