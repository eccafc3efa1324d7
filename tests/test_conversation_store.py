"""Unit tests for ConversationStore."""
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))

import pytest
from datetime import datetime
from services.conversation_store import ConversationStore
from models.conversation import Role, Turn, TurnMetadata


class TestConversationStore:
    """Test suite for ConversationStore."""

    @pytest.fixture
    def store(self):
        """Create an unbounded store with a window of 3."""
        return ConversationStore(max_turns=0, window_size=3)

    def test_append_creates_turn(self, store):
        """Test that append records role, content and timestamp."""
        turn = store.append(Role.USER, "Hello")

        assert isinstance(turn, Turn)
        assert turn.role == Role.USER
        assert turn.content == "Hello"
        assert isinstance(turn.created_at, datetime)
        assert turn.metadata is None
        assert store.count() == 1

    def test_append_accepts_role_string(self, store):
        """Test that plain role strings are converted to Role."""
        turn = store.append("assistant", "Hi there")
        assert turn.role == Role.ASSISTANT

    def test_append_rejects_unknown_role(self, store):
        """Test that an unknown role string is rejected."""
        with pytest.raises(ValueError):
            store.append("moderator", "nope")

    def test_append_with_metadata(self, store):
        """Test that metadata is attached to the turn."""
        turn = store.append(Role.ASSISTANT, "Answer", TurnMetadata(is_reasoning=True))
        assert turn.is_reasoning is True

    def test_turns_are_immutable(self, store):
        """Test that a recorded turn cannot be modified."""
        turn = store.append(Role.USER, "Hello")
        with pytest.raises(AttributeError):
            turn.content = "changed"

    def test_count_unbounded(self, store):
        """Test that count equals the number appended when unbounded."""
        for i in range(25):
            store.append(Role.USER, f"Message {i}")
        assert store.count() == 25

    def test_max_turns_evicts_oldest(self):
        """Test FIFO eviction once max_turns is exceeded."""
        store = ConversationStore(max_turns=4, window_size=10)
        for i in range(7):
            store.append(Role.USER, f"Message {i}")

        assert store.count() == 4
        assert [t.content for t in store.all()] == [
            "Message 3", "Message 4", "Message 5", "Message 6"
        ]

    def test_max_turns_not_reached(self):
        """Test that nothing is evicted below the limit."""
        store = ConversationStore(max_turns=5)
        for i in range(3):
            store.append(Role.USER, f"Message {i}")
        assert store.count() == 3

    def test_negative_max_turns_is_unbounded(self):
        """Test that a negative limit behaves as unbounded."""
        store = ConversationStore(max_turns=-1)
        for i in range(12):
            store.append(Role.USER, f"Message {i}")
        assert store.max_turns == 0
        assert store.count() == 12

    def test_window_returns_suffix(self, store):
        """Test that the window is the last window_size turns in order."""
        for i in range(5):
            store.append(Role.USER, f"Message {i}")

        window = store.window()
        assert [t.content for t in window] == ["Message 2", "Message 3", "Message 4"]
        assert window == store.all()[-3:]

    def test_window_with_fewer_turns(self, store):
        """Test that the window holds every turn when fewer than window_size exist."""
        store.append(Role.USER, "Only one")
        assert [t.content for t in store.window()] == ["Only one"]

    def test_window_empty(self, store):
        """Test the window of an empty store."""
        assert store.window() == []
        assert store.summary() == ""

    def test_window_does_not_mutate(self, store):
        """Test that reading the window leaves the log intact."""
        for i in range(5):
            store.append(Role.USER, f"Message {i}")
        store.window()
        assert store.count() == 5

    def test_all_returns_copy(self, store):
        """Test that all() is a defensive copy."""
        store.append(Role.USER, "Hello")
        turns = store.all()
        turns.clear()
        assert store.count() == 1

    def test_last(self, store):
        """Test retrieving the last N turns."""
        for i in range(4):
            store.append(Role.USER, f"Message {i}")

        assert [t.content for t in store.last(2)] == ["Message 2", "Message 3"]
        assert store.last(0) == []
        assert store.last(-3) == []
        assert len(store.last(10)) == 4

    def test_summary_format(self):
        """Test the window of 2 over three user/assistant pairs."""
        store = ConversationStore(window_size=2)
        for i in range(3):
            store.append(Role.USER, f"Question {i}")
            store.append(Role.ASSISTANT, f"Answer {i}")

        assert store.count() == 6
        assert [t.content for t in store.window()] == ["Question 2", "Answer 2"]
        assert store.summary() == "[USER]: Question 2\n[ASSISTANT]: Answer 2"

    def test_summary_system_role(self, store):
        """Test that system turns are labelled in upper case."""
        store.append(Role.SYSTEM, "Be brief")
        assert store.summary() == "[SYSTEM]: Be brief"

    def test_clear(self, store):
        """Test that clear empties the log."""
        for i in range(3):
            store.append(Role.USER, f"Message {i}")
        store.clear()

        assert store.count() == 0
        assert store.all() == []
        assert store.window() == []

    def test_set_window_size(self, store):
        """Test that the window size can be changed."""
        for i in range(5):
            store.append(Role.USER, f"Message {i}")

        store.set_window_size(1)
        assert store.window_size == 1
        assert [t.content for t in store.window()] == ["Message 4"]
        assert store.count() == 5

    def test_set_window_size_clamped(self, store):
        """Test that window sizes below 1 are clamped to 1."""
        store.set_window_size(0)
        assert store.window_size == 1
        store.set_window_size(-5)
        assert store.window_size == 1

    def test_constructor_clamps_window(self):
        """Test that the constructor clamps the window size."""
        store = ConversationStore(window_size=0)
        assert store.window_size == 1

    @pytest.mark.parametrize("max_turns,appended", [(0, 7), (3, 7), (5, 5), (10, 4)])
    def test_count_matches_retention_rule(self, max_turns, appended):
        """Test count against min(appended, max_turns) and the retained suffix."""
        store = ConversationStore(max_turns=max_turns, window_size=2)
        for i in range(appended):
            store.append(Role.USER, str(i))

        expected = appended if max_turns == 0 else min(appended, max_turns)
        assert store.count() == expected
        assert [t.content for t in store.all()] == [str(i) for i in range(appended - expected, appended)]
        assert store.window() == store.all()[-min(2, expected):]
