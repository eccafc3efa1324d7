"""Demo script for a basic multi-turn chatbot with conversation memory."""
import sys
sys.path.insert(0, '.')

from config import get_config, load_env
from services.orchestrator import ChatOrchestrator, ChatError


def main():
    """Hold a short conversation and show that context carries across turns."""
    print("=== Basic Chatbot Demo ===\n")

    try:
        load_env()
        config = get_config()

        chatbot = ChatOrchestrator(
            api_key=config.api_key,
            model=config.model,
            provider=config.provider,
            context_window=5,
        )

        questions = [
            "Hi! My name is Sam and I'm learning Python.",
            "What's a good first project for a beginner?",
            "Can you remind me what my name is?",
        ]

        for question in questions:
            print(f"User: {question}")
            try:
                response = chatbot.chat(question)
                print(f"Assistant: {response.message}")
                print(f"  (turns in memory: {response.conversation_turns})\n")
            except ChatError as e:
                print(f"✗ {e}\n")

        print("Conversation history:")
        for turn in chatbot.get_conversation_history():
            print(f"  [{turn.role.value}] {turn.content[:60]}...")

    except ValueError as e:
        print(f"✗ Setup error: {e}")


if __name__ == "__main__":
    main()
