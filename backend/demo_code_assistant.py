"""Demo script for a domain-specific assistant with a custom system prompt."""
import sys
sys.path.insert(0, '.')

from config import get_config, load_env
from services.orchestrator import ChatOrchestrator, ChatError

CODE_ASSISTANT_PROMPT = """You are an expert Python code assistant.
You help developers by:
- Writing clean, efficient code
- Explaining how code works
- Suggesting best practices
- Debugging issues

Always provide code examples when relevant and explain your reasoning."""


def main():
    """Run a short code-assistance conversation and print memory statistics."""
    print("=== Code Assistant Demo ===\n")

    try:
        load_env()
        config = get_config()

        assistant = ChatOrchestrator(
            api_key=config.api_key,
            model=config.model,
            provider=config.provider,
            system_prompt=CODE_ASSISTANT_PROMPT,
            context_window=8,
            use_reasoning_for_complex_queries=True,
        )

        questions = [
            "What's a good pattern for error handling with context managers?",
            "Can you show me an example?",
            "How does this differ from try/finally?",
        ]

        for question in questions:
            print(f"Developer: {question}")
            print("Analyzing...\n")
            try:
                response = assistant.chat(question)
                print(f"Assistant:\n{response.message}")
                print(f"\nContext turns: {response.conversation_turns}\n")
            except ChatError as e:
                print(f"✗ {e}\n")

        memory = assistant.memory
        print("=== Memory Statistics ===")
        print(f"Total messages in memory: {memory.count()}")
        print(f"Context window size: {len(memory.window())}")

    except ValueError as e:
        print(f"✗ Setup error: {e}")


if __name__ == "__main__":
    main()
