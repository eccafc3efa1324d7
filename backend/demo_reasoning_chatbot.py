"""Demo script for chain-of-thought reasoning on complex questions."""
import sys
sys.path.insert(0, '.')

from config import get_config, load_env
from services.orchestrator import ChatOrchestrator, ChatError


def main():
    """Ask questions that trigger the reasoning path and print the trace."""
    print("=== Chain-of-Thought Reasoning Demo ===\n")

    try:
        load_env()
        config = get_config()

        chatbot = ChatOrchestrator(
            api_key=config.api_key,
            model=config.model,
            provider=config.provider,
            system_prompt="You are a logical problem solver who thinks through complex problems step-by-step.",
            use_reasoning_for_complex_queries=True,
        )

        questions = [
            "How would you explain why the sky is blue?",
            "What are the steps to solve a complex problem?",
        ]

        for question in questions:
            print(f"User: {question}")
            print("Thinking through reasoning steps...\n")
            try:
                response = chatbot.chat(question)
            except ChatError as e:
                print(f"✗ {e}\n")
                continue

            if response.reasoning:
                print("Thinking process:")
                for step in response.reasoning.steps:
                    print(f"  {step.index}. {step.thought}")
                print("\n---\n")

            print(f"Final answer: {response.message}")
            elapsed = response.reasoning.execution_time_ms if response.reasoning else 0
            print(f"Reasoning time: {elapsed}ms\n")

    except ValueError as e:
        print(f"✗ Setup error: {e}")


if __name__ == "__main__":
    main()
