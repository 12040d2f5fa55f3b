"""
Simple Agent Example
====================

Demonstrates swapping providers with zero agent-code changes. The agent
answers arithmetic questions with the built-in tools and tells a joke.

Prerequisites:
- miniagent installed: pip install miniagent
- OPENROUTER_API_KEY set (or switch to another provider below)

Usage:
    python examples/simple_agent.py
"""

import asyncio
import os

from miniagent.agent.loop import Agent
from miniagent.errors import AgentError
from miniagent.llm.openrouter import OpenRouterProvider
from miniagent.tools import AddNumbersTool, JokeTool, MultiplyNumbersTool

# Other providers:
#   from miniagent.llm.openai import OpenAIProvider        (OPENAI_API_KEY, "gpt-4o-mini")
#   from miniagent.llm.anthropic import AnthropicProvider  (ANTHROPIC_API_KEY, "claude-sonnet-4-20250514")
#   from miniagent.llm.ollama import OllamaProvider        (no key, "llama3")


async def main():
    """Ask a few questions and print the conversation."""
    model = "meta-llama/llama-3.1-8b-instruct"
    provider = OpenRouterProvider(api_key=os.environ["OPENROUTER_API_KEY"], model=model)

    agent = (
        Agent(provider, model)
        .with_tool(AddNumbersTool())
        .with_tool(MultiplyNumbersTool())
        .with_tool(JokeTool())
    )

    questions = [
        "What is 56 + 89? Answer with just the number.",
        "Multiply 7 and 8 and give only the result.",
        "Tell me one joke.",
    ]

    for question in questions:
        print(f"Question: {question}")
        try:
            answer = await agent.run(question)
            print(f"Answer: {answer}\n")
        except AgentError as e:
            print(f"Error: {e}\n")

    print("--- Conversation History ---")
    for msg in agent.history:
        if msg.content.strip():
            print(f"{msg.role.value} → {msg.content}")

    await provider.close()


if __name__ == "__main__":
    asyncio.run(main())
