"""ReAct agent loop for tool-using LLM runs.

This module implements the Reasoning + Acting (ReAct) pattern where the agent
alternates between asking the provider what to do and executing the single
tool call it requests. The loop continues until the provider gives a final
answer or the step limit is reached.

Usage::

    from miniagent.agent import Agent
    from miniagent.llm import OpenRouterProvider
    from miniagent.tools import AddNumbersTool

    provider = OpenRouterProvider(api_key="...", model="meta-llama/llama-3.1-8b-instruct")
    agent = Agent(provider, "meta-llama/llama-3.1-8b-instruct").with_tool(AddNumbersTool())
    answer = await agent.run("What is 56 + 89?")
"""

from miniagent.agent.builder import build_agent
from miniagent.agent.loop import Agent
from miniagent.agent.state import AgentState, AgentStatus, ConversationState

__all__ = [
    "Agent",
    "AgentState",
    "AgentStatus",
    "ConversationState",
    "build_agent",
]
