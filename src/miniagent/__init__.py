"""miniagent - A small, provider-agnostic ReAct agent loop.

miniagent drives a "plan, act, observe" cycle between an LLM provider and a
set of tools until the model produces a final answer or the step budget
runs out.

Key modules:

- :mod:`miniagent.agent` - Agent loop, conversation state and run state machine
- :mod:`miniagent.llm` - Provider protocol and adapters (OpenAI, OpenRouter, Anthropic, Ollama)
- :mod:`miniagent.tools` - Tool protocol, registry and built-in tools
- :mod:`miniagent.config` - YAML configuration loading and validation
- :mod:`miniagent.errors` - Error taxonomy raised by the agent
"""

__version__ = "0.2.0"
