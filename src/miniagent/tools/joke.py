"""Random joke tool backed by JokeAPI."""

from typing import Any

import httpx

from miniagent.errors import ToolError

JOKE_API_URL = "https://v2.jokeapi.dev/joke/Any"
BLACKLIST_FLAGS = "nsfw,racist,sexist,explicit,religious,political"


class JokeTool:
    """Fetches a random family-friendly joke."""

    name = "get_joke"
    description = "Fetches a random family-friendly joke and returns it"
    parameters_schema: dict[str, Any] = {
        "type": "object",
        "properties": {},
        "additionalProperties": False,
    }

    def __init__(self, url: str = JOKE_API_URL, timeout: float = 10.0):
        """Initialize the joke tool.

        Args:
            url: JokeAPI endpoint
            timeout: Request timeout in seconds
        """
        self.url = url
        self.timeout = timeout

    async def execute(self, arguments: dict[str, Any]) -> str:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.url, params={"blacklistFlags": BLACKLIST_FLAGS})
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            raise ToolError(f"Failed to fetch joke: {e}") from e
        except ValueError as e:
            raise ToolError(f"Joke API returned invalid JSON: {e}") from e

        if data.get("error"):
            raise ToolError(f"Joke API error: {data.get('message', 'unknown error')}")

        if data.get("type") == "single":
            return data.get("joke") or "No joke found"

        return f"{data.get('setup', '')} {data.get('delivery', '')}".strip()
