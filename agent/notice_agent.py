# =============================================================================
# agent/notice_agent.py  —  Google ADK agent wired to the notice MCP server
# =============================================================================
#
# ADK is the agent framework (tool calling, sessions), LiteLlm lets it use a
# non-Gemini model, and MCPToolset connects it to our FastMCP server:
#
#   ADK Agent ──LiteLlm──▶ model (NOTICE_AGENT_MODEL)
#       │
#       └──MCPToolset (stdio)──▶ python -m tools.mcp_server ──▶ search service
#
# ADK starts the server as a subprocess, talks to it over stdin/stdout and
# exposes every discovered tool (just `search_notices`) to the model.
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset, StdioServerParameters

from agent.prompt import NOTICE_ASSISTANT_PROMPT
from core.config import get_agent_model


def create_agent() -> Agent:
    """Create the notice search assistant.

    The MCP server is launched with `uv run` from the project root so the
    subprocess sees the project's virtualenv (fastmcp, httpx, core/).

    Returns:
        A configured Google ADK Agent instance.
    """
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=project_root,
        ),
    )

    return Agent(
        name="notice_search_assistant",
        model=LiteLlm(model=get_agent_model()),   # e.g. openrouter/openai/gpt-4o
        instruction=NOTICE_ASSISTANT_PROMPT,
        tools=[mcp_tools],
    )
