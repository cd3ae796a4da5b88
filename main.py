# =============================================================================
# main.py  —  Interactive demo: chat with the notice search assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# The agent (agent/notice_agent.py) spawns tools/mcp_server.py over stdio.
# For every question, the console shows each search the model makes, a
# one-line summary of what came back (or the "오류: ..." text when the search
# failed), then the assistant's answer.
#
# The MCP server itself does not need this file; any MCP client can spawn
# `python -m tools.mcp_server` directly.
# =============================================================================

import asyncio

from dotenv import load_dotenv

# LiteLlm reads provider keys (OPENROUTER_API_KEY, ...) from the environment
# when the agent is created, so .env must be loaded first.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.events import describe_tool_call, describe_tool_response, final_text
from agent.notice_agent import create_agent

APP_NAME = "notice_search"
USER_ID = "demo_user"
EXIT_WORDS = {"quit", "exit", "q", "종료"}


async def ask(runner: Runner, session_id: str, question: str) -> str:
    """Send one question and print tool activity as it streams in."""
    message = types.Content(role="user", parts=[types.Part(text=question)])
    answer = ""

    async for event in runner.run_async(user_id=USER_ID, session_id=session_id, new_message=message):
        for part in (event.content.parts if event.content else None) or []:
            line = describe_tool_call(part) or describe_tool_response(part)
            if line:
                print(f"   {line}")
            elif final_text(part):
                answer = final_text(part)

    return answer


async def run_agent():
    session_service = InMemorySessionService()
    runner = Runner(agent=create_agent(), app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("스타트업 지원 공고 검색 도우미입니다. (종료: quit)")

    while True:
        try:
            question = input("\n질문> ").strip()
        except (EOFError, KeyboardInterrupt):
            break
        if question.lower() in EXIT_WORDS:
            break
        if question:
            answer = await ask(runner, session.id, question)
            print(f"\n{answer or '(응답이 생성되지 않았습니다)'}")


if __name__ == "__main__":
    asyncio.run(run_agent())
