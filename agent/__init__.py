# =============================================================================
# agent/__init__.py
# =============================================================================
# A small Google ADK agent that plays the "external orchestrator" role: it
# spawns tools/mcp_server.py over stdio, discovers `search_notices`, and
# decides when to call it while chatting with a founder looking for support
# programmes.  No search logic lives here.
# =============================================================================
