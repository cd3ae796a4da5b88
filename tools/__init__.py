# =============================================================================
# tools/__init__.py
# =============================================================================
# The MCP layer.  tools/mcp_server.py turns the pure search pipeline in core/
# into one discoverable tool and owns the result envelope:
#   - argument validation errors, remote failures and unknown tool names all
#     come back as {"isError": true} text, never as a crashed process
#   - logs go to stderr because stdout is the MCP transport
# =============================================================================
