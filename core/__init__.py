# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL the search logic for the startup notice server.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports Google ADK or FastMCP.  The validator,
#   the HTTP client and the formatter can be driven from a plain REPL (or a
#   test) without an MCP session.  tools/ wires them into the protocol.
# =============================================================================
