"""BrutNet MCP server."""
