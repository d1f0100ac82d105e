"""MCP tools for real-time X and web search through Grok."""

__version__ = "1.0.0"
