"""MCP server that drives NotebookLM through a Playwright browser."""

__version__ = "1.0.0"
