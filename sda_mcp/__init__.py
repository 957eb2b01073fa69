"""MCP tool server for the Sudan Digital Archive API."""

__version__ = "0.1.0"
