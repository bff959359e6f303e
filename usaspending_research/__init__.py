"""USAspending.gov research tools for MCP agent hosts."""

__version__ = "0.3.0"
