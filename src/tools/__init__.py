"""Tool layer - request/response handling for the brand-token operations."""

from .handlers import (
    TOOL_DEFINITIONS,
    BrandTokenTools,
    ToolRequest,
    ToolResponse,
    call_tool,
    list_tools,
)

__all__ = [
    "TOOL_DEFINITIONS",
    "BrandTokenTools",
    "ToolRequest",
    "ToolResponse",
    "call_tool",
    "list_tools",
]
