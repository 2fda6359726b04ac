from finagent.tools.base import WARNING_MARKER, ToolAdapter
from finagent.tools.registry import ToolRegistry

__all__ = ["WARNING_MARKER", "ToolAdapter", "ToolRegistry"]
