"""Tool registry - name based lookup and dispatch.

Arguments are validated against the tool's input model before the handler
runs; a handler only ever sees a validated model instance.
"""

from typing import Any

from loguru import logger

from strava_tools.tools.catalog import ToolSpec
from strava_tools.tools.results import ToolResult
from strava_tools.tools.write import UPDATE_ACTIVITY_TOOL

TOOLS: dict[str, ToolSpec] = {
    UPDATE_ACTIVITY_TOOL.name: UPDATE_ACTIVITY_TOOL,
}


def get_tool(tool_name: str) -> ToolSpec:
    """Get a tool by name.

    Raises:
        KeyError: If no tool has that name
    """
    try:
        return TOOLS[tool_name]
    except KeyError:
        raise KeyError(f"Unknown tool '{tool_name}'. Available tools: {list(TOOLS)}") from None


def list_tools() -> list[dict[str, Any]]:
    """Describe all tools (name, description, inputSchema)."""
    return [spec.describe() for spec in TOOLS.values()]


async def call_tool(tool_name: str, arguments: Any, **handler_kwargs: Any) -> ToolResult:
    """Validate arguments and run the named tool.

    Extra keyword arguments (``access_token``, ``update_fn``) are passed to the handler.
    """
    spec = get_tool(tool_name)
    parsed = spec.safe_parse(arguments)
    if not parsed.success:
        summary = parsed.error_summary()
        logger.warning(f"Rejected arguments for {tool_name}: {summary}")
        return ToolResult.failure(f"❌ Invalid arguments for {tool_name}: {summary}")

    logger.debug(f"Calling tool {tool_name}")
    return await spec.execute(parsed.data, **handler_kwargs)


def validate_no_duplicates() -> None:
    """Guard: every registered tool is stored under its own name.

    Raises:
        ValueError: If a key does not match its tool's name
    """
    mismatched = [key for key, spec in TOOLS.items() if key != spec.name]
    if mismatched:
        raise ValueError(f"Tool registry keys do not match tool names: {mismatched}")


# Validate on import
validate_no_duplicates()
