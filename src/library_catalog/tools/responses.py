"""
MCP tool response helpers.

Tools return a dict with a ``content`` array of typed items. Failures set
``isError`` so the client can tell an execution error apart from a normal
result. Lending outcomes such as NOT_FOUND or UNAVAILABLE are normal results,
not errors; only bad arguments and unexpected exceptions go through here.

At the MCP boundary ``to_tool_result`` turns these dicts into FastMCP results.
An error response is raised as ``ToolError``, which FastMCP reports to the
client as a CallToolResult with ``isError`` set.
"""

import logging
from typing import Any

from fastmcp.exceptions import ToolError
from fastmcp.tools import ToolResult
from pydantic import ValidationError

logger = logging.getLogger(__name__)


def text_response(text: str, data: dict[str, Any]) -> dict[str, Any]:
    """Build a successful response with a text item and structured data."""
    return {
        "content": [{
            "type": "text",
            "text": text
        }],
        "data": data
    }


def invalid_arguments(tool_name: str, error: ValidationError) -> dict[str, Any]:
    """Build the error response for arguments that fail schema validation."""
    logger.warning("Invalid %s parameters: %s", tool_name, error)
    return {
        "isError": True,
        "content": [{
            "type": "text",
            "text": f"Invalid {tool_name} parameters: {error}"
        }]
    }


def unexpected_error(tool_name: str, error: Exception) -> dict[str, Any]:
    """Build the catch-all error response. Must be called from an except block."""
    logger.exception("Unexpected error in %s tool", tool_name)
    return {
        "isError": True,
        "content": [{
            "type": "text",
            "text": f"An unexpected error occurred: {error!s}"
        }]
    }


def to_tool_result(response: dict[str, Any]) -> ToolResult:
    """
    Convert a handler response into the result of an MCP tool call.

    Raises:
        ToolError: If the response is flagged ``isError``
    """
    text = "\n".join(item["text"] for item in response["content"])
    if response.get("isError"):
        raise ToolError(text)
    return ToolResult(content=text, structured_content=response["data"])
