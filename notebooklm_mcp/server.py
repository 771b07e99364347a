# server.py
import sys
from typing import Any, Awaitable, Callable, Dict, Optional

import mcp.types as types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from notebooklm_mcp import __version__, actions
from notebooklm_mcp.actions import ActionResult
from notebooklm_mcp.session import AppContext
from notebooklm_mcp.tools import TOOL_NAMES, TOOLS, ToolCall

SERVER_NAME = "notebooklm-mcp"

REPORT = "report"   # failure text goes back as a normal tool result
RAISE = "raise"     # failure surfaces as a protocol-level tool error

# tool -> stage -> policy; stages missing here are raised
ERROR_POLICY: Dict[str, Dict[str, str]] = {
    "create_notebook": {"setup": RAISE, "ui": REPORT},
    "list_notebooks": {"setup": RAISE, "ui": REPORT},
    "open_notebooklm": {"setup": RAISE},
}

Handler = Callable[[AppContext, Dict[str, Any]], Awaitable[ActionResult]]

HANDLERS: Dict[str, Handler] = {
    # title is passed through as-is; a missing one arrives as None
    "create_notebook": lambda ctx, args: actions.create_notebook(ctx, args.get("title")),
    "list_notebooks": lambda ctx, args: actions.list_notebooks(ctx),
    "open_notebooklm": lambda ctx, args: actions.open_notebooklm(ctx),
}


class NotebookLMError(RuntimeError):
    pass


class UnknownToolError(NotebookLMError):
    pass


class ToolExecutionError(NotebookLMError):
    def __init__(self, tool: str, result: ActionResult):
        super().__init__(f"{tool} failed during {result.stage}: {result.error}")
        self.tool = tool
        self.result = result


async def dispatch(ctx: AppContext, name: str, arguments: Optional[Dict[str, Any]] = None) -> str:
    call = ToolCall(name=name, arguments=arguments or {})
    if call.name not in TOOL_NAMES:
        raise UnknownToolError(f"Unsupported tool: {call.name}")
    handler = HANDLERS[call.name]

    async with ctx.session.lock:
        result = await handler(ctx, call.arguments)

    if result.ok:
        return result.text
    if ERROR_POLICY.get(call.name, {}).get(result.stage, RAISE) == REPORT:
        return result.text
    raise ToolExecutionError(call.name, result)


def build_server(ctx: AppContext) -> Server:
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return [
            types.Tool(name=t["name"], description=t["description"], inputSchema=t["input_schema"])
            for t in TOOLS
        ]

    # arguments reach the handlers unvalidated
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> list[types.TextContent]:
        text = await dispatch(ctx, name, arguments)
        return [types.TextContent(type="text", text=text)]

    return server


async def run_server(ctx: AppContext):
    server = build_server(ctx)
    async with stdio_server() as (read_stream, write_stream):
        print("[server] NotebookLM MCP server is running on stdio", file=sys.stderr)
        await server.run(read_stream, write_stream, server.create_initialization_options())


async def main(ctx: AppContext):
    try:
        await run_server(ctx)
    finally:
        # a failing close must not mask the error that ended the server
        try:
            await ctx.close()
        except Exception as e:
            print(f"[server] Browser shutdown failed: {e}", file=sys.stderr)
        print("[server] Stopped", file=sys.stderr)
