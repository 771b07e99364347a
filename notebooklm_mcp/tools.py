from pydantic import BaseModel
from typing import Any, Dict

# Call envelope handed from the MCP layer to the dispatcher
class ToolCall(BaseModel):
    name: str
    arguments: Dict[str, Any] = {}

# Tool schemas advertised to MCP clients
TOOLS = [
    {
        "name": "create_notebook",
        "description": "Create a new NotebookLM notebook with the given title.",
        "input_schema": {
            "type": "object",
            "properties": {
                "title": {"type": "string", "description": "Notebook title"}
            },
            "required": ["title"]
        }
    },
    {
        "name": "list_notebooks",
        "description": "Fetch the titles of the notebooks currently shown in NotebookLM.",
        "input_schema": {"type": "object", "properties": {}},
    },
    {
        "name": "open_notebooklm",
        "description": "Open NotebookLM in the browser, signing in to Google if needed.",
        "input_schema": {"type": "object", "properties": {}},
    },
]

TOOL_NAMES = frozenset(t["name"] for t in TOOLS)
