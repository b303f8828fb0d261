"""Tool endpoints — list tools and run them over HTTP.

Routes
------
GET  /api/tools               → tool descriptors
POST /api/tools/{tool_name}   Body: tool arguments     → run one tool
POST /api/call                Body: {"tool", "args"}   → generic dispatcher

Every POST answers with the ``{"success": ..., "data" | "error": ...}``
envelope; failures are reported with a non-2xx status.
"""

from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from policy_backend.errors import UnknownToolError
from policy_backend.tools import TOOLS, run_tool

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class CallRequest(BaseModel):
    tool: Optional[str] = None
    args: Optional[dict[str, Any]] = None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _run(name: str, args: Optional[dict[str, Any]], unknown_status: int) -> Any:
    try:
        data = run_tool(name, args or {})
    except UnknownToolError as exc:
        return _error(unknown_status, str(exc))
    except Exception as exc:
        return _error(500, str(exc))
    return {"success": True, "data": data}


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("/tools")
def list_tools() -> dict[str, Any]:
    """Return the descriptors of every registered tool."""
    return {"tools": TOOLS}


@router.post("/tools/{tool_name}")
def call_tool(tool_name: str, args: Optional[dict[str, Any]] = Body(None)) -> Any:
    """Run *tool_name* with the JSON request body as its arguments."""
    return _run(tool_name, args, unknown_status=404)


@router.post("/call")
def call(body: CallRequest) -> Any:
    """Run ``body.tool`` with ``body.args``."""
    if not body.tool:
        return _error(400, "Tool name is required")
    return _run(body.tool, body.args, unknown_status=400)
