"""
assist.py - AI Tools API Endpoint

Runs the writing assistant tools on editor output:
- grammar: fix spelling and grammar
- formal_letter: rewrite as a formal letter
- social_post: rewrite for social media
- translate: translate to English
"""
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ...agents.editor_agent import TOOLS, get_editor_agent
from ...agents.writing_assistant import AssistantError

router = APIRouter()


class AssistRequest(BaseModel):
    """Request model for AI tools."""
    text: str


class AssistResponse(BaseModel):
    tool: str
    output: str


@router.post("/assist/{tool}", response_model=AssistResponse)
def run_assist_tool(tool: str, request: AssistRequest):
    """Run one AI tool on the given text."""
    print("[assist] Tool:", tool)

    if tool not in TOOLS:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {tool}")
    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Write something first")

    try:
        output = get_editor_agent().run_tool(tool, request.text)
    except (AssistantError, ValueError) as e:
        print(f"[assist] Error: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    return AssistResponse(tool=tool, output=output)


@router.get("/assist/tools")
def list_tools():
    """Available AI tools."""
    return {"tools": list(TOOLS)}
