"""
transliterate.py - Transliteration API Endpoint

Converts Singlish input to Sinhala Unicode.
The editor calls this on every input change; the call is cheap,
deterministic and never fails.
"""
from fastapi import APIRouter
from pydantic import BaseModel

from ...utils.transliteration import InputMode, render

router = APIRouter()


class TransliterateRequest(BaseModel):
    """Request model for transliteration endpoint."""
    text: str = ""
    mode: InputMode = InputMode.SINGLISH


class TransliterateResponse(BaseModel):
    """Response model for transliteration endpoint."""
    input: str
    output: str
    mode: InputMode


@router.post("/transliterate", response_model=TransliterateResponse)
def transliterate_text(request: TransliterateRequest):
    """
    Render editor output for the given input and mode.

    SI mode transliterates Singlish, EN mode returns the text as typed.
    """
    output = render(request.text, request.mode)
    return TransliterateResponse(input=request.text, output=output, mode=request.mode)
