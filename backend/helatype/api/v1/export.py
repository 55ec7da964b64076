"""
Export endpoint: download editor output as a text file.
"""
from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse
from pydantic import BaseModel

from ...config import get_settings
from ...utils.export import content_disposition, export_text

router = APIRouter()


class ExportRequest(BaseModel):
    text: str


@router.post("/export", response_class=FileResponse)
def export_output(request: ExportRequest):
    """Write the text to the export file and return it as a UTF-8 attachment."""
    try:
        path = export_text(request.text, get_settings().EXPORT_DIR)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except OSError as e:
        print(f"[export] Write failed: {e}")
        raise HTTPException(status_code=500, detail="Export failed")

    print("[export] Download requested, length:", len(request.text))
    return FileResponse(
        path,
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": content_disposition(path.name)}
    )
