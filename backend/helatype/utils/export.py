"""
Export helpers: write editor output to a plain text file.
"""
from pathlib import Path

from ..config import get_settings


def export_filename() -> str:
    return get_settings().EXPORT_FILENAME


def export_text(text: str, directory) -> Path:
    """
    Write text to the export file inside directory.

    Args:
        text: Output text to export
        directory: Folder to write into (created if missing)

    Returns:
        Path of the written file
    """
    if not text or not text.strip():
        raise ValueError("Nothing to export")

    folder = Path(directory)
    folder.mkdir(parents=True, exist_ok=True)
    path = folder / export_filename()
    path.write_text(text, encoding="utf-8")
    print("[export] Wrote", len(text), "chars to", path)
    return path


def content_disposition(filename: str = None) -> str:
    """Content-Disposition header value for a download."""
    return f'attachment; filename="{filename or export_filename()}"'
