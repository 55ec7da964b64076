"""
Health check endpoint with component status.
"""
from fastapi import APIRouter
from datetime import datetime

from ...config import get_settings

router = APIRouter()


@router.get("/health")
def health_check():
    """
    Health check endpoint.
    Returns status of the engine, history store and assistant config.
    """
    print("[Health] Health check requested")
    settings = get_settings()

    # Engine self check
    engine_status = "unknown"
    table = None
    try:
        from ...utils.mappings import get_mapping_table
        from ...utils.transliteration import transliterate
        table = get_mapping_table()
        engine_status = "ok" if transliterate("amma") == "අම්ම" else "degraded"
    except Exception as e:
        engine_status = "error: " + str(e)[:50]

    # Check history store
    history_status = "unknown"
    history_count = None
    try:
        from ...store.history_store import get_history_store
        store = get_history_store()
        history_count = len(store)
        history_status = "file" if hasattr(store, "path") else "in_memory"
    except Exception as e:
        history_status = "error: " + str(e)[:50]

    assistant_key = {
        "groq": settings.GROQ_API_KEY,
        "openrouter": settings.OPENROUTER_API_KEY,
        "gemini": settings.GEMINI_API_KEY
    }.get(settings.LLM_PROVIDER.lower())

    status = "ok" if engine_status == "ok" else "degraded"

    return {
        "status": status,
        "timestamp": datetime.now().isoformat(),
        "engine": engine_status,
        "mappings": len(table.entries) if table is not None else 0,
        "history": history_status,
        "history_count": history_count,
        "assistant": {
            "provider": settings.LLM_PROVIDER,
            "configured": bool(assistant_key)
        }
    }
