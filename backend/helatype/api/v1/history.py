"""
history.py - Saved Vault API Endpoints

Save, list, restore and delete editor output.
Saving asks the writing assistant for a short title but always
stores the text, even when the assistant is unavailable.
"""
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import List

from ...agents.editor_agent import get_editor_agent
from ...store.history_store import HistoryStoreError

router = APIRouter()


class SaveRequest(BaseModel):
    """Request model for saving text."""
    text: str


class HistoryItemModel(BaseModel):
    id: str
    text: str
    timestamp: int


class SaveResponse(BaseModel):
    """Response model for a smart save."""
    item: HistoryItemModel
    label: str
    labelled: bool


class HistoryResponse(BaseModel):
    count: int
    items: List[HistoryItemModel]


class RestoreResponse(BaseModel):
    """Text to load back into the editor."""
    id: str
    text: str


@router.get("/history", response_model=HistoryResponse)
def list_history():
    """List saved items, newest first."""
    items = get_editor_agent().store.list_items()
    print("[history] Listing", len(items), "items")
    return HistoryResponse(
        count=len(items),
        items=[HistoryItemModel(**item.to_dict()) for item in items]
    )


@router.post("/history", response_model=SaveResponse)
def save_history(request: SaveRequest):
    """
    Smart save: store text with an AI generated title.
    Falls back to the default title if the assistant fails.
    """
    print("[history] Save request, length:", len(request.text))

    if not request.text.strip():
        raise HTTPException(status_code=400, detail="Nothing to save")

    try:
        result = get_editor_agent().smart_save(request.text)
    except HistoryStoreError as e:
        print(f"[history] Store error: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return SaveResponse(
        item=HistoryItemModel(**result.item.to_dict()),
        label=result.label,
        labelled=result.labelled
    )


@router.get("/history/{item_id}", response_model=RestoreResponse)
def restore_history(item_id: str):
    """Get a saved item to restore it into the editor."""
    agent = get_editor_agent()
    try:
        text = agent.restore(item_id)
    except KeyError:
        raise HTTPException(status_code=404, detail="History item not found")

    print("[history] Restoring", item_id)
    return RestoreResponse(id=item_id, text=text)


@router.delete("/history/{item_id}")
def delete_history(item_id: str):
    """Delete a saved item."""
    try:
        deleted = get_editor_agent().delete(item_id)
    except HistoryStoreError as e:
        print(f"[history] Store error: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    if not deleted:
        raise HTTPException(status_code=404, detail="History item not found")
    return {"deleted": item_id}
