"""
Alphabet help endpoint: search the Singlish mapping table.
"""
from fastapi import APIRouter, Query
from pydantic import BaseModel
from typing import List, Optional

from ...utils.mappings import Category, search_mappings

router = APIRouter()


class MappingItem(BaseModel):
    latin: str
    sinhala: str
    category: str


class MappingsResponse(BaseModel):
    count: int
    mappings: List[MappingItem]


@router.get("/mappings", response_model=MappingsResponse)
def get_mappings(
    q: str = Query("", description="Latin spelling or Sinhala letter"),
    category: Optional[Category] = Query(None, description="Restrict to one category")
):
    """
    Search the alphabet table.
    Without a query, returns every vowel, consonant and special letter.
    """
    print("[mappings] Search:", repr(q), "category:", category.value if category else None)
    entries = search_mappings(q, category)
    return MappingsResponse(
        count=len(entries),
        mappings=[MappingItem(**e.to_dict()) for e in entries]
    )
