"""
Transliteration engine and mapping table.
"""
from .mappings import Category, MappingEntry, MappingTable, get_mapping_table, search_mappings
from .transliteration import InputMode, render, transliterate

__all__ = [
    'Category', 'MappingEntry', 'MappingTable', 'get_mapping_table', 'search_mappings',
    'InputMode', 'render', 'transliterate',
]
