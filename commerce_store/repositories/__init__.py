"""
Repository Layer - Data Access

This layer owns the in-memory entities and every index over them.
Callers get domain models and read-only views back, never raw index structures.

Date: 2026-10-18
"""
from commerce_store.repositories.data_store import DataStore
from commerce_store.repositories.sorted_index import SortedIndex

__all__ = [
    'DataStore',
    'SortedIndex'
]
