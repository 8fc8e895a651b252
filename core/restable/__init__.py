"""
core.restable — request-driven search and pagination for opted-in models.

Public API:
    contract    — Restable mixin (searchables, matches, query hook, page size)
    filters     — MatchFilter / MatchCollection, SearchableFilter / SearchableCollection
    search      — Search adapter and the paginate() helper
    exceptions  — TypeMismatch
"""

from core.restable.contract import Restable, is_restable
from core.restable.exceptions import TypeMismatch
from core.restable.filters import (
    MatchCollection,
    MatchFilter,
    SearchableCollection,
    SearchableFilter,
)
from core.restable.search import Search, paginate

__all__ = [
    'Restable',
    'is_restable',
    'TypeMismatch',
    'MatchCollection',
    'MatchFilter',
    'SearchableCollection',
    'SearchableFilter',
    'Search',
    'paginate',
]
