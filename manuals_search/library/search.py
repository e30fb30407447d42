# manuals_search/library/search.py

from typing import Iterable, List

from ..models.manual import Manual


def searchable_text(manual: Manual) -> str:
    """Text a query is matched against: title, brand, category and tags."""
    return " ".join([
        manual.title,
        manual.brand or "",
        manual.category or "",
        " ".join(manual.tags),
    ])


def filter_manuals(manuals: Iterable[Manual], query: str) -> List[Manual]:
    """
    Keep manuals whose searchable text contains the query.

    Matching is a case-insensitive substring test. An empty query keeps
    everything. Order is preserved.
    """
    needle = query.lower()
    return [m for m in manuals if needle in searchable_text(m).lower()]
