from typing import Sequence, Tuple

from ..schemas import SearchHistoryEntry, SearchQuery


def has_terms(query: SearchQuery) -> bool:
    """Only submissions with some text are remembered."""
    return bool(query.title or query.location)


def record_search(
    history: Sequence[SearchHistoryEntry],
    query: SearchQuery,
    capacity: int,
) -> Tuple[SearchHistoryEntry, ...]:
    entry = SearchHistoryEntry(title=query.title, location=query.location)
    return (entry, *history)[:capacity]
