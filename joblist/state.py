"""Screen state for the job list and the events that move it forward.

The screen is one frozen ``ScreenState`` value. Every user action or network
completion is an event, and ``reduce`` computes the next state from the
current one. Network side effects are returned to the caller as effects
instead of being performed here.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Tuple, Union

from .schemas import Job, SearchField, SearchHistoryEntry, SearchQuery
from .services.history import has_terms, record_search
from .services.search import filter_jobs, suggest


class Phase(str, Enum):
    LOADING = "loading"
    READY = "ready"


@dataclass(frozen=True)
class ScreenState:
    phase: Phase = Phase.LOADING
    jobs: Tuple[Job, ...] = ()
    filtered: Tuple[Job, ...] = ()
    query: SearchQuery = field(default_factory=SearchQuery)
    title_suggestions: Tuple[str, ...] = ()
    location_suggestions: Tuple[str, ...] = ()
    history: Tuple[SearchHistoryEntry, ...] = ()

    def suggestions(self, search_field: SearchField) -> Tuple[str, ...]:
        if search_field is SearchField.TITLE:
            return self.title_suggestions
        return self.location_suggestions

    def with_suggestions(self, search_field: SearchField, values) -> "ScreenState":
        if search_field is SearchField.TITLE:
            return replace(self, title_suggestions=tuple(values))
        return replace(self, location_suggestions=tuple(values))


# -----------------------
# Events
# -----------------------
@dataclass(frozen=True)
class JobsLoaded:
    jobs: Tuple[Job, ...]


@dataclass(frozen=True)
class JobsLoadFailed:
    reason: str = ""


@dataclass(frozen=True)
class HistoryLoaded:
    entries: Tuple[SearchHistoryEntry, ...]


@dataclass(frozen=True)
class HistoryLoadFailed:
    reason: str = ""


@dataclass(frozen=True)
class InputChanged:
    field: SearchField
    text: str


@dataclass(frozen=True)
class SuggestionSelected:
    field: SearchField
    value: str


@dataclass(frozen=True)
class SearchSubmitted:
    pass


@dataclass(frozen=True)
class HistorySelected:
    entry: SearchHistoryEntry


Event = Union[
    JobsLoaded,
    JobsLoadFailed,
    HistoryLoaded,
    HistoryLoadFailed,
    InputChanged,
    SuggestionSelected,
    SearchSubmitted,
    HistorySelected,
]


# -----------------------
# Effects
# -----------------------
@dataclass(frozen=True)
class PersistHistory:
    entry: SearchHistoryEntry


Effect = PersistHistory
Transition = Tuple[ScreenState, Tuple[Effect, ...]]


def _submit(state: ScreenState, capacity: int) -> Transition:
    filtered = tuple(filter_jobs(state.jobs, state.query))
    if not has_terms(state.query):
        return replace(state, filtered=filtered), ()
    history = record_search(state.history, state.query, capacity)
    return replace(state, filtered=filtered, history=history), (PersistHistory(history[0]),)


def reduce(
    state: ScreenState,
    event: Event,
    *,
    capacity: int = 2,
    suggest_on_empty: bool = True,
) -> Transition:
    """Return the state after ``event`` and the side effects it asks for."""
    if isinstance(event, JobsLoaded):
        jobs = tuple(event.jobs)
        return replace(state, phase=Phase.READY, jobs=jobs, filtered=jobs), ()

    if isinstance(event, JobsLoadFailed):
        # a failed load is an empty list, not an error screen
        return replace(state, phase=Phase.READY, jobs=(), filtered=()), ()

    if isinstance(event, HistoryLoaded):
        # searches made before the fetch landed stay in front
        history = (*state.history, *event.entries)[:capacity]
        return replace(state, history=history), ()

    if isinstance(event, HistoryLoadFailed):
        return state, ()

    if isinstance(event, InputChanged):
        state = replace(state, query=state.query.with_field(event.field, event.text))
        if not event.text and not suggest_on_empty:
            return state.with_suggestions(event.field, ()), ()
        return state.with_suggestions(event.field, suggest(state.jobs, event.field, event.text)), ()

    if isinstance(event, SuggestionSelected):
        state = replace(state, query=state.query.with_field(event.field, event.value))
        return state.with_suggestions(event.field, ()), ()

    if isinstance(event, SearchSubmitted):
        return _submit(state, capacity)

    if isinstance(event, HistorySelected):
        query = SearchQuery(title=event.entry.title, location=event.entry.location)
        return _submit(replace(state, query=query), capacity)

    raise TypeError(f"unknown event: {event!r}")
