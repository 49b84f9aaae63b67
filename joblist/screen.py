from __future__ import annotations

import asyncio
import logging
from collections import deque
from typing import Deque, List, Optional, Tuple

import httpx

from .config import settings
from .schemas import PersistOutcome, SearchField, SearchHistoryEntry
from .services.api import JobListClient
from .state import (
    Event,
    HistoryLoaded,
    HistoryLoadFailed,
    HistorySelected,
    InputChanged,
    JobsLoaded,
    JobsLoadFailed,
    PersistHistory,
    ScreenState,
    SearchSubmitted,
    SuggestionSelected,
    reduce,
)

logger = logging.getLogger(__name__)

# outcomes kept for drain() when nobody collects them
OUTCOME_BACKLOG = 100


class JobListScreen:
    """Drives the job list: loads data, applies events, saves history.

    Everything runs on one event loop, and searches must be dispatched from
    inside it. State only changes inside ``dispatch``; network calls report
    back through events or, for history saves, through ``PersistOutcome``
    values collected by ``drain``.
    """

    def __init__(
        self,
        client: JobListClient,
        *,
        capacity: Optional[int] = None,
        suggest_on_empty: Optional[bool] = None,
    ):
        self.client = client
        self.capacity = settings.HISTORY_CAPACITY if capacity is None else capacity
        self.suggest_on_empty = settings.SUGGEST_ON_EMPTY if suggest_on_empty is None else suggest_on_empty
        self.state = ScreenState()
        self._pending: List[asyncio.Task] = []
        self._outcomes: Deque[Tuple[int, PersistOutcome]] = deque(maxlen=OUTCOME_BACKLOG)
        self._submitted = 0

    # -----------------------
    # Loading
    # -----------------------
    async def mount(self) -> ScreenState:
        """Fetch jobs and history once, in parallel. No retries."""
        await asyncio.gather(self._load_jobs(), self._load_history())
        return self.state

    async def _load_jobs(self) -> None:
        try:
            jobs = await self.client.fetch_jobs()
        except (httpx.HTTPError, ValueError) as e:  # ValueError covers bad JSON and ValidationError
            logger.error("Error fetching jobs: %s", e)
            self.dispatch(JobsLoadFailed(reason=str(e)))
            return
        self.dispatch(JobsLoaded(jobs=tuple(jobs)))

    async def _load_history(self) -> None:
        try:
            entries = await self.client.fetch_history()
        except (httpx.HTTPError, ValueError) as e:  # ValueError covers bad JSON and ValidationError
            logger.error("Error fetching search history: %s", e)
            self.dispatch(HistoryLoadFailed(reason=str(e)))
            return
        self.dispatch(HistoryLoaded(entries=tuple(entries)))

    # -----------------------
    # Events
    # -----------------------
    def dispatch(self, event: Event) -> ScreenState:
        self.state, effects = reduce(
            self.state,
            event,
            capacity=self.capacity,
            suggest_on_empty=self.suggest_on_empty,
        )
        for effect in effects:
            if isinstance(effect, PersistHistory):
                self._start_persist(effect.entry)
        return self.state

    def type_title(self, text: str) -> ScreenState:
        return self.dispatch(InputChanged(SearchField.TITLE, text))

    def type_location(self, text: str) -> ScreenState:
        return self.dispatch(InputChanged(SearchField.LOCATION, text))

    def select_suggestion(self, field: SearchField, value: str) -> ScreenState:
        return self.dispatch(SuggestionSelected(field, value))

    def search(self) -> ScreenState:
        return self.dispatch(SearchSubmitted())

    def search_history(self, entry: SearchHistoryEntry) -> ScreenState:
        return self.dispatch(HistorySelected(entry))

    # -----------------------
    # History persistence
    # -----------------------
    def _start_persist(self, entry: SearchHistoryEntry) -> None:
        seq = self._submitted
        self._submitted += 1
        task = asyncio.create_task(self._persist(entry))
        self._pending.append(task)
        task.add_done_callback(lambda t: self._finish_persist(t, seq, entry))

    def _finish_persist(self, task: asyncio.Task, seq: int, entry: SearchHistoryEntry) -> None:
        self._pending.remove(task)
        if task.cancelled():
            outcome = PersistOutcome(entry=entry, ok=False, error="cancelled")
        elif task.exception() is not None:
            logger.error("Error saving search history: %s", task.exception())
            outcome = PersistOutcome(entry=entry, ok=False, error=str(task.exception()))
        else:
            outcome = task.result()
        self._outcomes.append((seq, outcome))

    async def _persist(self, entry: SearchHistoryEntry) -> PersistOutcome:
        try:
            await self.client.save_history(entry)
        except (httpx.HTTPError, RuntimeError) as e:  # RuntimeError: client already closed
            # local history keeps the entry either way
            logger.error("Error saving search history: %s", e)
            return PersistOutcome(entry=entry, ok=False, error=str(e))
        return PersistOutcome(entry=entry, ok=True)

    @property
    def pending_saves(self) -> int:
        return len(self._pending)

    async def drain(self) -> List[PersistOutcome]:
        """Wait for the history saves still running, then hand over every
        outcome not yet collected (at most OUTCOME_BACKLOG), in submission order.
        """
        if self._pending:
            await asyncio.wait(list(self._pending))
        outcomes = sorted(self._outcomes, key=lambda item: item[0])
        self._outcomes.clear()
        return [outcome for _, outcome in outcomes]
