from __future__ import annotations

from typing import List, Optional

import httpx  # async HTTP client with timeouts
from pydantic import TypeAdapter

from ..config import settings
from ..schemas import Job, SearchHistoryEntry

# whole-body validation: a non-list payload raises ValidationError
_JOBS = TypeAdapter(List[Job])
_HISTORY = TypeAdapter(List[SearchHistoryEntry])


class JobListClient:
    """Thin async wrapper over the job board endpoints.

    Errors are not handled here: non-2xx responses raise
    ``httpx.HTTPStatusError`` and transport failures raise the matching
    ``httpx.HTTPError`` subclass. Bodies of the wrong shape raise
    ``pydantic.ValidationError``. Callers decide what a failure means.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout_seconds: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        headers = {
            "User-Agent": "JobList/0.4 httpx",
            "Accept": "application/json",
        }
        self._client = httpx.AsyncClient(
            base_url=(base_url or settings.BASE_URL).rstrip("/"),
            timeout=settings.REQUEST_TIMEOUT_SECONDS if timeout_seconds is None else timeout_seconds,
            headers=headers,
            transport=transport,
            follow_redirects=True,
        )

    async def __aenter__(self) -> "JobListClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def fetch_jobs(self) -> List[Job]:
        resp = await self._client.get("/jobs")
        resp.raise_for_status()
        return _JOBS.validate_python(resp.json())

    async def fetch_job(self, job_id: str) -> Job:
        resp = await self._client.get(f"/jobs/{job_id}")
        resp.raise_for_status()
        return Job.model_validate(resp.json())

    async def fetch_history(self) -> List[SearchHistoryEntry]:
        resp = await self._client.get("/search-history")
        resp.raise_for_status()
        return _HISTORY.validate_python(resp.json())

    async def save_history(self, entry: SearchHistoryEntry) -> None:
        resp = await self._client.post(
            "/search-history",
            json={"title": entry.title, "location": entry.location},
        )
        resp.raise_for_status()
