from __future__ import annotations

import anyio
import httpx
import pytest
from pydantic import ValidationError

from joblist.services.api import JobListClient

DETAIL = {
    "id": 7,
    "title": "Data Engineer",
    "company": "Acme",
    "location": "Da Nang",
    "salary": "1500 USD",
    "jobType": "Full-time",
    "description": "Build pipelines.",
    "status": "Open",
    "additionalInfo": {"quantity": 2},
}


def _handler(request: httpx.Request) -> httpx.Response:
    if request.url.path == "/jobs/7":
        return httpx.Response(200, json=DETAIL)
    if request.url.path == "/jobs/legacy":
        return httpx.Response(200, json={"_id": "legacy", "title": "QA", "jobDescription": "Test things"})
    if request.url.path == "/jobs":
        return httpx.Response(200, json={"detail": "not a list"})
    return httpx.Response(404, json={"detail": "Not found"})


def _client(**kwargs) -> JobListClient:
    return JobListClient("http://board.test", transport=httpx.MockTransport(_handler), **kwargs)


def test_fetch_job() -> None:
    async def _run() -> None:
        async with _client() as client:
            job = await client.fetch_job("7")
        assert job.id == "7"
        assert job.title == "Data Engineer"
        assert job.job_type == "Full-time"
        assert job.description == "Build pipelines."

    anyio.run(_run)


def test_fetch_job_with_original_id_field() -> None:
    async def _run() -> None:
        async with _client() as client:
            job = await client.fetch_job("legacy")
        assert job.id == "legacy"
        assert job.description == "Test things"

    anyio.run(_run)


def test_fetch_missing_job_raises() -> None:
    async def _run() -> None:
        async with _client() as client:
            with pytest.raises(httpx.HTTPStatusError) as exc_info:
                await client.fetch_job("999")
        assert exc_info.value.response.status_code == 404

    anyio.run(_run)


def test_fetch_jobs_rejects_non_list_body() -> None:
    async def _run() -> None:
        async with _client() as client:
            with pytest.raises(ValidationError):
                await client.fetch_jobs()

    anyio.run(_run)


def test_explicit_zero_timeout_is_kept() -> None:
    async def _run() -> None:
        client = _client(timeout_seconds=0)
        assert client._client.timeout.read == 0
        await client.aclose()

    anyio.run(_run)
