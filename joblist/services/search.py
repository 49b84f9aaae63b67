"""Autocomplete suggestions and job filtering over the loaded job list.

Both operations are plain case-insensitive substring checks. An empty
fragment is contained in every string, so it matches everything.
"""
from typing import Iterable, List

from ..schemas import Job, SearchField, SearchQuery


def _contains(value: str, fragment: str) -> bool:
    return fragment.lower() in value.lower()


def suggest(jobs: Iterable[Job], field: SearchField, fragment: str) -> List[str]:
    """Distinct values of ``field`` containing ``fragment``, in first-seen order."""
    seen = set()
    out: List[str] = []
    for job in jobs:
        value = job.field_value(field)
        if value in seen or not _contains(value, fragment):
            continue
        seen.add(value)
        out.append(value)
    return out


def filter_jobs(jobs: Iterable[Job], query: SearchQuery) -> List[Job]:
    return [
        job
        for job in jobs
        if _contains(job.title, query.title) and _contains(job.location, query.location)
    ]
