from __future__ import annotations

import os

import pytest

# must be set before jobs_api is imported: the engine is built at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["API_KEY"] = ""

from joblist.schemas import Job  # noqa: E402


@pytest.fixture
def api_client():
    from fastapi.testclient import TestClient

    from jobs_api.db import Base, engine
    from jobs_api.main import app

    Base.metadata.drop_all(bind=engine)
    with TestClient(app) as client:
        yield client
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def jobs() -> list[Job]:
    return [
        Job(id="1", title="Backend Engineer", company="Acme", location="Hanoi"),
        Job(id="2", title="Frontend Engineer", company="Globex", location="Hanoi"),
        Job(id="3", title="Backend Lead", company="Initech", location="HCMC"),
    ]


@pytest.fixture
def posting_payload():
    """Factory for a valid job-posting request body."""

    def _make(**overrides) -> dict:
        payload = {
            "title": "Data Engineer",
            "company": "Acme",
            "location": "Da Nang",
            "salary": "1500 USD",
            "jobType": "Full-time",
            "description": "Build pipelines.",
            "requirements": "Python, SQL",
            "benefits": "Remote Fridays",
            "status": "Open",
            "additionalInfo": {
                "deadline": "2026-12-31",
                "experience": "2 years",
                "education": "Bachelor",
                "quantity": 2,
                "gender": "Any",
            },
        }
        payload.update(overrides)
        return payload

    return _make
