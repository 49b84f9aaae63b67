from jobs_api.config import settings


def test_health(api_client):
    assert api_client.get("/health").json() == {"ok": True}


def test_list_jobs_empty(api_client):
    resp = api_client.get("/jobs")
    assert resp.status_code == 200
    assert resp.json() == []


def test_create_and_fetch_job(api_client, posting_payload):
    resp = api_client.post("/jobs", json=posting_payload())
    assert resp.status_code == 201
    body = resp.json()
    assert body["title"] == "Data Engineer"
    assert body["jobType"] == "Full-time"
    assert body["status"] == "Open"
    assert body["additionalInfo"]["quantity"] == 2

    detail = api_client.get(f"/jobs/{body['id']}")
    assert detail.status_code == 200
    assert detail.json()["additionalInfo"]["education"] == "Bachelor"


def test_list_returns_client_shape_newest_first(api_client, posting_payload):
    api_client.post("/jobs", json=posting_payload(title="First"))
    api_client.post("/jobs", json=posting_payload(title="Second"))
    rows = api_client.get("/jobs").json()
    assert [r["title"] for r in rows] == ["Second", "First"]
    assert set(rows[0]) == {"id", "title", "company", "location", "salary", "jobType", "description"}


def test_list_filters_by_title_and_location(api_client, posting_payload):
    api_client.post("/jobs", json=posting_payload(title="Backend Engineer", location="Hanoi"))
    api_client.post("/jobs", json=posting_payload(title="Frontend Engineer", location="Hanoi"))
    api_client.post("/jobs", json=posting_payload(title="Backend Lead", location="HCMC"))

    rows = api_client.get("/jobs", params={"q": "backend", "location": "hanoi"}).json()
    assert [r["title"] for r in rows] == ["Backend Engineer"]

    rows = api_client.get("/jobs", params={"limit": 1}).json()
    assert [r["title"] for r in rows] == ["Backend Lead"]


def test_missing_job_is_404(api_client):
    assert api_client.get("/jobs/999").status_code == 404


def test_status_outside_enum_is_rejected(api_client, posting_payload):
    resp = api_client.post("/jobs", json=posting_payload(status="Archived"))
    assert resp.status_code == 422


def test_legacy_status_literal_is_accepted(api_client, posting_payload):
    resp = api_client.post("/jobs", json=posting_payload(status="Tạm dừng"))
    assert resp.status_code == 201
    assert resp.json()["status"] == "Paused"


def test_job_description_alias(api_client, posting_payload):
    payload = posting_payload()
    payload.pop("description")
    payload["jobDescription"] = "Own the data platform."
    resp = api_client.post("/jobs", json=payload)
    assert resp.json()["description"] == "Own the data platform."


def test_quantity_must_be_positive(api_client, posting_payload):
    payload = posting_payload()
    payload["additionalInfo"]["quantity"] = 0
    assert api_client.post("/jobs", json=payload).status_code == 422


def test_create_requires_api_key_when_configured(api_client, posting_payload, monkeypatch):
    monkeypatch.setattr(settings, "API_KEY", "secret")
    assert api_client.post("/jobs", json=posting_payload()).status_code == 401
    resp = api_client.post("/jobs", json=posting_payload(), headers={"X-API-Key": "secret"})
    assert resp.status_code == 201


def test_like_wildcards_in_query_match_literally(api_client, posting_payload):
    api_client.post("/jobs", json=posting_payload(title="Backend Engineer", location="Hanoi"))
    api_client.post("/jobs", json=posting_payload(title="Growth 100% remote", location="Remote_EU"))

    assert api_client.get("/jobs", params={"q": "_"}).json() == []
    rows = api_client.get("/jobs", params={"q": "%"}).json()
    assert [r["title"] for r in rows] == ["Growth 100% remote"]
    rows = api_client.get("/jobs", params={"location": "e_e"}).json()
    assert [r["title"] for r in rows] == ["Growth 100% remote"]
    assert api_client.get("/jobs", params={"location": "m_t"}).json() == []
