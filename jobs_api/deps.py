# jobs_api/deps.py
from fastapi import Header, HTTPException
from .config import settings
from .db import SessionLocal


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def require_api_key(x_api_key: str | None = Header(None)):
    """Require a matching X-API-Key header when API_KEY is configured.

    - If API_KEY is empty/missing, auth is effectively disabled (no-op).
    - If API_KEY is set and header doesn't match, raise 401.
    """
    api_key = settings.API_KEY.strip()
    if not api_key:
        # auth disabled when no API key configured
        return
    if x_api_key != api_key:
        raise HTTPException(status_code=401, detail="Unauthorized: invalid API key")
    return
