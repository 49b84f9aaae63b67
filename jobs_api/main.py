from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .db import init_db
from .logging_config import get_logger
from .routers import jobs as jobs_router
from .routers import search_history as search_history_router

logger = get_logger(__name__)

app = FastAPI(title=settings.APP_NAME, version="0.4.0")

# CORS, so the mobile/web client can call the API directly
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(jobs_router.router)
app.include_router(search_history_router.router)


@app.on_event("startup")
def _on_startup():
    # create tables on startup (development convenience). Use migrations for prod.
    init_db()
    logger.info("%s started env=%s", settings.APP_NAME, settings.APP_ENV)


@app.get("/health")
def health():
    return {"ok": True}
