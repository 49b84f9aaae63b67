from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from ..deps import get_db
from ..logging_config import get_logger
from ..models import SearchHistoryORM
from ..schemas import SearchHistoryIn, SearchHistoryOut

router = APIRouter(prefix="/search-history", tags=["search history"])
logger = get_logger(__name__)


@router.get("", response_model=list[SearchHistoryOut])
def list_history(
    limit: int = Query(20, ge=1, le=200),
    db: Session = Depends(get_db),
):
    # most recent first; id breaks ties between entries created in the same instant
    return (
        db.query(SearchHistoryORM)
        .order_by(SearchHistoryORM.created_at.desc(), SearchHistoryORM.id.desc())
        .limit(limit)
        .all()
    )


@router.post("", response_model=SearchHistoryOut, status_code=201)
def save_history(payload: SearchHistoryIn, db: Session = Depends(get_db)):
    row = SearchHistoryORM(title=payload.title, location=payload.location)
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.debug("search history saved id=%s title=%r location=%r", row.id, row.title, row.location)
    return row
