from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from ..deps import get_db, require_api_key
from ..logging_config import get_logger
from ..models import JobORM
from ..schemas import JobOut, JobPostingOut, JobPostingRequest

router = APIRouter(prefix="/jobs", tags=["jobs"])
logger = get_logger(__name__)


def _contains(text: str) -> str:
    """LIKE pattern for a literal substring; % and _ in user input match themselves."""
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


@router.get("", response_model=list[JobOut])
def list_jobs(
    q: str | None = Query(None, description="search in title"),
    location: str | None = Query(None, description="search in location"),
    limit: int | None = Query(None, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    db: Session = Depends(get_db),
):
    query = db.query(JobORM).order_by(JobORM.id.desc())
    if q:
        query = query.filter(JobORM.title.ilike(_contains(q), escape="\\"))
    if location:
        query = query.filter(JobORM.location.ilike(_contains(location), escape="\\"))
    if offset:
        query = query.offset(offset)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


@router.get("/{job_id}", response_model=JobPostingOut)
def get_job(job_id: int, db: Session = Depends(get_db)):
    row = db.get(JobORM, job_id)
    if row is None:
        raise HTTPException(status_code=404, detail=f"Job {job_id} not found")
    return JobPostingOut.from_row(row)


@router.post("", response_model=JobPostingOut, status_code=201, dependencies=[Depends(require_api_key)])
def create_job(payload: JobPostingRequest, db: Session = Depends(get_db)):
    info = payload.additional_info
    row = JobORM(
        title=payload.title,
        company=payload.company,
        location=payload.location,
        salary=payload.salary,
        job_type=payload.job_type,
        description=payload.description,
        requirements=payload.requirements,
        benefits=payload.benefits,
        status=payload.status.value,
        deadline=info.deadline,
        experience=info.experience,
        education=info.education,
        quantity=info.quantity,
        gender=info.gender,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("job created id=%s title=%r status=%s", row.id, row.title, row.status)
    return JobPostingOut.from_row(row)
