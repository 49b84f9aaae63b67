from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Text, DateTime
from .db import Base


def _utcnow():
    return datetime.now(timezone.utc)


class JobORM(Base):
    __tablename__ = "jobs"
    id = Column(Integer, primary_key=True)
    title = Column(String(512), nullable=False)
    company = Column(String(256), nullable=False, default="")
    location = Column(String(256), nullable=False, default="")
    salary = Column(String(128), nullable=False, default="")
    job_type = Column(String(64), nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    requirements = Column(Text, nullable=False, default="")
    benefits = Column(Text, nullable=False, default="")
    status = Column(String(16), nullable=False, default="Open")

    # additionalInfo, flattened
    deadline = Column(String(64), nullable=False, default="")
    experience = Column(String(128), nullable=False, default="")
    education = Column(String(128), nullable=False, default="")
    quantity = Column(Integer, nullable=False, default=1)
    gender = Column(String(32), nullable=False, default="")

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)


class SearchHistoryORM(Base):
    __tablename__ = "search_history"
    id = Column(Integer, primary_key=True)
    title = Column(String(512), nullable=False, default="")
    location = Column(String(256), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)
