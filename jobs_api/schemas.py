from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class JobStatus(str, Enum):
    OPEN = "Open"
    PAUSED = "Paused"
    CLOSED = "Closed"

    @classmethod
    def _missing_(cls, value):
        # literals used by the first version of the mobile backend
        legacy = {"Mở": cls.OPEN, "Tạm dừng": cls.PAUSED, "Đóng": cls.CLOSED}
        if isinstance(value, str):
            return legacy.get(value.strip())
        return None


class AdditionalInfo(CamelModel):
    deadline: str = ""
    experience: str = ""
    education: str = ""
    quantity: int = Field(1, ge=1)
    gender: str = ""


class JobPostingRequest(CamelModel):
    title: str = Field(..., min_length=1, max_length=512)
    company: str = Field(..., max_length=256)
    location: str = Field(..., max_length=256)
    salary: str = Field("", max_length=128)
    job_type: str = Field("", max_length=64)
    description: str = Field("", validation_alias=AliasChoices("description", "jobDescription"))
    requirements: str = ""
    benefits: str = ""
    status: JobStatus = JobStatus.OPEN
    additional_info: AdditionalInfo = Field(default_factory=AdditionalInfo)


class JobOut(CamelModel):
    id: int
    title: str
    company: str = ""
    location: str = ""
    salary: str = ""
    job_type: str = ""
    description: str = ""


class JobPostingOut(JobOut):
    requirements: str = ""
    benefits: str = ""
    status: JobStatus
    additional_info: AdditionalInfo
    created_at: Optional[datetime] = None

    @classmethod
    def from_row(cls, row) -> "JobPostingOut":
        """Build from a JobORM row, regrouping the flattened additional info."""
        return cls(
            id=row.id,
            title=row.title,
            company=row.company,
            location=row.location,
            salary=row.salary,
            job_type=row.job_type,
            description=row.description,
            requirements=row.requirements,
            benefits=row.benefits,
            status=JobStatus(row.status),
            additional_info=AdditionalInfo(
                deadline=row.deadline,
                experience=row.experience,
                education=row.education,
                quantity=row.quantity,
                gender=row.gender,
            ),
            created_at=row.created_at,
        )


class SearchHistoryIn(CamelModel):
    title: str = Field("", max_length=512)
    location: str = Field("", max_length=256)

    @model_validator(mode="after")
    def _not_blank(self):
        if not self.title and not self.location:
            raise ValueError("title or location must be non-empty")
        return self


class SearchHistoryOut(CamelModel):
    id: int
    title: str
    location: str
    created_at: Optional[datetime] = None


__all__ = [
    "AdditionalInfo",
    "JobOut",
    "JobPostingOut",
    "JobPostingRequest",
    "JobStatus",
    "SearchHistoryIn",
    "SearchHistoryOut",
]
