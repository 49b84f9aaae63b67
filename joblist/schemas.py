from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class SearchField(str, Enum):
    TITLE = "title"
    LOCATION = "location"


class Job(BaseModel):
    """A job as listed on the screen. Frozen: the list is replaced, never edited."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, coerce_numbers_to_str=True)

    id: str = Field(validation_alias=AliasChoices("id", "_id"))
    title: str
    company: str = ""
    location: str = ""
    salary: str = ""
    job_type: str = Field("", validation_alias=AliasChoices("jobType", "job_type"))
    description: str = Field("", validation_alias=AliasChoices("description", "jobDescription"))

    def field_value(self, field: SearchField) -> str:
        return self.title if field is SearchField.TITLE else self.location


class SearchHistoryEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    location: str = ""


class SearchQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = ""
    location: str = ""

    def with_field(self, field: SearchField, text: str) -> "SearchQuery":
        return self.model_copy(update={field.value: text})

    def get(self, field: SearchField) -> str:
        return getattr(self, field.value)


class PersistOutcome(BaseModel):
    """Result of saving one history entry to the backend."""

    entry: SearchHistoryEntry
    ok: bool
    error: Optional[str] = None
