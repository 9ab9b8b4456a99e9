from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from typing import Annotated, List, Optional
from datetime import date, datetime
from enum import Enum


class JobLevel(str, Enum):
    """Experience level required for the job"""
    INTERNSHIP = "INTERNSHIP"
    ENTRY_LEVEL = "ENTRY_LEVEL"
    MID_LEVEL = "MID_LEVEL"
    SENIOR_LEVEL = "SENIOR_LEVEL"


class JobMode(str, Enum):
    """Employment mode"""
    FULL_TIME = "FULL_TIME"
    PART_TIME = "PART_TIME"
    CONTRACT = "CONTRACT"


class JobStage(str, Enum):
    """Where the application currently stands"""
    NOT_APPLIED = "NOT_APPLIED"
    APPLIED = "APPLIED"
    FIRST_INTERVIEW = "FIRST_INTERVIEW"
    FOLLOW_UP_INTERVIEWS = "FOLLOW_UP_INTERVIEWS"
    OFFER = "OFFER"


_url_adapter = TypeAdapter(AnyUrl)


def _validate_url(value: str) -> str:
    # Keep the caller's spelling; AnyUrl would normalize it (trailing slash etc.)
    try:
        _url_adapter.validate_python(value)
    except ValueError:
        raise ValueError("Invalid URL format")
    return value


NonEmptyStr = Annotated[str, Field(min_length=1)]
UrlStr = Annotated[str, Field(min_length=1), AfterValidator(_validate_url)]


class JobCreateRequest(BaseModel):
    """Schema for creating a new job. The id is always assigned by the store."""
    model_config = ConfigDict(populate_by_name=True)

    title: NonEmptyStr = Field(..., examples=["Software Engineer"])
    company: NonEmptyStr = Field(..., examples=["TechCorp Inc."])
    location: NonEmptyStr = Field(..., examples=["New York, USA"])
    url: UrlStr = Field(..., examples=["https://techcorp.com/jobs/12345"])
    description: NonEmptyStr = Field(..., examples=["We are looking for a skilled software engineer..."])
    level: JobLevel
    mode: JobMode
    stage: JobStage
    date_posted: date = Field(..., examples=["2025-03-30"])
    active: bool
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")


class JobUpdateRequest(BaseModel):
    """
    Schema for a partial job update.

    Every field is optional, but a field that is sent must hold a valid value;
    explicit nulls are rejected.
    """
    model_config = ConfigDict(populate_by_name=True)

    title: Optional[NonEmptyStr] = None
    company: Optional[NonEmptyStr] = None
    location: Optional[NonEmptyStr] = None
    url: Optional[UrlStr] = None
    description: Optional[NonEmptyStr] = None
    level: Optional[JobLevel] = None
    mode: Optional[JobMode] = None
    stage: Optional[JobStage] = None
    date_posted: Optional[date] = None
    active: Optional[bool] = None
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class Job(JobCreateRequest):
    """A persisted job"""
    id: str = Field(..., examples=["abcde12345"])


class JobPage(BaseModel):
    """One page of jobs plus the size of the whole collection"""
    jobs: List[Job]
    total: int
