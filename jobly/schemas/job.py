from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

# jobs.id and jobs.salary are 32-bit INTEGER columns
INT4_MAX = 2**31 - 1


class JobCreateRequest(BaseModel):
    """Schema for creating a new job"""
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    id: int = Field(..., ge=0, le=INT4_MAX)
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0, le=INT4_MAX)
    equity: Optional[float] = Field(None, ge=0, le=1, description="Ownership fraction between 0 and 1")
    company_handle: str = Field(..., alias="companyHandle", min_length=1, max_length=25)


class JobUpdateRequest(BaseModel):
    """
    Partial update of a job.

    Only title, salary and equity can change. A field left out of the request
    body is left untouched; id and companyHandle are rejected.
    """
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0, le=INT4_MAX)
    equity: Optional[float] = Field(None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("title may not be null")
        return v


class JobResponse(BaseModel):
    """Schema for job response"""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[float] = None
    company_handle: str = Field(..., alias="companyHandle")


class JobEnvelope(BaseModel):
    job: JobResponse


class JobListEnvelope(BaseModel):
    jobs: List[JobResponse]


class JobDeletedResponse(BaseModel):
    deleted: int
