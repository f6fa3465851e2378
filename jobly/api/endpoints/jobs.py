import logging
from typing import Optional
from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.orm import Session

from jobly.core.config import settings
from jobly.core.database import get_db
from jobly.core.deps import get_admin_user
from jobly.core.errors import NotFoundError
from jobly.crud import job as job_crud
from jobly.models.user import User
from jobly.schemas.job import (
    JobCreateRequest,
    JobUpdateRequest,
    JobResponse,
    JobEnvelope,
    JobListEnvelope,
    JobDeletedResponse,
    INT4_MAX,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("", status_code=201, response_model=JobEnvelope)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """
    Create a new job.

    Body: { id, title, salary, equity, companyHandle }

    Returns { job: { id, title, salary, equity, companyHandle } }

    Authorization required: admin
    """
    new_job = job_crud.create(db, request)
    logger.info(f"Job {new_job.id} created by {admin_user.username}")
    return JobEnvelope(job=JobResponse.model_validate(new_job))


@router.get("", response_model=JobListEnvelope)
def list_jobs(
    title: Optional[str] = None,
    min_salary: Optional[int] = Query(None, alias="minSalary", ge=0, le=INT4_MAX),
    has_equity: Optional[bool] = Query(None, alias="hasEquity"),
    db: Session = Depends(get_db)
):
    """
    List jobs ordered by title.

    Can filter on provided search filters:
    - minSalary
    - hasEquity (true: only jobs with a non-zero equity share)
    - title (case-insensitive, partial match)

    An empty result is a normal 200 unless EMPTY_JOB_LIST_IS_NOT_FOUND is set.

    Authorization required: none
    """
    jobs = job_crud.find_all(db, title=title, min_salary=min_salary, has_equity=has_equity)

    if not jobs and settings.EMPTY_JOB_LIST_IS_NOT_FOUND:
        raise NotFoundError("Jobs not found")

    return JobListEnvelope(jobs=[JobResponse.model_validate(job) for job in jobs])


@router.get("/{key}", response_model=JobEnvelope)
def get_job(key: str, db: Session = Depends(get_db)):
    """
    Retrieve a single job.

    A key of ASCII digits is looked up as the job id; anything else as the
    exact job title. Ids beyond the column range cannot exist.

    Authorization required: none
    """
    if key.isascii() and key.isdigit():
        job_id = int(key)
        if job_id > INT4_MAX:
            raise NotFoundError(f"No job: {key}")
        job = job_crud.get_by_id(db, job_id)
    else:
        job = job_crud.get(db, key)

    return JobEnvelope(job=JobResponse.model_validate(job))


@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job(
    request: JobUpdateRequest,
    job_id: int = Path(..., ge=0, le=INT4_MAX),
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """
    Patch job data.

    Fields can be: { title, salary, equity }

    Returns { job: { id, title, salary, equity, companyHandle } }

    Authorization required: admin
    """
    job = job_crud.update(db, job_id, request)
    return JobEnvelope(job=JobResponse.model_validate(job))


@router.delete("/{job_id}", response_model=JobDeletedResponse)
def delete_job(
    job_id: int = Path(..., ge=0, le=INT4_MAX),
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """
    Delete a job by ID.

    Returns { deleted: id }

    Authorization required: admin
    """
    job_crud.remove(db, job_id)
    logger.info(f"Job {job_id} deleted by {admin_user.username}")
    return JobDeletedResponse(deleted=job_id)
