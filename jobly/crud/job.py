"""
CRUD operations for Job model.

Every function takes the request's database session as its first argument
and raises BadRequestError / NotFoundError instead of returning sentinels,
so the API layer only has to pass results through.
"""

import logging
from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from jobly.core.errors import BadRequestError, NotFoundError
from jobly.models.job import Job
from jobly.schemas.job import JobCreateRequest, JobUpdateRequest

logger = logging.getLogger(__name__)

# Fields a partial update may touch; id and company_handle are fixed at creation.
UPDATABLE_FIELDS = ("title", "salary", "equity")


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def create(db: Session, job_data: JobCreateRequest) -> Job:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        Created Job instance

    Raises:
        BadRequestError: If a job with the same id already exists
    """
    if db.get(Job, job_data.id) is not None:
        raise BadRequestError(f"Duplicate job: {job_data.id}")

    db_job = Job(
        id=job_data.id,
        title=job_data.title,
        salary=job_data.salary,
        equity=job_data.equity,
        company_handle=job_data.company_handle,
    )

    db.add(db_job)
    try:
        db.commit()
    except IntegrityError:
        # Another request inserted the same id after the check above
        db.rollback()
        raise BadRequestError(f"Duplicate job: {job_data.id}")
    db.refresh(db_job)

    logger.info(f"Created job {db_job.id}: {db_job.title} ({db_job.company_handle})")
    return db_job


def find_all(
    db: Session,
    title: Optional[str] = None,
    min_salary: Optional[int] = None,
    has_equity: Optional[bool] = None
) -> List[Job]:
    """
    Retrieve jobs matching the optional filters, ordered by title.

    Args:
        db: Database session
        title: Case-insensitive partial match on title
        min_salary: Only jobs paying at least this much
        has_equity: If true, only jobs offering a non-zero equity share

    Returns:
        List of Job instances (possibly empty)
    """
    query = db.query(Job)

    if min_salary:
        query = query.filter(Job.salary >= min_salary)

    if has_equity:
        query = query.filter(Job.equity > 0)

    if title:
        query = query.filter(Job.title.ilike(f"%{escape_like(title)}%", escape="\\"))

    jobs = query.order_by(Job.title).all()
    logger.debug(f"find_all(title={title!r}, min_salary={min_salary}, has_equity={has_equity}) -> {len(jobs)} jobs")
    return jobs


def get(db: Session, title: str) -> Job:
    """
    Retrieve a job by its exact title.

    Raises:
        NotFoundError: If no job has that title
    """
    job = db.query(Job).filter(Job.title == title).order_by(Job.id).first()

    if not job:
        raise NotFoundError(f"No job: {title}")

    return job


def get_by_id(db: Session, job_id: int) -> Job:
    """
    Retrieve a job by its ID.

    Raises:
        NotFoundError: If no job has that id
    """
    job = db.get(Job, job_id)

    if not job:
        raise NotFoundError(f"No job: {job_id}")

    return job


def update(db: Session, job_id: int, patch: JobUpdateRequest) -> Job:
    """
    Partial update: only the fields present in the request change.

    Args:
        db: Database session
        job_id: Job ID to update
        patch: Validated subset of {title, salary, equity}

    Returns:
        Updated Job instance

    Raises:
        BadRequestError: If the patch carries no fields
        NotFoundError: If no job has that id
    """
    changes = patch.model_dump(include=set(UPDATABLE_FIELDS), exclude_unset=True)
    if not changes:
        raise BadRequestError("No data")

    job = get_by_id(db, job_id)

    for field, value in changes.items():
        setattr(job, field, value)

    db.commit()
    db.refresh(job)

    logger.info(f"Updated job {job_id}: {sorted(changes)}")
    return job


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: If no job has that id
    """
    deleted = db.query(Job).filter(Job.id == job_id).delete(synchronize_session="fetch")

    if not deleted:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    logger.info(f"Deleted job {job_id}")
