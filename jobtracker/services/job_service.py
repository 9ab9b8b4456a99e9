"""
Job service.

Orchestrates job CRUD and pagination over the document store. Documents live
in the `jobs` collection; the store id becomes `Job.id`.
"""

import logging
from typing import Any, Dict, List
from sqlalchemy.orm import Session

from jobtracker.core.exceptions import NotFoundError
from jobtracker.crud import document as document_crud
from jobtracker.schemas.job import Job, JobCreateRequest, JobPage, JobUpdateRequest

COLLECTION = "jobs"

logger = logging.getLogger(__name__)


def _not_found(job_id: str) -> NotFoundError:
    return NotFoundError(f"Job with ID {job_id} not found", code="JOB_NOT_FOUND")


def list_all(db: Session) -> List[Job]:
    """Return every job, unfiltered."""
    documents = document_crud.get_all(db, COLLECTION)
    return [Job.model_validate(doc) for doc in documents]


def list_paginated(db: Session, page: int, limit: int) -> JobPage:
    """
    Return one page of jobs and the total number of jobs.

    Pages are 1-based. The page and the count are two separate reads, so a
    write landing between them can make `total` disagree with the page.

    Args:
        db: Database session
        page: Page number, starting at 1
        limit: Page size
    """
    offset = (page - 1) * limit
    documents = document_crud.get_page(db, COLLECTION, limit=limit, offset=offset)
    total = document_crud.count(db, COLLECTION)

    return JobPage(
        jobs=[Job.model_validate(doc) for doc in documents],
        total=total,
    )


def get_by_id(db: Session, job_id: str) -> Job:
    """
    Retrieve a job by its ID.

    Raises:
        NotFoundError: If the job does not exist
    """
    doc = document_crud.get_by_id(db, COLLECTION, job_id)
    if doc is None:
        raise _not_found(job_id)
    return Job.model_validate(doc)


def create(db: Session, job_in: JobCreateRequest) -> Job:
    """
    Create a job.

    The store assigns the id. The returned job is the submitted payload with
    that id merged in; timestamps the store adds are only visible on reads.
    """
    payload = job_in.model_dump(mode="json", by_alias=True, exclude_none=True)
    job_id = document_crud.create(db, COLLECTION, payload)

    logger.info(f"Created job {job_id}: {job_in.title} at {job_in.company}")
    return Job.model_validate({"id": job_id, **payload})


def update(db: Session, job_id: str, job_in: JobUpdateRequest) -> Dict[str, Any]:
    """
    Merge the supplied fields into an existing job.

    Returns {"id": job_id, **supplied_fields}; the store is not re-read, so
    any values the store computes on write are not reflected.

    Raises:
        NotFoundError: If the job does not exist
    """
    fields = job_in.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if not document_crud.update(db, COLLECTION, job_id, fields):
        raise _not_found(job_id)

    logger.info(f"Updated job {job_id}: {sorted(fields)}")
    return {"id": job_id, **fields}


def delete(db: Session, job_id: str) -> None:
    """Delete a job. Deleting a job that does not exist is a no-op."""
    deleted = document_crud.delete(db, COLLECTION, job_id)
    if deleted:
        logger.info(f"Deleted job {job_id}")
    else:
        logger.info(f"Delete requested for missing job {job_id}")
