import logging
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobtracker.core.auth import IdentityContext
from jobtracker.core.database import get_db
from jobtracker.core.deps import is_authorized
from jobtracker.schemas.job import JobCreateRequest, JobUpdateRequest
from jobtracker.schemas.response import PaginationMeta, success_response
from jobtracker.services import job_service

router = APIRouter(prefix="/jobs", tags=["Job"])
logger = logging.getLogger(__name__)

MAX_LIMIT = 100
# Keeps (page - 1) * limit within a signed 64-bit OFFSET
MAX_PAGE = 2**63 // MAX_LIMIT


@router.get("")
def list_jobs(
    page: int = Query(1, ge=1, le=MAX_PAGE, description="Page number, starting at 1"),
    limit: int = Query(10, ge=1, le=MAX_LIMIT, description="Jobs per page"),
    db: Session = Depends(get_db),
    identity: IdentityContext = Depends(is_authorized(["user"])),
):
    """
    Retrieve a page of jobs.

    The `metadata` field carries total, page, limit and totalPages.
    """
    result = job_service.list_paginated(db, page, limit)
    metadata = PaginationMeta.from_total(result.total, page, limit)

    return success_response(result.jobs, "Jobs Retrieved", metadata)


@router.get("/{job_id}")
def get_job(
    job_id: str,
    db: Session = Depends(get_db),
    identity: IdentityContext = Depends(is_authorized(["user"])),
):
    """Retrieve a job by its ID."""
    job = job_service.get_by_id(db, job_id)
    return success_response(job, "Job Retrieved")


@router.post("", status_code=201)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db),
    identity: IdentityContext = Depends(is_authorized(["user"])),
):
    """Create a new job posting. The id is assigned by the store."""
    new_job = job_service.create(db, request)
    logger.info(f"User {identity.uid} created job {new_job.id}")

    return success_response(new_job, "Job Created")


@router.put("/{job_id}")
def update_job(
    job_id: str,
    request: JobUpdateRequest,
    db: Session = Depends(get_db),
    identity: IdentityContext = Depends(is_authorized(["user"])),
):
    """
    Update a job by ID.

    Only the fields present in the body are changed. The response echoes the
    submitted fields with the id; it is not re-read from the store.
    """
    updated_job = job_service.update(db, job_id, request)
    return success_response(updated_job, "Job Updated")


@router.delete("/{job_id}")
def delete_job(
    job_id: str,
    db: Session = Depends(get_db),
    identity: IdentityContext = Depends(is_authorized(["user"])),
):
    """Delete a job by ID."""
    job_service.delete(db, job_id)
    logger.info(f"User {identity.uid} deleted job {job_id}")

    return success_response(message="Job Deleted")
