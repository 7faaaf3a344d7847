"""
Job postings.

Posting a job writes the job and its skill links in a single transaction:
if any skill link fails, the job is rolled back with it.
"""

import logging

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload, selectinload

from jobboard.db import Job, JobApplication, JobSkill
from jobboard.db.tables import utcnow
from jobboard.errors import NotFound, PermissionDenied, StoreError
from jobboard.search import JobCriteria, filter_jobs
from jobboard.services.skills import get_or_create_skill, unique_names

logger = logging.getLogger(__name__)

JOB_STATUSES = ("active", "paused", "closed")


def list_active_jobs(db: Session, limit: int | None = None) -> list[Job]:
    """Active jobs, newest first, with their employer loaded."""
    query = (
        db.query(Job)
        .options(joinedload(Job.employer))
        .filter(Job.status == "active")
        .order_by(Job.created_at.desc())
    )
    if limit:
        query = query.limit(limit)
    return query.all()


def search_jobs(db: Session, criteria: JobCriteria | None = None) -> list[Job]:
    """Filter a snapshot of the active jobs."""
    return filter_jobs(list_active_jobs(db), criteria)


def get_job(db: Session, job_id: str, viewer_id: str | None = None) -> Job:
    """
    Load a job with employer and skills.

    Paused and closed jobs are only visible to the employer who owns them.
    """
    job = (
        db.query(Job)
        .options(
            joinedload(Job.employer),
            selectinload(Job.job_skills).joinedload(JobSkill.skill),
        )
        .filter(Job.id == job_id)
        .first()
    )
    if not job or (job.status != "active" and job.employer_id != viewer_id):
        raise NotFound("Job not found")
    return job


def require_owned_job(db: Session, job_id: str, employer_id: str) -> Job:
    job = db.get(Job, job_id)
    if not job:
        raise NotFound("Job not found")
    if job.employer_id != employer_id:
        raise PermissionDenied("You can only manage your own jobs")
    return job


def post_job(db: Session, employer_id: str, data: dict, skills: list[str] | None = None) -> Job:
    """Create an active job and link its skills, all or nothing."""
    try:
        job = Job(employer_id=employer_id, status="active", **data)
        db.add(job)
        db.flush()

        for name in unique_names(skills or []):
            skill = get_or_create_skill(db, name)
            db.add(JobSkill(job_id=job.id, skill_id=skill.id, required=True))

        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Posting job for employer {employer_id} failed, rolled back: {e}")
        raise StoreError("Failed to post job") from e

    logger.info(f"Employer {employer_id} posted job {job.id}")
    return get_job(db, job.id, viewer_id=employer_id)


def toggle_job_status(db: Session, job_id: str, employer_id: str) -> Job:
    """Active jobs are paused; paused or closed jobs are re-activated."""
    job = require_owned_job(db, job_id, employer_id)
    job.status = "paused" if job.status == "active" else "active"
    job.updated_at = utcnow()
    db.commit()
    db.refresh(job)
    return job


def delete_job(db: Session, job_id: str, employer_id: str) -> None:
    """Delete a job together with its applications and skill links."""
    job = require_owned_job(db, job_id, employer_id)
    db.delete(job)
    db.commit()
    logger.info(f"Employer {employer_id} deleted job {job_id}")


def list_employer_jobs(db: Session, employer_id: str) -> list[Job]:
    return (
        db.query(Job)
        .filter(Job.employer_id == employer_id)
        .order_by(Job.created_at.desc())
        .all()
    )


def application_counts(db: Session, job_ids: list[str]) -> dict[str, int]:
    if not job_ids:
        return {}
    rows = (
        db.query(JobApplication.job_id, func.count(JobApplication.id))
        .filter(JobApplication.job_id.in_(job_ids))
        .group_by(JobApplication.job_id)
        .all()
    )
    return {job_id: count for job_id, count in rows}


def employer_stats(db: Session, employer_id: str, jobs: list[Job] | None = None) -> dict:
    if jobs is None:
        jobs = list_employer_jobs(db, employer_id)
    job_ids = [j.id for j in jobs]

    total_applications = 0
    shortlisted = 0
    if job_ids:
        statuses = (
            db.query(JobApplication.status)
            .filter(JobApplication.job_id.in_(job_ids))
            .all()
        )
        total_applications = len(statuses)
        shortlisted = sum(1 for (status,) in statuses if status == "shortlisted")

    return {
        "total_jobs": len(jobs),
        "active_jobs": sum(1 for j in jobs if j.status == "active"),
        "total_applications": total_applications,
        "shortlisted": shortlisted,
    }
