"""Job applications: seekers apply, employers screen."""

import logging

from sqlalchemy.orm import Session, joinedload, selectinload

from jobboard.db import Job, JobApplication, SeekerProfileRow
from jobboard.db.tables import utcnow
from jobboard.errors import JobBoardError, NotFound, PermissionDenied
from jobboard.navigation.pages import Page, page_to_path
from jobboard.services.jobs import require_owned_job
from jobboard.services.notifications import notify

logger = logging.getLogger(__name__)

APPLICATION_STATUSES = ("applied", "viewed", "shortlisted", "rejected")


def has_applied(db: Session, job_id: str, user_id: str) -> bool:
    return (
        db.query(JobApplication.id)
        .filter(JobApplication.job_id == job_id, JobApplication.user_id == user_id)
        .first()
        is not None
    )


def apply_to_job(db: Session, job_id: str, user_id: str, cover_letter: str = "") -> JobApplication:
    """Submit an application, attaching the seeker's resume."""
    job = db.get(Job, job_id)
    if not job or job.status != "active":
        raise NotFound("Job not found")
    if has_applied(db, job_id, user_id):
        raise JobBoardError("You have already applied to this job")

    profile = db.get(SeekerProfileRow, user_id)
    application = JobApplication(
        job_id=job_id,
        user_id=user_id,
        resume_url=profile.resume_url if profile else None,
        cover_letter=cover_letter or "",
        status="applied",
    )
    db.add(application)
    notify(
        db,
        job.employer_id,
        type="new_application",
        title=f"New application for {job.title}",
        message=f"{profile.full_name if profile else 'A candidate'} applied.",
        link=page_to_path(Page.APPLICANTS, {"job_id": job_id}),
        extra_data={"job_id": job_id},
    )
    db.commit()
    db.refresh(application)
    logger.info(f"Seeker {user_id} applied to job {job_id}")
    return application


def list_seeker_applications(db: Session, user_id: str, limit: int | None = None) -> list[JobApplication]:
    query = (
        db.query(JobApplication)
        .options(joinedload(JobApplication.job).joinedload(Job.employer))
        .filter(JobApplication.user_id == user_id)
        .order_by(JobApplication.created_at.desc())
    )
    if limit:
        query = query.limit(limit)
    return query.all()


def list_applicants(
    db: Session, job_id: str, employer_id: str, status: str | None = None
) -> tuple[Job, list[JobApplication]]:
    """Applications for one of the employer's jobs, newest first. `status="all"` means no filter."""
    job = require_owned_job(db, job_id, employer_id)
    query = (
        db.query(JobApplication)
        .options(
            joinedload(JobApplication.user_profile).selectinload(SeekerProfileRow.skills),
            joinedload(JobApplication.user_profile).selectinload(SeekerProfileRow.education),
            joinedload(JobApplication.user_profile).selectinload(SeekerProfileRow.certifications),
        )
        .filter(JobApplication.job_id == job_id)
    )
    if status and status != "all":
        query = query.filter(JobApplication.status == status)
    return job, query.order_by(JobApplication.created_at.desc()).all()


def _owned_application(db: Session, application_id: str, employer_id: str) -> JobApplication:
    application = (
        db.query(JobApplication)
        .options(joinedload(JobApplication.job))
        .filter(JobApplication.id == application_id)
        .first()
    )
    if not application:
        raise NotFound("Application not found")
    if application.job.employer_id != employer_id:
        raise PermissionDenied("You can only manage applications to your own jobs")
    return application


def update_application_status(db: Session, application_id: str, employer_id: str, status: str) -> JobApplication:
    if status not in APPLICATION_STATUSES:
        raise JobBoardError(f"Unknown application status: {status}")

    application = _owned_application(db, application_id, employer_id)
    if application.status != status:
        application.status = status
        application.updated_at = utcnow()
        notify(
            db,
            application.user_id,
            type="application_status",
            title=f"Application {status}",
            message=f"Your application for {application.job.title} is now {status}.",
            link=page_to_path(Page.JOB_DETAIL, {"job_id": application.job_id}),
            extra_data={"job_id": application.job_id, "status": status},
        )
    db.commit()
    db.refresh(application)
    return application


def save_employer_notes(db: Session, application_id: str, employer_id: str, notes: str) -> JobApplication:
    application = _owned_application(db, application_id, employer_id)
    application.employer_notes = notes
    application.updated_at = utcnow()
    db.commit()
    db.refresh(application)
    return application


def status_counts(applications: list[JobApplication]) -> dict[str, int]:
    counts = {status: 0 for status in APPLICATION_STATUSES}
    for application in applications:
        counts[application.status] = counts.get(application.status, 0) + 1
    return counts
