"""Application endpoints for seekers (own applications) and employers (screening)."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobboard.api.deps import require_employer, require_seeker
from jobboard.api.routes.jobs import job_to_response
from jobboard.api.schemas import (
    ApplicantResponse,
    ApplicantsResponse,
    ApplicationResponse,
    CertificationResponse,
    EducationResponse,
    JobListResponse,
    NotesUpdate,
    SeekerApplicationResponse,
    StatusUpdate,
)
from jobboard.auth.roles import SeekerProfile
from jobboard.db import JobApplication, get_db
from jobboard.services import applications as application_service
from jobboard.services import jobs as job_service
from jobboard.session import AppContext

router = APIRouter()
employer_router = APIRouter()


def seeker_application_response(application: JobApplication) -> SeekerApplicationResponse:
    base = ApplicationResponse.model_validate(application)
    return SeekerApplicationResponse(
        **base.model_dump(),
        job=job_to_response(application.job) if application.job else None,
    )


def applicant_response(application: JobApplication) -> ApplicantResponse:
    base = ApplicationResponse.model_validate(application)
    profile = application.user_profile
    return ApplicantResponse(
        **base.model_dump(),
        user_profile=SeekerProfile.model_validate(profile) if profile else None,
        skills=[us.skill.name for us in profile.skills] if profile else [],
        education=[EducationResponse.model_validate(e) for e in profile.education] if profile else [],
        certifications=[CertificationResponse.model_validate(c) for c in profile.certifications] if profile else [],
    )


@router.get("", response_model=list[SeekerApplicationResponse])
def list_my_applications(
    limit: int | None = Query(default=None, ge=1, le=100),
    context: AppContext = Depends(require_seeker),
    db: Session = Depends(get_db),
):
    """The seeker's applications, newest first."""
    applications = application_service.list_seeker_applications(db, context.identity.id, limit=limit)
    return [seeker_application_response(a) for a in applications]


@router.patch("/{application_id}/status", response_model=ApplicationResponse)
def update_status(
    application_id: str,
    data: StatusUpdate,
    context: AppContext = Depends(require_employer),
    db: Session = Depends(get_db),
):
    """Move an application to viewed, shortlisted or rejected."""
    application = application_service.update_application_status(
        db, application_id, context.identity.id, data.status
    )
    return ApplicationResponse.model_validate(application)


@router.put("/{application_id}/notes", response_model=ApplicationResponse)
def save_notes(
    application_id: str,
    data: NotesUpdate,
    context: AppContext = Depends(require_employer),
    db: Session = Depends(get_db),
):
    """Save the employer's private notes on an applicant."""
    application = application_service.save_employer_notes(db, application_id, context.identity.id, data.notes)
    return ApplicationResponse.model_validate(application)


@employer_router.get("/jobs", response_model=JobListResponse)
def list_my_jobs(
    context: AppContext = Depends(require_employer),
    db: Session = Depends(get_db),
):
    """All of the employer's jobs (any status) with application counts."""
    jobs = job_service.list_employer_jobs(db, context.identity.id)
    counts = job_service.application_counts(db, [j.id for j in jobs])
    return JobListResponse(
        jobs=[job_to_response(j, application_count=counts.get(j.id, 0)) for j in jobs],
        total=len(jobs),
    )


@employer_router.get("/jobs/{job_id}/applicants", response_model=ApplicantsResponse)
def list_applicants(
    job_id: str,
    status: str = Query(default="all", description="all/applied/viewed/shortlisted/rejected"),
    context: AppContext = Depends(require_employer),
    db: Session = Depends(get_db),
):
    """Applicants for one of the employer's jobs."""
    job, applications = application_service.list_applicants(db, job_id, context.identity.id, status)
    _, everyone = application_service.list_applicants(db, job_id, context.identity.id)
    return ApplicantsResponse(
        job=job_to_response(job),
        applications=[applicant_response(a) for a in applications],
        status_counts=application_service.status_counts(everyone),
    )
