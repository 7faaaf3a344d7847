"""Job endpoints: search, detail, apply, post and manage."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from jobboard.api.deps import get_context, require_employer, require_seeker
from jobboard.api.schemas import (
    ApplicationResponse,
    ApplyRequest,
    EmployerSummary,
    JobCreate,
    JobDetailResponse,
    JobListResponse,
    JobResponse,
)
from jobboard.auth import Role
from jobboard.auth.roles import EmployerProfile
from jobboard.db import Job, get_db
from jobboard.navigation.pages import Page, page_to_path
from jobboard.search import JobCriteria
from jobboard.services import applications as application_service
from jobboard.services import jobs as job_service
from jobboard.session import AppContext

router = APIRouter()

JOB_FIELDS = (
    "id",
    "employer_id",
    "title",
    "description",
    "industry_category",
    "job_role",
    "location",
    "job_type",
    "shift_type",
    "experience_min",
    "experience_max",
    "salary_min",
    "salary_max",
    "salary_currency",
    "is_urgent",
    "is_featured",
    "status",
    "created_at",
    "updated_at",
)


def job_to_response(job: Job, include_skills: bool = False, application_count: int | None = None) -> JobResponse:
    return JobResponse(
        **{name: getattr(job, name) for name in JOB_FIELDS},
        employer=EmployerSummary.model_validate(job.employer) if job.employer else None,
        skills=[js.skill.name for js in job.job_skills] if include_skills else [],
        application_count=application_count,
    )


@router.get("", response_model=JobListResponse)
def search_jobs(
    text: str | None = Query(default=None, alias="q"),
    location: str | None = None,
    industry: str | None = None,
    job_type: str | None = None,
    shift_type: str | None = None,
    experience_min: int | None = None,
    experience_max: int | None = None,
    db: Session = Depends(get_db),
):
    """List active jobs, narrowed by the search form criteria."""
    criteria = JobCriteria(
        text=text,
        location=location,
        industry=industry,
        job_type=job_type,
        shift_type=shift_type,
        experience_min=experience_min,
        experience_max=experience_max,
    )
    jobs = job_service.search_jobs(db, criteria)
    return JobListResponse(jobs=[job_to_response(j) for j in jobs], total=len(jobs))


@router.get("/{job_id}", response_model=JobDetailResponse)
def get_job(
    job_id: str,
    context: AppContext = Depends(get_context),
    db: Session = Depends(get_db),
):
    """Job detail. Seekers also learn whether they have applied already."""
    viewer_id = context.identity.id if context.identity else None
    job = job_service.get_job(db, job_id, viewer_id=viewer_id)

    has_applied = False
    if context.role == Role.SEEKER:
        has_applied = application_service.has_applied(db, job_id, viewer_id)

    return JobDetailResponse(
        job=job_to_response(job, include_skills=True),
        employer=EmployerProfile.model_validate(job.employer) if job.employer else None,
        has_applied=has_applied,
        path=page_to_path(Page.JOB_DETAIL, {"job_id": job.id}),
    )


@router.post("/{job_id}/apply", response_model=ApplicationResponse)
def apply(
    job_id: str,
    data: ApplyRequest | None = None,
    context: AppContext = Depends(require_seeker),
    db: Session = Depends(get_db),
):
    """Apply to a job with an optional cover letter."""
    application = application_service.apply_to_job(
        db, job_id, context.identity.id, cover_letter=data.cover_letter if data else ""
    )
    return ApplicationResponse.model_validate(application)


@router.post("", response_model=JobResponse, status_code=201)
def post_job(
    data: JobCreate,
    context: AppContext = Depends(require_employer),
    db: Session = Depends(get_db),
):
    """Post a new job with its skills."""
    fields = data.model_dump(exclude={"skills"})
    job = job_service.post_job(db, context.identity.id, fields, data.skills)
    return job_to_response(job, include_skills=True)


@router.post("/{job_id}/toggle-status", response_model=JobResponse)
def toggle_status(
    job_id: str,
    context: AppContext = Depends(require_employer),
    db: Session = Depends(get_db),
):
    """Pause an active job, or re-activate a paused one."""
    job = job_service.toggle_job_status(db, job_id, context.identity.id)
    return job_to_response(job)


@router.delete("/{job_id}")
def delete_job(
    job_id: str,
    context: AppContext = Depends(require_employer),
    db: Session = Depends(get_db),
):
    """Delete a job and everything attached to it."""
    job_service.delete_job(db, job_id, context.identity.id)
    return {"message": "Job deleted"}
