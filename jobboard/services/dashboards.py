"""Dashboard data for both roles."""

from sqlalchemy.orm import Session

from jobboard.db import JobApplication, SeekerProfileRow
from jobboard.services.applications import list_seeker_applications, status_counts
from jobboard.services.jobs import application_counts, employer_stats, list_active_jobs, list_employer_jobs

RECENT_APPLICATIONS = 5
RECOMMENDED_JOBS = 6


def seeker_dashboard(db: Session, user_id: str) -> dict:
    profile = db.get(SeekerProfileRow, user_id)
    all_statuses = db.query(JobApplication).filter(JobApplication.user_id == user_id).all()
    return {
        "applications": list_seeker_applications(db, user_id, limit=RECENT_APPLICATIONS),
        "recommended_jobs": list_active_jobs(db, limit=RECOMMENDED_JOBS),
        "status_counts": status_counts(all_statuses),
        "profile_completion": profile.profile_completion if profile else 0,
    }


def employer_dashboard(db: Session, employer_id: str) -> dict:
    jobs = list_employer_jobs(db, employer_id)
    counts = application_counts(db, [j.id for j in jobs])
    return {
        "jobs": jobs,
        "application_counts": counts,
        "stats": employer_stats(db, employer_id, jobs),
    }
