"""Dashboard endpoint. The same page serves both roles with different views."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobboard.api.deps import require_context
from jobboard.api.routes.applications import seeker_application_response
from jobboard.api.routes.jobs import job_to_response
from jobboard.api.schemas import EmployerDashboardResponse, EmployerStats, SeekerDashboardResponse
from jobboard.auth import Role
from jobboard.db import get_db
from jobboard.navigation.pages import Page
from jobboard.navigation.views import compose_view
from jobboard.services import dashboards
from jobboard.session import AppContext

router = APIRouter()


@router.get("", response_model=SeekerDashboardResponse | EmployerDashboardResponse)
def get_dashboard(
    context: AppContext = Depends(require_context),
    db: Session = Depends(get_db),
):
    view = compose_view(Page.DASHBOARD, context.role).name

    if context.role == Role.EMPLOYER:
        data = dashboards.employer_dashboard(db, context.identity.id)
        counts = data["application_counts"]
        return EmployerDashboardResponse(
            view=view,
            jobs=[job_to_response(j, application_count=counts.get(j.id, 0)) for j in data["jobs"]],
            stats=EmployerStats(**data["stats"]),
        )

    data = dashboards.seeker_dashboard(db, context.identity.id)
    return SeekerDashboardResponse(
        view=view,
        applications=[seeker_application_response(a) for a in data["applications"]],
        recommended_jobs=[job_to_response(j) for j in data["recommended_jobs"]],
        status_counts=data["status_counts"],
        profile_completion=data["profile_completion"],
    )
