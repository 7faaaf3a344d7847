"""View composition: which screen the shell renders for a page and role."""

from __future__ import annotations

from pydantic import BaseModel, Field

from jobboard.auth.roles import Role
from jobboard.navigation.controller import PageState
from jobboard.navigation.guard import AuthState
from jobboard.navigation.pages import Page, coerce_page, page_to_path
from jobboard.session import AppContext, SessionStatus

VIEW_NAMES: dict[Page, str] = {
    Page.LANDING: "landing",
    Page.LOGIN: "login",
    Page.SIGNUP: "signup",
    Page.FORGOT_PASSWORD: "forgot-password",
    Page.PROFILE: "profile",
    Page.JOBS: "job-search",
    Page.JOB_DETAIL: "job-detail",
    Page.EMPLOYER_DASHBOARD: "employer-dashboard",
    Page.POST_JOB: "post-job",
    Page.APPLICANTS: "applicants",
    Page.NOTIFICATIONS: "notifications",
}

# Auth screens render without header and footer
BARE_PAGES = frozenset({Page.LOGIN, Page.SIGNUP})


class ViewDescriptor(BaseModel):
    name: str
    page: Page
    params: dict = Field(default_factory=dict)
    path: str = "/"
    show_chrome: bool = True
    message: str | None = None


class NavLink(BaseModel):
    label: str
    page: Page


def compose_view(page, role: Role | None, params: dict | None = None) -> ViewDescriptor:
    """
    Pick the view for a page.

    The dashboard is the one page whose view depends on role: employers get
    the employer dashboard, everyone else the seeker dashboard. Unknown
    pages fall back to the landing view so the shell is never blank.
    """
    resolved = coerce_page(page) or Page.LANDING
    params = dict(params or {})

    if resolved == Page.DASHBOARD:
        name = "employer-dashboard" if role == Role.EMPLOYER else "seeker-dashboard"
    else:
        name = VIEW_NAMES[resolved]

    return ViewDescriptor(
        name=name,
        page=resolved,
        params=params,
        path=page_to_path(resolved, params),
        show_chrome=resolved not in BARE_PAGES,
    )


def compose_shell(context: AppContext, state: PageState) -> ViewDescriptor:
    """Compose the whole shell, surfacing session faults as their own views."""
    if context.status == SessionStatus.LOADING:
        return ViewDescriptor(name="loading", page=state.page, path=page_to_path(state.page, state.params))
    if context.status == SessionStatus.UNDETERMINED:
        return ViewDescriptor(
            name="account-error",
            page=state.page,
            path=page_to_path(state.page, state.params),
            message="Your account has no seeker or employer profile. Please contact support.",
        )
    if context.status == SessionStatus.ERROR:
        return ViewDescriptor(
            name="error",
            page=state.page,
            path=page_to_path(state.page, state.params),
            message=context.error or "Could not load your account. Try again.",
        )
    return compose_view(state.page, context.role, state.params)


def header_links(auth_state: AuthState) -> list[NavLink]:
    if not auth_state.is_authenticated:
        return [
            NavLink(label="Find Jobs", page=Page.JOBS),
            NavLink(label="Sign In", page=Page.LOGIN),
            NavLink(label="Get Started", page=Page.SIGNUP),
        ]

    dashboard = Page.EMPLOYER_DASHBOARD if auth_state.role == Role.EMPLOYER else Page.DASHBOARD
    return [
        NavLink(label="Jobs", page=Page.JOBS),
        NavLink(label="Dashboard", page=dashboard),
        NavLink(label="Notifications", page=Page.NOTIFICATIONS),
        NavLink(label="Profile", page=Page.PROFILE),
    ]
