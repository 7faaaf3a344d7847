"""Authorization guard: the policy every navigation request passes through."""

from dataclasses import dataclass

from jobboard.auth.roles import Role
from jobboard.navigation.pages import Page, coerce_page

# Reachable without signing in
PUBLIC_PAGES = frozenset(
    {
        Page.LANDING,
        Page.LOGIN,
        Page.SIGNUP,
        Page.FORGOT_PASSWORD,
        Page.JOBS,
        Page.JOB_DETAIL,
    }
)

EMPLOYER_PAGES = frozenset({Page.EMPLOYER_DASHBOARD, Page.POST_JOB, Page.APPLICANTS})


@dataclass(frozen=True)
class AuthState:
    is_authenticated: bool = False
    role: Role | None = None


ANONYMOUS = AuthState()


def guard(requested_page, auth_state: AuthState) -> Page:
    """
    Resolve a requested page against the caller's authentication state.

    1. Signed-out callers asking for a non-public page get the login page.
    2. Non-employers asking for an employer page get the dashboard.
    3. Anything else is allowed.

    Unknown page identifiers are treated as the landing page.
    """
    page = coerce_page(requested_page) or Page.LANDING

    if not auth_state.is_authenticated and page not in PUBLIC_PAGES:
        return Page.LOGIN
    if page in EMPLOYER_PAGES and auth_state.role != Role.EMPLOYER:
        return Page.DASHBOARD
    return page
