"""
Page registry: the fixed page identifiers and their URL paths.

Job-bearing pages carry the job id in the path, so a reload keeps its
context. Asked for a path without a job id, those pages collapse onto their
collection path (`/jobs`, `/employer`), which maps back to the collection
page; that is the one lossy case in the table.
"""

import re
from enum import Enum
from urllib.parse import quote, unquote, urlsplit


class Page(str, Enum):
    LANDING = "landing"
    LOGIN = "login"
    SIGNUP = "signup"
    FORGOT_PASSWORD = "forgot-password"
    DASHBOARD = "dashboard"
    PROFILE = "profile"
    JOBS = "jobs"
    JOB_DETAIL = "job-detail"
    EMPLOYER_DASHBOARD = "employer-dashboard"
    POST_JOB = "post-job"
    APPLICANTS = "applicants"
    NOTIFICATIONS = "notifications"


# Page -> path template. Order matters for reverse lookup: the first match wins.
PAGE_PATHS: dict[Page, str] = {
    Page.LANDING: "/",
    Page.LOGIN: "/login",
    Page.SIGNUP: "/signup",
    Page.FORGOT_PASSWORD: "/forgot-password",
    Page.DASHBOARD: "/dashboard",
    Page.PROFILE: "/profile",
    Page.JOBS: "/jobs",
    Page.JOB_DETAIL: "/jobs/{job_id}",
    Page.EMPLOYER_DASHBOARD: "/employer",
    Page.POST_JOB: "/employer/post-job",
    Page.APPLICANTS: "/employer/jobs/{job_id}/applicants",
    Page.NOTIFICATIONS: "/notifications",
}

# Where a job-bearing page lands when no job id is supplied
COLLECTION_FALLBACK: dict[Page, Page] = {
    Page.JOB_DETAIL: Page.JOBS,
    Page.APPLICANTS: Page.EMPLOYER_DASHBOARD,
}

_PARAM_RE = re.compile(r"\{(\w+)\}")


def _compile(template: str) -> re.Pattern:
    pattern = ""
    last = 0
    for match in _PARAM_RE.finditer(template):
        pattern += re.escape(template[last : match.start()])
        pattern += f"(?P<{match.group(1)}>[^/]+)"
        last = match.end()
    pattern += re.escape(template[last:])
    return re.compile(f"^{pattern}$")


_PATH_PATTERNS: list[tuple[Page, re.Pattern]] = [
    (page, _compile(template)) for page, template in PAGE_PATHS.items()
]


def coerce_page(value) -> Page | None:
    """Return the Page for an enum member or identifier string, or None if unknown."""
    if isinstance(value, Page):
        return value
    try:
        return Page(value)
    except ValueError:
        return None


def pages_requiring_job_id() -> frozenset[Page]:
    return frozenset(page for page, template in PAGE_PATHS.items() if "{job_id}" in template)


def page_to_path(page: Page, params: dict | None = None) -> str:
    """Translate a page (and its params) into a URL path."""
    params = params or {}
    template = PAGE_PATHS[page]
    names = _PARAM_RE.findall(template)
    if any(not params.get(name) for name in names):
        return PAGE_PATHS[COLLECTION_FALLBACK[page]]
    return _PARAM_RE.sub(lambda m: quote(str(params[m.group(1)]), safe=""), template)


def path_to_page(path: str) -> tuple[Page, dict]:
    """
    Translate a URL path into a page and its params.

    Query strings, fragments and trailing slashes are ignored. Unknown
    paths resolve to the landing page.
    """
    path = urlsplit(path or "/").path or "/"
    if len(path) > 1:
        path = path.rstrip("/") or "/"

    for page, pattern in _PATH_PATTERNS:
        match = pattern.match(path)
        if match:
            return page, {name: unquote(value) for name, value in match.groupdict().items()}
    return Page.LANDING, {}
