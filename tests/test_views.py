"""Tests for view composition and header links."""

from types import SimpleNamespace

import pytest

from jobboard.auth import Role
from jobboard.navigation.controller import PageState
from jobboard.navigation.guard import ANONYMOUS, AuthState
from jobboard.navigation.pages import Page
from jobboard.navigation.views import compose_shell, compose_view, header_links
from jobboard.session import SessionStatus


class TestComposeView:
    def test_dashboard_depends_on_role(self) -> None:
        assert compose_view(Page.DASHBOARD, Role.EMPLOYER).name == "employer-dashboard"
        assert compose_view(Page.DASHBOARD, Role.SEEKER).name == "seeker-dashboard"
        assert compose_view(Page.DASHBOARD, None).name == "seeker-dashboard"

    @pytest.mark.parametrize("page", list(Page))
    def test_every_page_has_a_view(self, page: Page) -> None:
        view = compose_view(page, Role.EMPLOYER, {"job_id": "7"})
        assert view.name
        assert view.page == page

    def test_auth_pages_render_bare(self) -> None:
        assert compose_view(Page.LOGIN, None).show_chrome is False
        assert compose_view(Page.SIGNUP, None).show_chrome is False
        assert compose_view(Page.JOBS, None).show_chrome is True

    def test_job_detail_view_carries_job(self) -> None:
        view = compose_view(Page.JOB_DETAIL, Role.SEEKER, {"job_id": "7"})
        assert view.name == "job-detail"
        assert view.params == {"job_id": "7"}
        assert view.path == "/jobs/7"

    def test_unknown_page_falls_back_to_landing(self) -> None:
        assert compose_view("nowhere", None).name == "landing"


class TestComposeShell:
    def _context(self, status: SessionStatus, role: Role | None = None, error: str | None = None):  # type: ignore[no-untyped-def]
        return SimpleNamespace(status=status, role=role, error=error)

    def test_loading(self) -> None:
        view = compose_shell(self._context(SessionStatus.LOADING), PageState(Page.DASHBOARD))
        assert view.name == "loading"

    def test_undetermined_role_is_an_error_view(self) -> None:
        view = compose_shell(self._context(SessionStatus.UNDETERMINED), PageState(Page.DASHBOARD))
        assert view.name == "account-error"
        assert "no seeker or employer profile" in view.message

    def test_store_error(self) -> None:
        view = compose_shell(self._context(SessionStatus.ERROR, error="boom"), PageState(Page.PROFILE))
        assert view.name == "error"
        assert view.message == "boom"

    def test_ready_uses_page_view(self) -> None:
        view = compose_shell(self._context(SessionStatus.READY, Role.EMPLOYER), PageState(Page.DASHBOARD))
        assert view.name == "employer-dashboard"


class TestHeaderLinks:
    def test_anonymous(self) -> None:
        links = header_links(ANONYMOUS)
        assert [link.page for link in links] == [Page.JOBS, Page.LOGIN, Page.SIGNUP]

    def test_seeker(self) -> None:
        links = header_links(AuthState(is_authenticated=True, role=Role.SEEKER))
        assert Page.DASHBOARD in [link.page for link in links]
        assert Page.LOGIN not in [link.page for link in links]

    def test_employer_dashboard_link(self) -> None:
        links = header_links(AuthState(is_authenticated=True, role=Role.EMPLOYER))
        dashboard = next(link for link in links if link.label == "Dashboard")
        assert dashboard.page == Page.EMPLOYER_DASHBOARD
