"""Tests for the navigation guard."""

import pytest

from jobboard.auth import Role
from jobboard.navigation.guard import ANONYMOUS, EMPLOYER_PAGES, PUBLIC_PAGES, AuthState, guard
from jobboard.navigation.pages import Page

SEEKER = AuthState(is_authenticated=True, role=Role.SEEKER)
EMPLOYER = AuthState(is_authenticated=True, role=Role.EMPLOYER)
NO_ROLE = AuthState(is_authenticated=True, role=None)

# (requested, anonymous, seeker, employer)
EXPECTED = [
    (Page.LANDING, Page.LANDING, Page.LANDING, Page.LANDING),
    (Page.LOGIN, Page.LOGIN, Page.LOGIN, Page.LOGIN),
    (Page.SIGNUP, Page.SIGNUP, Page.SIGNUP, Page.SIGNUP),
    (Page.FORGOT_PASSWORD, Page.FORGOT_PASSWORD, Page.FORGOT_PASSWORD, Page.FORGOT_PASSWORD),
    (Page.JOBS, Page.JOBS, Page.JOBS, Page.JOBS),
    (Page.JOB_DETAIL, Page.JOB_DETAIL, Page.JOB_DETAIL, Page.JOB_DETAIL),
    (Page.DASHBOARD, Page.LOGIN, Page.DASHBOARD, Page.DASHBOARD),
    (Page.PROFILE, Page.LOGIN, Page.PROFILE, Page.PROFILE),
    (Page.NOTIFICATIONS, Page.LOGIN, Page.NOTIFICATIONS, Page.NOTIFICATIONS),
    (Page.EMPLOYER_DASHBOARD, Page.LOGIN, Page.DASHBOARD, Page.EMPLOYER_DASHBOARD),
    (Page.POST_JOB, Page.LOGIN, Page.DASHBOARD, Page.POST_JOB),
    (Page.APPLICANTS, Page.LOGIN, Page.DASHBOARD, Page.APPLICANTS),
]


class TestGuardTable:
    def test_table_covers_every_page(self) -> None:
        assert {row[0] for row in EXPECTED} == set(Page)

    @pytest.mark.parametrize("requested,anonymous,seeker,employer", EXPECTED)
    def test_each_page_and_role(self, requested, anonymous, seeker, employer) -> None:  # type: ignore[no-untyped-def]
        assert guard(requested, ANONYMOUS) == anonymous
        assert guard(requested, SEEKER) == seeker
        assert guard(requested, EMPLOYER) == employer


class TestGuardProperties:
    @pytest.mark.parametrize("page", list(Page))
    def test_anonymous_only_reaches_public_pages(self, page: Page) -> None:
        result = guard(page, ANONYMOUS)
        assert result in PUBLIC_PAGES
        if page not in PUBLIC_PAGES:
            assert result == Page.LOGIN

    @pytest.mark.parametrize("page", sorted(EMPLOYER_PAGES))
    def test_signed_in_without_role_kept_off_employer_pages(self, page: Page) -> None:
        assert guard(page, NO_ROLE) == Page.DASHBOARD

    @pytest.mark.parametrize("page", list(Page))
    def test_idempotent(self, page: Page) -> None:
        for state in (ANONYMOUS, SEEKER, EMPLOYER, NO_ROLE):
            once = guard(page, state)
            assert guard(once, state) == once

    def test_accepts_identifier_strings(self) -> None:
        assert guard("post-job", EMPLOYER) == Page.POST_JOB
        assert guard("profile", ANONYMOUS) == Page.LOGIN

    def test_unknown_page_is_landing(self) -> None:
        assert guard("admin", EMPLOYER) == Page.LANDING
        assert guard(None, ANONYMOUS) == Page.LANDING
