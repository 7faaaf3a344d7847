"""
Navigation controller.

Owns the current page and its params. Every transition, whether requested
by the user or arriving from the URL bar (reload, back, forward), passes
through the authorization guard before it is committed.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from jobboard.navigation.guard import ANONYMOUS, AuthState, guard
from jobboard.navigation.pages import (
    Page,
    page_to_path,
    pages_requiring_job_id,
    path_to_page,
)

logger = logging.getLogger(__name__)

JOB_ID_PAGES = pages_requiring_job_id()


@dataclass(frozen=True)
class PageState:
    page: Page = Page.LANDING
    params: dict = field(default_factory=dict)

    @property
    def job_id(self) -> str | None:
        return self.params.get("job_id")


class History:
    """In-memory browser history: a stack of paths with a cursor."""

    def __init__(self, initial_path: str = "/"):
        self._entries = [initial_path]
        self._index = 0

    @property
    def current(self) -> str:
        return self._entries[self._index]

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    def push(self, path: str):
        # Pushing drops any forward entries, like a browser does
        del self._entries[self._index + 1 :]
        self._entries.append(path)
        self._index += 1

    def replace(self, path: str):
        self._entries[self._index] = path

    def back(self) -> str | None:
        if self._index == 0:
            return None
        self._index -= 1
        return self.current

    def forward(self) -> str | None:
        if self._index >= len(self._entries) - 1:
            return None
        self._index += 1
        return self.current


PageListener = Callable[[PageState], None]


def _params_for(page: Page, params: dict | None) -> dict:
    """Keep only the params the committed page uses."""
    if page in JOB_ID_PAGES and params and params.get("job_id"):
        return {"job_id": str(params["job_id"])}
    return {}


class NavigationController:
    def __init__(
        self,
        auth_state_provider: Callable[[], AuthState] | None = None,
        history: History | None = None,
    ):
        self._auth_state_provider = auth_state_provider or (lambda: ANONYMOUS)
        self.history = history or History()
        self._listeners: list[PageListener] = []
        self._lock = threading.RLock()
        self.state = PageState()

    @property
    def current_page(self) -> Page:
        return self.state.page

    @property
    def page_params(self) -> dict:
        return dict(self.state.params)

    def subscribe(self, listener: PageListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _commit(self, requested, params: dict | None) -> PageState:
        safe_page = guard(requested, self._auth_state_provider())
        if safe_page != requested:
            logger.debug(f"Guard redirected {getattr(requested, 'value', requested)} -> {safe_page.value}")

        self.state = PageState(safe_page, _params_for(safe_page, params))
        if safe_page in JOB_ID_PAGES and self.state.job_id is None:
            logger.warning(f"Navigated to {safe_page.value} without a job_id")

        for listener in list(self._listeners):
            listener(self.state)
        return self.state

    def navigate(self, page, params: dict | None = None) -> PageState:
        """Guard, commit and push the resulting path onto the history stack."""
        with self._lock:
            state = self._commit(page, params)
            path = page_to_path(state.page, state.params)
            if path != self.history.current:
                self.history.push(path)
            return state

    def on_external_navigation(self, path: str) -> PageState:
        """Handle a URL change the controller did not initiate (load, back, forward)."""
        page, params = path_to_page(path)
        with self._lock:
            state = self._commit(page, params)

            # Keep the URL bar honest when the guard substituted the page
            resolved = page_to_path(state.page, state.params)
            if resolved != self.history.current:
                self.history.replace(resolved)
            return state

    def back(self) -> PageState | None:
        with self._lock:
            path = self.history.back()
            return None if path is None else self.on_external_navigation(path)

    def forward(self) -> PageState | None:
        with self._lock:
            path = self.history.forward()
            return None if path is None else self.on_external_navigation(path)

    def reevaluate(self) -> PageState:
        """Re-run the guard for the current page, e.g. after sign-in or sign-out."""
        with self._lock:
            return self.on_external_navigation(page_to_path(self.state.page, self.state.params))
