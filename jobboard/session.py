"""
Application context.

Holds one user's session, resolved role and profile, and the navigation
controller that depends on them. The context subscribes to the identity
provider and re-resolves the role whenever its own session changes;
components read it through an explicit reference and may subscribe to it.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from enum import Enum

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from jobboard.auth.identity import AuthSession, Identity, IdentityProvider, SessionEvent
from jobboard.auth.roles import (
    UNDETERMINED,
    EmployerProfile,
    ResolvedRole,
    Role,
    SeekerProfile,
    register_account,
    resolve_role,
)
from jobboard.navigation.controller import History, NavigationController
from jobboard.navigation.guard import ANONYMOUS, AuthState

logger = logging.getLogger(__name__)

LOAD_ERROR_MESSAGE = "Could not load your account. Try again."


class SessionStatus(str, Enum):
    LOADING = "loading"
    ANONYMOUS = "anonymous"
    READY = "ready"
    UNDETERMINED = "undetermined"  # signed in, but no profile in either table
    ERROR = "error"  # backend failure while resolving; refresh() retries


ContextListener = Callable[["AppContext"], None]


class AppContext:
    def __init__(
        self,
        provider: IdentityProvider,
        session_factory: Callable[[], Session],
        history: History | None = None,
    ):
        self._provider = provider
        self._session_factory = session_factory
        self._lock = threading.RLock()
        self._generation = 0
        self._listeners: list[ContextListener] = []

        self.session: AuthSession | None = None
        self.resolution: ResolvedRole | None = None
        self.status = SessionStatus.LOADING
        self.error: str | None = None

        self.navigator = NavigationController(lambda: self.auth_state, history)
        self._unsubscribe = provider.subscribe(self.handle_session_change)

    # Read access

    @property
    def identity(self) -> Identity | None:
        return self.session.identity if self.session else None

    @property
    def token(self) -> str | None:
        return self.session.token if self.session else None

    @property
    def role(self) -> Role | None:
        return self.resolution.role if self.resolution else None

    @property
    def profile(self) -> SeekerProfile | EmployerProfile | None:
        return self.resolution.profile if self.resolution else None

    @property
    def auth_state(self) -> AuthState:
        if self.session is None:
            return ANONYMOUS
        return AuthState(is_authenticated=True, role=self.role)

    def subscribe(self, listener: ContextListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self):
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("App context listener failed")

    # State transitions

    def load(self, token: str | None) -> AppContext:
        """Attach to the session behind a bearer token (or none) and resolve it."""
        session = None
        if token:
            with self._session_factory() as db:
                session = self._provider.get_session(db, token)
        self._set_session(session)
        return self

    def _set_session(self, session: AuthSession | None):
        with self._lock:
            self._generation += 1
            self.session = session
            self.resolution = None
            self.error = None
            if session is None:
                self.status = SessionStatus.ANONYMOUS
            else:
                self.status = SessionStatus.LOADING

        if session is None:
            self.navigator.reevaluate()
            self._notify()
        else:
            self.refresh()

    def refresh(self):
        """Resolve the role and profile for the current session."""
        with self._lock:
            if self.session is None:
                return
            generation = self._generation
            identity_id = self.session.identity.id

            try:
                with self._session_factory() as db:
                    result = resolve_role(db, identity_id)
            except SQLAlchemyError:
                logger.exception(f"Role resolution failed for {identity_id}")
                if generation != self._generation:
                    return
                self.status = SessionStatus.ERROR
                self.error = LOAD_ERROR_MESSAGE
                self._notify()
                return

            if generation != self._generation:
                logger.debug(f"Discarding stale role resolution for {identity_id}")
                return

            self.error = None
            if result is UNDETERMINED:
                self.resolution = None
                self.status = SessionStatus.UNDETERMINED
            else:
                self.resolution = result
                self.status = SessionStatus.READY

        self.navigator.reevaluate()
        self._notify()

    def handle_session_change(self, event: SessionEvent, session: AuthSession | None):
        """Identity provider listener: follow changes to this context's own session."""
        if session is None or self.session is None or session.token != self.session.token:
            return
        if event == SessionEvent.SIGNED_OUT:
            self._set_session(None)
        else:
            # TOKEN_REFRESHED / USER_UPDATED: the profile may have changed too
            self._set_session(session)

    # Actions driven through the context (CLI and tests)

    def sign_in(self, email: str, password: str) -> AppContext:
        with self._session_factory() as db:
            session = self._provider.sign_in(db, email, password)
        self._set_session(session)
        return self

    def sign_up(self, email: str, password: str, role: Role, display_name: str) -> AppContext:
        with self._session_factory() as db:
            session, _ = register_account(db, self._provider, email, password, role, display_name)
        self._set_session(session)
        return self

    def sign_out(self):
        if self.session is not None:
            with self._session_factory() as db:
                self._provider.sign_out(db, self.session.token)
        if self.session is not None:
            self._set_session(None)

    def close(self):
        self._unsubscribe()
        self._listeners.clear()
