"""
Identity provider.

E-mail/password accounts with bearer-token sessions stored in the database,
plus a synchronous session-change notification stream that app contexts
subscribe to.
"""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from sqlalchemy.orm import Session

from jobboard.auth.passwords import (
    PasswordStrength,
    evaluate_password_strength,
    hash_password,
    verify_password,
)
from jobboard.config import settings
from jobboard.db import AuthSessionRow, PasswordReset, User
from jobboard.db.tables import utcnow
from jobboard.errors import AuthError

logger = logging.getLogger(__name__)

WEAK_PASSWORD_MESSAGE = "Password is too weak. Use letters and numbers."


class SessionEvent(str, Enum):
    SIGNED_IN = "SIGNED_IN"
    SIGNED_OUT = "SIGNED_OUT"
    TOKEN_REFRESHED = "TOKEN_REFRESHED"
    USER_UPDATED = "USER_UPDATED"


@dataclass(frozen=True)
class Identity:
    id: str
    email: str


@dataclass(frozen=True)
class AuthSession:
    token: str
    identity: Identity
    expires_at: datetime


SessionListener = Callable[[SessionEvent, "AuthSession | None"], None]


def _normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def _snapshot(row: AuthSessionRow, user: User) -> AuthSession:
    return AuthSession(
        token=row.token,
        identity=Identity(id=user.id, email=user.email),
        expires_at=row.expires_at,
    )


class IdentityProvider:
    """Sign-up, sign-in, sign-out, session lookup and change notifications."""

    def __init__(self):
        self._listeners: list[SessionListener] = []

    # Subscriptions

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a session-change listener. Returns a function that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, event: SessionEvent, session: AuthSession | None):
        for listener in list(self._listeners):
            try:
                listener(event, session)
            except Exception:
                logger.exception(f"Session listener failed on {event.value}")

    # Accounts

    def create_identity(self, db: Session, email: str, password: str) -> User:
        """Validate and add a new user row. Flushes but does not commit."""
        email = _normalize_email(email)
        if "@" not in email:
            raise AuthError("A valid email address is required")
        if evaluate_password_strength(password) == PasswordStrength.WEAK:
            raise AuthError(WEAK_PASSWORD_MESSAGE)
        if db.query(User).filter(User.email == email).first():
            raise AuthError("User already registered")

        user = User(email=email, password_hash=hash_password(password))
        db.add(user)
        db.flush()
        return user

    def sign_up(self, db: Session, email: str, password: str) -> Identity:
        user = self.create_identity(db, email, password)
        db.commit()
        logger.info(f"Registered user {user.id}")
        return Identity(id=user.id, email=user.email)

    # Sessions

    def start_session(self, db: Session, user: User) -> AuthSession:
        row = AuthSessionRow(
            token=secrets.token_hex(32),
            user_id=user.id,
            expires_at=utcnow() + timedelta(hours=settings.session_ttl_hours),
        )
        db.add(row)
        db.commit()
        session = _snapshot(row, user)
        self._emit(SessionEvent.SIGNED_IN, session)
        return session

    def sign_in(self, db: Session, email: str, password: str) -> AuthSession:
        user = db.query(User).filter(User.email == _normalize_email(email)).first()
        if not user or not verify_password(password, user.password_hash):
            logger.warning("Failed sign-in attempt")
            raise AuthError("Invalid login credentials", status_code=401)
        return self.start_session(db, user)

    def get_session(self, db: Session, token: str) -> AuthSession | None:
        """Look up a live session. Expired sessions are deleted and treated as absent."""
        if not token:
            return None
        row = db.get(AuthSessionRow, token)
        if row is None:
            return None
        if row.expires_at < utcnow():
            db.delete(row)
            db.commit()
            return None
        return _snapshot(row, row.user)

    def refresh_session(self, db: Session, token: str) -> AuthSession:
        if self.get_session(db, token) is None:
            raise AuthError("Session expired or invalid", status_code=401)
        row = db.get(AuthSessionRow, token)
        row.expires_at = utcnow() + timedelta(hours=settings.session_ttl_hours)
        db.commit()
        session = _snapshot(row, row.user)
        self._emit(SessionEvent.TOKEN_REFRESHED, session)
        return session

    def sign_out(self, db: Session, token: str) -> None:
        """End a session. Unknown tokens are ignored."""
        row = db.get(AuthSessionRow, token) if token else None
        if row is None:
            return
        session = _snapshot(row, row.user)
        db.delete(row)
        db.commit()
        self._emit(SessionEvent.SIGNED_OUT, session)

    def notify_user_updated(self, db: Session, user_id: str) -> None:
        """Tell subscribers that the user's profile or credentials changed."""
        rows = db.query(AuthSessionRow).filter(AuthSessionRow.user_id == user_id).all()
        for row in rows:
            self._emit(SessionEvent.USER_UPDATED, _snapshot(row, row.user))

    # Password reset

    def reset_password(self, db: Session, email: str, redirect_to: str | None = None) -> str | None:
        """
        Issue a password reset link for an e-mail address.

        Unknown addresses are accepted silently so callers cannot probe for
        accounts. Returns the reset token when one was issued.
        """
        user = db.query(User).filter(User.email == _normalize_email(email)).first()
        if user is None:
            logger.info("Password reset requested for unknown email")
            return None

        token = secrets.token_urlsafe(32)
        db.add(
            PasswordReset(
                token=token,
                user_id=user.id,
                expires_at=utcnow() + timedelta(minutes=settings.password_reset_ttl_minutes),
            )
        )
        db.commit()

        redirect = (redirect_to or settings.password_reset_redirect).rstrip("/")
        logger.info(f"Password reset link for {user.id}: {redirect}/reset-password?token={token}")
        return token

    def complete_password_reset(self, db: Session, token: str, new_password: str) -> Identity:
        reset = db.get(PasswordReset, token) if token else None
        if reset is None or reset.used or reset.expires_at < utcnow():
            raise AuthError("Reset link is invalid or has expired")
        if evaluate_password_strength(new_password) == PasswordStrength.WEAK:
            raise AuthError(WEAK_PASSWORD_MESSAGE)

        user = db.get(User, reset.user_id)
        user.password_hash = hash_password(new_password)
        user.updated_at = utcnow()
        reset.used = True

        # Existing sessions end with the old password
        revoked = [_snapshot(row, user) for row in user.sessions]
        for row in list(user.sessions):
            db.delete(row)
        db.commit()

        for session in revoked:
            self._emit(SessionEvent.SIGNED_OUT, session)
        return Identity(id=user.id, email=user.email)


identity_provider = IdentityProvider()
