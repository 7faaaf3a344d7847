"""Account endpoints: sign-up, sign-in, sign-out and password reset."""

import logging

from fastapi import APIRouter, Depends, Header, Request
from sqlalchemy.orm import Session

from jobboard.api.deps import bearer_token, drop_context, get_context
from jobboard.api.limiter import limiter
from jobboard.api.schemas import (
    AccountResponse,
    ResetPasswordConfirm,
    ResetPasswordRequest,
    SessionResponse,
    SignInRequest,
    SignUpRequest,
)
from jobboard.auth import UNDETERMINED, AuthSession, Role, identity_provider, register_account, resolve_role
from jobboard.config import settings
from jobboard.db import get_db
from jobboard.errors import AuthError
from jobboard.navigation.pages import Page, page_to_path
from jobboard.session import AppContext

logger = logging.getLogger(__name__)

router = APIRouter()


def landing_path(role: Role | None) -> str:
    """Where a freshly signed-in user lands."""
    if role == Role.EMPLOYER:
        return page_to_path(Page.EMPLOYER_DASHBOARD)
    if role == Role.SEEKER:
        return page_to_path(Page.DASHBOARD)
    return page_to_path(Page.LANDING)


def session_response(session: AuthSession, role: Role | None) -> SessionResponse:
    return SessionResponse(
        token=session.token,
        user_id=session.identity.id,
        email=session.identity.email,
        expires_at=session.expires_at,
        role=role,
        redirect=landing_path(role),
    )


@router.post("/signup", response_model=SessionResponse, status_code=201)
@limiter.limit(settings.auth_rate_limit)
def sign_up(request: Request, data: SignUpRequest, db: Session = Depends(get_db)):
    """Create an account with its seeker or employer profile and sign in."""
    session, resolved = register_account(db, identity_provider, data.email, data.password, data.role, data.full_name)
    return session_response(session, resolved.role if resolved else None)


@router.post("/signin", response_model=SessionResponse)
@limiter.limit(settings.auth_rate_limit)
def sign_in(request: Request, data: SignInRequest, db: Session = Depends(get_db)):
    session = identity_provider.sign_in(db, data.email, data.password)
    resolved = resolve_role(db, session.identity.id)
    return session_response(session, None if resolved is UNDETERMINED else resolved.role)


@router.post("/signout")
def sign_out(authorization: str | None = Header(default=None), db: Session = Depends(get_db)):
    """End the caller's session. Signing out twice is harmless."""
    token = bearer_token(authorization)
    if token:
        identity_provider.sign_out(db, token)
        drop_context(token)
    return {"message": "Signed out", "redirect": page_to_path(Page.LANDING)}


@router.post("/refresh", response_model=SessionResponse)
def refresh(authorization: str | None = Header(default=None), db: Session = Depends(get_db)):
    """Extend the caller's session."""
    token = bearer_token(authorization)
    if not token:
        raise AuthError("Not signed in", status_code=401)
    session = identity_provider.refresh_session(db, token)
    resolved = resolve_role(db, session.identity.id)
    return session_response(session, None if resolved is UNDETERMINED else resolved.role)


@router.get("/session", response_model=AccountResponse)
def current_session(context: AppContext = Depends(get_context)):
    """The caller's account as the app context sees it."""
    return AccountResponse(
        status=context.status.value,
        user_id=context.identity.id if context.identity else None,
        email=context.identity.email if context.identity else None,
        role=context.role,
        profile=context.profile,
    )


@router.post("/reset-password")
@limiter.limit(settings.auth_rate_limit)
def reset_password(request: Request, data: ResetPasswordRequest, db: Session = Depends(get_db)):
    """Send a reset link. The answer is the same whether or not the address exists."""
    identity_provider.reset_password(db, data.email, data.redirect_to)
    return {"message": "If that address has an account, a reset link is on its way"}


@router.post("/reset-password/confirm")
@limiter.limit(settings.auth_rate_limit)
def confirm_reset(request: Request, data: ResetPasswordConfirm, db: Session = Depends(get_db)):
    identity = identity_provider.complete_password_reset(db, data.token, data.password)
    logger.info(f"Password reset completed for {identity.id}")
    return {"message": "Password updated", "redirect": page_to_path(Page.LOGIN)}
