"""
Role resolution.

An identity's role is not stored on the account: it is derived by probing
the seeker and employer profile tables. Sign-up creates exactly one of the
two, so finding neither is a data-consistency fault.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from jobboard.auth.identity import AuthSession, IdentityProvider
from jobboard.db import EmployerRow, SeekerProfileRow

logger = logging.getLogger(__name__)

SIGNUP_PROFILE_COMPLETION = 20


class Role(str, Enum):
    SEEKER = "seeker"
    EMPLOYER = "employer"


class SeekerProfile(BaseModel):
    role: Literal["seeker"] = "seeker"
    id: str
    full_name: str
    phone: str | None = None
    location: str | None = None
    preferred_job_type: str | None = None
    preferred_shift: str | None = None
    years_experience: int = 0
    bio: str | None = None
    resume_url: str | None = None
    profile_completion: int = 0
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class EmployerProfile(BaseModel):
    role: Literal["employer"] = "employer"
    id: str
    company_name: str
    company_logo: str | None = None
    company_size: str | None = None
    industry_type: str | None = None
    website: str | None = None
    description: str | None = None
    location: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    verified: bool = False
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


Profile = Annotated[SeekerProfile | EmployerProfile, Field(discriminator="role")]


@dataclass(frozen=True)
class ResolvedRole:
    role: Role
    profile: SeekerProfile | EmployerProfile


class _Undetermined:
    """Sentinel: the identity has no profile in either table."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "UNDETERMINED"


UNDETERMINED = _Undetermined()


def resolve_role(db: Session, identity_id: str) -> ResolvedRole | _Undetermined:
    """Seeker table first, then employer table. Store errors propagate."""
    seeker = db.get(SeekerProfileRow, identity_id)
    if seeker is not None:
        return ResolvedRole(Role.SEEKER, SeekerProfile.model_validate(seeker))

    employer = db.get(EmployerRow, identity_id)
    if employer is not None:
        return ResolvedRole(Role.EMPLOYER, EmployerProfile.model_validate(employer))

    logger.error(f"Identity {identity_id} has neither a seeker nor an employer profile")
    return UNDETERMINED


def create_profile(db: Session, identity_id: str, role: Role, display_name: str):
    """Add the role-specific profile row. Flushes but does not commit."""
    if role == Role.SEEKER:
        row = SeekerProfileRow(
            id=identity_id,
            full_name=display_name,
            profile_completion=SIGNUP_PROFILE_COMPLETION,
        )
    else:
        row = EmployerRow(id=identity_id, company_name=display_name, verified=False)
    db.add(row)
    db.flush()
    return row


def register_account(
    db: Session,
    provider: IdentityProvider,
    email: str,
    password: str,
    role: Role,
    display_name: str,
) -> tuple[AuthSession, ResolvedRole]:
    """
    Create the identity and its profile in one transaction, then sign in.

    Either both rows exist afterwards or neither does.
    """
    try:
        user = provider.create_identity(db, email, password)
        create_profile(db, user.id, role, display_name.strip())
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Registered {role.value} account {user.id}")
    session = provider.start_session(db, user)
    resolved = resolve_role(db, user.id)
    return session, resolved
