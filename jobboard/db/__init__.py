"""Database package."""

from jobboard.db.base import Base, get_db, get_session_factory, init_db, reset_engine
from jobboard.db.tables import (
    AuthSessionRow,
    Certification,
    Education,
    EmployerRow,
    Job,
    JobApplication,
    JobSkill,
    Notification,
    PasswordReset,
    SeekerProfileRow,
    Skill,
    User,
    UserSkill,
)

__all__ = [
    "Base",
    "get_db",
    "get_session_factory",
    "init_db",
    "reset_engine",
    "User",
    "AuthSessionRow",
    "PasswordReset",
    "SeekerProfileRow",
    "EmployerRow",
    "Job",
    "Skill",
    "JobSkill",
    "UserSkill",
    "Education",
    "Certification",
    "JobApplication",
    "Notification",
]
