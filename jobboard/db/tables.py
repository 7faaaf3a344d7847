"""Database table models."""

import uuid
from datetime import UTC, datetime

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobboard.db.base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp (SQLite drops tzinfo, so everything is stored naive)."""
    return datetime.now(UTC).replace(tzinfo=None)


# Identity provider tables


class User(Base):
    """Identity: an e-mail/password account."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    sessions: Mapped[list["AuthSessionRow"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )


class AuthSessionRow(Base):
    """A signed-in session, addressed by its bearer token."""

    __tablename__ = "auth_sessions"

    token: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    expires_at: Mapped[datetime] = mapped_column(DateTime)

    user: Mapped["User"] = relationship(back_populates="sessions")


class PasswordReset(Base):
    """One-time password reset token."""

    __tablename__ = "password_resets"

    token: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"))
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    expires_at: Mapped[datetime] = mapped_column(DateTime)
    used: Mapped[bool] = mapped_column(Boolean, default=False)


# Profiles (at most one of the two exists per identity)


class SeekerProfileRow(Base):
    """Job seeker profile, keyed by identity id."""

    __tablename__ = "user_profiles"

    id: Mapped[str] = mapped_column(ForeignKey("users.id"), primary_key=True)
    full_name: Mapped[str] = mapped_column(String(255), default="")
    phone: Mapped[str | None] = mapped_column(String(50), default=None)
    location: Mapped[str | None] = mapped_column(String(255), default=None)
    preferred_job_type: Mapped[str | None] = mapped_column(String(50), default=None)
    preferred_shift: Mapped[str | None] = mapped_column(String(50), default=None)
    years_experience: Mapped[int] = mapped_column(Integer, default=0)
    bio: Mapped[str | None] = mapped_column(Text, default=None)
    resume_url: Mapped[str | None] = mapped_column(Text, default=None)
    profile_completion: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    skills: Mapped[list["UserSkill"]] = relationship(
        back_populates="profile", cascade="all, delete-orphan"
    )
    education: Mapped[list["Education"]] = relationship(cascade="all, delete-orphan")
    certifications: Mapped[list["Certification"]] = relationship(cascade="all, delete-orphan")


class EmployerRow(Base):
    """Employer (company) profile, keyed by identity id."""

    __tablename__ = "employers"

    id: Mapped[str] = mapped_column(ForeignKey("users.id"), primary_key=True)
    company_name: Mapped[str] = mapped_column(String(255), default="")
    company_logo: Mapped[str | None] = mapped_column(Text, default=None)
    company_size: Mapped[str | None] = mapped_column(String(50), default=None)
    industry_type: Mapped[str | None] = mapped_column(String(100), default=None)
    website: Mapped[str | None] = mapped_column(Text, default=None)
    description: Mapped[str | None] = mapped_column(Text, default=None)
    location: Mapped[str | None] = mapped_column(String(255), default=None)
    contact_email: Mapped[str | None] = mapped_column(String(255), default=None)
    contact_phone: Mapped[str | None] = mapped_column(String(50), default=None)
    verified: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    jobs: Mapped[list["Job"]] = relationship(back_populates="employer")


# Jobs and skills


class Job(Base):
    """A job posting."""

    __tablename__ = "jobs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    employer_id: Mapped[str] = mapped_column(ForeignKey("employers.id"), index=True)
    title: Mapped[str] = mapped_column(String(255))
    description: Mapped[str] = mapped_column(Text, default="")
    industry_category: Mapped[str] = mapped_column(String(100), default="")
    job_role: Mapped[str] = mapped_column(String(100), default="")
    location: Mapped[str] = mapped_column(String(255), default="")
    job_type: Mapped[str] = mapped_column(String(20), default="full-time")
    shift_type: Mapped[str | None] = mapped_column(String(20), default=None)
    experience_min: Mapped[int] = mapped_column(Integer, default=0)
    experience_max: Mapped[int | None] = mapped_column(Integer, default=None)
    salary_min: Mapped[float | None] = mapped_column(Float, default=None)
    salary_max: Mapped[float | None] = mapped_column(Float, default=None)
    salary_currency: Mapped[str] = mapped_column(String(10), default="USD")
    is_urgent: Mapped[bool] = mapped_column(Boolean, default=False)
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False)
    status: Mapped[str] = mapped_column(String(20), default="active")  # active/paused/closed
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    employer: Mapped["EmployerRow"] = relationship(back_populates="jobs")
    job_skills: Mapped[list["JobSkill"]] = relationship(
        back_populates="job", cascade="all, delete-orphan"
    )
    applications: Mapped[list["JobApplication"]] = relationship(
        back_populates="job", cascade="all, delete-orphan"
    )


class Skill(Base):
    """Skill catalogue entry."""

    __tablename__ = "skills"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    name: Mapped[str] = mapped_column(String(100), unique=True)
    category: Mapped[str] = mapped_column(String(20), default="technical")  # technical/soft/certification
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)


class JobSkill(Base):
    """Skill required (or preferred) by a job."""

    __tablename__ = "job_skills"
    __table_args__ = (UniqueConstraint("job_id", "skill_id"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    job_id: Mapped[str] = mapped_column(ForeignKey("jobs.id"), index=True)
    skill_id: Mapped[str] = mapped_column(ForeignKey("skills.id"))
    required: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    job: Mapped["Job"] = relationship(back_populates="job_skills")
    skill: Mapped["Skill"] = relationship()


class UserSkill(Base):
    """Skill held by a seeker."""

    __tablename__ = "user_skills"
    __table_args__ = (UniqueConstraint("user_id", "skill_id"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = mapped_column(ForeignKey("user_profiles.id"), index=True)
    skill_id: Mapped[str] = mapped_column(ForeignKey("skills.id"))
    proficiency: Mapped[str] = mapped_column(String(20), default="intermediate")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    profile: Mapped["SeekerProfileRow"] = relationship(back_populates="skills")
    skill: Mapped["Skill"] = relationship()


# Seeker history


class Education(Base):
    __tablename__ = "education"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = mapped_column(ForeignKey("user_profiles.id"), index=True)
    degree: Mapped[str] = mapped_column(String(255))
    field: Mapped[str] = mapped_column(String(255), default="")
    institution: Mapped[str] = mapped_column(String(255))
    year_completed: Mapped[int | None] = mapped_column(Integer, default=None)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)


class Certification(Base):
    __tablename__ = "certifications"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = mapped_column(ForeignKey("user_profiles.id"), index=True)
    name: Mapped[str] = mapped_column(String(255))
    issuing_organization: Mapped[str] = mapped_column(String(255), default="")
    issue_date: Mapped[str | None] = mapped_column(String(20), default=None)
    expiry_date: Mapped[str | None] = mapped_column(String(20), default=None)
    credential_id: Mapped[str | None] = mapped_column(String(100), default=None)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)


# Applications and notifications


class JobApplication(Base):
    """A seeker's application to a job."""

    __tablename__ = "job_applications"
    __table_args__ = (UniqueConstraint("job_id", "user_id"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    job_id: Mapped[str] = mapped_column(ForeignKey("jobs.id"), index=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("user_profiles.id"), index=True)
    resume_url: Mapped[str | None] = mapped_column(Text, default=None)
    cover_letter: Mapped[str] = mapped_column(Text, default="")
    status: Mapped[str] = mapped_column(String(20), default="applied")  # applied/viewed/shortlisted/rejected
    match_score: Mapped[float | None] = mapped_column(Float, default=None)
    employer_notes: Mapped[str | None] = mapped_column(Text, default=None)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    job: Mapped["Job"] = relationship(back_populates="applications")
    user_profile: Mapped["SeekerProfileRow"] = relationship()


class Notification(Base):
    __tablename__ = "notifications"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True)
    type: Mapped[str] = mapped_column(String(50))
    title: Mapped[str] = mapped_column(String(255))
    message: Mapped[str] = mapped_column(Text, default="")
    read: Mapped[bool] = mapped_column(Boolean, default=False)
    link: Mapped[str | None] = mapped_column(Text, default=None)
    extra_data: Mapped[dict] = mapped_column(JSON, default=dict)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
