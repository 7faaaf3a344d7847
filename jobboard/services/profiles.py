"""
Seeker and employer profiles.

Profile completion for seekers: the full name is worth 20 points (a fresh
sign-up starts at 20), each other field 10, and having at least one skill 10.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from jobboard.auth.roles import Role
from jobboard.db import Certification, Education, EmployerRow, SeekerProfileRow, UserSkill
from jobboard.db.tables import utcnow
from jobboard.errors import JobBoardError, NotFound, RoleUndetermined
from jobboard.services.skills import get_or_create_skill

SEEKER_FIELDS = (
    "full_name",
    "phone",
    "location",
    "preferred_job_type",
    "preferred_shift",
    "years_experience",
    "bio",
    "resume_url",
)
EMPLOYER_FIELDS = (
    "company_name",
    "company_logo",
    "company_size",
    "industry_type",
    "website",
    "description",
    "location",
    "contact_email",
    "contact_phone",
)

COMPLETION_WEIGHTS = {
    "full_name": 20,
    "phone": 10,
    "location": 10,
    "preferred_job_type": 10,
    "preferred_shift": 10,
    "years_experience": 10,
    "bio": 10,
    "resume_url": 10,
}
SKILLS_WEIGHT = 10


def compute_profile_completion(profile: SeekerProfileRow, skill_count: int = 0) -> int:
    score = 0
    for name, weight in COMPLETION_WEIGHTS.items():
        value = getattr(profile, name)
        if isinstance(value, str):
            value = value.strip()
        if value:
            score += weight
    if skill_count > 0:
        score += SKILLS_WEIGHT
    return min(score, 100)


def _seeker(db: Session, user_id: str) -> SeekerProfileRow:
    profile = db.get(SeekerProfileRow, user_id)
    if profile is None:
        raise NotFound("Seeker profile not found")
    return profile


def _recompute_completion(db: Session, profile: SeekerProfileRow):
    skill_count = db.query(UserSkill).filter(UserSkill.user_id == profile.id).count()
    profile.profile_completion = compute_profile_completion(profile, skill_count)


def update_profile(db: Session, user_id: str, role: Role | None, data: dict):
    """Apply a partial update to the caller's own profile."""
    if role == Role.SEEKER:
        profile = _seeker(db, user_id)
        allowed = SEEKER_FIELDS
    elif role == Role.EMPLOYER:
        profile = db.get(EmployerRow, user_id)
        if profile is None:
            raise NotFound("Employer profile not found")
        allowed = EMPLOYER_FIELDS
    else:
        raise RoleUndetermined(user_id)

    for name, value in data.items():
        if name in allowed:
            setattr(profile, name, value)
    profile.updated_at = utcnow()

    if role == Role.SEEKER:
        db.flush()
        _recompute_completion(db, profile)

    db.commit()
    db.refresh(profile)
    return profile


# Skills


def list_user_skills(db: Session, user_id: str) -> list[UserSkill]:
    return (
        db.query(UserSkill)
        .options(joinedload(UserSkill.skill))
        .filter(UserSkill.user_id == user_id)
        .all()
    )


def add_user_skill(db: Session, user_id: str, skill_name: str, proficiency: str = "intermediate") -> UserSkill:
    profile = _seeker(db, user_id)
    skill = get_or_create_skill(db, skill_name)
    user_skill = UserSkill(user_id=user_id, skill_id=skill.id, proficiency=proficiency)
    db.add(user_skill)
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        raise JobBoardError(f"Skill already on profile: {skill.name}")

    _recompute_completion(db, profile)
    db.commit()
    db.refresh(user_skill)
    return user_skill


def remove_user_skill(db: Session, user_id: str, user_skill_id: str) -> None:
    user_skill = (
        db.query(UserSkill)
        .filter(UserSkill.id == user_skill_id, UserSkill.user_id == user_id)
        .first()
    )
    if not user_skill:
        raise NotFound("Skill not found on profile")
    db.delete(user_skill)
    db.flush()
    _recompute_completion(db, _seeker(db, user_id))
    db.commit()


# Education and certifications


def list_education(db: Session, user_id: str) -> list[Education]:
    return db.query(Education).filter(Education.user_id == user_id).all()


def add_education(db: Session, user_id: str, data: dict) -> Education:
    _seeker(db, user_id)
    entry = Education(user_id=user_id, **data)
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


def remove_education(db: Session, user_id: str, education_id: str) -> None:
    entry = (
        db.query(Education)
        .filter(Education.id == education_id, Education.user_id == user_id)
        .first()
    )
    if not entry:
        raise NotFound("Education entry not found")
    db.delete(entry)
    db.commit()


def list_certifications(db: Session, user_id: str) -> list[Certification]:
    return db.query(Certification).filter(Certification.user_id == user_id).all()


def add_certification(db: Session, user_id: str, data: dict) -> Certification:
    _seeker(db, user_id)
    entry = Certification(user_id=user_id, **data)
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


def remove_certification(db: Session, user_id: str, certification_id: str) -> None:
    entry = (
        db.query(Certification)
        .filter(Certification.id == certification_id, Certification.user_id == user_id)
        .first()
    )
    if not entry:
        raise NotFound("Certification not found")
    db.delete(entry)
    db.commit()
