"""Profile endpoints."""

from fastapi import APIRouter, Body, Depends
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.orm import Session

from jobboard.api.deps import require_context, require_seeker
from jobboard.api.schemas import (
    CertificationCreate,
    CertificationResponse,
    EducationCreate,
    EducationResponse,
    EmployerProfileUpdate,
    ProfileDetailResponse,
    SeekerProfileUpdate,
    SkillResponse,
    UserSkillCreate,
    UserSkillResponse,
)
from jobboard.auth import Role, identity_provider
from jobboard.db import get_db
from jobboard.services import profiles as profile_service
from jobboard.services.skills import list_skills
from jobboard.session import AppContext

router = APIRouter()
skills_router = APIRouter()


def _profile_detail(context: AppContext, db: Session) -> ProfileDetailResponse:
    detail = ProfileDetailResponse(role=context.role, profile=context.profile)
    if context.role == Role.SEEKER:
        user_id = context.identity.id
        detail.skills = [UserSkillResponse.model_validate(s) for s in profile_service.list_user_skills(db, user_id)]
        detail.education = [EducationResponse.model_validate(e) for e in profile_service.list_education(db, user_id)]
        detail.certifications = [
            CertificationResponse.model_validate(c) for c in profile_service.list_certifications(db, user_id)
        ]
    return detail


@router.get("", response_model=ProfileDetailResponse)
def get_profile(
    context: AppContext = Depends(require_context),
    db: Session = Depends(get_db),
):
    """Get the caller's profile (seeker or employer shape, tagged by role)."""
    return _profile_detail(context, db)


@router.put("", response_model=ProfileDetailResponse)
def update_profile(
    payload: dict = Body(...),
    context: AppContext = Depends(require_context),
    db: Session = Depends(get_db),
):
    """Update the caller's profile. Fields must match the caller's role."""
    schema = SeekerProfileUpdate if context.role == Role.SEEKER else EmployerProfileUpdate
    try:
        data = schema.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False, include_context=False)) from e

    profile_service.update_profile(db, context.identity.id, context.role, data.model_dump(exclude_none=True))
    # Sessions of this user (this context included) re-resolve their profile
    identity_provider.notify_user_updated(db, context.identity.id)
    return _profile_detail(context, db)


@router.post("/skills", response_model=UserSkillResponse, status_code=201)
def add_skill(
    data: UserSkillCreate,
    context: AppContext = Depends(require_seeker),
    db: Session = Depends(get_db),
):
    user_skill = profile_service.add_user_skill(db, context.identity.id, data.skill_name, data.proficiency)
    identity_provider.notify_user_updated(db, context.identity.id)
    return UserSkillResponse.model_validate(user_skill)


@router.delete("/skills/{user_skill_id}")
def remove_skill(
    user_skill_id: str,
    context: AppContext = Depends(require_seeker),
    db: Session = Depends(get_db),
):
    profile_service.remove_user_skill(db, context.identity.id, user_skill_id)
    identity_provider.notify_user_updated(db, context.identity.id)
    return {"message": "Skill removed"}


@router.post("/education", response_model=EducationResponse, status_code=201)
def add_education(
    data: EducationCreate,
    context: AppContext = Depends(require_seeker),
    db: Session = Depends(get_db),
):
    entry = profile_service.add_education(db, context.identity.id, data.model_dump())
    return EducationResponse.model_validate(entry)


@router.delete("/education/{education_id}")
def remove_education(
    education_id: str,
    context: AppContext = Depends(require_seeker),
    db: Session = Depends(get_db),
):
    profile_service.remove_education(db, context.identity.id, education_id)
    return {"message": "Education removed"}


@router.post("/certifications", response_model=CertificationResponse, status_code=201)
def add_certification(
    data: CertificationCreate,
    context: AppContext = Depends(require_seeker),
    db: Session = Depends(get_db),
):
    entry = profile_service.add_certification(db, context.identity.id, data.model_dump())
    return CertificationResponse.model_validate(entry)


@router.delete("/certifications/{certification_id}")
def remove_certification(
    certification_id: str,
    context: AppContext = Depends(require_seeker),
    db: Session = Depends(get_db),
):
    profile_service.remove_certification(db, context.identity.id, certification_id)
    return {"message": "Certification removed"}


@skills_router.get("", response_model=list[SkillResponse])
def get_skills(category: str | None = None, db: Session = Depends(get_db)):
    """The skill catalogue, alphabetical."""
    return [SkillResponse.model_validate(s) for s in list_skills(db, category)]
