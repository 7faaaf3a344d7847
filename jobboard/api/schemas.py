"""API request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from jobboard.auth.roles import EmployerProfile, Profile, Role, SeekerProfile
from jobboard.navigation.pages import Page
from jobboard.navigation.views import NavLink, ViewDescriptor
from jobboard.search.filters import JOB_TYPES, SHIFT_TYPES


# Auth schemas
class SignUpRequest(BaseModel):
    email: str
    password: str
    confirm_password: str | None = None
    role: Role = Role.SEEKER
    full_name: str = Field(..., min_length=1, description="Full name, or company name for employers")

    @model_validator(mode="after")
    def passwords_match(self):
        if self.confirm_password is not None and self.confirm_password != self.password:
            raise ValueError("Passwords do not match")
        return self


class SignInRequest(BaseModel):
    email: str
    password: str


class SessionResponse(BaseModel):
    token: str
    user_id: str
    email: str
    expires_at: datetime
    role: Role | None = None
    redirect: str = Field(default="/", description="Path of the page to show next")


class AccountResponse(BaseModel):
    status: str
    user_id: str | None = None
    email: str | None = None
    role: Role | None = None
    profile: SeekerProfile | EmployerProfile | None = None


class ResetPasswordRequest(BaseModel):
    email: str
    redirect_to: str | None = None


class ResetPasswordConfirm(BaseModel):
    token: str
    password: str


# Profile schemas
class SeekerProfileUpdate(BaseModel):
    full_name: str | None = None
    phone: str | None = None
    location: str | None = None
    preferred_job_type: str | None = None
    preferred_shift: str | None = None
    years_experience: int | None = Field(default=None, ge=0)
    bio: str | None = None
    resume_url: str | None = None

    class Config:
        extra = "forbid"


class EmployerProfileUpdate(BaseModel):
    company_name: str | None = None
    company_logo: str | None = None
    company_size: str | None = None
    industry_type: str | None = None
    website: str | None = None
    description: str | None = None
    location: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None

    class Config:
        extra = "forbid"


class SkillResponse(BaseModel):
    id: str
    name: str
    category: str

    class Config:
        from_attributes = True


class UserSkillCreate(BaseModel):
    skill_name: str = Field(..., min_length=1)
    proficiency: str = Field(default="intermediate", description="beginner/intermediate/advanced/expert")


class UserSkillResponse(BaseModel):
    id: str
    proficiency: str
    skill: SkillResponse

    class Config:
        from_attributes = True


class EducationCreate(BaseModel):
    degree: str
    field: str = ""
    institution: str
    year_completed: int | None = None


class EducationResponse(EducationCreate):
    id: str
    created_at: datetime

    class Config:
        from_attributes = True


class CertificationCreate(BaseModel):
    name: str
    issuing_organization: str = ""
    issue_date: str | None = None
    expiry_date: str | None = None
    credential_id: str | None = None


class CertificationResponse(CertificationCreate):
    id: str
    created_at: datetime

    class Config:
        from_attributes = True


class ProfileDetailResponse(BaseModel):
    role: Role
    profile: Profile
    skills: list[UserSkillResponse] = []
    education: list[EducationResponse] = []
    certifications: list[CertificationResponse] = []


# Job schemas
class EmployerSummary(BaseModel):
    id: str
    company_name: str
    company_logo: str | None = None
    location: str | None = None

    class Config:
        from_attributes = True


class JobCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    industry_category: str = ""
    job_role: str = ""
    location: str = ""
    job_type: str = "full-time"
    shift_type: str | None = None
    experience_min: int = Field(default=0, ge=0)
    experience_max: int | None = Field(default=None, ge=0)
    salary_min: float | None = None
    salary_max: float | None = None
    salary_currency: str = "USD"
    is_urgent: bool = False
    is_featured: bool = False
    skills: list[str] = []

    @field_validator("job_type")
    @classmethod
    def known_job_type(cls, v: str) -> str:
        if v not in JOB_TYPES:
            raise ValueError(f"job_type must be one of {', '.join(JOB_TYPES)}")
        return v

    @field_validator("shift_type")
    @classmethod
    def known_shift_type(cls, v: str | None) -> str | None:
        if v is not None and v not in SHIFT_TYPES:
            raise ValueError(f"shift_type must be one of {', '.join(SHIFT_TYPES)}")
        return v

    @model_validator(mode="after")
    def ranges_ordered(self):
        if self.experience_max is not None and self.experience_max < self.experience_min:
            raise ValueError("experience_max must not be below experience_min")
        if self.salary_min is not None and self.salary_max is not None and self.salary_max < self.salary_min:
            raise ValueError("salary_max must not be below salary_min")
        return self


class JobResponse(BaseModel):
    id: str
    employer_id: str
    title: str
    description: str
    industry_category: str
    job_role: str
    location: str
    job_type: str
    shift_type: str | None
    experience_min: int
    experience_max: int | None
    salary_min: float | None
    salary_max: float | None
    salary_currency: str
    is_urgent: bool
    is_featured: bool
    status: str
    created_at: datetime
    updated_at: datetime
    employer: EmployerSummary | None = None
    skills: list[str] = []
    application_count: int | None = None


class JobListResponse(BaseModel):
    jobs: list[JobResponse]
    total: int


class JobDetailResponse(BaseModel):
    job: JobResponse
    employer: EmployerProfile | None = None
    has_applied: bool = False
    path: str


# Application schemas
class ApplyRequest(BaseModel):
    cover_letter: str = ""


class ApplicationResponse(BaseModel):
    id: str
    job_id: str
    user_id: str
    status: str
    cover_letter: str
    resume_url: str | None
    match_score: float | None
    employer_notes: str | None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SeekerApplicationResponse(ApplicationResponse):
    job: JobResponse | None = None


class ApplicantResponse(ApplicationResponse):
    user_profile: SeekerProfile | None = None
    skills: list[str] = []
    education: list[EducationResponse] = []
    certifications: list[CertificationResponse] = []


class ApplicantsResponse(BaseModel):
    job: JobResponse
    applications: list[ApplicantResponse]
    status_counts: dict[str, int]


class StatusUpdate(BaseModel):
    status: str


class NotesUpdate(BaseModel):
    notes: str


# Dashboard schemas
class SeekerDashboardResponse(BaseModel):
    view: str
    applications: list[SeekerApplicationResponse]
    recommended_jobs: list[JobResponse]
    status_counts: dict[str, int]
    profile_completion: int


class EmployerStats(BaseModel):
    total_jobs: int
    active_jobs: int
    total_applications: int
    shortlisted: int


class EmployerDashboardResponse(BaseModel):
    view: str
    jobs: list[JobResponse]
    stats: EmployerStats


# Notification schemas
class NotificationResponse(BaseModel):
    id: str
    type: str
    title: str
    message: str
    read: bool
    link: str | None
    extra_data: dict = {}
    created_at: datetime

    class Config:
        from_attributes = True


class NotificationListResponse(BaseModel):
    notifications: list[NotificationResponse]
    unread: int


# Navigation schemas
class NavigateRequest(BaseModel):
    page: str
    params: dict = {}


class NavigationResponse(BaseModel):
    page: Page
    params: dict
    path: str
    view: ViewDescriptor
    history: list[str]
    links: list[NavLink]
