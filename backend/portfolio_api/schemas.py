"""
Pydantic schemas for the portfolio API.
Centralized to avoid circular imports between services and routers.

Create/Update schemas only check input shape (types, lengths).
URL checks and business rules (date ordering, rating range, skill category)
live in the services so they also apply to merged update values.
"""

from datetime import date, datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, computed_field, model_serializer

from shared.config.constants import Limits
from shared.utils.validators import certification_status

T = TypeVar("T")


# =============================================================================
# Common
# =============================================================================


class PageOutput(BaseModel, Generic[T]):
    items: list[T]
    total: int
    page: int
    limit: int


class IdsInput(BaseModel):
    ids: list[str] = Field(default_factory=list, max_length=Limits.MAX_BULK_IDS)


class ReorderInput(BaseModel):
    ids: list[str] = Field(default_factory=list, max_length=Limits.MAX_REORDER_IDS)


class BulkDeleteOutput(BaseModel):
    deleted_count: int
    failed_ids: list[str]

    class Config:
        from_attributes = True


class BulkRestoreOutput(BaseModel):
    restored_count: int
    failed_ids: list[str]

    class Config:
        from_attributes = True


class _OwnedOutput(BaseModel):
    id: str
    owner_id: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    class Config:
        from_attributes = True


# =============================================================================
# Project Schemas
# =============================================================================


class ProjectOutput(_OwnedOutput):
    title: str
    description: str | None = None
    image: str | None = None
    url: str | None = None
    github_url: str | None = None
    tags: list[str] = []
    technologies: list[str] = []
    start_date: date | None = None
    end_date: date | None = None
    featured: bool
    order: int


class ProjectCreate(BaseModel):
    title: str = Field(min_length=1, max_length=Limits.MAX_TITLE_LENGTH)
    description: str | None = Field(default=None, max_length=Limits.MAX_DESCRIPTION_LENGTH)
    image: str | None = None
    url: str | None = None
    github_url: str | None = None
    tags: list[str] = []
    technologies: list[str] = []
    start_date: date | None = None
    end_date: date | None = None
    featured: bool = False
    order: int = 0


class ProjectUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=Limits.MAX_TITLE_LENGTH)
    description: str | None = Field(default=None, max_length=Limits.MAX_DESCRIPTION_LENGTH)
    image: str | None = None
    url: str | None = None
    github_url: str | None = None
    tags: list[str] | None = None
    technologies: list[str] | None = None
    start_date: date | None = None
    end_date: date | None = None
    featured: bool | None = None
    order: int | None = None


# =============================================================================
# Company Schemas
# =============================================================================


class CompanyOutput(_OwnedOutput):
    name: str
    logo: str | None = None
    website: str | None = None
    description: str | None = None
    industry: str | None = None
    location: str | None = None
    founded_year: int | None = None


class CompanyCreate(BaseModel):
    name: str = Field(min_length=1, max_length=Limits.MAX_NAME_LENGTH)
    logo: str | None = None
    website: str | None = None
    description: str | None = Field(default=None, max_length=Limits.MAX_DESCRIPTION_LENGTH)
    industry: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    location: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    founded_year: int | None = Field(default=None, ge=1800, le=2100)


class CompanyUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=Limits.MAX_NAME_LENGTH)
    logo: str | None = None
    website: str | None = None
    description: str | None = Field(default=None, max_length=Limits.MAX_DESCRIPTION_LENGTH)
    industry: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    location: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    founded_year: int | None = Field(default=None, ge=1800, le=2100)


# =============================================================================
# Experience Schemas
# =============================================================================


class ExperienceOutput(_OwnedOutput):
    company_id: str | None = None
    title: str
    company: str | None = None
    location: str | None = None
    start_date: date
    end_date: date | None = None
    current: bool
    description: str | None = None
    achievements: list[str] = []
    technologies: list[str] = []
    company_details: CompanyOutput | None = None

    @model_serializer(mode="wrap")
    def _omit_unresolved_company(self, handler):
        data = handler(self)
        if data.get("company_details") is None:
            data.pop("company_details", None)
        return data


class ExperienceCreate(BaseModel):
    company_id: str | None = None
    title: str = Field(min_length=1, max_length=Limits.MAX_TITLE_LENGTH)
    company: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    location: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    start_date: date
    end_date: date | None = None
    current: bool = False
    description: str | None = Field(default=None, max_length=Limits.MAX_DESCRIPTION_LENGTH)
    achievements: list[str] = []
    technologies: list[str] = []


class ExperienceUpdate(BaseModel):
    company_id: str | None = None
    title: str | None = Field(default=None, min_length=1, max_length=Limits.MAX_TITLE_LENGTH)
    company: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    location: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    start_date: date | None = None
    end_date: date | None = None
    current: bool | None = None
    description: str | None = Field(default=None, max_length=Limits.MAX_DESCRIPTION_LENGTH)
    achievements: list[str] | None = None
    technologies: list[str] | None = None


# =============================================================================
# Education Schemas
# =============================================================================


class EducationOutput(_OwnedOutput):
    institution: str
    degree: str
    field: str | None = None
    start_date: date
    end_date: date | None = None
    gpa: str | None = None
    description: str | None = None


class EducationCreate(BaseModel):
    institution: str = Field(min_length=1, max_length=Limits.MAX_TITLE_LENGTH)
    degree: str = Field(min_length=1, max_length=Limits.MAX_TITLE_LENGTH)
    field: str | None = Field(default=None, max_length=Limits.MAX_TITLE_LENGTH)
    start_date: date
    end_date: date | None = None
    gpa: str | None = Field(default=None, max_length=20)
    description: str | None = Field(default=None, max_length=Limits.MAX_DESCRIPTION_LENGTH)


class EducationUpdate(BaseModel):
    institution: str | None = Field(default=None, min_length=1, max_length=Limits.MAX_TITLE_LENGTH)
    degree: str | None = Field(default=None, min_length=1, max_length=Limits.MAX_TITLE_LENGTH)
    field: str | None = Field(default=None, max_length=Limits.MAX_TITLE_LENGTH)
    start_date: date | None = None
    end_date: date | None = None
    gpa: str | None = Field(default=None, max_length=20)
    description: str | None = Field(default=None, max_length=Limits.MAX_DESCRIPTION_LENGTH)


# =============================================================================
# Skill Schemas
# =============================================================================


class SkillOutput(_OwnedOutput):
    name: str
    category: str
    level: int
    icon: str | None = None
    color: str | None = None
    order: int


class SkillCreate(BaseModel):
    name: str = Field(min_length=1, max_length=Limits.MAX_NAME_LENGTH)
    category: str
    level: int = Field(default=0, ge=Limits.MIN_SKILL_LEVEL, le=Limits.MAX_SKILL_LEVEL)
    icon: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    color: str | None = Field(default=None, max_length=20)
    order: int = 0


class SkillUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=Limits.MAX_NAME_LENGTH)
    category: str | None = None
    level: int | None = Field(default=None, ge=Limits.MIN_SKILL_LEVEL, le=Limits.MAX_SKILL_LEVEL)
    icon: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    color: str | None = Field(default=None, max_length=20)
    order: int | None = None


# =============================================================================
# Certification Schemas
# =============================================================================


class CertificationOutput(_OwnedOutput):
    name: str
    issuer: str
    issue_date: date
    expiry_date: date | None = None
    credential_id: str | None = None
    credential_url: str | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def status(self) -> str:
        return certification_status(self.expiry_date)[0]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def days_until_expiry(self) -> int | None:
        return certification_status(self.expiry_date)[1]


class CertificationCreate(BaseModel):
    name: str = Field(min_length=1, max_length=Limits.MAX_TITLE_LENGTH)
    issuer: str = Field(min_length=1, max_length=Limits.MAX_TITLE_LENGTH)
    issue_date: date
    expiry_date: date | None = None
    credential_id: str | None = Field(default=None, max_length=Limits.MAX_TITLE_LENGTH)
    credential_url: str | None = None


class CertificationUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=Limits.MAX_TITLE_LENGTH)
    issuer: str | None = Field(default=None, min_length=1, max_length=Limits.MAX_TITLE_LENGTH)
    issue_date: date | None = None
    expiry_date: date | None = None
    credential_id: str | None = Field(default=None, max_length=Limits.MAX_TITLE_LENGTH)
    credential_url: str | None = None


# =============================================================================
# Blog Schemas
# =============================================================================


class BlogPostOutput(_OwnedOutput):
    title: str
    slug: str
    content: str
    excerpt: str | None = None
    cover_image: str | None = None
    published: bool
    published_at: datetime | None = None
    tags: list[str] = []


class BlogPostCreate(BaseModel):
    title: str = Field(min_length=1, max_length=Limits.MAX_TITLE_LENGTH)
    slug: str | None = Field(default=None, max_length=Limits.MAX_SLUG_LENGTH)
    content: str = Field(min_length=1)
    excerpt: str | None = Field(default=None, max_length=Limits.MAX_EXCERPT_LENGTH)
    cover_image: str | None = None
    published: bool = False
    tags: list[str] = []


class BlogPostUpdate(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=Limits.MAX_TITLE_LENGTH)
    slug: str | None = Field(default=None, max_length=Limits.MAX_SLUG_LENGTH)
    content: str | None = Field(default=None, min_length=1)
    excerpt: str | None = Field(default=None, max_length=Limits.MAX_EXCERPT_LENGTH)
    cover_image: str | None = None
    published: bool | None = None
    tags: list[str] | None = None


class PublishInput(BaseModel):
    published: bool


# =============================================================================
# Testimonial Schemas
# =============================================================================


class TestimonialOutput(_OwnedOutput):
    name: str
    role: str | None = None
    company: str | None = None
    content: str
    avatar: str | None = None
    rating: int
    featured: bool
    order: int


class TestimonialCreate(BaseModel):
    name: str = Field(min_length=1, max_length=Limits.MAX_NAME_LENGTH)
    role: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    company: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    content: str = Field(min_length=1, max_length=Limits.MAX_DESCRIPTION_LENGTH)
    avatar: str | None = None
    rating: int = Limits.MAX_RATING
    featured: bool = False
    order: int = 0


class TestimonialUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=Limits.MAX_NAME_LENGTH)
    role: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    company: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    content: str | None = Field(default=None, min_length=1, max_length=Limits.MAX_DESCRIPTION_LENGTH)
    avatar: str | None = None
    rating: int | None = None
    featured: bool | None = None
    order: int | None = None


# =============================================================================
# Contact Schemas
# =============================================================================


class ContactOutput(_OwnedOutput):
    platform: str
    url: str
    icon: str | None = None
    order: int
    active: bool


class ContactCreate(BaseModel):
    platform: str = Field(min_length=1, max_length=50)
    url: str = Field(min_length=1, max_length=Limits.MAX_URL_LENGTH)
    icon: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    order: int = 0
    active: bool = True


class ContactUpdate(BaseModel):
    platform: str | None = Field(default=None, min_length=1, max_length=50)
    url: str | None = Field(default=None, min_length=1, max_length=Limits.MAX_URL_LENGTH)
    icon: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    order: int | None = None
    active: bool | None = None


# =============================================================================
# Profile Schemas
# =============================================================================


class VisibilityOutput(BaseModel):
    is_public: bool = True
    show_projects: bool = True
    show_companies: bool = True
    show_skills: bool = True
    show_experiences: bool = True
    show_education: bool = True
    show_certifications: bool = True
    show_blog: bool = True
    show_testimonials: bool = True
    show_contacts: bool = True

    class Config:
        from_attributes = True


class ProfileOutput(VisibilityOutput):
    id: str
    owner_id: str
    bio: str | None = None
    avatar: str | None = None
    resume_url: str | None = None
    location: str | None = None
    available_for_hire: bool
    portfolio_url: str | None = None
    theme: str
    created_at: datetime
    updated_at: datetime


class PublicProfileOutput(BaseModel):
    owner_id: str
    bio: str | None = None
    avatar: str | None = None
    resume_url: str | None = None
    location: str | None = None
    available_for_hire: bool
    portfolio_url: str | None = None
    theme: str
    sections: dict[str, bool]


class ProfileUpdate(BaseModel):
    bio: str | None = Field(default=None, max_length=Limits.MAX_BIO_LENGTH)
    avatar: str | None = None
    resume_url: str | None = None
    location: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    available_for_hire: bool | None = None
    portfolio_url: str | None = None
    theme: str | None = Field(default=None, max_length=50)
    is_public: bool | None = None
    show_projects: bool | None = None
    show_companies: bool | None = None
    show_skills: bool | None = None
    show_experiences: bool | None = None
    show_education: bool | None = None
    show_certifications: bool | None = None
    show_blog: bool | None = None
    show_testimonials: bool | None = None
    show_contacts: bool | None = None


class UrlInput(BaseModel):
    url: str = Field(min_length=1)


# =============================================================================
# Account Data Schemas
# =============================================================================


class AccountCleanupOutput(BaseModel):
    removed: dict[str, int]
    failed: list[str]

    class Config:
        from_attributes = True
