"""
Data models for the profile record.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SkillLevel(str, Enum):
    """Proficiency tier, ordered from lowest to highest."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"

    @property
    def rank(self) -> int:
        return _LEVEL_ORDER.index(self) + 1


_LEVEL_ORDER = [SkillLevel.BEGINNER, SkillLevel.INTERMEDIATE, SkillLevel.ADVANCED, SkillLevel.EXPERT]


class Provider(str, Enum):
    """Closed set of contact channels a social link can point to."""
    LINKEDIN = "linkedin"
    GITHUB = "github"
    TWITTER = "twitter"
    WEBSITE = "website"
    EMAIL = "email"
    WHATSAPP = "whatsapp"


class Skill(BaseModel):
    name: str
    level: SkillLevel


class Project(BaseModel):
    id: str
    title: str
    description: str
    role: str
    image: str
    link: str = "#"


class Testimonial(BaseModel):
    id: str
    author: str
    role: str
    text: str


class SocialLink(BaseModel):
    provider: Provider
    url: str


class ContactInfo(BaseModel):
    email: str
    phone: Optional[str] = None
    links: List[SocialLink] = []


class ProfileData(BaseModel):
    """The single structured document describing the portfolio owner."""
    id: str
    name: str
    title: str
    photo: str
    summary: str
    about: str
    skills: List[Skill] = []
    projects: List[Project] = []
    testimonials: List[Testimonial] = []
    contact: ContactInfo
    cv: str = "#"
    updated_at: datetime = Field(default_factory=utcnow)
