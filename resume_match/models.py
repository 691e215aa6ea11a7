from __future__ import annotations
from pydantic import BaseModel, Field, ConfigDict
from typing import Dict, List, Optional


class ContactInfo(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    links: List[str] = []


class ExperienceEntry(BaseModel):
    company: str = ""
    title: str = ""
    start: str = Field(default="", description="raw text, not validated as a date")
    end: str = Field(default="", description="raw text, may be 'Present'")
    bullets: List[str] = []


class EducationEntry(BaseModel):
    institution: str = ""
    degree: str = ""
    year: str = ""
    bullets: List[str] = []


class ResumeJson(BaseModel):
    contact: ContactInfo = Field(default_factory=ContactInfo)
    summary: str = ""
    skills: List[str] = []
    experience: List[ExperienceEntry] = []
    education: List[EducationEntry] = []
    extras: Dict[str, List[str]] = {}


class BulletSource(BaseModel):
    section: str
    company: Optional[str] = None
    title: Optional[str] = None


class RankedBullet(BaseModel):
    text: str
    score: float = Field(ge=0.0, le=1.0)
    source: BulletSource


class MatchResult(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(populate_by_name=True)

    ranked_bullets: List[RankedBullet] = Field(default_factory=list, alias="rankedBullets")
    skill_matches: List[str] = Field(default_factory=list, alias="skillMatches")
    match_score: int = Field(default=0, ge=0, le=100, alias="matchScore")


class AnalysisResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume: ResumeJson
    match: Optional[MatchResult] = None
    keywords: List[str] = []
    suggested_skills: List[str] = Field(default_factory=list, alias="suggestedSkills")
