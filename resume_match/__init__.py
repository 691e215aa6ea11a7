from .models import (
    ContactInfo,
    ExperienceEntry,
    EducationEntry,
    ResumeJson,
    BulletSource,
    RankedBullet,
    MatchResult,
    AnalysisResult,
)
from .tokens import tokenize
from .sections import split_into_sections
from .parser import parse_resume_text
from .matcher import match_job_description, compute_overlap
from .reconcile import analyze, merge_analyzed

__all__ = [
    "ContactInfo",
    "ExperienceEntry",
    "EducationEntry",
    "ResumeJson",
    "BulletSource",
    "RankedBullet",
    "MatchResult",
    "AnalysisResult",
    "tokenize",
    "split_into_sections",
    "parse_resume_text",
    "match_job_description",
    "compute_overlap",
    "analyze",
    "merge_analyzed",
]
