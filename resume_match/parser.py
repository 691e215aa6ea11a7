from __future__ import annotations

import re
from typing import Dict, List

from .models import ResumeJson
from .sections import HEADER_KEY, split_into_sections
from . import rules
from .logger import get_logger

logger = get_logger(__name__)

# sections the parser models itself; every other non-empty one goes to extras
MODELED_SECTIONS = {HEADER_KEY, "summary", "skills", "experience", "education"}


def normalise_text(raw_text: str) -> str:
    s = (raw_text or "").replace("\r\n", "\n").replace("\r", "\n")
    s = s.replace("\t", " ")
    s = re.sub(r"\n{3,}", "\n\n", s)
    return s.strip()


def text_lines(raw_text: str) -> List[str]:
    return [ln.strip() for ln in normalise_text(raw_text).split("\n") if ln.strip()]


def extract_extras(sections: Dict[str, List[str]]) -> Dict[str, List[str]]:
    return {
        key: list(body)
        for key, body in sections.items()
        if key not in MODELED_SECTIONS and body
    }


def parse_resume_text(raw_text: str) -> ResumeJson:
    """
    Plain resume text -> ResumeJson.

    Pure and best-effort: unrecognised input yields empty fields, never an
    exception. Callers that failed to extract text should pass "".
    """
    lines = text_lines(raw_text)

    contact = rules.extract_contact(lines)
    secs = split_into_sections(lines)

    resume = ResumeJson(
        contact=contact,
        summary=" ".join(secs.get("summary") or []),
        skills=rules.extract_skills(secs.get("skills") or []),
        experience=rules.extract_experience(secs.get("experience")),
        education=rules.extract_education(secs.get("education")),
        extras=extract_extras(secs),
    )

    logger.debug(
        "parsed resume: %d lines, sections=%s, %d experience, %d education, %d skills",
        len(lines),
        sorted(secs),
        len(resume.experience),
        len(resume.education),
        len(resume.skills),
    )
    return resume
