# resume_match/sections.py
from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Tuple

# Exact heading vocabulary (lowercase). A line is a heading only when it equals
# one of these after trimming trailing ":" / ".".
HEADING_KEYWORDS: Tuple[str, ...] = (
    "summary",
    "objective",
    "profile",
    "skills",
    "technical skills",
    "experience",
    "professional experience",
    "work experience",
    "projects",
    "education",
    "certifications",
    "awards",
)

HEADER_KEY = "header"

_WS = re.compile(r"\s+")


def section_key(heading: str) -> str:
    """'technical skills' -> 'technicalskills'"""
    return _WS.sub("", heading or "")


def detect_heading(line: str) -> Optional[str]:
    """
    Returns the normalized section key when `line` is a heading, else None.
    'Technical Skills:' -> 'technicalskills'
    """
    lower = (line or "").strip().lower().rstrip(":.").strip()
    if lower in HEADING_KEYWORDS:
        return section_key(lower)
    return None


def split_into_sections(lines: Iterable[str]) -> Dict[str, List[str]]:
    """
    Single left-to-right pass over resume lines.

    Lines before the first heading land in "header". Heading lines themselves
    are dropped; every other line goes to the current section's body.
    """
    sections: Dict[str, List[str]] = {HEADER_KEY: []}
    current = HEADER_KEY

    for line in lines or []:
        key = detect_heading(line)
        if key:
            current = key
            sections.setdefault(current, [])
            continue
        sections.setdefault(current, []).append(line)

    return sections
