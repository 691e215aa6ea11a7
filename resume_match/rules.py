from __future__ import annotations
import re
from typing import List, Optional, Sequence

from .models import ContactInfo, ExperienceEntry, EducationEntry

HEADER_LINES = 8

EMAIL = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.I)
PHONE = re.compile(r"\+?\d[\d\s().-]{7,}\d")
LINK = re.compile(r"https?://[^\s)]+|www\.[^\s)]+", re.I)
# "Austin, TX 78701" / "Berlin" / "New York, NY"; only the line ending matters
LOCATION = re.compile(r"\b[A-Za-z]+\s?(?:,\s?[A-Za-z]+)?\s?(?:\d{5})?$")

BULLET_MARKERS = (re.compile(r"^[-•*]\s+"), re.compile(r"^\d+\.\s+"))

# "Acme Corp - Engineer", "Data Team – Lead"
EXPERIENCE_HEADING = re.compile(r"(?:\b[A-Za-z]+\b\s?){2,}[-–]\s?[A-Za-z]+")
YEAR_TOKEN = re.compile(r"\b\d{4}\b")
DATE_RANGE = re.compile(r"(\b\d{4}\b).*(\b\d{4}\b|present)", re.I)
RANGE_SPLIT = re.compile(r"[-–]")
HEADING_PARTS = re.compile(r"[-–@•]")

DEGREE_HINT = re.compile(
    r"\b(?:b\.?s\.?|m\.?s\.?|ph\.?d\.?|bachelor|master|diploma|degree)", re.I
)
YEAR = re.compile(r"\b(?:19|20)\d{2}\b")

SKILL_SPLIT = re.compile(r"[,;\n]")
SKILL_JUNK = re.compile(r"[^a-z0-9.+# ]", re.I)


# ---------------------------------------------------------------- contacts


def _is_email_line(line: str) -> bool:
    return bool(EMAIL.search(line or ""))


def _is_phone_line(line: str) -> bool:
    return bool(PHONE.search(line or ""))


def _infer_name(lines: Sequence[str]) -> str:
    first = lines[0] if lines else ""
    if first and not _is_email_line(first) and not _is_phone_line(first):
        return LINK.sub("", first).strip()
    return ""


def _infer_location(lines: Sequence[str]) -> str:
    # the name line usually matches too; only contact lines are excluded
    for line in lines:
        if _is_email_line(line) or _is_phone_line(line):
            continue
        if LOCATION.search(line):
            return line
    return ""


def extract_contact(lines: Sequence[str]) -> ContactInfo:
    """
    Best-effort contact block from the first HEADER_LINES lines.
    Anything not found stays an empty string.
    """
    head = list(lines or [])[:HEADER_LINES]

    email = next((line for line in head if EMAIL.search(line)), "")

    phone = ""
    for line in head:
        m = PHONE.search(line)
        if m:
            phone = m.group(0)
            break

    links = list(dict.fromkeys(u for line in head for u in LINK.findall(line)))
    name = _infer_name(head)

    return ContactInfo(
        name=name,
        email=email,
        phone=phone,
        location=_infer_location(head),
        links=links,
    )


# ---------------------------------------------------------------- skills


def extract_skills(lines: Sequence[str]) -> List[str]:
    """
    'Python, Go; Rust' -> ['python', 'go', 'rust']
    No dedupe: the list mirrors what the candidate wrote.
    """
    if not lines:
        return []
    out: List[str] = []
    for tok in SKILL_SPLIT.split(" ".join(lines)):
        tok = tok.strip().lower()
        if len(tok) <= 1:
            continue
        tok = SKILL_JUNK.sub("", tok).strip()
        if tok:
            out.append(tok)
    return out


# ---------------------------------------------------------------- bullets


def is_bullet(line: str) -> bool:
    return any(rx.match(line or "") for rx in BULLET_MARKERS)


def strip_bullet(line: str) -> str:
    s = line or ""
    for rx in BULLET_MARKERS:
        if rx.match(s):
            return rx.sub("", s, count=1).strip()
    return s.strip()


# ---------------------------------------------------------------- experience


def is_experience_heading(line: str) -> bool:
    if EXPERIENCE_HEADING.search(line or ""):
        return True
    return bool(YEAR_TOKEN.search(line or "")) and not is_bullet(line)


def parse_experience_heading(line: str) -> ExperienceEntry:
    """
    'Acme Corp - Senior Engineer 2019 - 2022'
      -> company='Acme Corp', title='Senior Engineer', start='2019', end='2022'
    'Globex @ Developer 2016 - Present'
      -> company='Globex', title='Developer', start='2016', end='Present'
    """
    s = line or ""
    start, end = "", ""
    m = DATE_RANGE.search(s)
    if m:
        span = [p.strip() for p in RANGE_SPLIT.split(m.group(0))]
        start = span[0] if len(span) > 0 else ""
        end = span[1] if len(span) > 1 else ""
        s = s.replace(m.group(0), "", 1)

    parts = [p.strip() for p in HEADING_PARTS.split(s.strip())]
    parts = [p for p in parts if p]

    return ExperienceEntry(
        company=parts[0] if len(parts) > 0 else "",
        title=parts[1] if len(parts) > 1 else "",
        start=start,
        end=end,
    )


def extract_experience(lines: Optional[Sequence[str]]) -> List[ExperienceEntry]:
    """
    Walks the EXPERIENCE body. Heading lines open a new entry; everything else
    becomes a bullet of the open one. Bullets seen before any heading get an
    empty entry so they are not lost.
    """
    if not lines:
        return []

    entries: List[ExperienceEntry] = []
    cur: Optional[ExperienceEntry] = None

    for line in lines:
        if is_experience_heading(line):
            if cur is not None:
                entries.append(cur)
            cur = parse_experience_heading(line)
            continue

        bullet = strip_bullet(line)
        if bullet:
            if cur is None:
                cur = ExperienceEntry()
            cur.bullets.append(bullet)

    if cur is not None:
        entries.append(cur)
    return entries


# ---------------------------------------------------------------- education


def is_education_heading(line: str) -> bool:
    return bool(DEGREE_HINT.search(line or ""))


def extract_year(line: str) -> str:
    m = YEAR.search(line or "")
    return m.group(0) if m else ""


def extract_education(lines: Optional[Sequence[str]]) -> List[EducationEntry]:
    """
    Same walk as extract_experience, keyed on degree words.
    institution and degree both hold the raw heading line.
    """
    if not lines:
        return []

    entries: List[EducationEntry] = []
    cur: Optional[EducationEntry] = None

    for line in lines:
        if is_education_heading(line):
            if cur is not None:
                entries.append(cur)
            cur = EducationEntry(
                institution=line,
                degree=line,
                year=extract_year(line),
            )
            continue

        bullet = strip_bullet(line)
        if bullet:
            if cur is None:
                cur = EducationEntry()
            cur.bullets.append(bullet)

    if cur is not None:
        entries.append(cur)
    return entries
