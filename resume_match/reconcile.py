from __future__ import annotations
from typing import List, Optional
from rapidfuzz import fuzz, utils

from .models import AnalysisResult, ExperienceEntry, ResumeJson
from .parser import parse_resume_text
from .matcher import match_job_description
from .keywords import extract_keywords, suggest_skills

# mean token_set_ratio over the compared fields (company, title)
MATCH_THRESHOLD = 85


def _entry_similarity(a: ExperienceEntry, b: ExperienceEntry) -> float:
    scores = []
    if a.company and b.company:
        scores.append(fuzz.token_set_ratio(a.company, b.company, processor=utils.default_process))
    if a.title and b.title:
        scores.append(fuzz.token_set_ratio(a.title, b.title, processor=utils.default_process))
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def merge_experience(
    edited: List[ExperienceEntry], parsed: List[ExperienceEntry]
) -> List[ExperienceEntry]:
    """
    Keep the user's edited entry wherever it matches a freshly parsed one;
    the fresh parse decides which entries exist and in what order.
    """
    if not edited:
        return parsed
    if not parsed:
        return [e.model_copy(deep=True) for e in edited]
    out: List[ExperienceEntry] = []
    used = [False] * len(edited)
    for p in parsed:
        best_i, best = -1, 0.0
        for i, e in enumerate(edited):
            if used[i]:
                continue
            score = _entry_similarity(p, e)
            if score > best:
                best = score
                best_i = i
        if best_i >= 0 and best >= MATCH_THRESHOLD:
            used[best_i] = True
            out.append(edited[best_i].model_copy(deep=True))
        else:
            out.append(p)
    return out


def merge_analyzed(previous: Optional[ResumeJson], parsed: ResumeJson) -> ResumeJson:
    """
    Re-analyze policy: user edits to summary, skills and matching experience
    entries survive a fresh parse; everything else comes from the parse.
    """
    if previous is None:
        return parsed
    # model_copy does not copy `update` values; nothing in the result may alias `previous`
    education = parsed.education or [e.model_copy(deep=True) for e in previous.education]
    return parsed.model_copy(
        update={
            "summary": previous.summary or parsed.summary,
            "skills": list(previous.skills) if previous.skills else list(parsed.skills),
            "experience": merge_experience(previous.experience, parsed.experience),
            "education": education,
        },
        deep=True,
    )


def analyze(
    text: str, job_description: str = "", previous: Optional[ResumeJson] = None
) -> AnalysisResult:
    resume = merge_analyzed(previous, parse_resume_text(text))
    jd = (job_description or "").strip()
    return AnalysisResult(
        resume=resume,
        match=match_job_description(jd, resume) if jd else None,
        keywords=extract_keywords(jd),
        suggested_skills=suggest_skills(jd, resume.skills),
    )
