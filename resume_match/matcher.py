from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from .models import BulletSource, ExperienceEntry, MatchResult, RankedBullet, ResumeJson
from .tokens import tokenize
from .logger import get_logger

logger = get_logger(__name__)

MAX_RANKED_BULLETS = 12
BULLET_WEIGHT = 0.7
SKILL_WEIGHT = 0.3


def compute_overlap(tokens_a: Sequence[str], tokens_b: Sequence[str]) -> float:
    """
    Shared distinct tokens over the larger distinct-token count.
    Symmetric, in [0, 1]; 0 when either side is empty.
    """
    set_a, set_b = set(tokens_a or ()), set(tokens_b or ())
    if not set_a or not set_b:
        return 0.0
    return len(set_a & set_b) / max(len(set_a), len(set_b))


def collect_bullets(
    experience: Sequence[ExperienceEntry],
) -> List[Tuple[str, List[str], BulletSource]]:
    out = []
    for entry in experience or []:
        source = BulletSource(section="experience", company=entry.company, title=entry.title)
        for bullet in entry.bullets:
            out.append((bullet, tokenize(bullet), source))
    return out


def match_skills(resume_skills: Sequence[str], jd_tokens: Sequence[str]) -> List[str]:
    jd_set = set(jd_tokens)
    return [s for s in resume_skills or [] if (s or "").lower() in jd_set]


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def compute_match_score(
    bullets: Sequence[RankedBullet], skill_matches: Sequence[str], total_skills: int
) -> int:
    if not bullets and not skill_matches:
        return 0
    bullet_score = sum(b.score for b in bullets) / max(len(bullets), 1)
    skill_score = len(skill_matches) / max(total_skills, 1)
    combined = (BULLET_WEIGHT * bullet_score + SKILL_WEIGHT * skill_score) * 100
    return min(100, _round_half_up(combined))


def match_job_description(job_description: str, resume: ResumeJson) -> MatchResult:
    """
    Scores every experience bullet against the job description, keeps the
    best MAX_RANKED_BULLETS with a non-zero score, and blends their mean with
    skill coverage into a 0-100 score.
    """
    jd_tokens = tokenize(job_description)

    scored = [
        RankedBullet(text=text, score=compute_overlap(toks, jd_tokens), source=source)
        for text, toks, source in collect_bullets(resume.experience)
    ]
    # sorted() is stable: equal scores keep resume order
    ranked = sorted((b for b in scored if b.score > 0), key=lambda b: -b.score)
    ranked = ranked[:MAX_RANKED_BULLETS]

    skill_matches = match_skills(resume.skills, jd_tokens)
    score = compute_match_score(ranked, skill_matches, len(resume.skills))

    logger.debug(
        "match: %d jd tokens, %d/%d bullets ranked, %d skill matches, score=%d",
        len(jd_tokens),
        len(ranked),
        len(scored),
        len(skill_matches),
        score,
    )
    return MatchResult(ranked_bullets=ranked, skill_matches=skill_matches, match_score=score)
