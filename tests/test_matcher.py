import pytest
from resume_match import match_job_description, parse_resume_text
from resume_match.matcher import MAX_RANKED_BULLETS, compute_match_score, compute_overlap
from resume_match.models import ExperienceEntry, ResumeJson


def _resume(*entries, skills=()):
    return ResumeJson(
        skills=list(skills),
        experience=[ExperienceEntry(company=c, title=t, bullets=list(b)) for c, t, b in entries],
    )


def test_match_sample_resume(sample_resume_text, sample_jd):
    res = parse_resume_text(sample_resume_text)
    out = match_job_description(sample_jd, res)

    assert [b.text for b in out.ranked_bullets] == ["Built Python services on Kubernetes"]
    top = out.ranked_bullets[0]
    assert top.score == pytest.approx(2 / 9)
    assert top.source.section == "experience"
    assert top.source.company == "Acme Corp"
    assert top.source.title == "Senior Engineer"
    assert out.skill_matches == ["python", "docker"]
    # round(100 * (0.7 * 2/9 + 0.3 * 2/4)) == round(30.56)
    assert out.match_score == 31


def test_empty_job_description_scores_zero(sample_resume_text):
    out = match_job_description("", parse_resume_text(sample_resume_text))
    assert out.ranked_bullets == []
    assert out.skill_matches == []
    assert out.match_score == 0


def test_skill_matches_are_exact_case_insensitive_tokens():
    res = _resume(skills=["Python", "Docker"])
    out = match_job_description("We need Python and Kubernetes experience", res)
    assert out.skill_matches == ["Python"]
    assert out.ranked_bullets == []
    assert out.match_score == 15


def test_multiword_skill_never_matches_single_tokens():
    res = _resume(skills=["machine learning"])
    assert match_job_description("machine learning engineer", res).skill_matches == []


def test_zero_overlap_bullets_are_excluded():
    res = _resume(("Acme", "Dev", ["Painted fences", "Wrote Python tooling"]))
    out = match_job_description("python", res)
    assert [b.text for b in out.ranked_bullets] == ["Wrote Python tooling"]
    assert all(b.score > 0 for b in out.ranked_bullets)


def test_ranked_bullets_truncated_and_sorted():
    bullets = [" ".join(["python"] + [f"w{j}" for j in range(i)]) for i in range(20)]
    # reverse so the best bullet is last in resume order
    res = _resume(("Acme", "Dev", list(reversed(bullets))))
    out = match_job_description("python", res)

    assert len(out.ranked_bullets) == MAX_RANKED_BULLETS
    scores = [b.score for b in out.ranked_bullets]
    assert scores == sorted(scores, reverse=True)
    assert out.ranked_bullets[0].text == "python"
    assert scores[0] == 1.0


def test_equal_scores_keep_resume_order():
    res = _resume(
        ("Acme", "Dev", ["python alpha"]),
        ("Globex", "Lead", ["python beta"]),
    )
    out = match_job_description("python", res)
    assert [b.text for b in out.ranked_bullets] == ["python alpha", "python beta"]
    assert [b.source.company for b in out.ranked_bullets] == ["Acme", "Globex"]


def test_perfect_match_is_capped_at_100():
    res = _resume(("Acme", "Dev", ["python docker"]), skills=["python", "docker"])
    assert match_job_description("Python, Docker!", res).match_score == 100


@pytest.mark.parametrize(
    "a, b",
    [
        (["python", "docker"], ["python", "kubernetes", "aws"]),
        (["go"], ["go", "go", "rust"]),
        ([], ["python"]),
        (["x1", "y1", "z1"], ["x1", "y1", "z1"]),
    ],
)
def test_compute_overlap_is_symmetric_and_bounded(a, b):
    ab, ba = compute_overlap(a, b), compute_overlap(b, a)
    assert ab == ba
    assert 0.0 <= ab <= 1.0


def test_compute_overlap_values():
    assert compute_overlap(["a1", "b1"], ["a1", "c1", "d1"]) == pytest.approx(1 / 3)
    assert compute_overlap([], []) == 0.0


def test_compute_match_score_empty_is_zero():
    assert compute_match_score([], [], 0) == 0
    assert compute_match_score([], [], 10) == 0


def test_match_is_deterministic(sample_resume_text, sample_jd):
    res = parse_resume_text(sample_resume_text)
    assert match_job_description(sample_jd, res) == match_job_description(sample_jd, res)


def test_match_result_serializes_with_camel_case():
    out = match_job_description("python", _resume(("Acme", "Dev", ["python"])))
    data = out.model_dump(by_alias=True)
    assert set(data) == {"rankedBullets", "skillMatches", "matchScore"}
    assert data["rankedBullets"][0]["source"] == {"section": "experience", "company": "Acme", "title": "Dev"}
