import pytest
from resume_match.rules import (
    extract_experience,
    is_experience_heading,
    parse_experience_heading,
    strip_bullet,
)


def test_parse_heading_company_title_dates():
    e = parse_experience_heading("Acme Corp - Senior Engineer 2019 - 2022")
    assert (e.company, e.title, e.start, e.end) == ("Acme Corp", "Senior Engineer", "2019", "2022")
    assert e.bullets == []


@pytest.mark.parametrize(
    "line, exp",
    [
        ("Globex @ Developer 2016 - Present", ("Globex", "Developer", "2016", "Present")),
        ("Initech Corp – Analyst 2014 – 2015", ("Initech Corp", "Analyst", "2014", "2015")),
        ("Initech Corp - Analyst", ("Initech Corp", "Analyst", "", "")),
        ("Umbrella • Researcher • 2010 to 2012", ("Umbrella", "Researcher", "2010 to 2012", "")),
        ("Hooli 2018", ("Hooli 2018", "", "", "")),
    ],
)
def test_parse_heading_variants(line, exp):
    e = parse_experience_heading(line)
    assert (e.company, e.title, e.start, e.end) == exp


@pytest.mark.parametrize(
    "line, expected",
    [
        ("Acme Corp - Senior Engineer", True),
        ("Hooli 2018 - 2020", True),
        ("Built APIs for 3 teams", False),
        ("- Grew revenue 30% in 2021", False),
        ("• Shipped the 2021 roadmap", False),
    ],
)
def test_experience_heading_heuristic(line, expected):
    assert is_experience_heading(line) is expected


@pytest.mark.parametrize(
    "line, out",
    [
        ("- Built APIs", "Built APIs"),
        ("• Built APIs", "Built APIs"),
        ("* Built APIs", "Built APIs"),
        ("12. Built APIs", "Built APIs"),
        ("-Built APIs", "-Built APIs"),
        ("Built APIs", "Built APIs"),
    ],
)
def test_strip_bullet(line, out):
    assert strip_bullet(line) == out


def test_extract_experience_two_entries_with_bullets():
    lines = [
        "Acme Corp - Senior Engineer 2019 - 2022",
        "- Built Python services",
        "- Grew revenue 30% in 2021",
        "Globex @ Developer 2016 - 2019",
        "1. Maintained billing pipelines",
    ]
    items = extract_experience(lines)
    assert len(items) == 2
    assert items[0].company == "Acme Corp"
    assert items[0].bullets == ["Built Python services", "Grew revenue 30% in 2021"]
    assert items[1].company == "Globex"
    assert items[1].title == "Developer"
    assert items[1].bullets == ["Maintained billing pipelines"]


def test_bullets_before_any_heading_get_an_empty_entry():
    items = extract_experience(["- Orphan bullet", "Acme Corp - Engineer 2020 - 2021"])
    assert len(items) == 2
    assert items[0].model_dump() == {
        "company": "",
        "title": "",
        "start": "",
        "end": "",
        "bullets": ["Orphan bullet"],
    }
    assert items[1].bullets == []


@pytest.mark.parametrize("lines", [None, []])
def test_extract_experience_empty_is_safe(lines):
    assert extract_experience(lines) == []
