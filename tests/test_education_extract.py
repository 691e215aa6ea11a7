import pytest
from resume_match.rules import extract_education


def test_education_entries_keep_raw_line_in_both_fields():
    lines = [
        "B.S. Computer Science, State University 2015",
        "- Dean's list",
        "M.S. Data Science 2018",
    ]
    out = extract_education(lines)
    assert len(out) == 2
    first = out[0]
    assert first.institution == first.degree == "B.S. Computer Science, State University 2015"
    assert first.year == "2015"
    assert first.bullets == ["Dean's list"]
    assert out[1].year == "2018"
    assert out[1].bullets == []


@pytest.mark.parametrize(
    "line",
    [
        "Bachelor of Arts, History",
        "Master of Science",
        "PhD in Physics",
        "High School Diploma",
        "Associate Degree, Nursing",
        "BS Mathematics",
    ],
)
def test_degree_vocabulary_opens_entry(line):
    out = extract_education([line])
    assert len(out) == 1
    assert out[0].degree == line
    assert out[0].year == ""


def test_coursework_line_is_not_a_degree():
    out = extract_education(["Bachelor of Arts", "Relevant coursework: Algorithms, Systems"])
    assert len(out) == 1
    assert out[0].bullets == ["Relevant coursework: Algorithms, Systems"]


def test_degree_words_inside_other_words_do_not_open_entries():
    out = extract_education(["M.S. Computer Science", "Coursework: Distributed Systems"])
    assert len(out) == 1
    assert out[0].bullets == ["Coursework: Distributed Systems"]


def test_lines_before_a_degree_get_an_empty_entry():
    out = extract_education(["State University", "Bachelor of Arts 2012"])
    assert len(out) == 2
    assert out[0].institution == "" and out[0].bullets == ["State University"]
    assert out[1].year == "2012"


@pytest.mark.parametrize("lines", [None, []])
def test_extract_education_empty_is_safe(lines):
    assert extract_education(lines) == []
