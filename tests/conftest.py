import sys
from pathlib import Path

import pytest

# Ensure project root is importable (so `import backend` works)
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


SAMPLE_RESUME = """
Jane Doe
jane.doe@example.com
+1 (555) 123-4567
Austin, TX 78701
https://github.com/janedoe
www.linkedin.com/in/janedoe

Summary
Backend engineer focused on data platforms.

Skills
Python, Go; Rust, Docker

Experience
Acme Corp - Senior Engineer 2019 - 2022
- Built Python services on Kubernetes
- Led a team of five engineers
Globex @ Developer 2016 - 2019
• Maintained billing pipelines in Go


Education
B.S. Computer Science, State University 2015
- Dean's list

Certifications
AWS Certified Developer
"""

SAMPLE_JD = "We need a Python engineer with Kubernetes and Docker experience"


@pytest.fixture
def sample_resume_text():
    return SAMPLE_RESUME


@pytest.fixture
def sample_jd():
    return SAMPLE_JD
