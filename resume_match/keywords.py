from __future__ import annotations
import re
from collections import Counter
from typing import List, Sequence

from .tokens import tokenize

# ------- Technology lexicon (small but effective) -------
# canonical name -> list of regex fragments (lowercase)
_SKILL_CANON = {
    "Python": [r"\bpython\b"],
    "Java": [r"\bjava\b"],
    "JavaScript": [r"\bjavascript\b", r"\bjs\b(?!x)"],
    "TypeScript": [r"\btypescript\b"],
    "C#": [r"(?<![\w#])c#(?![\w#])", r"\bc[-\s]?sharp\b"],
    "C++": [r"(?<![\w+])c\+\+(?![\w+])"],
    "Go": [r"\bgolang\b", r"\bgo\b(?=\s*(?:,|/|\)|$|developer|engineer|services?))"],
    "Rust": [r"\brust\b"],
    "Node.js": [r"\bnode(?:\.js)?\b"],
    "React": [r"\breact(?:\.js|js)?\b"],
    "Vue": [r"\bvue(?:\.js|js)?\b"],
    "Angular": [r"\bangular\b"],
    "Django": [r"\bdjango\b"],
    "Flask": [r"\bflask\b"],
    "FastAPI": [r"\bfastapi\b"],
    "Spring": [r"\bspring(?:\s*boot)?\b"],
    "SQL": [r"\bsql\b"],
    "PostgreSQL": [r"\bpostgres(?:ql)?\b"],
    "MySQL": [r"\bmysql\b"],
    "MongoDB": [r"\bmongo(?:db)?\b"],
    "Redis": [r"\bredis\b"],
    "Elasticsearch": [r"\belastic(?:search)?\b"],
    "Kafka": [r"\bkafka\b"],
    "GraphQL": [r"\bgraphql\b"],
    "REST": [r"\brest(?:ful)?\b"],
    "gRPC": [r"\bgrpc\b"],
    "HTML": [r"\bhtml5?\b"],
    "CSS": [r"\bcss3?\b"],
    "Git": [r"\bgit\b"],
    "Linux": [r"\blinux\b"],
    "Docker": [r"\bdocker\b"],
    "Kubernetes": [r"\bkubernetes\b", r"\bk8s\b"],
    "AWS": [r"\baws\b", r"amazon web services"],
    "Azure": [r"\bazure\b"],
    "GCP": [r"\bgcp\b", r"\bgoogle cloud\b"],
    "CI/CD": [r"\bci/?cd\b", r"continuous integration", r"continuous delivery"],
    "Terraform": [r"\bterraform\b"],
    "Ansible": [r"\bansible\b"],
    "Pandas": [r"\bpandas\b"],
    "NumPy": [r"\bnumpy\b"],
    "Scikit-learn": [r"\bscikit[- ]?learn\b", r"\bsklearn\b"],
    "PyTorch": [r"\bpytorch\b"],
    "TensorFlow": [r"\btensorflow\b"],
    "Machine Learning": [r"\bmachine learning\b", r"\bml\b"],
    "NLP": [r"\bnlp\b", r"natural language processing"],
    "Tableau": [r"\btableau\b"],
    "Excel": [r"\bexcel\b"],
    "Jira": [r"\bjira\b"],
    "Agile": [r"\bagile\b", r"\bscrum\b"],
}

_SKILL_PATTERNS = [
    (canon, re.compile("|".join(frags), re.I)) for canon, frags in _SKILL_CANON.items()
]

STOP_WORDS = frozenset(
    """
    about above after all also an and any are as at be been being both but by
    can could did do does doing during each etc for from had has have having he
    her here hers him his how if in into is it its itself just may me more most
    must my no nor not of off on once only or other our ours out over own per
    plus same she should so some such than that the their theirs them then there
    these they this those through to too under until up us very was we were what
    when where which while who whom why will with within without would you your
    yours able across ability etc. e.g. i.e. including strong work working team
    role join looking ideal candidate requirements preferred years year experience
    """.split()
)


def extract_keywords(text: str, limit: int = 15) -> List[str]:
    """
    Most frequent meaningful tokens of a job description.
    Ties keep first-appearance order.
    """
    toks = [
        t for t in tokenize(text)
        if t not in STOP_WORDS and not t.replace(".", "").isdigit()
    ]
    if not toks:
        return []
    first_seen = {}
    for i, t in enumerate(toks):
        first_seen.setdefault(t, i)
    counts = Counter(toks)
    ranked = sorted(counts, key=lambda t: (-counts[t], first_seen[t]))
    return ranked[: max(limit, 0)]


def lexicon_skills(text: str) -> List[str]:
    """Canonical lexicon names mentioned anywhere in `text`, lexicon order."""
    s = text or ""
    return [canon for canon, rx in _SKILL_PATTERNS if rx.search(s)]


def suggest_skills(job_description: str, resume_skills: Sequence[str]) -> List[str]:
    """
    Lexicon skills the job asks for that the resume does not list yet.
    'We run Kubernetes (k8s) and Python' with skills ['python'] -> ['Kubernetes']
    """
    have = {(s or "").strip().casefold() for s in resume_skills or []}
    return [canon for canon in lexicon_skills(job_description) if canon.casefold() not in have]
