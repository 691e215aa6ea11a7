from __future__ import annotations

import re
from typing import List

# keep tech punctuation so "c++", "c#" and "node.js" survive
_NON_TOKEN = re.compile(r"[^a-z0-9+.# ]")


def tokenize(text: str) -> List[str]:
    """Lowercase word-like tokens; tokens of one character are dropped."""
    cleaned = _NON_TOKEN.sub(" ", (text or "").lower())
    return [tok for tok in (t.strip() for t in cleaned.split()) if len(tok) > 1]
