from __future__ import annotations

import re
from typing import List

TOKEN_PATTERN = re.compile(r"\S+|\s+")


def tokenize(text: str) -> List[str]:
    """Split text into alternating runs of non-whitespace and whitespace."""
    if not text:
        return []
    return TOKEN_PATTERN.findall(text)


def word_tokens(text: str) -> List[str]:
    """Return only the non-whitespace tokens of text, in order."""
    return [token for token in tokenize(text) if token.strip()]
