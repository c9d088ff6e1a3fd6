"""
Normalization, tokenization & n-gram helpers.

WHAT:
  - lowercasing + trim, optional British -> American spelling pass,
    word tokens, and contiguous n-gram spans over those tokens.

WHY:
  - The lexicon is US English and keyed on lowercase words and
    space-joined phrases, so every input has to land in that form.
"""

import json, os, re
from functools import lru_cache
from typing import Iterable, List, Mapping

from .utils import get_logger

log = get_logger(__name__)

WORD_RE = re.compile(r"[^\W_]+(?:'[^\W_]+)*")
APOS_RE = re.compile(r"[‘’ʼ]")

DIALECT_PATH = os.path.join(os.path.dirname(__file__), "data", "gb_us.json")

def normalize_text(text) -> str:
    t = text if isinstance(text, str) else str(text)
    return APOS_RE.sub("'", t.lower().strip())

@lru_cache(maxsize=None)
def _load_dialect():
    with open(DIALECT_PATH, "r", encoding="utf-8") as f:
        table: Mapping[str, str] = {k.lower(): v.lower() for k, v in json.load(f).items()}
    words = sorted(table, key=len, reverse=True)
    return re.compile(r"\b(" + "|".join(map(re.escape, words)) + r")\b"), table

def gb_to_us(text: str) -> str:
    """Swap British spellings for American ones, word by word."""
    rx, table = _load_dialect()
    return rx.sub(lambda m: table[m.group(1)], text)

def tokenize(text: str) -> List[str]:
    return WORD_RE.findall(text or "")

def ngrams(tokens: List[str], n: int) -> List[str]:
    """
    Space-joined spans of ``n`` consecutive tokens, in text order.
    An order longer than the token list is skipped with a warning.
    """
    if len(tokens) < n:
        log.warning("skipping %d-grams: only %d tokens", n, len(tokens))
        return []
    return [" ".join(tokens[i:i+n]) for i in range(len(tokens) - n + 1)]

def all_ngrams(tokens: List[str], orders: Iterable[int]) -> List[str]:
    out: List[str] = []
    for n in sorted(orders):
        out.extend(ngrams(tokens, n))
    return out
