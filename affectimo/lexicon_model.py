import json, math, os
from collections import Counter
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, NamedTuple, Optional

from .normalize import all_ngrams, normalize_text, tokenize
from .options import Encoding
from .utils import get_logger

log = get_logger(__name__)

# Intercepts of the published linear model; one score per category.
INTERCEPTS: Mapping[str, float] = MappingProxyType({
    "AFFECT": 5.037104721,
    "INTENSITY": 2.399762631,
})

class LexiconError(ValueError):
    pass

class MatchRecord(NamedTuple):
    term: str
    count: int
    weight: float

@dataclass(frozen=True)
class TokenPool:
    counts: Counter
    wordcount: int

    def __contains__(self, term: str) -> bool:
        return term in self.counts

def build_pool(tokens: List[str], orders: Iterable[int] = (), wc_grams: bool = False) -> TokenPool:
    """
    Merge unigrams with every requested n-gram order and count occurrences.
    wordcount is the unigram count unless wc_grams asks for the merged length.
    """
    grams = all_ngrams(tokens, orders)
    merged = list(tokens) + grams
    wordcount = len(merged) if wc_grams else len(tokens)
    return TokenPool(Counter(merged), wordcount)

def round_half_away(x: float, places: int) -> float:
    if not math.isfinite(x):
        return x
    with localcontext() as ctx:
        d = Decimal(repr(x))
        # quantize needs room for every integer digit plus the requested places
        ctx.prec = max(28, d.adjusted() + places + 2)
        q = Decimal(1).scaleb(-places)
        return float(d.quantize(q, rounding=ROUND_HALF_UP))

def contribution(rec: MatchRecord, encoding: Encoding, wordcount: int) -> float:
    if encoding is Encoding.FREQUENCY:
        return (rec.count / wordcount) * rec.weight
    return rec.weight

def aggregate(records: Iterable[MatchRecord], intercept: float, encoding: Encoding,
              wordcount: int, places: int) -> float:
    lex = 0.0
    for rec in records:
        lex += contribution(rec, encoding, wordcount)
    return round_half_away(lex + intercept, places)

class Lexicon:
    """Read-only category -> term -> weight table."""

    def __init__(self, categories: Mapping[str, Mapping[str, float]]):
        if not isinstance(categories, Mapping):
            raise LexiconError("lexicon must map category -> {term: weight}")
        cats: Dict[str, Mapping[str, float]] = {}
        for cat, terms in categories.items():
            if not isinstance(terms, Mapping):
                raise LexiconError(f"category {cat!r} must map term -> weight")
            table = {}
            for term, w in terms.items():
                try:
                    weight = float(w)
                except (TypeError, ValueError):
                    raise LexiconError(f"bad weight for {term!r} in {cat!r}: {w!r}") from None
                # keyed the way input is tokenized, so "well-being" matches "well being"
                key = " ".join(tokenize(normalize_text(term)))
                if not key:
                    log.warning("skipping %r in %s: no word tokens", term, cat)
                    continue
                table[key] = weight
            cats[str(cat).upper()] = MappingProxyType(table)

        missing = [c for c in INTERCEPTS if c not in cats]
        if missing:
            raise LexiconError(f"lexicon is missing categories: {', '.join(missing)}")
        self.categories: Mapping[str, Mapping[str, float]] = MappingProxyType(cats)

    @classmethod
    def from_file(cls, path: str) -> "Lexicon":
        if not os.path.isfile(path):
            raise FileNotFoundError(f"Lexicon not found: {path}")
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise LexiconError(f"{path}: not valid JSON ({e})") from e

        # build_lexicon writes {"kind": ..., "categories": {CAT: {term: weight}}};
        # a bare {CAT: {term: weight}} file is accepted as well.
        if isinstance(data, dict) and "categories" in data:
            data = data["categories"]
        lex = cls(data)
        log.debug("loaded %s (%s)", path,
                  ", ".join(f"{c}={len(t)}" for c, t in lex.categories.items()))
        return lex

    def __getitem__(self, category: str) -> Mapping[str, float]:
        return self.categories[category]

    def __len__(self) -> int:
        return sum(len(t) for t in self.categories.values())

    def match(self, pool: TokenPool, min_weight: float = -math.inf, max_weight: float = math.inf,
              categories: Optional[Iterable[str]] = None) -> Dict[str, List[MatchRecord]]:
        """
        Returns {category: [MatchRecord, ...]} in lexicon order.
        A term matches when it is in the pool and min_weight < weight < max_weight.
        """
        cats = list(categories) if categories is not None else list(self.categories)
        matches: Dict[str, List[MatchRecord]] = {}
        for cat in cats:
            found: List[MatchRecord] = []
            for term, weight in self.categories.get(cat, {}).items():
                if term in pool and min_weight < weight < max_weight:
                    found.append(MatchRecord(term, pool.counts[term], weight))
            matches[cat] = found
        return matches

    def summarize(self, matches: Mapping[str, List[MatchRecord]], encoding: Encoding,
                  wordcount: int, places: int) -> Dict[str, float]:
        """One rounded score per intercept category."""
        return {
            cat: aggregate(matches.get(cat, ()), intercept, encoding, wordcount, places)
            for cat, intercept in INTERCEPTS.items()
        }
