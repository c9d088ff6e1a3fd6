"""
Per-call scoring options.

``ScoreConfig`` is frozen and validated once in ``__post_init__``: anything
that can be coerced (numeric strings, enum names in any case, a single int
for ``ngrams``) is coerced, anything else falls back to that option's
default with a warning. Scoring itself never sees a bad value.
"""
from __future__ import annotations

import dataclasses, math, re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, FrozenSet, Mapping, Optional

from .utils import get_logger

log = get_logger(__name__)

class Encoding(str, Enum):
    BINARY = "binary"
    FREQUENCY = "frequency"

class OutputMode(str, Enum):
    LEX = "lex"
    MATCHES = "matches"
    FULL = "full"

class SortBy(str, Enum):
    FREQ = "freq"
    LEX = "lex"
    WEIGHT = "weight"

class Locale(str, Enum):
    US = "US"
    GB = "GB"

DEFAULT_NGRAMS: FrozenSet[int] = frozenset({2, 3})

# option-bag spellings -> field names
ALIASES = {
    "min": "min_weight",
    "max": "max_weight",
    "nGrams": "ngrams",
    "sortBy": "sort_by",
    "wcGrams": "wc_grams",
}

def _enum(kind, value, default, name):
    if isinstance(value, kind):
        return value
    if value is not None:
        s = str(value).strip().lower()
        for member in kind:
            if member.value.lower() == s or member.name.lower() == s:
                return member
    log.warning("invalid %s %r, using %r", name, value, default.value)
    return default

def _float(value, default, name):
    if value is None:
        return default
    if isinstance(value, bool):
        log.warning("invalid %s %r, using %r", name, value, default)
        return default
    try:
        f = float(value)
    except (TypeError, ValueError):
        log.warning("invalid %s %r, using %r", name, value, default)
        return default
    if math.isnan(f):
        log.warning("invalid %s %r, using %r", name, value, default)
        return default
    return f

def _places(value, default):
    if isinstance(value, bool):
        log.warning("invalid places %r, using %d", value, default)
        return default
    try:
        f = float(value)
        p = int(f)
    except (TypeError, ValueError, OverflowError):
        log.warning("invalid places %r, using %d", value, default)
        return default
    if p != f or p < 0:
        log.warning("invalid places %r, using %d", value, default)
        return default
    return p

def _ngrams(value) -> FrozenSet[int]:
    if value is None:
        return DEFAULT_NGRAMS
    if isinstance(value, bool):
        return DEFAULT_NGRAMS if value else frozenset()
    if isinstance(value, str):
        value = [v for v in re.split(r"[\s,]+", value) if v]
    elif isinstance(value, (int, float)):
        value = [value]
    try:
        items = list(value)
    except TypeError:
        log.warning("invalid ngrams %r, using %s", value, sorted(DEFAULT_NGRAMS))
        return DEFAULT_NGRAMS
    orders = set()
    for v in items:
        try:
            n = int(v)
        except (TypeError, ValueError, OverflowError):
            log.warning("ignoring n-gram order %r", v)
            continue
        if n < 1 or (isinstance(v, float) and v != n):
            log.warning("ignoring n-gram order %r", v)
            continue
        orders.add(n)
    return frozenset(orders)

def _flag(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)

@dataclass(frozen=True)
class ScoreConfig:
    encoding: Encoding = Encoding.BINARY
    min_weight: float = -math.inf
    max_weight: float = math.inf
    ngrams: FrozenSet[int] = field(default=DEFAULT_NGRAMS)
    output: OutputMode = OutputMode.LEX
    places: int = 9
    sort_by: SortBy = SortBy.FREQ
    wc_grams: bool = False
    locale: Locale = Locale.US

    def __post_init__(self):
        fix = lambda k, v: object.__setattr__(self, k, v)
        fix("encoding", _enum(Encoding, self.encoding, Encoding.BINARY, "encoding"))
        fix("min_weight", _float(self.min_weight, -math.inf, "min"))
        fix("max_weight", _float(self.max_weight, math.inf, "max"))
        fix("ngrams", _ngrams(self.ngrams))
        fix("output", _enum(OutputMode, self.output, OutputMode.LEX, "output mode"))
        fix("places", _places(self.places, 9))
        fix("sort_by", _enum(SortBy, self.sort_by, SortBy.FREQ, "sortBy"))
        fix("wc_grams", _flag(self.wc_grams))
        fix("locale", _enum(Locale, self.locale, Locale.US, "locale"))

    @classmethod
    def from_options(cls, base: Optional["ScoreConfig"] = None, **options: Any) -> "ScoreConfig":
        """Build a config from keyword options (camelCase spellings accepted), layered over ``base``."""
        names = {f.name for f in dataclasses.fields(cls)}
        kwargs = {}
        for key, value in options.items():
            name = ALIASES.get(key, key)
            if name not in names:
                log.warning("ignoring unknown option %r", key)
                continue
            kwargs[name] = value
        if base is None:
            return cls(**kwargs)
        return dataclasses.replace(base, **kwargs)

def resolve(config=None, base: Optional[ScoreConfig] = None, **options) -> ScoreConfig:
    """Accept a ScoreConfig, a plain mapping of options, or nothing; mappings and options layer over ``base``."""
    if isinstance(config, Mapping):
        options = {**config, **options}
        config = base
    elif config is None:
        config = base
    elif not isinstance(config, ScoreConfig):
        log.warning("invalid config %r, using defaults", config)
        config = base
    if options:
        return ScoreConfig.from_options(config, **options)
    return config if config is not None else DEFAULT_CONFIG

DEFAULT_CONFIG = ScoreConfig()
