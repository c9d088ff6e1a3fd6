from functools import lru_cache
from typing import Dict, List, Optional, Union
import os

from .config import SETTINGS
from .formatter import format_matches
from .lexicon_model import INTERCEPTS, Lexicon, build_pool
from .normalize import gb_to_us, normalize_text, tokenize
from .options import Locale, OutputMode, ScoreConfig, resolve
from .utils import get_logger

log = get_logger(__name__)

# Where the compiled lexicon (built via build_lexicon) is looked up
SEARCH = [
    os.path.join("models", "affect_lexicon.json"),
    os.path.join(os.path.dirname(__file__), "..", "models", "affect_lexicon.json"),
]

Result = Union[Dict[str, float], Dict[str, List[list]], Dict[str, dict]]

@lru_cache(maxsize=None)
def load_default_lexicon(path: Optional[str] = None) -> Lexicon:
    """Load the lexicon from ``path``, $AFFECTIMO_LEXICON, or the search path. Raises if none exists."""
    path = path or SETTINGS.lexicon_path
    if path:
        return Lexicon.from_file(path)
    for p in SEARCH:
        if os.path.isfile(p):
            return Lexicon.from_file(p)
    raise FileNotFoundError("models/affect_lexicon.json not found. Build it first "
                            "(python -m affectimo.training.build_lexicon) or set AFFECTIMO_LEXICON.")

class Scorer:
    """Scores text for AFFECT and INTENSITY against one shared, read-only lexicon."""

    def __init__(self, lexicon: Lexicon, config: Optional[ScoreConfig] = None):
        self.lexicon = lexicon
        self.config = resolve(config)

    def score(self, text, config=None, **options) -> Optional[Result]:
        """
        Return the shape picked by ``output`` (None if the text has no tokens):
          - lex:     {category: score}
          - matches: {category: [[term, count, weight, contribution], ...]}
          - full:    {"matches": {...}, "values": {...}}
        """
        cfg = resolve(config, base=self.config, **options)

        if text is None:
            log.debug("no input, nothing to score")
            return None
        t = normalize_text(text)
        if not t:
            log.debug("empty input, nothing to score")
            return None
        if cfg.locale is Locale.GB:
            t = gb_to_us(t)
        tokens = tokenize(t)
        if not tokens:
            log.debug("no tokens in %r", t)
            return None

        pool = build_pool(tokens, cfg.ngrams, cfg.wc_grams)
        matches = self.lexicon.match(pool, cfg.min_weight, cfg.max_weight, INTERCEPTS)

        if cfg.output is OutputMode.MATCHES:
            return format_matches(matches, pool.wordcount, cfg.encoding, cfg.sort_by, cfg.places)
        values = self.lexicon.summarize(matches, cfg.encoding, pool.wordcount, cfg.places)
        if cfg.output is OutputMode.FULL:
            return {
                "matches": format_matches(matches, pool.wordcount, cfg.encoding, cfg.sort_by, cfg.places),
                "values": values,
            }
        return values

def score(text, config=None, lexicon: Optional[Lexicon] = None, **options) -> Optional[Result]:
    """Score one text; uses the default lexicon unless one is passed in."""
    return Scorer(lexicon if lexicon is not None else load_default_lexicon()).score(text, config, **options)
