"""Batch entry point: load the lexicon once, then score many texts with the same config.
Keeps the hot path small and easy to test."""

from typing import Iterable, List, Optional

from .model import Scorer, load_default_lexicon

def load_model(path: Optional[str] = None) -> Scorer:
    return Scorer(load_default_lexicon(path))

def predict(texts: Iterable, config=None, scorer: Optional[Scorer] = None, **options) -> List:
    scorer = scorer if scorer is not None else load_model()
    return [scorer.score(t, config, **options) for t in texts]
