import json
import pytest

from affectimo.lexicon_model import Lexicon
from affectimo.model import Scorer

TOY = {
    "AFFECT": {
        "wonderful": 0.5,
        "magnificent": 0.4,
        "day": 0.05,
        "capital": 0.02,
        "bad day": -0.6,
        "terrible": -0.8,
        "not good": -0.7,
        "good": 0.3,
        "tired": -0.4,
        "color": 0.2,
    },
    "INTENSITY": {
        "wonderful": 0.3,
        "magnificent": 0.35,
        "terrible": 0.6,
        "bad day": 0.2,
        "tired": -0.1,
        "good": 0.05,
        "color": 0.1,
    },
}

AFFECT_INT = 5.037104721
INTENSITY_INT = 2.399762631

@pytest.fixture
def lexicon():
    return Lexicon(TOY)

@pytest.fixture
def scorer(lexicon):
    return Scorer(lexicon)

@pytest.fixture
def lexicon_file(tmp_path):
    p = tmp_path / "affect_lexicon.json"
    p.write_text(json.dumps({"kind": "affect-lexicon", "version": 1, "categories": TOY}), encoding="utf-8")
    return str(p)
