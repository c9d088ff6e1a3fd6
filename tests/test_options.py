import dataclasses
import logging
import math

import pytest

from affectimo.options import (DEFAULT_CONFIG, Encoding, Locale, OutputMode, ScoreConfig,
                               SortBy, resolve)

def test_defaults():
    cfg = ScoreConfig()
    assert cfg.encoding is Encoding.BINARY
    assert cfg.min_weight == -math.inf and cfg.max_weight == math.inf
    assert cfg.ngrams == frozenset({2, 3})
    assert cfg.output is OutputMode.LEX
    assert cfg.places == 9
    assert cfg.sort_by is SortBy.FREQ
    assert cfg.wc_grams is False
    assert cfg.locale is Locale.US

def test_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.places = 2

def test_option_bag_spellings():
    cfg = ScoreConfig.from_options(encoding="Frequency", min="-0.5", max=0.5, nGrams=[2],
                                   sortBy="weight", wcGrams=True, locale="gb", output="FULL")
    assert cfg.encoding is Encoding.FREQUENCY
    assert cfg.min_weight == -0.5 and cfg.max_weight == 0.5
    assert cfg.ngrams == frozenset({2})
    assert cfg.sort_by is SortBy.WEIGHT
    assert cfg.wc_grams is True
    assert cfg.locale is Locale.GB
    assert cfg.output is OutputMode.FULL

def test_unknown_output_mode_falls_back(caplog):
    with caplog.at_level(logging.WARNING):
        cfg = ScoreConfig(output="everything")
    assert cfg.output is OutputMode.LEX
    assert "invalid output mode" in caplog.text

def test_bad_values_fall_back(caplog):
    with caplog.at_level(logging.WARNING):
        cfg = ScoreConfig(encoding="tfidf", min_weight="abc", max_weight=float("nan"),
                          places=-1, sort_by=3, locale="FR")
    assert cfg.encoding is Encoding.BINARY
    assert cfg.min_weight == -math.inf
    assert cfg.max_weight == math.inf
    assert cfg.places == 9
    assert cfg.sort_by is SortBy.FREQ
    assert cfg.locale is Locale.US

@pytest.mark.parametrize("value, expected", [
    (True, {2, 3}),
    (False, set()),
    (4, {4}),
    ("2, 4", {2, 4}),
    ([2, "3", 0, -1, "x", 2.5], {2, 3}),
    (None, {2, 3}),
])
def test_ngrams_coercion(value, expected):
    assert ScoreConfig(ngrams=value).ngrams == frozenset(expected)

def test_ngrams_not_iterable_falls_back():
    assert ScoreConfig(ngrams=object()).ngrams == frozenset({2, 3})

@pytest.mark.parametrize("value, expected", [("4", 4), (2.0, 2), (2.5, 9), (True, 9), ("x", 9), (0, 0)])
def test_places_coercion(value, expected):
    assert ScoreConfig(places=value).places == expected

def test_unknown_option_ignored(caplog):
    with caplog.at_level(logging.WARNING):
        cfg = ScoreConfig.from_options(colour="blue", places=3)
    assert cfg.places == 3
    assert "unknown option 'colour'" in caplog.text

def test_from_options_layers_over_base():
    base = ScoreConfig(encoding="frequency", places=4)
    cfg = ScoreConfig.from_options(base, output="matches")
    assert cfg.encoding is Encoding.FREQUENCY
    assert cfg.places == 4
    assert cfg.output is OutputMode.MATCHES
    assert base.output is OutputMode.LEX

def test_resolve_accepts_mapping_config_or_nothing():
    assert resolve() is DEFAULT_CONFIG
    cfg = ScoreConfig(places=2)
    assert resolve(cfg) is cfg
    assert resolve({"sortBy": "lex"}).sort_by is SortBy.LEX
    assert resolve(cfg, places=5).places == 5
    assert resolve("nonsense") is DEFAULT_CONFIG

def test_bool_weight_bounds_fall_back(caplog):
    with caplog.at_level(logging.WARNING):
        cfg = ScoreConfig(min_weight=True, max_weight=False)
    assert cfg.min_weight == -math.inf
    assert cfg.max_weight == math.inf
    assert "invalid min True" in caplog.text

def test_resolve_layers_mapping_over_base():
    base = ScoreConfig(output="full", encoding="frequency")
    cfg = resolve({"places": 2}, base=base)
    assert cfg.output is OutputMode.FULL
    assert cfg.encoding is Encoding.FREQUENCY
    assert cfg.places == 2
    assert resolve(None, base=base) is base
