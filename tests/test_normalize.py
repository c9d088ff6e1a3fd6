import logging

from affectimo.normalize import all_ngrams, gb_to_us, ngrams, normalize_text, tokenize

def test_normalize_lowercases_and_trims():
    assert normalize_text("  Hello WORLD \n") == "hello world"

def test_normalize_coerces_non_strings():
    assert normalize_text(12345) == "12345"

def test_normalize_straightens_apostrophes():
    assert normalize_text("Don’t") == "don't"

def test_tokenize_drops_punctuation_keeps_contractions():
    assert tokenize("this is a wonderful, magnificent day... isn't it?") == [
        "this", "is", "a", "wonderful", "magnificent", "day", "isn't", "it"]

def test_tokenize_nothing():
    assert tokenize("!!! ... ???") == []
    assert tokenize("") == []

def test_ngrams_in_text_order():
    toks = ["a", "bad", "day", "today"]
    assert ngrams(toks, 2) == ["a bad", "bad day", "day today"]
    assert ngrams(toks, 3) == ["a bad day", "bad day today"]
    assert ngrams(toks, 4) == ["a bad day today"]

def test_ngrams_order_longer_than_text_is_skipped(caplog):
    with caplog.at_level(logging.WARNING):
        assert ngrams(["a", "bad", "day"], 5) == []
    assert "skipping 5-grams" in caplog.text

def test_all_ngrams_keeps_other_orders(caplog):
    with caplog.at_level(logging.WARNING):
        out = all_ngrams(["a", "bad", "day"], {2, 5})
    assert out == ["a bad", "bad day"]
    assert "skipping 5-grams" in caplog.text

def test_gb_to_us_whole_words_only():
    assert gb_to_us("my favourite colours") == "my favorite colors"
    assert gb_to_us("colouring in") == "colouring in"
    assert gb_to_us("grey skies, grey days") == "gray skies, gray days"
