"""Ranked match rows for diagnostic output: [term, count, weight, contribution]."""
from typing import Dict, List, Mapping

from .lexicon_model import MatchRecord, contribution, round_half_away
from .options import Encoding, SortBy

def _key(sort_by: SortBy, encoding: Encoding, wordcount: int):
    if sort_by is SortBy.LEX:
        return lambda rec: contribution(rec, encoding, wordcount)
    if sort_by is SortBy.WEIGHT:
        return lambda rec: rec.weight
    return lambda rec: rec.count

def format_rows(records: List[MatchRecord], wordcount: int, encoding: Encoding = Encoding.BINARY,
                sort_by: SortBy = SortBy.FREQ, places: int = 9) -> List[list]:
    # sorted() is stable with reverse=True, so ties keep matcher order
    ordered = sorted(records, key=_key(sort_by, encoding, wordcount), reverse=True)
    return [
        [rec.term, rec.count, round_half_away(rec.weight, places),
         round_half_away(contribution(rec, encoding, wordcount), places)]
        for rec in ordered
    ]

def format_matches(matches: Mapping[str, List[MatchRecord]], wordcount: int,
                   encoding: Encoding = Encoding.BINARY, sort_by: SortBy = SortBy.FREQ,
                   places: int = 9) -> Dict[str, List[list]]:
    return {cat: format_rows(recs, wordcount, encoding, sort_by, places)
            for cat, recs in matches.items()}
