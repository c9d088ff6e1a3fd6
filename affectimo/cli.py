"""
Command-line scoring.

Usage:
  python -m affectimo.cli "What a wonderful day" [--output full] [--encoding frequency]
  python -m affectimo.cli --file posts.txt --csv > scores.csv
  echo "so tired of this" | python -m affectimo.cli --locale GB
"""
import argparse, json, sys

from .config import SETTINGS
from .inference import load_model
from .lexicon_model import LexiconError
from .options import Encoding, Locale, OutputMode, SortBy, ScoreConfig
from .utils import csv_export

def _lines(args):
    if args.text:
        return list(args.text)
    if args.file:
        with open(args.file, "r", encoding="utf-8") as f:
            return [ln.rstrip("\n") for ln in f]
    return [ln.rstrip("\n") for ln in sys.stdin]

def build_parser():
    ap = argparse.ArgumentParser(prog="affectimo", description="Score text for affect (valence) and intensity (arousal).")
    ap.add_argument("text", nargs="*", help="Text(s) to score; reads --file or stdin when omitted")
    ap.add_argument("--file", help="Score each line of this file")
    ap.add_argument("--lexicon", help="Compiled lexicon JSON (default: $AFFECTIMO_LEXICON or models/affect_lexicon.json)")
    ap.add_argument("--encoding", choices=[e.value for e in Encoding], default=Encoding.BINARY.value)
    ap.add_argument("--min", type=float, default=None, help="Only match weights above this")
    ap.add_argument("--max", type=float, default=None, help="Only match weights below this")
    ap.add_argument("--ngrams", type=int, nargs="+", default=[2, 3], metavar="N")
    ap.add_argument("--no-ngrams", action="store_true", help="Unigrams only")
    ap.add_argument("--output", choices=[o.value for o in OutputMode], default=OutputMode.LEX.value)
    ap.add_argument("--places", type=int, default=SETTINGS.places)
    ap.add_argument("--sort-by", choices=[s.value for s in SortBy], default=SortBy.FREQ.value)
    ap.add_argument("--wc-grams", action="store_true", help="Count n-grams toward the word count")
    ap.add_argument("--locale", choices=[l.value for l in Locale], default=Locale.US.value)
    ap.add_argument("--csv", action="store_true", help="Write text,AFFECT,INTENSITY rows as CSV (implies --output lex)")
    return ap

def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        scorer = load_model(args.lexicon)
    except (FileNotFoundError, LexiconError) as e:
        print(f"affectimo: {e}", file=sys.stderr)
        return 2

    cfg = ScoreConfig(
        encoding=args.encoding,
        min_weight=args.min,
        max_weight=args.max,
        ngrams=False if args.no_ngrams else args.ngrams,
        output=OutputMode.LEX if args.csv else args.output,
        places=args.places,
        sort_by=args.sort_by,
        wc_grams=args.wc_grams,
        locale=args.locale,
    )
    texts = _lines(args)
    results = [scorer.score(t, cfg) for t in texts]
    if args.csv:
        sys.stdout.write(csv_export(zip(texts, results)).decode())
    else:
        for r in results:
            print(json.dumps(r))
    return 0

if __name__ == "__main__":
    sys.exit(main())
