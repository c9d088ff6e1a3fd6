"""
Compile the affect/intensity lexicon CSV into the JSON model the scorer loads.

Works with .csv / .tsv / .csv.gz / .tsv.gz, header or no header; rows are
term, category, weight.
Usage:
  python -m affectimo.training.build_lexicon --csv /path/to/affect_intensity.csv[.gz] [--force]
"""
import os, json, argparse, re, csv, gzip, io, sys
from collections import Counter

KNOWN = {"AFFECT", "INTENSITY"}

def _open_any(path: str):
    if path.endswith(".gz"):
        return io.TextIOWrapper(gzip.open(path, "rb"), encoding="utf-8", errors="ignore")
    return open(path, "r", encoding="utf-8", errors="ignore")

def _sniff(sample: str) -> str:
    try:
        return csv.Sniffer().sniff(sample, delimiters="\t,;").delimiter
    except csv.Error:
        if "\t" in sample: return "\t"
        if "," in sample: return ","
        return ";"

def _weight(cell):
    try:
        return float(cell)
    except (TypeError, ValueError):
        return None

def read_lexicon_file(path: str):
    with _open_any(path) as f:
        sample = f.read(4096)
        f.seek(0)
        delim = _sniff(sample)
        rdr = csv.reader(f, delimiter=delim)
        rows = [r for r in rdr if any((c or "").strip() for c in r)]

    header = [c.strip().lower() for c in rows[0]] if rows else []
    has_header = any(x in header for x in ("term", "word", "category", "weight"))
    if has_header:
        rows = rows[1:]

    term_idx, cat_idx, w_idx = 0, 1, 2
    for i, name in enumerate(header if has_header else []):
        if name in ("term", "word"): term_idx = i
        if name == "category": cat_idx = i
        if name == "weight": w_idx = i

    cats = {c: {} for c in KNOWN}
    skipped = 0
    for r in rows:
        if max(term_idx, cat_idx, w_idx) >= len(r):
            skipped += 1; continue
        term = " ".join((r[term_idx] or "").lower().split())
        cat = (r[cat_idx] or "").strip().upper()
        w = _weight(r[w_idx])
        if not term or cat not in KNOWN or w is None:
            skipped += 1; continue
        cats[cat][term] = w
    return cats, skipped

def build_model(cats):
    return {"kind": "affect-lexicon", "version": 1, "categories": cats}

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--csv", required=True, help="Path to the affect/intensity lexicon (.csv/.tsv/.gz)")
    ap.add_argument("--out", default=os.path.join("models", "affect_lexicon.json"))
    ap.add_argument("--force", action="store_true", help="Write even if small (<100 terms)")
    args = ap.parse_args(argv)

    cats, skipped = read_lexicon_file(args.csv)
    total = sum(len(t) for t in cats.values())
    print(f"Parsed {total} terms ({skipped} rows skipped).")
    c = Counter({cat: len(t) for cat, t in cats.items()})
    print("Terms per category:", c.most_common())
    phrases = sum(1 for t in cats.values() for term in t if re.search(r"\s", term))
    print(f"Multi-word terms: {phrases}")

    if total < 100 and not args.force:
        sys.exit("Parsed <100 terms; pass --force if using a tiny subset, or check the CSV path/format.")

    out_dir = os.path.dirname(args.out)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    with open(args.out, "w", encoding="utf-8") as f:
        json.dump(build_model(cats), f, ensure_ascii=False)
    print(f"Saved {args.out}")

if __name__ == "__main__":
    main()
