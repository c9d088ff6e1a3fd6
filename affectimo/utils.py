import csv, io, logging
from .config import SETTINGS

CATEGORIES = ("AFFECT", "INTENSITY")

def get_logger(name: str = "affectimo", level: str | int | None = None):
    logger = logging.getLogger(name)
    if not logger.handlers:
        lvl = level if level is not None else SETTINGS.log_level
        if isinstance(lvl, str) and not isinstance(logging.getLevelName(lvl), int):
            lvl = logging.WARNING
        logger.setLevel(lvl)
        ch = logging.StreamHandler()
        ch.setLevel(lvl)
        fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(name)s - %(message)s")
        ch.setFormatter(fmt)
        logger.addHandler(ch)
    return logger

def csv_export(rows):
    """rows: iterable of (text, values) where values is {category: score} or None."""
    buf=io.StringIO(); w=csv.writer(buf)
    w.writerow(["text", *CATEGORIES])
    for text, values in rows:
        if values is None:
            w.writerow([text, *("" for _ in CATEGORIES)])
        else:
            w.writerow([text, *(values.get(c, "") for c in CATEGORIES)])
    return buf.getvalue().encode()
