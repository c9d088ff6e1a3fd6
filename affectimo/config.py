from dataclasses import dataclass
import os
from dotenv import load_dotenv
load_dotenv()

@dataclass(frozen=True)
class Settings:
    lexicon_path: str | None
    log_level: str
    places: int

def _to_int(x, default):
    try: return int(x) if x else default
    except ValueError: return default

SETTINGS = Settings(
    lexicon_path=os.getenv("AFFECTIMO_LEXICON") or None,
    log_level=os.getenv("AFFECTIMO_LOG_LEVEL", "WARNING").upper(),
    places=_to_int(os.getenv("AFFECTIMO_PLACES"), 9),
)
