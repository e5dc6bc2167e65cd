# config.py
import os

# ======= Grid dimensions (cells) =======
ROWS    = int(os.getenv("TP_ROWS", "15"))
COLUMNS = int(os.getenv("TP_COLUMNS", "60"))

# ======= Randomness =======
# Empty means a fresh, nondeterministic generator per run.
_SEED_RAW = os.getenv("TP_SEED", "").strip()
SEED = int(_SEED_RAW) if _SEED_RAW else None

# ======= Terminal output =======
# always / never / auto (auto colours only when stdout is a TTY)
COLOR = os.getenv("TP_COLOR", "auto").strip().lower()

# ======= Web preview guards =======
MAX_CELLS = int(os.getenv("TP_MAX_CELLS", "20000"))

# ======= Output names =======
COUNTS_OUT   = os.getenv("TP_COUNTS_OUT", "counts.txt")
PATTERN_HTML = os.getenv("TP_PATTERN_HTML", "pattern_view.html")
LOG_FILE     = os.getenv("TP_LOG_FILE", os.path.join("logs", "pattern_runs.log"))

class CFG:
    ROWS    = ROWS
    COLUMNS = COLUMNS

    SEED  = SEED
    COLOR = COLOR

    MAX_CELLS = MAX_CELLS

    COUNTS_OUT   = COUNTS_OUT
    PATTERN_HTML = PATTERN_HTML
    LOG_FILE     = LOG_FILE

__all__ = ["CFG", "ROWS", "COLUMNS"]
