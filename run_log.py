from __future__ import annotations

import logging
import os
import threading
import time
from pathlib import Path
from typing import Any, Dict, Optional

from config import CFG

# ------------------------------
# Thread-safe last-run state
# ------------------------------

RUN_LOCK = threading.Lock()


def _log_path() -> Path:
    configured = Path(CFG.LOG_FILE)
    if configured.is_absolute():
        return configured
    return Path(__file__).resolve().parent / configured


def _init_logger() -> logging.Logger:
    logger = logging.getLogger("tile_pattern.runs")
    if logger.handlers:
        return logger

    try:
        log_path = _log_path()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
        logger.propagate = False
    except OSError:
        # No log file means no run log; generation carries on regardless.
        logger.handlers.clear()
    return logger


RUN_LOGGER = _init_logger()


def _log_enabled() -> bool:
    return bool(RUN_LOGGER.handlers)


def _fmt_seconds(seconds: Optional[float]) -> Optional[str]:
    if seconds is None:
        return None
    return f"{float(seconds):.4f}s"


def emit_log(event: str, **fields: Any) -> None:
    if not _log_enabled():
        return
    extras = [
        f"{key}={value}"
        for key, value in fields.items()
        if value is not None and value != ""
    ]
    if extras:
        RUN_LOGGER.info("%s | %s", event, " ".join(extras))
    else:
        RUN_LOGGER.info("%s", event)


def _fresh_state() -> Dict[str, Any]:
    return {
        "run_id": 0,
        "rows": 0,
        "cols": 0,
        "seed": None,
        "placements": 0,
        "counts": {},
        "elapsed": None,
        "finished_at": None,
    }


LAST_RUN: Dict[str, Any] = _fresh_state()


def reset() -> None:
    with RUN_LOCK:
        LAST_RUN.clear()
        LAST_RUN.update(_fresh_state())


def log_run_started(rows: int, cols: int, seed: Optional[int]) -> float:
    emit_log("Generation started", rows=rows, cols=cols, seed=seed)
    return time.perf_counter()


def record_run(rows: int, cols: int, seed: Optional[int], counts: Dict[str, int],
               placements: int, started: float) -> None:
    elapsed = max(0.0, time.perf_counter() - started)
    summary = ",".join(f"{name}={n}" for name, n in counts.items())
    emit_log(
        "Generation finished",
        rows=rows,
        cols=cols,
        seed=seed,
        placements=placements,
        counts=summary,
        duration=_fmt_seconds(elapsed),
    )
    with RUN_LOCK:
        LAST_RUN["run_id"] = int(LAST_RUN.get("run_id") or 0) + 1
        LAST_RUN.update({
            "rows": rows,
            "cols": cols,
            "seed": seed,
            "placements": placements,
            "counts": dict(counts),
            "elapsed": round(elapsed, 6),
            "finished_at": time.time(),
        })


def snapshot() -> Dict[str, Any]:
    with RUN_LOCK:
        snap = dict(LAST_RUN)
        snap["counts"] = dict(LAST_RUN.get("counts") or {})
    snap["log_file"] = os.fspath(_log_path()) if _log_enabled() else ""
    return snap


__all__ = ["emit_log", "log_run_started", "record_run", "snapshot", "reset"]
