"""
Terminal output helpers and log setup for the ``diffreview`` command.
"""

import json
import logging
import os
import sys
from datetime import datetime

from .reconcile import ChangeGroup, Hunk


def setup_logger(log_dir: str = ".diffreview/logs",
                 level: str = "INFO") -> logging.Logger:
    """Creates a file logger. All verbose output goes here."""
    os.makedirs(log_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = os.path.join(log_dir, f"diffreview_{timestamp}.log")

    logger = logging.getLogger("diff_review")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Replace the handler from any earlier call
    for old in [h for h in logger.handlers if isinstance(h, logging.FileHandler)]:
        logger.removeHandler(old)
        old.close()

    # File handler — captures everything at the configured level
    fh = logging.FileHandler(log_file, encoding="utf-8")
    fh.setLevel(logger.level)
    fh.setFormatter(logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s", datefmt="%H:%M:%S"
    ))
    logger.addHandler(fh)

    return logger


def dump_json(items: list[Hunk] | list[ChangeGroup], indent: int = 2,
              stream=None) -> None:
    """Print hunks or change groups as a JSON array."""
    out = stream or sys.stdout
    out.write(json.dumps([item.to_dict() for item in items], indent=indent,
                         ensure_ascii=False))
    out.write("\n")


def summarize_groups(groups: list[ChangeGroup]) -> str:
    """One line per change group, e.g. ``#0  line 2  replace  -1 +1``."""
    if not groups:
        return "  (no changes)"
    rows: list[str] = []
    for g in groups:
        if g.is_replacement:
            kind = "replace"
        elif g.is_addition:
            kind = "add"
        else:
            kind = "remove"
        rows.append(
            f"  #{g.index:<3} line {g.start_line:<5} {kind:<8} "
            f"-{len(g.removed_lines)} +{len(g.added_lines)}"
        )
    return "\n".join(rows)
