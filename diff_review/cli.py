"""
`diffreview` command-line interface.

Commands
--------
diffreview hunks  BEFORE AFTER                  -- JSON list of hunks
diffreview groups BEFORE AFTER                  -- JSON list of change groups
diffreview groups BEFORE AFTER --summary        -- one line per change
diffreview apply  BEFORE AFTER --decisions 1,0  -- print the merged file
diffreview apply  BEFORE AFTER --reject-all -o OUT
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .cli_display import dump_json, setup_logger, summarize_groups
from .config import Config
from .reconcile import (
    ChangeReview, DecisionParseError, compute_hunks, group_into_changes,
    parse_decisions,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _read(path: str, encoding: str) -> str:
    """Read a file verbatim ("-" reads stdin), keeping its newlines."""
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding=encoding, newline="") as f:
        return f.read()


def _read_pair(args: argparse.Namespace, cfg: Config) -> tuple[str, str]:
    if args.before == "-" and args.after == "-":
        logger.error("[DiffReview] Both inputs read from stdin")
        print("Only one of BEFORE and AFTER can be '-'", file=sys.stderr)
        sys.exit(2)
    try:
        return _read(args.before, cfg.ENCODING), _read(args.after, cfg.ENCODING)
    except OSError as exc:
        logger.error("[DiffReview] Cannot read input: %s", exc)
        print(f"Cannot read input: {exc}", file=sys.stderr)
        sys.exit(1)


# ---------------------------------------------------------------------------
# Sub-command handlers
# ---------------------------------------------------------------------------

def _cmd_hunks(args: argparse.Namespace, cfg: Config) -> None:
    """Print the hunks between two files."""
    before, after = _read_pair(args, cfg)
    dump_json(compute_hunks(before, after), indent=cfg.JSON_INDENT)


def _cmd_groups(args: argparse.Namespace, cfg: Config) -> None:
    """Print the change groups between two files."""
    before, after = _read_pair(args, cfg)
    groups = group_into_changes(compute_hunks(before, after))
    if args.summary:
        print(summarize_groups(groups))
    else:
        dump_json(groups, indent=cfg.JSON_INDENT)


def _cmd_apply(args: argparse.Namespace, cfg: Config) -> None:
    """Rebuild the file from accept/reject decisions."""
    before, after = _read_pair(args, cfg)
    review = ChangeReview(before, after)

    try:
        decisions = parse_decisions(args.decisions) if args.decisions else []
    except DecisionParseError as exc:
        logger.error("[DiffReview] %s", exc)
        print(f"Invalid --decisions: {exc}", file=sys.stderr)
        sys.exit(2)

    if len(decisions) > len(review.groups):
        logger.warning(
            "[DiffReview] %d decision(s) given for %d change(s); "
            "extra entries ignored",
            len(decisions), len(review.groups),
        )
    for index, accepted in enumerate(decisions[:len(review.groups)]):
        if accepted:
            review.approve(index)
        else:
            review.reject(index)

    if args.accept_all:
        review.approve_all()
    elif args.reject_all:
        review.reject_all()

    result = review.resolve(pending_default=cfg.accept_pending)
    logger.info(
        "[DiffReview] Applied decisions %s to %d change(s)",
        [s.value for s in review.statuses], len(review.groups),
    )

    if args.output:
        try:
            with open(args.output, "w", encoding=cfg.ENCODING, newline="") as f:
                f.write(result)
        except OSError as exc:
            logger.error("[DiffReview] Cannot write %s: %s", args.output, exc)
            print(f"Cannot write output: {exc}", file=sys.stderr)
            sys.exit(1)
    else:
        sys.stdout.write(result)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Build and return the `diffreview` argument parser."""
    parser = argparse.ArgumentParser(
        prog="diffreview",
        description="Review line changes between two versions of a file",
    )
    parser.add_argument("--config", default=None,
                        help="Path to .diffreview.yaml config file")
    parser.add_argument("--log-dir", dest="log_dir", default=None,
                        help="Directory for log files (default: from config)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log at DEBUG level")

    subparsers = parser.add_subparsers(dest="cmd", metavar="COMMAND")
    subparsers.required = True

    def _add_pair(p: argparse.ArgumentParser) -> None:
        p.add_argument("before", help="Original file ('-' for stdin)")
        p.add_argument("after", help="Proposed file ('-' for stdin)")

    # --- hunks ---
    hunks_p = subparsers.add_parser("hunks", help="List line hunks as JSON")
    _add_pair(hunks_p)
    hunks_p.set_defaults(func=_cmd_hunks)

    # --- groups ---
    groups_p = subparsers.add_parser(
        "groups", help="List reviewable change groups as JSON"
    )
    _add_pair(groups_p)
    groups_p.add_argument("--summary", action="store_true",
                          help="Print one line per change instead of JSON")
    groups_p.set_defaults(func=_cmd_groups)

    # --- apply ---
    apply_p = subparsers.add_parser(
        "apply", help="Rebuild the file from per-change decisions"
    )
    _add_pair(apply_p)
    apply_p.add_argument(
        "-d", "--decisions", default="",
        help="Comma-separated accept/reject per change, e.g. '1,0,1'",
    )
    bulk = apply_p.add_mutually_exclusive_group()
    bulk.add_argument("--accept-all", action="store_true",
                      help="Accept every change without a decision")
    bulk.add_argument("--reject-all", action="store_true",
                      help="Reject every change without a decision")
    apply_p.add_argument("-o", "--output", default=None,
                         help="Write the result here instead of stdout")
    apply_p.set_defaults(func=_cmd_apply)

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the `diffreview` command."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    cfg = Config.load(args.config)
    level = "DEBUG" if args.verbose else cfg.LOG_LEVEL
    setup_logger(args.log_dir or cfg.LOG_DIR, level)

    args.func(args, cfg)


if __name__ == "__main__":
    main()
