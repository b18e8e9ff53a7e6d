"""Command line entry point: print the tree digest of a directory."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from treehash.config import DEFAULT_ROOT
from treehash.config_manager import ConfigManager
from treehash.engine.errors import TreeHashError
from treehash.engine.tree import TreeHash

logger = logging.getLogger(__name__)


def build_parser(config: ConfigManager) -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="treehash",
        description="Compute a deterministic SHA-256 fingerprint of a directory tree",
        epilog="Environment:\n  " + "\n  ".join(config.describe()),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("path", nargs="?", type=Path, default=DEFAULT_ROOT, help="Directory to hash")
    ap.add_argument("--follow-symlinks", action=argparse.BooleanOptionalAction, default=None,
                    help="Follow symbolic links")
    ap.add_argument("--include-hidden", action=argparse.BooleanOptionalAction, default=None,
                    help="Include entries whose name starts with a dot")
    ap.add_argument("--ignore-invalid-types", action=argparse.BooleanOptionalAction, default=None,
                    help="Skip devices, FIFOs and sockets instead of failing")
    ap.add_argument("--no-root", dest="set_root", action="store_const", const=False, default=None,
                    help="Print absolute paths instead of ./-relative ones")

    fmt = ap.add_mutually_exclusive_group()
    fmt.add_argument("--table", action="store_true", help="Print the sorted table before the digest")
    fmt.add_argument("--json", action="store_true", help="Print a JSON report")
    fmt.add_argument("--markdown", action="store_true", help="Print a Markdown report")

    ap.add_argument("--expect", metavar="HEX", help="Exit with status 1 unless the digest matches")
    ap.add_argument("--config", type=Path, help="JSON file with option defaults")
    ap.add_argument("--log-level", default=None, help="Logging level (default from TREEHASH_LOG_LEVEL)")
    return ap


def main(argv: list[str] | None = None) -> int:
    config = ConfigManager()
    args = build_parser(config).parse_args(argv)

    level = (args.log_level or config.log_level()).upper()
    if not isinstance(logging.getLevelName(level), int):
        print(f"treehash: unknown log level {level!r}", file=sys.stderr)
        return 2
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        options = config.load_options(
            args.config,
            overrides={
                "follow_symlinks": args.follow_symlinks,
                "include_hidden": args.include_hidden,
                "ignore_invalid_types": args.ignore_invalid_types,
                "set_root": args.set_root,
            },
        )
        result = TreeHash().with_options(options).with_files_from_dir(args.path).compute_hash()
    except TreeHashError as exc:
        logger.debug("Hashing failed", exc_info=True)
        print(f"treehash: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(result.to_json())
    elif args.markdown:
        print(result.to_markdown())
    elif args.table:
        sys.stdout.write(result.table_text)
        print(f"{result.hexdigest}  -")
    else:
        print(result.hexdigest)

    if args.expect is not None and not result.verify(args.expect):
        print(f"treehash: digest mismatch, expected {args.expect}", file=sys.stderr)
        return 1
    return 0
