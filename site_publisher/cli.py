"""Command line entry point for building the site."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from site_publisher.core.builder import KINDS, SiteBuilder
from site_publisher.core.config import load_config

logger = logging.getLogger("site_publisher")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="site-publisher",
        description="Build blog and portfolio pages and list files from Markdown content.",
    )
    parser.add_argument(
        "--root", type=Path, default=Path.cwd(),
        help="Site root directory (default: current directory)",
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="YAML config file (default: site.yml under the root, if present)",
    )
    parser.add_argument(
        "--only", choices=KINDS, action="append", dest="kinds",
        help="Build only this content kind; may be repeated",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show warnings and errors")
    return parser.parse_args(argv)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
    logger.handlers[:] = [handler]
    logger.setLevel(level)


def main(argv: Optional[List[str]] = None) -> int:
    """Run a build and return the process exit code."""
    args = parse_args(argv)
    setup_logging(args.verbose, args.quiet)

    try:
        config = load_config(args.config, root=args.root.resolve())
        result = SiteBuilder(config).build(args.kinds or KINDS)
    except Exception:
        logger.exception("Build failed")
        return 1

    logger.info(
        "Built %d pages, wrote %d list files, skipped %d items, removed %d thumbnails",
        len(result.generated), len(result.indexes),
        len(result.skipped), len(result.removed_thumbnails),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
