# repobundle/cli.py

"""
Command line entry point.

Every option defaults to the matching action input (``INPUT_INCLUDE``,
``INPUT_EXCLUDE``, ...), so the same command serves as the body of a GitHub
Action and as a local tool.
"""


from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from repobundle.actions import configure_logging, get_input, set_output
from repobundle.bundle import bundle_repo
from repobundle.config import BundleConfig, OutputStyle, parse_bool, parse_patterns
from repobundle.errors import OutputError

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="repobundle",
        description="Bundle a directory tree and the contents of the selected files into one text artifact.",
    )
    p.add_argument(
        "--include",
        default=get_input("include", ""),
        help="Comma-separated glob patterns of files to include",
    )
    p.add_argument(
        "--exclude",
        default=get_input("exclude", ""),
        help="Comma-separated glob patterns of files to exclude",
    )
    p.add_argument(
        "--style",
        choices=[s.value for s in OutputStyle],
        default=get_input("style") or OutputStyle.XML.value,
        help="Output framing style (default: xml)",
    )
    p.add_argument(
        "--no-description",
        dest="description",
        action="store_false",
        default=None,
        help="Omit the description block at the top of the bundle",
    )
    p.add_argument(
        "--escape",
        action="store_true",
        default=None,
        help="XML-escape file names and paths in the xml style",
    )
    p.add_argument(
        "--root",
        type=Path,
        default=get_input("root") or None,
        help="Working root (default: current directory)",
    )
    p.add_argument(
        "--encoding",
        default=get_input("encoding") or "utf-8",
        help="Text encoding used to read files (default: utf-8)",
    )
    p.add_argument(
        "--max-workers",
        type=int,
        default=get_input("max_workers") or None,
        help="Maximum concurrent file reads",
    )
    p.add_argument("-o", "--output", type=Path, help="Write the bundle to this file instead of the action output")
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return p.parse_args(argv)


def _config(ns: argparse.Namespace) -> BundleConfig:
    description = ns.description
    if description is None:
        description = parse_bool(get_input("description"), default=True)
    escape = ns.escape
    if escape is None:
        escape = parse_bool(get_input("escape"), default=False)
    return BundleConfig(
        include=parse_patterns(ns.include),
        exclude=parse_patterns(ns.exclude),
        style=OutputStyle(ns.style),
        description=description,
        escape=escape,
        root=ns.root,
        encoding=ns.encoding,
        max_workers=ns.max_workers,
    )


def _write(text: str, out_path: Path | None) -> None:
    if out_path is None:
        set_output("result", text)
        return
    try:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8", newline="\n")
    except OSError as e:
        raise OutputError(f"Could not write to output file '{out_path}': {e}") from e


def main(argv: list[str] | None = None) -> None:
    """Run select → bundle → publish; exit with status 1 on failure."""
    ns = _parse_args(argv)
    configure_logging(ns.verbose)
    try:
        config = _config(ns)
        text = bundle_repo(config)
        _write(text, ns.output)
        logger.info("Directory structure and file contents generated")
    except KeyboardInterrupt:
        logger.error("Cancelled")
        sys.exit(1)
    except Exception as e:
        logger.error("%s", str(e) or "An unknown error occurred")
        sys.exit(1)


if __name__ == "__main__":
    main()
