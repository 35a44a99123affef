# repobundle/selection.py

"""
File selection.

Files are selected by walking the working root and matching every relative
POSIX path against include and exclude glob patterns. Patterns are compiled
with :mod:`pathspec` gitignore rules, anchored at the root so that they
behave like shell globs relative to the working directory:

- ``*.md`` matches ``README.md`` but not ``docs/guide.md``,
- ``**/*.md`` matches Markdown files at any depth,
- ``src`` matches the ``src`` directory and therefore everything under it,
- a leading ``!`` negates a pattern.

Only regular files are kept (a symbolic link to a file counts as a file,
directories and links to directories do not). The result is deduplicated
and sorted.
"""


from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

import pathspec

from repobundle.errors import SelectionError

logger = logging.getLogger(__name__)


def anchor_pattern(pattern: str, root: Path) -> str:
    """
    Anchor a glob pattern at ``root``.

    Absolute patterns are rewritten relative to ``root``; relative patterns
    lose any leading ``./`` and gain a leading ``/``.
    """

    negate = pattern.startswith("!")
    body = pattern[1:] if negate else pattern

    if os.path.isabs(body):
        try:
            body = os.path.relpath(body, root)
        except ValueError:
            pass
        body = body.replace(os.sep, "/")

    while body.startswith("./"):
        body = body[2:]
    body = "/" + body.lstrip("/")

    return ("!" if negate else "") + body


def compile_patterns(patterns: Iterable[str], root: Path) -> pathspec.GitIgnoreSpec:
    """
    Compile glob patterns into a :class:`pathspec.GitIgnoreSpec`.

    Raises
    ------
    SelectionError
        If a pattern is malformed.
    """

    patterns = list(patterns)
    try:
        return pathspec.GitIgnoreSpec.from_lines([anchor_pattern(p, root) for p in patterns])
    except ValueError as e:
        raise SelectionError(f"Invalid glob pattern in {patterns!r}: {e}") from e


def iter_files(root: Path) -> Iterable[Path]:
    """
    Yield every regular file below ``root``.

    Symbolic links to directories are not followed.

    Raises
    ------
    SelectionError
        If a directory cannot be listed.
    """

    def on_error(e: OSError) -> None:
        raise SelectionError(f"Could not scan directory '{e.filename}': {e}") from e

    for dirpath, dirnames, filenames in root.walk(on_error=on_error):
        dirnames.sort()
        for name in sorted(filenames):
            p = dirpath / name
            try:
                if p.is_file():
                    yield p
            except OSError:
                logger.debug("Skipping %s: cannot stat", p)


def select_files(
    include: Iterable[str],
    exclude: Iterable[str] = (),
    root: str | os.PathLike[str] | None = None,
) -> list[str]:
    """
    Select the files to bundle.

    Parameters
    ----------
    include : Iterable[str]
        Glob patterns; a file is selected if it matches at least one.
        An empty list selects nothing.
    exclude : Iterable[str], optional
        Glob patterns; a selected file matching any of them is dropped.
    root : str | os.PathLike | None, optional
        Working root, the current working directory by default.

    Returns
    -------
    list[str]
        Absolute paths of regular files, sorted by string comparison.

    Raises
    ------
    SelectionError
        If ``root`` is not a directory, a pattern is malformed or the tree
        cannot be enumerated.
    """

    try:
        root = Path(root if root is not None else os.getcwd()).resolve()
    except (OSError, RuntimeError) as e:
        raise SelectionError(f"Could not resolve root path '{root}': {e}") from e
    if not root.is_dir():
        raise SelectionError(f"Root path '{root}' is not a directory")

    include_spec = compile_patterns(include, root)
    exclude_spec = compile_patterns(exclude, root)
    if not include_spec.patterns:
        logger.warning("No include patterns given, nothing will be selected")
        return []

    selected: set[str] = set()
    for p in iter_files(root):
        rel = p.relative_to(root).as_posix()
        if not include_spec.match_file(rel):
            continue
        if exclude_spec.match_file(rel):
            logger.debug("Excluded %s", rel)
            continue
        selected.add(str(p))

    logger.debug("Selected %d files under %s", len(selected), root)
    return sorted(selected)
