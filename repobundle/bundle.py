# repobundle/bundle.py

"""
Bundle assembly.

A bundle is a single text artifact made of, in this order:

1. an optional description of the include/exclude patterns,
2. the directory tree of the selected files,
3. one section per file, in selection order.

The tree and the file sections are framed by the renderer matching
:attr:`BundleConfig.style`; selection and tree construction are identical for
every style.
"""


from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence

from repobundle.config import BundleConfig
from repobundle.content import FileRecord, fetch_contents
from repobundle.paths import normalize_path
from repobundle.render import get_renderer
from repobundle.selection import select_files
from repobundle.tree import build_tree

logger = logging.getLogger(__name__)


def describe(config: BundleConfig) -> str:
    """Return the human-readable description block for ``config``."""
    description = "This is a merged representation of the files in the repository.\n\n"
    description += "It includes the files matching the following glob patterns:\n"
    description += "\n".join(f"  - {p}" for p in config.include)
    description += "\n\n"
    if config.exclude:
        description += "Files matching any of the following glob patterns are excluded:\n"
        description += "\n".join(f"  - {p}" for p in config.exclude)
        description += "\n\n"
    description += "The directory structure is shown first, followed by the contents of each file.\n\n"
    return description


def _working_root(config: BundleConfig) -> Path:
    return Path(config.root if config.root is not None else os.getcwd())


def bundle(paths: Sequence[str | os.PathLike[str]], config: BundleConfig) -> str:
    """
    Bundle already selected files into one text artifact.

    Parameters
    ----------
    paths : Sequence[str | os.PathLike]
        Selected file paths, absolute or relative to ``config.root``. They
        are used in the given order for the file sections; callers pass them
        sorted.
    config : BundleConfig
        Output settings.

    Returns
    -------
    str
        The bundle. Unreadable files appear with
        :data:`repobundle.content.ERROR_SENTINEL` as content; they never
        make this function fail.
    """

    root = _working_root(config)
    renderer = get_renderer(config.style, escape=config.escape)

    display_paths = [normalize_path(p, root) for p in paths]
    tree = build_tree(display_paths)

    # Relative inputs are read from the working root, not the process cwd.
    read_paths = [root / p if not os.path.isabs(p) else p for p in paths]
    contents = fetch_contents(read_paths, encoding=config.encoding, max_workers=config.max_workers)
    records = [FileRecord(path, content) for path, content in zip(display_paths, contents)]

    chunks = []
    if config.description:
        chunks.append(describe(config))
    chunks.append(renderer.render_tree(tree))
    chunks.extend(renderer.render_files(records))
    return "\n".join(chunks)


def bundle_repo(config: BundleConfig) -> str:
    """
    Select files with ``config`` patterns and bundle them.

    Raises
    ------
    repobundle.errors.SelectionError
        If selection fails (malformed pattern, unreadable tree).
    """

    paths = select_files(config.include, config.exclude, root=_working_root(config))
    logger.info("Bundling %d files", len(paths))
    return bundle(paths, config)
