# repobundle/paths.py

"""
Path normalization helpers.

Selected files may be given as absolute paths (as produced by glob expansion)
or as paths relative to the working root. Both the directory tree and the
per-file section labels use the same normalized, ``/``-joined relative form.
"""

from __future__ import annotations

import os
import re

_SEPARATORS = re.compile(r"[\\/]" if os.sep == "\\" else r"/")


def normalize_path(path: str | os.PathLike[str], root: str | os.PathLike[str] | None = None) -> str:
    """
    Return the display form of ``path`` relative to ``root``.

    Absolute paths are made relative to ``root`` (the current working
    directory when ``root`` is ``None``); relative paths are kept as they are.
    Segments are joined with ``/`` regardless of the platform.

    This function never raises. If the path cannot be expressed relative to
    the root (another drive, or a location outside of the root), the original
    path is returned unchanged.

    Parameters
    ----------
    path : str | os.PathLike
        Path of a selected file.
    root : str | os.PathLike | None, optional
        Working root used to relativize absolute paths.

    Returns
    -------
    str
        Normalized path.
    """

    raw = os.fspath(path)
    if not os.path.isabs(raw):
        return "/".join(path_segments(raw)) or raw

    base = os.fspath(root) if root is not None else os.getcwd()
    # Try the paths as given first, then with symbolic links in the root and
    # in the parent directory resolved. The file name itself is kept, so a
    # link to a file is labelled with the link's name.
    real_base = os.path.realpath(base)
    real_raw = os.path.join(os.path.realpath(os.path.dirname(raw)), os.path.basename(raw))
    for candidate, start in ((raw, base), (raw, real_base), (real_raw, real_base)):
        rel = _relative(candidate, start)
        if rel is not None:
            return rel
    return raw


def _relative(path: str, start: str) -> str | None:
    try:
        rel = os.path.relpath(path, start)
    except ValueError:
        # Paths on different drives.
        return None
    segments = path_segments(rel)
    if not segments or segments[0] == os.pardir:
        return None
    return "/".join(segments)


def path_segments(path: str | os.PathLike[str]) -> list[str]:
    """Split ``path`` on separators, dropping empty and ``.`` segments."""
    return [part for part in _SEPARATORS.split(os.fspath(path)) if part and part != os.curdir]
