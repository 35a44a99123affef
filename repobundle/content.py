# repobundle/content.py

"""
File content fetching.

Contents are read as text, one file at a time per worker thread. A file that
cannot be read (permission denied, removed since selection, not valid text in
the requested encoding) does not abort the run: its content is replaced by
:data:`ERROR_SENTINEL` and a warning is logged.
"""


from __future__ import annotations

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

ERROR_SENTINEL = "@@ERROR READING FILE@@"


@dataclass(frozen=True)
class FileRecord:
    """
    A file section of the bundle.

    Attributes
    ----------
    path
        Normalized display path.
    content
        File text, or :data:`ERROR_SENTINEL` if it could not be read.
    """

    path: str
    content: str


def read_file(path: str | os.PathLike[str], *, encoding: str = "utf-8") -> str:
    """
    Read a whole file as text.

    Parameters
    ----------
    path : str | os.PathLike
        File to read.
    encoding : str, default="utf-8"
        Text encoding; decoding is strict.

    Returns
    -------
    str
        The file content, or :data:`ERROR_SENTINEL` if the file could not be
        read or decoded. Errors are logged as warnings and never raised.
    """

    try:
        # newline="" keeps line endings byte-for-byte.
        with Path(path).open("r", encoding=encoding, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Error reading file %s: %s", os.fspath(path), e)
        return ERROR_SENTINEL


def fetch_contents(
    paths: Iterable[str | os.PathLike[str]],
    *,
    encoding: str = "utf-8",
    max_workers: int | None = None,
) -> list[str]:
    """
    Read several files concurrently.

    Reads are independent and share no state; results are returned in the
    order of ``paths``.
    """

    paths = list(paths)
    if not paths:
        return []
    with ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="repobundle-read") as pool:
        return list(pool.map(lambda p: read_file(p, encoding=encoding), paths))
