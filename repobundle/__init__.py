"""
repobundle — directory tree and file content bundling.

This package provides simple, composable tools to:
- select files from a working tree with include/exclude glob patterns,
- rebuild and render the directory tree of the selection,
- concatenate the tree and every file's contents into a single text artifact,
  in plain-text or tagged-markup framing.

The result is deterministic for a given set of files and suitable for
repository digests or large-language-model (LLM) context.
"""

from __future__ import annotations

from .bundle import bundle, bundle_repo, describe
from .config import BundleConfig, OutputStyle, parse_patterns
from .content import ERROR_SENTINEL, FileRecord, fetch_contents, read_file
from .errors import OutputError, RepoBundleError, SelectionError
from .paths import normalize_path
from .render import PlainRenderer, TreeRenderer, XmlRenderer, get_renderer
from .selection import select_files
from .tree import TreeNode, build_tree

__all__ = [
    "bundle",
    "bundle_repo",
    "describe",
    "BundleConfig",
    "OutputStyle",
    "parse_patterns",
    "ERROR_SENTINEL",
    "FileRecord",
    "fetch_contents",
    "read_file",
    "OutputError",
    "RepoBundleError",
    "SelectionError",
    "normalize_path",
    "PlainRenderer",
    "TreeRenderer",
    "XmlRenderer",
    "get_renderer",
    "select_files",
    "TreeNode",
    "build_tree",
]
