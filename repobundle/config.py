# repobundle/config.py

"""Bundle configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class OutputStyle(str, Enum):
    """
    Output framing style.

    Attributes
    ----------
    PLAIN
        Bare tree text and ``---``-delimited file sections.
    XML
        Tree wrapped in ``<directory_structure>``, files in ``<file>`` tags.
    """

    PLAIN = "plain"
    XML = "xml"


def parse_patterns(raw: str | None) -> list[str]:
    """
    Split a comma-separated pattern list.

    Entries are stripped of surrounding whitespace and empty entries are
    dropped, so ``" src/**, ,*.md "`` gives ``["src/**", "*.md"]``.
    """

    if not raw:
        return []
    return [p.strip() for p in raw.split(",") if p.strip()]


def parse_bool(raw: str | bool | None, *, default: bool = False) -> bool:
    """Parse a YAML 1.2 core-schema boolean as used by action inputs."""
    if isinstance(raw, bool):
        return raw
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip()
    if value in ("true", "True", "TRUE"):
        return True
    if value in ("false", "False", "FALSE"):
        return False
    raise ValueError(f"Invalid boolean value: {raw!r} (expected true or false)")


@dataclass(frozen=True)
class BundleConfig:
    """
    Settings for one bundling run.

    Attributes
    ----------
    include
        Glob patterns selecting files.
    exclude
        Glob patterns removing files from the selection.
    style
        Output framing style.
    description
        Whether to start the artifact with a description of the patterns.
    escape
        XML-escape names and paths in the tagged style.
    root
        Working root; selection and path normalization are relative to it.
        ``None`` means the current working directory.
    encoding
        Text encoding used to read files.
    max_workers
        Upper bound on concurrent file reads (``None`` lets
        :class:`concurrent.futures.ThreadPoolExecutor` decide).
    """

    include: list[str] = field(default_factory=list)
    exclude: list[str] = field(default_factory=list)
    style: OutputStyle = OutputStyle.XML
    description: bool = True
    escape: bool = False
    root: Path | None = None
    encoding: str = "utf-8"
    max_workers: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "style", OutputStyle(self.style))
        if self.max_workers is not None and self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")

    @classmethod
    def from_strings(cls, include: str | None, exclude: str | None = None, **kwargs) -> "BundleConfig":
        """Build a config from comma-separated ``include``/``exclude`` strings."""
        return cls(include=parse_patterns(include), exclude=parse_patterns(exclude), **kwargs)
