# repobundle/render.py

"""
Tree and file-section rendering.

A single tree-construction engine feeds two stateless renderers:

- :class:`PlainRenderer` produces bare tree text and ``---``-delimited file
  sections,
- :class:`XmlRenderer` wraps the same tree text in one
  ``<directory_structure>`` element and frames each file in a ``<file>``
  element.

Both draw the tree with :class:`anytree.ContStyle` connectors (``├──``,
``└──``, ``│``) and order children at every level by plain code-point
comparison of their names. The ordering is case-sensitive and does not depend
on the locale, so ``"B"`` sorts before ``"a"``.
"""


from __future__ import annotations

from typing import Callable, Iterable
from xml.sax.saxutils import escape as xml_escape
from xml.sax.saxutils import quoteattr

from anytree import ContStyle

from repobundle.config import OutputStyle
from repobundle.content import FileRecord
from repobundle.tree import TreeNode


def by_name(node: TreeNode) -> str:
    return node.name


class TreeRenderer:
    """
    Base renderer shared by the output styles.

    Subclasses only decide how the tree text and the file sections are
    framed; line layout and ordering live here.

    Parameters
    ----------
    sort_key : Callable[[TreeNode], Any], optional
        Key used to order siblings. Defaults to the node name.
    """

    style = ContStyle()

    def __init__(self, *, sort_key: Callable[[TreeNode], object] = by_name) -> None:
        self.sort_key = sort_key

    def tree_lines(self, root: TreeNode) -> list[str]:
        """
        Return one line per node below ``root``.

        The root itself is not rendered. Children of the root are drawn
        without indentation; deeper levels are indented with ``│   `` under a
        non-last parent and four spaces under a last one.
        """

        lines: list[str] = []

        def rec(node: TreeNode, prefix: str) -> None:
            children = sorted(node.children, key=self.sort_key)
            n = len(children)
            for i, child in enumerate(children):
                last = i == n - 1
                lines.append(prefix + (self.style.end if last else self.style.cont) + child.name)
                # Files are never expanded, even if a later path used them as a directory.
                if not child.is_file and child.children:
                    rec(child, prefix + (self.style.empty if last else self.style.vertical))

        rec(root, "")
        return lines

    def tree_text(self, root: TreeNode) -> str:
        """Return the bare tree text; every line ends with a newline."""
        return "".join(f"{line}\n" for line in self.tree_lines(root))

    def render_tree(self, root: TreeNode) -> str:
        raise NotImplementedError

    def render_file(self, record: FileRecord) -> str:
        raise NotImplementedError

    def render_files(self, records: Iterable[FileRecord]) -> list[str]:
        """Render file sections, keeping the order of ``records``."""
        return [self.render_file(record) for record in records]


class PlainRenderer(TreeRenderer):
    """
    Plain-text renderer.

    The tree is optionally preceded by a literal ``header`` line and a blank
    line. Each file becomes::

        ---
        File: <path>
        ---

        <content>
    """

    def __init__(self, *, header: str | None = "Directory Structure:", sort_key: Callable[[TreeNode], object] = by_name) -> None:
        super().__init__(sort_key=sort_key)
        self.header = header

    def render_tree(self, root: TreeNode) -> str:
        text = self.tree_text(root)
        if self.header:
            return f"{self.header}\n\n{text}"
        return text

    def render_file(self, record: FileRecord) -> str:
        return f"---\nFile: {record.path}\n---\n\n{record.content}"


class XmlRenderer(TreeRenderer):
    """
    Tagged-markup renderer.

    Names and paths are written as they are unless ``escape`` is set, in
    which case markup-special characters are XML-escaped. Without escaping a
    file name containing ``"`` or ``<`` produces malformed markup.
    """

    def __init__(self, *, escape: bool = False, sort_key: Callable[[TreeNode], object] = by_name) -> None:
        super().__init__(sort_key=sort_key)
        self.escape = escape

    def tree_lines(self, root: TreeNode) -> list[str]:
        lines = super().tree_lines(root)
        if self.escape:
            return [xml_escape(line) for line in lines]
        return lines

    def render_tree(self, root: TreeNode) -> str:
        return f"<directory_structure>\n{self.tree_text(root)}</directory_structure>"

    def render_file(self, record: FileRecord) -> str:
        if self.escape:
            open_tag = f"<file path={quoteattr(record.path)}>"
        else:
            open_tag = f'<file path="{record.path}">'
        return f"{open_tag}\n{record.content}</file>"

    def render_files(self, records: Iterable[FileRecord]) -> list[str]:
        return ["<files>", *super().render_files(records), "</files>"]


def get_renderer(style: OutputStyle | str, *, escape: bool = False) -> TreeRenderer:
    """
    Return the renderer for an output style.

    Raises
    ------
    ValueError
        If ``style`` is not a known :class:`~repobundle.config.OutputStyle`.
    """

    style = OutputStyle(style)
    if style is OutputStyle.PLAIN:
        return PlainRenderer()
    return XmlRenderer(escape=escape)
