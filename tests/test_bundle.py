# tests/test_bundle.py
import sys
from pathlib import Path

import pytest

from repobundle import (
    ERROR_SENTINEL,
    BundleConfig,
    OutputStyle,
    SelectionError,
    bundle,
    bundle_repo,
    describe,
)


def _make_file(p: Path, content: str = "x"):
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")


def _config(tmp_path: Path, **kwargs) -> BundleConfig:
    kwargs.setdefault("include", ["**"])
    return BundleConfig(root=tmp_path, **kwargs)


def test_describe_without_excludes():
    text = describe(BundleConfig(include=["src/**", "*.md"]))
    assert text == (
        "This is a merged representation of the files in the repository.\n\n"
        "It includes the files matching the following glob patterns:\n"
        "  - src/**\n"
        "  - *.md\n\n"
        "The directory structure is shown first, followed by the contents of each file.\n\n"
    )


def test_describe_with_excludes():
    text = describe(BundleConfig(include=["**"], exclude=["dist/**"]))
    assert "Files matching any of the following glob patterns are excluded:\n  - dist/**\n\n" in text
    assert text.index("excluded") < text.index("The directory structure")


def test_xml_bundle_layout(tmp_path: Path):
    _make_file(tmp_path / "a.txt", "AA\n")
    _make_file(tmp_path / "dir/b.txt", "BB\n")

    root = tmp_path.resolve()
    paths = [str(root / "a.txt"), str(root / "dir/b.txt")]
    out = bundle(paths, _config(tmp_path, description=False))

    assert out == (
        "<directory_structure>\n"
        "├── a.txt\n"
        "└── dir\n"
        "    └── b.txt\n"
        "</directory_structure>\n"
        "<files>\n"
        '<file path="a.txt">\n'
        "AA\n"
        "</file>\n"
        '<file path="dir/b.txt">\n'
        "BB\n"
        "</file>\n"
        "</files>"
    )


def test_plain_bundle_layout(tmp_path: Path):
    _make_file(tmp_path / "a.txt", "AA\n")
    _make_file(tmp_path / "dir/b.txt", "BB\n")

    out = bundle(["a.txt", "dir/b.txt"], _config(tmp_path, style=OutputStyle.PLAIN, description=False))

    assert out == (
        "Directory Structure:\n\n"
        "├── a.txt\n"
        "└── dir\n"
        "    └── b.txt\n"
        "\n"
        "---\nFile: a.txt\n---\n\nAA\n"
        "\n"
        "---\nFile: dir/b.txt\n---\n\nBB\n"
    )


def test_description_comes_first(tmp_path: Path):
    _make_file(tmp_path / "a.txt", "AA")
    config = _config(tmp_path, include=["*.txt"])
    out = bundle(["a.txt"], config)
    assert out.startswith(describe(config))
    assert out.index("<directory_structure>") > 0


def test_styles_share_selection_and_tree(tmp_path: Path):
    for name in ["z/a.txt", "aa.txt", "m/n/o.txt"]:
        _make_file(tmp_path / name, name)

    xml = bundle_repo(_config(tmp_path))
    plain = bundle_repo(_config(tmp_path, style="plain"))

    tree_xml = xml.split("<directory_structure>\n", 1)[1].split("</directory_structure>", 1)[0]
    tree_plain = plain.split("Directory Structure:\n\n", 1)[1].split("\n---\n", 1)[0]
    assert tree_xml.strip("\n") == tree_plain.strip("\n")
    for name in ["z/a.txt", "aa.txt", "m/n/o.txt"]:
        assert f'<file path="{name}">' in xml
        assert f"File: {name}\n" in plain


def test_file_sections_follow_selection_order_not_tree_order(tmp_path: Path):
    _make_file(tmp_path / "z/a.txt", "ZA")
    _make_file(tmp_path / "aa.txt", "AA")

    out = bundle(["z/a.txt", "aa.txt"], _config(tmp_path, description=False))

    # Tree groups by directory: aa.txt first, then z
    assert out.index("├── aa.txt") < out.index("└── z")
    # Sections keep the given order
    assert out.index('<file path="z/a.txt">') < out.index('<file path="aa.txt">')


def test_unreadable_file_gets_sentinel_and_run_succeeds(tmp_path: Path):
    _make_file(tmp_path / "readme.md", "hello")
    (tmp_path / "secret.bin").write_bytes(b"\xff\xfe\x00\x81")

    out = bundle_repo(_config(tmp_path))

    assert f'<file path="secret.bin">\n{ERROR_SENTINEL}</file>' in out
    assert '<file path="readme.md">\nhello</file>' in out


def test_empty_selection(tmp_path: Path):
    out = bundle([], _config(tmp_path, description=False))
    assert out == "<directory_structure>\n</directory_structure>\n<files>\n</files>"

    plain = bundle([], _config(tmp_path, style="plain", description=False))
    assert plain == "Directory Structure:\n\n"


def test_bundle_repo_applies_patterns(tmp_path: Path):
    _make_file(tmp_path / "src/main.py", "print('hi')\n")
    _make_file(tmp_path / "src/build/gen.py", "generated\n")
    _make_file(tmp_path / "notes.txt", "n\n")

    out = bundle_repo(_config(tmp_path, include=["src/**"], exclude=["src/build"]))

    assert '<file path="src/main.py">' in out
    assert "gen.py" not in out
    assert "notes.txt" not in out
    assert "  - src/**\n" in out
    assert "  - src/build\n" in out


def test_bundle_repo_selection_error_propagates(tmp_path: Path):
    with pytest.raises(SelectionError):
        bundle_repo(BundleConfig(include=["**"], root=tmp_path / "missing"))


def test_config_from_strings():
    config = BundleConfig.from_strings(" src/** , ,*.md ", "", style="plain")
    assert config.include == ["src/**", "*.md"]
    assert config.exclude == []
    assert config.style is OutputStyle.PLAIN


def test_config_rejects_bad_values():
    with pytest.raises(ValueError):
        BundleConfig(style="html")
    with pytest.raises(ValueError):
        BundleConfig(max_workers=0)


@pytest.mark.skipif(sys.platform.startswith("win"), reason="Symlink creation needs privileges on Windows")
def test_symlinked_root_keeps_paths_relative(tmp_path: Path):
    real = tmp_path / "checkout"
    _make_file(real / "a.txt", "A")
    _make_file(real / "src/b.txt", "B")
    link = tmp_path / "link"
    link.symlink_to(real, target_is_directory=True)

    # Paths under the link as given, and paths under the resolved root
    for paths in (
        [str(link / "a.txt"), str(link / "src/b.txt")],
        [str(real.resolve() / "a.txt"), str(real.resolve() / "src/b.txt")],
    ):
        out = bundle(paths, BundleConfig(root=link, description=False))
        assert out.startswith("<directory_structure>\n├── a.txt\n└── src\n    └── b.txt\n</directory_structure>\n")
        assert '<file path="a.txt">\nA</file>' in out
        assert '<file path="src/b.txt">\nB</file>' in out


@pytest.mark.skipif(sys.platform.startswith("win"), reason="Symlink creation needs privileges on Windows")
def test_bundle_repo_through_symlinked_root(tmp_path: Path):
    real = tmp_path / "checkout"
    _make_file(real / "docs/guide.md", "G")
    link = tmp_path / "link"
    link.symlink_to(real, target_is_directory=True)

    out = bundle_repo(BundleConfig(include=["**"], root=link, description=False))
    assert '<file path="docs/guide.md">\nG</file>' in out
    assert str(tmp_path) not in out
