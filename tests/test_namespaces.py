"""Tests for NamespaceScanner."""

from pathlib import Path
from unittest.mock import Mock

from sourceloader.resolution.namespaces import NamespaceScanner


def test_collects_namespaces_in_discovery_order(tmp_path: Path, write):
    write(tmp_path / "a" / "Foo.php", "<?php\nnamespace App\\First;\n\nclass Foo {}\n")
    write(tmp_path / "b" / "Foo.php", "<?php\nnamespace App\\Second;\n")

    assert NamespaceScanner().namespaces_of(tmp_path, "Foo.php") == ["App\\First", "App\\Second"]


def test_only_files_with_exact_name_are_opened(tmp_path: Path, write, monkeypatch):
    write(tmp_path / "Foo.php", "namespace Wanted;\n")
    write(tmp_path / "MyFoo.php", "namespace Unwanted;\n")
    write(tmp_path / "Foo.php.bak", "namespace Backup;\n")
    opened = []
    original_open = Path.open

    def tracking_open(self, *args, **kwargs):
        opened.append(self)
        return original_open(self, *args, **kwargs)

    monkeypatch.setattr(Path, "open", tracking_open)

    assert NamespaceScanner().namespaces_of(tmp_path, "Foo.php") == ["Wanted"]
    assert opened == [tmp_path / "Foo.php"]


def test_line_must_match_whole_declaration(tmp_path: Path, write):
    write(
        tmp_path / "Foo.php",
        "  namespace Indented;\n"
        "namespace NoSemicolon\n"
        "namespace Trailing; // comment\n"
        "namespace   Spaced;\n"
        "namespace Windows;\r\n"
        "use namespace Other;\n",
    )

    assert NamespaceScanner().namespaces_of(tmp_path, "Foo.php") == ["Spaced", "Windows"]


def test_multiple_declarations_and_duplicates_kept(tmp_path: Path, write):
    write(tmp_path / "x" / "Foo.php", "namespace Same;\nnamespace Other;\n")
    write(tmp_path / "y" / "Foo.php", "namespace Same;\n")

    assert NamespaceScanner().namespaces_of(tmp_path, "Foo.php") == ["Same", "Other", "Same"]


def test_no_matching_file_returns_empty(tmp_path: Path, write):
    write(tmp_path / "Bar.php", "namespace Bar;\n")

    assert NamespaceScanner().namespaces_of(tmp_path, "Foo.php") == []


def test_missing_root_returns_empty(tmp_path: Path):
    assert NamespaceScanner().namespaces_of(tmp_path / "missing", "Foo.php") == []


def test_undecodable_file_keeps_earlier_lines_and_continues(tmp_path: Path, write):
    bad = tmp_path / "a" / "Foo.php"
    bad.parent.mkdir()
    bad.write_bytes(b"namespace Before;\n" + b"\xff\xfe\xfa" * 4000 + b"\nnamespace After;\n")
    write(tmp_path / "b" / "Foo.php", "namespace Good;\n")
    logger = Mock()

    result = NamespaceScanner(logger=logger).namespaces_of(tmp_path, "Foo.php")

    assert result[-1] == "Good"
    assert "After" not in result
    logger.warning.assert_called_once()


def test_each_call_rescans(tmp_path: Path, write):
    scanner = NamespaceScanner()
    write(tmp_path / "Foo.php", "namespace One;\n")
    assert scanner.namespaces_of(tmp_path, "Foo.php") == ["One"]

    write(tmp_path / "Foo.php", "namespace Two;\n")
    assert scanner.namespaces_of(tmp_path, "Foo.php") == ["Two"]


def test_custom_pattern(tmp_path: Path, write):
    write(tmp_path / "mod.py", "__namespace__ = 'app.core'\n")

    scanner = NamespaceScanner(pattern=r"^__namespace__ = '(.*)'$")

    assert scanner.namespaces_of(tmp_path, "mod.py") == ["app.core"]
