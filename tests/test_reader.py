"""Tests for the file reader."""

from __future__ import annotations

import pytest

from szero.exceptions import SourceReadError
from szero.reader import DEFAULT_EXCLUDE_DIRS, find, read


class TestRead:
    def test_reads_fixture_lines(self, fixtures_dir):
        lines = read(fixtures_dir / "foo" / "x.js")
        assert any("require" in line.text for line in lines)
        assert lines[3].line_number == 4
        assert lines[3].text == "const roi = require('roi');"

    def test_line_numbers_are_one_based(self, tmp_path):
        f = tmp_path / "a.js"
        f.write_text("one\ntwo\nthree")
        assert [line.line_number for line in read(f)] == [1, 2, 3]

    def test_round_trip_preserves_bytes(self, tmp_path):
        content = "const a = require('a');\r\n\r\n\tlet b = 1;\n// trailing\n"
        f = tmp_path / "a.js"
        f.write_bytes(content.encode("utf-8"))
        lines = read(f)
        assert "\n".join(line.text for line in lines) == content

    def test_round_trip_without_trailing_newline(self, tmp_path):
        content = "x\ny"
        f = tmp_path / "a.js"
        f.write_bytes(content.encode("utf-8"))
        assert "\n".join(line.text for line in read(f)) == content

    def test_empty_file(self, tmp_path):
        f = tmp_path / "empty.js"
        f.write_text("")
        assert read(f) == []

    def test_latin1_fallback(self, tmp_path):
        f = tmp_path / "legacy.js"
        f.write_bytes("// caf\xe9\n".encode("latin-1"))
        assert read(f)[0].text == "// caf\xe9"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(SourceReadError):
            read(tmp_path / "nope.js")

    def test_error_is_os_error(self, tmp_path):
        with pytest.raises(OSError):
            read(tmp_path / "nope.js")

    def test_directory_raises(self, tmp_path):
        with pytest.raises(SourceReadError):
            read(tmp_path)


class TestFind:
    @pytest.fixture
    def tree(self, tmp_path):
        (tmp_path / "src").mkdir()
        (tmp_path / "src" / "a.js").write_text("")
        (tmp_path / "src" / "c.ts").write_text("")
        (tmp_path / "src" / "notes.txt").write_text("")
        (tmp_path / "src" / "styles.css").write_text("")
        (tmp_path / "node_modules" / "dep").mkdir(parents=True)
        (tmp_path / "node_modules" / "dep" / "index.js").write_text("")
        (tmp_path / ".git").mkdir()
        (tmp_path / ".git" / "hook.js").write_text("")
        (tmp_path / "index.mjs").write_text("")
        return tmp_path

    def test_finds_javascript_files(self, fixtures_dir):
        names = [p.name for p in find(fixtures_dir)]
        assert "x.js" in names
        assert "p.js" in names

    def test_collects_source_extensions_only(self, tree):
        rel = [p.relative_to(tree).as_posix() for p in find(tree)]
        assert rel == ["index.mjs", "src/a.js", "src/c.ts"]

    def test_never_returns_excluded_paths(self, tree):
        for path in find(tree):
            parts = set(path.relative_to(tree).parts)
            assert not parts & DEFAULT_EXCLUDE_DIRS

    def test_custom_exclusions(self, tree):
        rel = [p.relative_to(tree).as_posix() for p in find(tree, exclude_dirs={"src"})]
        assert "src/a.js" not in rel
        assert "node_modules/dep/index.js" in rel

    def test_custom_extensions(self, tree):
        rel = [p.relative_to(tree).as_posix() for p in find(tree, extensions={".TS"})]
        assert rel == ["src/c.ts"]

    def test_restartable(self, tree):
        assert find(tree) == find(tree)

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(SourceReadError):
            find(tmp_path / "missing")
