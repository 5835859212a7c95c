"""
Unit tests for source file collection.
"""

import os
import sys

import pytest

from bundler.collector import FileEntry, collect_files
from bundler.errors import BundleIOError


def relative_paths(entries):
    return sorted(entry.relative_path.replace(os.sep, "/") for entry in entries)


class TestCollectFiles:
    def test_collects_matching_extensions_recursively(self, source_tree):
        entries = collect_files(source_tree, {".py", ".java"})
        assert relative_paths(entries) == ["a.py", "src/Main.java"]

    def test_extension_match_is_case_insensitive(self, source_tree):
        entries = collect_files(source_tree, {".cs"})
        assert relative_paths(entries) == ["src/Program.CS"]

    def test_bin_and_debug_directories_are_excluded(self, source_tree):
        entries = collect_files(source_tree, {".cs", ".py"})
        paths = relative_paths(entries)
        assert "bin/Debug.cs" not in paths
        assert "obj/debug/gen.py" not in paths

    def test_exclusion_is_case_sensitive(self, tmp_path, make_tree):
        make_tree(tmp_path, {"Bin/a.py": "a\n", "DEBUG/b.py": "b\n", "src/bin/c.py": "c\n"})
        entries = collect_files(tmp_path, {".py"})
        assert relative_paths(entries) == ["Bin/a.py", "DEBUG/b.py"]

    def test_file_named_bin_is_not_excluded(self, tmp_path, make_tree):
        make_tree(tmp_path, {"tools/debug.py": "d\n"})
        assert relative_paths(collect_files(tmp_path, {".py"})) == ["tools/debug.py"]

    def test_root_inside_bin_directory_is_collected(self, tmp_path, make_tree):
        root = tmp_path / "bin" / "project"
        make_tree(root, {"a.py": "a\n"})
        assert relative_paths(collect_files(root, {".py"})) == ["a.py"]

    def test_no_matches_returns_empty_list(self, source_tree):
        assert collect_files(source_tree, {".rb"}) == []

    def test_output_file_is_skipped(self, source_tree):
        stale = source_tree / "bundle.py"
        stale.write_text("old bundle\n", encoding="utf-8")
        entries = collect_files(source_tree, {".py"}, exclude=stale)
        assert relative_paths(entries) == ["a.py"]

    def test_output_given_through_parent_directory_is_skipped(self, source_tree, monkeypatch):
        monkeypatch.chdir(source_tree)
        (source_tree / "all.py").write_text("old bundle\n", encoding="utf-8")
        entries = collect_files(".", {".py"}, exclude=os.path.join("..", "project", "all.py"))
        assert relative_paths(entries) == ["a.py"]

    def test_entries_carry_absolute_and_relative_paths(self, source_tree):
        [entry] = collect_files(source_tree, {".js"})
        assert isinstance(entry, FileEntry)
        assert entry.path.is_absolute()
        assert entry.path == (source_tree / "b.js").absolute()
        assert entry.relative_path == "b.js"
        assert entry.extension == ".js"

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(BundleIOError) as exc_info:
            collect_files(tmp_path / "missing", {".py"})
        assert "missing" in str(exc_info.value)

    @pytest.mark.skipif(
        sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="directory permissions are not enforced",
    )
    def test_unreadable_directory_raises(self, tmp_path, make_tree):
        make_tree(tmp_path, {"locked/a.py": "a\n"})
        locked = tmp_path / "locked"
        locked.chmod(0)
        try:
            with pytest.raises(BundleIOError) as exc_info:
                collect_files(tmp_path, {".py"})
            assert exc_info.value.original_error is not None
        finally:
            locked.chmod(0o755)
