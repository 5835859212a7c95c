"""
Property-based tests for bundling.

Ordering, empty-line removal and block separation must hold for any file
set and content, not only the hand-written examples.
"""

from pathlib import Path

from hypothesis import given, settings, HealthCheck, strategies as st

from bundler.collector import FileEntry
from bundler.config import SortMode, resolve_config
from bundler.response_file import ResponseAnswers, build_response_command, read_response_file
from bundler.writer import order_files, strip_empty_lines, write_bundle


extensions = st.sampled_from([".py", ".js", ".ts", ".cs", ".java"])
names = st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=8)

file_entries = st.lists(
    st.builds(
        lambda directory, name, ext: FileEntry(
            path=Path("/root") / directory / f"{name}{ext}",
            relative_path=f"{directory}/{name}{ext}",
        ),
        st.sampled_from(["a", "b", "src", "src/x"]),
        names,
        extensions,
    ),
    unique_by=lambda entry: str(entry.path),
    max_size=20,
)

source_lines = st.lists(
    st.text(alphabet="ab =;\t ", max_size=10),
    max_size=10,
)


class TestOrderingProperties:

    @given(files=file_entries)
    def test_name_order_is_lexicographic_path_order(self, files):
        ordered = order_files(files, SortMode.NAME)
        keys = [str(entry.path) for entry in ordered]
        assert keys == sorted(keys)
        assert sorted(keys) == sorted(str(entry.path) for entry in files)

    @given(files=file_entries)
    def test_type_order_groups_extensions(self, files):
        ordered = order_files(files, SortMode.TYPE)
        keys = [(entry.extension, str(entry.path)) for entry in ordered]
        assert keys == sorted(keys)

        seen = []
        for entry in ordered:
            if not seen or seen[-1] != entry.extension:
                assert entry.extension not in seen
                seen.append(entry.extension)


class TestContentProperties:

    @given(lines=source_lines)
    def test_strip_leaves_no_blank_lines(self, lines):
        stripped = strip_empty_lines(lines)
        assert all(line.strip() for line in stripped)
        assert [line for line in lines if line.strip()] == stripped

    @given(contents=st.lists(source_lines, min_size=1, max_size=5))
    @settings(max_examples=30, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_removed_empty_lines_leave_only_separators(self, tmp_path_factory, contents):
        root = tmp_path_factory.mktemp("props")
        files = []
        for index, lines in enumerate(contents):
            path = root / f"f{index}.py"
            path.write_text("".join(line + "\n" for line in lines), encoding="utf-8", newline="")
            files.append(FileEntry(path=path, relative_path=path.name))
        output = root / "out.txt"
        config = resolve_config(["py"], output, root=root, remove_empty_lines=True)

        result = write_bundle(files, config)

        written = output.read_text(encoding="utf-8").split("\n")[:-1]
        assert written.count("") == len(contents)
        assert all(line.strip() or line == "" for line in written)
        assert result.line_count == len(written)


class TestResponseCommandProperties:

    @given(
        languages=st.lists(st.sampled_from(["py", "js", "ts", "cs", "java", "all"]), min_size=1, max_size=3),
        output=st.text(alphabet="abc_./-", min_size=1, max_size=12),
        note=st.sampled_from(["", "true", "false", "yes"]),
        sort=st.sampled_from(["", "name", "type"]),
        author=st.text(alphabet="ABC xyz", max_size=10),
    )
    def test_command_round_trips_through_response_reader(
        self, tmp_path_factory, languages, output, note, sort, author
    ):
        answers = ResponseAnswers(
            languages=", ".join(languages), output=output, note=note, sort=sort, author=author,
        )
        command = build_response_command(answers)
        rsp = tmp_path_factory.mktemp("rsp") / "bundle.rsp"
        rsp.write_text(command, encoding="utf-8")

        args = read_response_file(rsp)

        assert args[:3] == ["bundle", "--language", ",".join(languages)]
        assert args[3:5] == ["--output", output.strip()]
        assert ("--note" in args) == (note == "true")
        assert ("--sort" in args) == (sort == "type")
        if author.strip():
            assert args[-2:] == ["--author", author.strip()]
        else:
            assert "--author" not in args
