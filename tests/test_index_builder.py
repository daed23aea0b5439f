"""
Unit tests for importing files into a store.
"""
import pytest

from textxref import (
    ErrorKind, IndexBuilder, IndexStore, XrefError, derive_text_name, read_text_file
)


class TestDeriveTextName:
    """File name to text name."""

    @pytest.mark.parametrize("path,expected", [
        ("story.txt", "story"),
        ("/data/texts/story.txt", "story"),
        ("C:\\texts\\story.md", "story"),
        ("archive.tar.gz", "archive.tar"),
        ("notes", "notes"),
    ])
    def test_derive(self, path, expected):
        assert derive_text_name(path) == expected


class TestReadTextFile:
    """Reading file content."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(XrefError) as exc_info:
            read_text_file(tmp_path / "missing.txt")
        assert exc_info.value.kind == ErrorKind.FILE_NOT_FOUND

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("")
        with pytest.raises(XrefError) as exc_info:
            read_text_file(path)
        assert exc_info.value.kind == ErrorKind.INVALID_FORMAT

    def test_latin1_fallback(self, tmp_path):
        path = tmp_path / "old.txt"
        path.write_bytes("caf\xe9 noir".encode("latin-1"))
        assert read_text_file(path) == "caf\xe9 noir"


class TestImport:
    """Store import and batch loading."""

    def test_import_text(self, tmp_path):
        path = tmp_path / "poem.txt"
        path.write_text("Roses are red\nviolets are blue\n")
        store = IndexStore()

        assert store.import_text(path) == "poem"
        assert store.search("poem", "are") == [1, 4]

    def test_import_surfaces_build_errors(self, tmp_path):
        store = IndexStore()
        bad = tmp_path / "bad name.txt"
        bad.write_text("words")
        with pytest.raises(XrefError) as exc_info:
            store.import_text(bad)
        assert exc_info.value.kind == ErrorKind.INVALID_NAME

        good = tmp_path / "good.txt"
        good.write_text("words")
        store.import_text(good)
        with pytest.raises(XrefError) as exc_info:
            store.import_text(good)
        assert exc_info.value.kind == ErrorKind.ALREADY_EXISTS

    def test_import_paths_collects_failures(self, tmp_path):
        (tmp_path / "one.txt").write_text("first text")
        (tmp_path / "two.txt").write_text("")
        store = IndexStore()
        builder = IndexBuilder(store)

        report = builder.import_paths([tmp_path / "one.txt", tmp_path / "two.txt",
                                       tmp_path / "three.txt"])

        assert report.imported == ["one"]
        assert not report.ok
        kinds = {path.split("/")[-1]: err.kind for path, err in report.failed.items()}
        assert kinds == {"two.txt": ErrorKind.INVALID_FORMAT,
                         "three.txt": ErrorKind.FILE_NOT_FOUND}
        assert store.names() == ["one"]

    def test_import_directory(self, tmp_path):
        (tmp_path / "sub").mkdir()
        (tmp_path / "b.txt").write_text("bee")
        (tmp_path / "sub" / "a.txt").write_text("ay")
        (tmp_path / "skip.md").write_text("not imported")
        store = IndexStore()

        report = IndexBuilder(store).import_directory(tmp_path)

        assert report.ok
        assert sorted(report.imported) == ["a", "b"]
        assert store.names() == ["a", "b"]

    def test_check_file(self, tmp_path):
        path = tmp_path / "ok.txt"
        path.write_text("fine")
        assert IndexBuilder(IndexStore()).check_file(path)
