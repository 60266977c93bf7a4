"""
Tests for the locale table model - merging language files and splitting them back.
"""
import json
import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from errors import ParseError, WriteError
from locale_table import LocaleTableModel


def make_reader(files):
    """Reader over an in-memory {file_name: text} listing"""
    return lambda name: files[name]


class TestLoad:
    """Test merging language files into a table."""

    def test_merges_languages_per_key(self):
        """Should merge en and fr into one key-indexed table"""
        files = {
            "en.json": json.dumps({"a": "1", "b": "2"}),
            "fr.json": json.dumps({"a": "uno"}),
        }
        table = LocaleTableModel.load(list(files), make_reader(files))
        assert table == {"a": {"en": "1", "fr": "uno"}, "b": {"en": "2"}}

    def test_missing_language_has_no_entry(self):
        """Should not add an entry for a language missing a key"""
        files = {
            "en.json": json.dumps({"b": "2"}),
            "fr.json": json.dumps({}),
        }
        table = LocaleTableModel.load(list(files), make_reader(files))
        assert "fr" not in table["b"]

    def test_ignores_non_json_files(self):
        """Should skip names not ending in .json"""
        files = {"en.json": json.dumps({"a": "1"}), "README.md": "# not json"}
        table = LocaleTableModel.load(list(files), make_reader(files))
        assert table == {"a": {"en": "1"}}

    def test_empty_listing(self):
        """Should return an empty table for a directory without language files"""
        assert LocaleTableModel.load([], make_reader({})) == {}

    def test_invalid_json_raises_parse_error(self):
        """Should raise ParseError naming the broken file"""
        files = {"en.json": json.dumps({"a": "1"}), "fr.json": "{not json"}
        with pytest.raises(ParseError) as exc_info:
            LocaleTableModel.load(list(files), make_reader(files))
        assert exc_info.value.file_name == "fr.json"

    def test_non_object_raises_parse_error(self):
        """Should reject a top-level JSON array"""
        files = {"en.json": json.dumps(["a", "b"])}
        with pytest.raises(ParseError):
            LocaleTableModel.load(list(files), make_reader(files))

    def test_nested_value_raises_parse_error(self):
        """Should reject nested objects and non-string values"""
        files = {"en.json": json.dumps({"menu": {"file": "File"}})}
        with pytest.raises(ParseError):
            LocaleTableModel.load(list(files), make_reader(files))

        files = {"en.json": json.dumps({"count": 3})}
        with pytest.raises(ParseError):
            LocaleTableModel.load(list(files), make_reader(files))


class TestLanguages:
    """Test language code derivation."""

    def test_language_of_strips_suffix(self):
        """Should strip only the trailing .json suffix"""
        assert LocaleTableModel.language_of("en.json") == "en"
        assert LocaleTableModel.language_of("pt-BR.json") == "pt-BR"
        assert LocaleTableModel.language_of("x.json.json") == "x.json"

    def test_languages_from_files_sorted(self):
        """Should list languages of json files in sorted file order"""
        names = ["fr.json", "notes.txt", "de.json", "en.json"]
        assert LocaleTableModel.languages_from_files(names) == ["de", "en", "fr"]

    def test_languages_of_is_union(self):
        """Should union languages across every key, not just the first"""
        table = {"a": {"en": "1"}, "b": {"en": "2", "fr": "deux"}}
        assert LocaleTableModel.languages_of(table) == ["en", "fr"]
        assert LocaleTableModel.languages_of(table, ["de"]) == ["de", "en", "fr"]


class TestSplit:
    """Test splitting a table into per-language objects."""

    def test_split_fills_missing_with_empty_string(self):
        """Should write every key in every language"""
        table = {"a": {"en": "1", "fr": "uno"}, "b": {"en": "2"}}
        result = LocaleTableModel.split(table, ["en", "fr"])
        assert result == {
            "en": {"a": "1", "b": "2"},
            "fr": {"a": "uno", "b": ""},
        }

    def test_split_empty_table_keeps_languages(self):
        """Should still produce an empty object for each known language"""
        assert LocaleTableModel.split({}, ["en", "fr"]) == {"en": {}, "fr": {}}


class TestSave:
    """Test writing language files."""

    def test_save_writes_one_file_per_language(self, tmp_path):
        """Should write <lang>.json with 2-space indentation"""
        table = {"hello": {"en": "Hello", "de": "Hallo"}}
        written = LocaleTableModel.save(table, ["en", "de"], str(tmp_path))

        assert sorted(os.path.basename(f) for f in written) == ["de.json", "en.json"]
        text = (tmp_path / "en.json").read_text(encoding="utf-8")
        assert text == '{\n  "hello": "Hello"\n}\n'
        assert json.loads((tmp_path / "de.json").read_text(encoding="utf-8")) == {"hello": "Hallo"}

    def test_save_keeps_non_ascii(self, tmp_path):
        """Should not escape non-ASCII characters"""
        LocaleTableModel.save({"bye": {"ja": "さようなら"}}, ["ja"], str(tmp_path))
        assert "さようなら" in (tmp_path / "ja.json").read_text(encoding="utf-8")

    def test_round_trip(self, tmp_path):
        """Should reproduce the original per-language content after load and save"""
        original = {
            "en": {"greeting": "Hello", "farewell": "Bye"},
            "fr": {"greeting": "Bonjour", "farewell": "Au revoir"},
            "de": {"greeting": "Hallo", "farewell": "Tschüss"},
        }
        for language, values in original.items():
            (tmp_path / f"{language}.json").write_text(json.dumps(values), encoding="utf-8")

        names = os.listdir(tmp_path)
        table = LocaleTableModel.load(
            names, lambda name: (tmp_path / name).read_text(encoding="utf-8")
        )
        LocaleTableModel.save(table, LocaleTableModel.languages_from_files(names), str(tmp_path))

        for language, values in original.items():
            saved = json.loads((tmp_path / f"{language}.json").read_text(encoding="utf-8"))
            assert saved == values

    def test_write_failure_reports_written_files(self, tmp_path):
        """Should raise WriteError listing the files written before the failure"""
        calls = []

        def failing_writer(path, text):
            if path.endswith("fr.json"):
                raise PermissionError("read-only")
            calls.append(path)

        table = {"a": {"de": "1", "en": "2", "fr": "3"}}
        with pytest.raises(WriteError) as exc_info:
            LocaleTableModel.save(table, ["de", "en", "fr"], str(tmp_path), failing_writer)

        assert exc_info.value.file_name == "fr.json"
        assert exc_info.value.written_files == calls
        assert len(calls) == 2

    def test_unencodable_value_raises_write_error(self, tmp_path):
        """Should raise WriteError and leave the existing file intact"""
        target = tmp_path / "en.json"
        target.write_text('{"a": "old"}\n', encoding="utf-8")
        before = target.read_bytes()

        with pytest.raises(WriteError) as exc_info:
            LocaleTableModel.save({"a": {"en": "\ud83d"}}, ["en"], str(tmp_path))

        assert exc_info.value.file_name == "en.json"
        assert target.read_bytes() == before
