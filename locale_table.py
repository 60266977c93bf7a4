"""
Locale Table Model for Localization Manager

Merges per-language JSON files into one key-indexed table and splits the
table back into per-language objects.

Table layout: {key: {language: value}}
"""

import json
import os

from constants import LANGUAGE_FILE_EXTENSION
from errors import ParseError, WriteError
from file_handlers import FileHandler


class LocaleTableModel:
    """Transposes language files into a locale table and back"""

    @staticmethod
    def is_language_file(file_name):
        return file_name.endswith(LANGUAGE_FILE_EXTENSION)

    @staticmethod
    def language_of(file_name):
        """Get the language code of a language file name (en.json -> en)"""
        return file_name[:-len(LANGUAGE_FILE_EXTENSION)]

    @staticmethod
    def languages_from_files(file_names):
        """Ordered language codes for the language files in a listing"""
        languages = []
        for file_name in sorted(file_names):
            if LocaleTableModel.is_language_file(file_name):
                language = LocaleTableModel.language_of(file_name)
                if language not in languages:
                    languages.append(language)
        return languages

    @staticmethod
    def parse_language_file(file_name, text):
        """Parse the text of a language file into a flat {key: value} dict"""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(file_name, f"invalid JSON ({e})") from e

        if not isinstance(data, dict):
            raise ParseError(file_name, f"expected a JSON object, got {type(data).__name__}")

        for key, value in data.items():
            if not isinstance(value, str):
                raise ParseError(
                    file_name,
                    f"value of '{key}' must be a string, got {type(value).__name__}"
                )
        return data

    @staticmethod
    def load(file_names, read_file):
        """
        Load and merge all language files into a locale table

        Args:
            file_names: Names from a directory listing; only *.json files are used
            read_file: Callable returning the text of a file given its name

        Returns:
            Locale table {key: {language: value}}. A key missing from a language
            file has no entry for that language.

        Raises:
            ParseError: If any language file is not a flat object of strings
        """
        table = {}
        for file_name in sorted(file_names):
            if not LocaleTableModel.is_language_file(file_name):
                continue
            language = LocaleTableModel.language_of(file_name)
            data = LocaleTableModel.parse_language_file(file_name, read_file(file_name))

            for key, value in data.items():
                if key not in table:
                    table[key] = {}
                table[key][language] = value
        return table

    @staticmethod
    def languages_of(table, languages=None):
        """Union of the given languages and every language used in the table"""
        result = list(languages or [])
        for values in table.values():
            for language in values:
                if language not in result:
                    result.append(language)
        return result

    @staticmethod
    def split(table, languages):
        """
        Split a locale table into per-language flat objects

        Every key appears in every language; missing values become empty strings.
        """
        return {
            language: {key: values.get(language, '') for key, values in table.items()}
            for language in LocaleTableModel.languages_of(table, languages)
        }

    @staticmethod
    def save(table, languages, directory, write_file=None):
        """
        Write one <language>.json file per language, overwriting existing files

        Files are written one at a time. There is no atomicity across files: if a
        write fails, the files written before it keep their new content.

        Returns:
            List of written file paths

        Raises:
            WriteError: If a file cannot be written
        """
        if write_file is None:
            write_file = FileHandler.write_text

        written_files = []
        for language, values in LocaleTableModel.split(table, languages).items():
            file_name = FileHandler.language_file_name(language)
            file_path = os.path.join(directory, file_name)
            try:
                write_file(file_path, FileHandler.dump_language_file(values))
            except (OSError, UnicodeError) as e:
                raise WriteError(file_name, str(e), written_files) from e
            written_files.append(file_path)
        return written_files
