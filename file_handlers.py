"""
File Handlers for Localization Manager

Handles directory listing and whole-file reading and writing of language files.
"""

import json
import os

from constants import LANGUAGE_FILE_EXTENSION, JSON_INDENT


class FileHandler:
    """Handles file operations for per-language JSON files"""

    @staticmethod
    def list_json_files(directory):
        """Return the sorted names of all *.json files in a directory"""
        return sorted(
            name for name in os.listdir(directory)
            if name.endswith(LANGUAGE_FILE_EXTENSION)
            and os.path.isfile(os.path.join(directory, name))
        )

    @staticmethod
    def read_text(file_path):
        """Read a whole file as UTF-8 text"""
        with open(file_path, mode='r', encoding='utf-8') as file:
            return file.read()

    @staticmethod
    def write_text(file_path, text):
        """Overwrite a whole file with UTF-8 text, creating it if absent"""
        # Encode before opening so an unencodable value never truncates the file
        data = text.encode('utf-8')
        with open(file_path, mode='wb') as file:
            file.write(data)

    @staticmethod
    def dump_language_file(values):
        """Serialize one language's flat key/value object"""
        return json.dumps(values, indent=JSON_INDENT, ensure_ascii=False) + '\n'

    @staticmethod
    def language_file_name(language):
        """Get the file name for a language code"""
        return f"{language}{LANGUAGE_FILE_EXTENSION}"
