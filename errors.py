"""
Errors for Localization Manager

Exception types raised by the locale table, edit session and file handlers.
"""


class LocaleManagerError(Exception):
    """Base class for all Localization Manager errors"""


class ParseError(LocaleManagerError):
    """A language file is not a flat JSON object of strings"""

    def __init__(self, file_name, reason):
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"Error parsing {file_name}: {reason}")


class WriteError(LocaleManagerError):
    """Writing a language file failed"""

    def __init__(self, file_name, reason, written_files=None):
        self.file_name = file_name
        self.reason = reason
        self.written_files = list(written_files or [])
        super().__init__(f"Error writing {file_name}: {reason}")


class DuplicateKeyError(LocaleManagerError):
    """A new key already exists or is the target of an in-progress edit"""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Key '{key}' already exists")


class InvalidKeyError(LocaleManagerError):
    """A key is empty or whitespace only"""


class RenameCollisionError(LocaleManagerError):
    """A rename would overwrite another key"""

    def __init__(self, key, original_keys):
        self.key = key
        self.original_keys = list(original_keys)
        sources = ', '.join(f"'{k}'" for k in self.original_keys)
        super().__init__(f"Cannot rename {sources} to '{key}': key is already in use")


class KeyNotFoundError(LocaleManagerError):
    """The key is not in the locale table"""

    def __init__(self, key):
        self.key = key
        super().__init__(f"Key '{key}' not found")


class NoPendingChangesError(LocaleManagerError):
    """There are no staged edits to apply or cancel"""
