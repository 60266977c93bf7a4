"""
Data Model for Localization Manager

Manages application state and data structures.
"""

from edit_session import EditSession, NewEntryDraft


class AppState:
    """Manages application data state"""

    def __init__(self):
        # Selected directory
        self.directory = None

        # Locale data
        self.table = {}  # {key: {language: value}}
        self.languages = []  # Ordered language codes, derived once per load

        # Transient overlays, reconciled into the table only on confirmation
        self.session = EditSession()
        self.draft = NewEntryDraft()
        self.pending_action = None  # PendingAction awaiting confirmation

        # True when the last save failed and the files no longer match the table
        self.unsynced = False

        # Current search query
        self.query = ''

    @property
    def dirty(self):
        return self.session.dirty

    @property
    def has_unsaved_changes(self):
        return self.session.dirty or self.unsynced

    def load_directory(self, directory, table, languages):
        """Install a freshly loaded directory, discarding all previous state"""
        self.directory = directory
        self.table = table
        self.languages = list(languages)
        self.clear_session()
        self.draft.reset()
        self.unsynced = False
        self.query = ''

    def clear_session(self):
        """Clear staged edits and any pending confirmation"""
        self.session = EditSession()
        self.pending_action = None
