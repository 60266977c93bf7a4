"""
Edit Session for Localization Manager

Tracks staged edits, the new-key draft and the action awaiting confirmation.
Nothing here touches the locale table; staged data is only applied by
ActionLogic once the user confirms.
"""

# Pending action kinds
ACTION_EDIT_SINGLE = 'edit-single'
ACTION_EDIT_BULK = 'edit-bulk'
ACTION_DELETE = 'delete'
ACTION_CREATE = 'create'
ACTION_CANCEL_ALL = 'cancel-all'

ACTION_KINDS = (
    ACTION_EDIT_SINGLE,
    ACTION_EDIT_BULK,
    ACTION_DELETE,
    ACTION_CREATE,
    ACTION_CANCEL_ALL,
)


class EditEntry:
    """Staged changes for one key"""

    def __init__(self, original_key, values):
        self.original_key = original_key
        self.pending_key = original_key
        self.pending_values = dict(values)

    @property
    def is_rename(self):
        return self.pending_key != self.original_key

    def __repr__(self):
        return (f"EditEntry({self.original_key!r} -> {self.pending_key!r}, "
                f"{self.pending_values!r})")


class EditSession:
    """All keys currently being edited, keyed by original key"""

    def __init__(self):
        self.entries = {}  # {original_key: EditEntry}

    @property
    def dirty(self):
        return bool(self.entries)

    def __len__(self):
        return len(self.entries)

    def __contains__(self, original_key):
        return original_key in self.entries

    def get(self, original_key):
        return self.entries.get(original_key)

    def begin_edit(self, key, table):
        """
        Start editing a key

        Editing a key that already has staged changes keeps those changes.
        """
        entry = self.entries.get(key)
        if entry is None:
            entry = EditEntry(key, table.get(key, {}))
            self.entries[key] = entry
        return entry

    def set_pending_key(self, original_key, pending_key):
        """Stage a rename; new keys are stripped, the original key is kept verbatim"""
        if pending_key != original_key:
            pending_key = (pending_key or '').strip()
        self.entries[original_key].pending_key = pending_key

    def set_pending_value(self, original_key, language, value):
        self.entries[original_key].pending_values[language] = value

    def cancel(self, original_key):
        """Discard the staged changes of one key"""
        return self.entries.pop(original_key, None)

    def discard_if_unchanged(self, original_key, table):
        """Drop an entry whose staged key and values equal the table's"""
        entry = self.entries.get(original_key)
        if entry is None or entry.is_rename:
            return False
        if entry.pending_values != table.get(original_key, {}):
            return False
        del self.entries[original_key]
        return True

    def clear(self):
        self.entries = {}

    def pending_keys(self, exclude=None):
        """Target keys of all staged edits, optionally skipping one original key"""
        return {
            entry.pending_key for original_key, entry in self.entries.items()
            if original_key != exclude
        }

    def copy(self):
        session = EditSession()
        for original_key, entry in self.entries.items():
            clone = EditEntry(original_key, entry.pending_values)
            clone.pending_key = entry.pending_key
            session.entries[original_key] = clone
        return session


class NewEntryDraft:
    """In-progress key and values for key creation"""

    def __init__(self):
        self.key = ''
        self.values = {}  # {language: value}

    def set_value(self, language, value):
        self.values[language] = value

    def reset(self):
        self.key = ''
        self.values = {}


class PendingAction:
    """A mutating action waiting for user confirmation"""

    def __init__(self, kind, key=None):
        if kind not in ACTION_KINDS:
            raise ValueError(f"Unknown action kind: {kind}")
        self.kind = kind
        self.key = key  # Target key for edit-single and delete, new key for create

    def __eq__(self, other):
        return (isinstance(other, PendingAction)
                and (self.kind, self.key) == (other.kind, other.key))

    def __repr__(self):
        return f"PendingAction({self.kind!r}, key={self.key!r})"
