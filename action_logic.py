"""
Action Logic for Localization Manager

Applies confirmed actions to the locale table. Every function takes the current
table and session and returns new ones; inputs are never modified.
"""

from errors import (
    DuplicateKeyError, InvalidKeyError, KeyNotFoundError,
    NoPendingChangesError, RenameCollisionError
)


class ActionLogic:
    """Pure transforms for edit, delete, create and cancel-all"""

    @staticmethod
    def normalize_key(key):
        """Strip surrounding whitespace from a key and reject empty keys"""
        key = (key or '').strip()
        if not key:
            raise InvalidKeyError("Key must not be empty")
        return key

    @staticmethod
    def check_new_key(table, session, key):
        """Reject a new key that exists in the table or is an in-progress rename target"""
        key = ActionLogic.normalize_key(key)
        if key in table or key in session.pending_keys():
            raise DuplicateKeyError(key)
        return key

    @staticmethod
    def rename_target(entry):
        """Target key of an entry; only renamed keys are validated"""
        if not entry.is_rename:
            return entry.pending_key
        return ActionLogic.normalize_key(entry.pending_key)

    @staticmethod
    def check_rename(table, session, entry):
        """Reject a single rename whose target is taken by another key"""
        if not entry.is_rename:
            return
        target = ActionLogic.rename_target(entry)
        if target in table:
            raise RenameCollisionError(target, [entry.original_key])
        if target in session.pending_keys(exclude=entry.original_key):
            raise RenameCollisionError(target, [entry.original_key])

    @staticmethod
    def check_bulk_renames(table, session):
        """Reject a batch of edits if two targets clash or a target is kept in the table"""
        targets = {}  # {pending_key: [original_key]}
        for original_key, entry in session.entries.items():
            target = ActionLogic.rename_target(entry)
            targets.setdefault(target, []).append(original_key)

        remaining_keys = set(table) - set(session.entries)
        for target, original_keys in targets.items():
            if len(original_keys) > 1 or target in remaining_keys:
                raise RenameCollisionError(target, original_keys)

    @staticmethod
    def replace_entries(table, entries):
        """Build a new table with edited entries written in place of their originals"""
        replacements = {entry.original_key: entry for entry in entries}
        new_table = {}
        for key, values in table.items():
            entry = replacements.pop(key, None)
            if entry is None:
                new_table[key] = values
            else:
                new_table[entry.pending_key] = dict(entry.pending_values)
        # Entries whose original key is gone from the table are appended
        for entry in replacements.values():
            new_table[entry.pending_key] = dict(entry.pending_values)
        return new_table

    @staticmethod
    def apply_edit(table, session, original_key):
        """
        Promote one staged edit into the table

        Returns:
            (new_table, new_session) with the entry removed from the session
        """
        entry = session.get(original_key)
        if entry is None:
            raise NoPendingChangesError(f"No pending changes for '{original_key}'")
        if original_key not in table:
            raise KeyNotFoundError(original_key)
        ActionLogic.check_rename(table, session, entry)

        new_table = ActionLogic.replace_entries(table, [entry])

        new_session = session.copy()
        new_session.cancel(original_key)
        return new_table, new_session

    @staticmethod
    def apply_bulk_edit(table, session):
        """
        Promote every staged edit into the table in one batch

        Returns:
            (new_table, new_session) where the new session is empty
        """
        if not session.dirty:
            raise NoPendingChangesError("No pending changes to save")
        ActionLogic.check_bulk_renames(table, session)

        new_table = ActionLogic.replace_entries(table, session.entries.values())

        new_session = session.copy()
        new_session.clear()
        return new_table, new_session

    @staticmethod
    def apply_delete(table, session, key):
        """Remove a key from the table and drop its staged edit, if any"""
        if key not in table:
            raise KeyNotFoundError(key)

        new_table = dict(table)
        del new_table[key]

        new_session = session.copy()
        new_session.cancel(key)
        return new_table, new_session

    @staticmethod
    def apply_create(table, session, draft, languages):
        """Add the draft key with one value per language"""
        key = ActionLogic.check_new_key(table, session, draft.key)

        values = {language: draft.values.get(language, '') for language in languages}
        for language, value in draft.values.items():
            values.setdefault(language, value)

        new_table = dict(table)
        new_table[key] = values
        return new_table

    @staticmethod
    def apply_cancel_all(session):
        """Discard every staged edit"""
        new_session = session.copy()
        new_session.clear()
        return new_session
