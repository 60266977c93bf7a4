"""
Application Controller for Localization Manager

Owns the application state and runs every user action against it: loading a
directory, staging edits, the confirmation gate and saving language files.
The GUI only renders state and forwards user input to this controller.
"""

import logging
import os

from action_logic import ActionLogic
from data_model import AppState
from edit_session import (
    ACTION_CANCEL_ALL, ACTION_CREATE, ACTION_DELETE, ACTION_EDIT_BULK,
    ACTION_EDIT_SINGLE, PendingAction
)
from errors import (
    KeyNotFoundError, LocaleManagerError, NoPendingChangesError, ParseError, WriteError
)
from file_handlers import FileHandler
from locale_table import LocaleTableModel
from logging_utils import log_and_status, log_error, log_success, log_warning
from search_filter import SearchFilter
from statistics_logic import LocaleStatistics


class LocaleController:
    """Single owner of the application state"""

    def __init__(self, state=None, file_handler=None, status_fn=None):
        self.state = state or AppState()
        self.file_handler = file_handler or FileHandler()
        self.status_fn = status_fn

    # ------------------------------------------------------------------
    # Loading and saving
    # ------------------------------------------------------------------

    def load_directory(self, directory):
        """
        Load all language files of a directory

        On ParseError the current state is left untouched and the error is
        re-raised for the caller to show.
        """
        file_names = self.file_handler.list_json_files(directory)

        def read_file(file_name):
            try:
                return self.file_handler.read_text(os.path.join(directory, file_name))
            except UnicodeDecodeError as e:
                raise ParseError(file_name, f"not valid UTF-8 ({e.reason})") from e

        try:
            table = LocaleTableModel.load(file_names, read_file)
        except LocaleManagerError as e:
            log_error(self.status_fn, f"Could not load {directory}", exc=e)
            raise

        languages = LocaleTableModel.languages_from_files(file_names)
        self.state.load_directory(directory, table, languages)
        log_success(
            self.status_fn,
            f"Loaded {len(table)} key(s) in {len(languages)} language(s)",
            details=directory
        )
        return table

    def save(self):
        """
        Write the current table to every language file

        On WriteError the table keeps its new content and the state is marked
        unsynced until a later save succeeds.
        """
        if not self.state.directory:
            logging.debug("Save skipped: no directory selected")
            return []

        try:
            written_files = LocaleTableModel.save(
                self.state.table,
                self.state.languages,
                self.state.directory,
                self.file_handler.write_text
            )
        except WriteError as e:
            self.state.unsynced = True
            log_error(
                self.status_fn,
                f"Could not write {e.file_name}",
                details=f"{len(e.written_files)} file(s) already written",
                exc=e
            )
            raise

        self.state.unsynced = False
        log_success(self.status_fn, f"Saved {len(written_files)} language file(s)")
        return written_files

    # ------------------------------------------------------------------
    # Viewing
    # ------------------------------------------------------------------

    def set_query(self, query):
        self.state.query = query or ''

    def visible_table(self):
        """The table filtered by the current search query"""
        return SearchFilter.filter_table(self.state.table, self.state.query)

    def languages(self):
        return list(self.state.languages)

    def statistics(self):
        return LocaleStatistics.calculate_statistics(
            self.state.table, self.languages(), len(self.state.session)
        )

    # ------------------------------------------------------------------
    # Edit session
    # ------------------------------------------------------------------

    def begin_edit(self, key):
        """Start editing a key, keeping any changes already staged for it"""
        if key not in self.state.table:
            raise KeyNotFoundError(key)
        return self.state.session.begin_edit(key, self.state.table)

    def update_pending_key(self, original_key, pending_key):
        self.begin_edit(original_key)
        self.state.session.set_pending_key(original_key, pending_key)

    def update_pending_value(self, original_key, language, value):
        self.begin_edit(original_key)
        self.state.session.set_pending_value(original_key, language, value)

    def cancel_edit(self, original_key):
        """Discard the staged changes of one key without confirmation"""
        entry = self.state.session.cancel(original_key)
        if entry is not None:
            log_and_status(self.status_fn, f"Cancelled edit of '{original_key}'")
        return entry

    def close_edit(self, original_key):
        """Leave edit mode, dropping the entry if nothing was changed"""
        return self.state.session.discard_if_unchanged(original_key, self.state.table)

    def update_draft_key(self, key):
        self.state.draft.key = key

    def update_draft_value(self, language, value):
        self.state.draft.set_value(language, value)

    # ------------------------------------------------------------------
    # Confirmation gate
    # ------------------------------------------------------------------

    def _stage(self, action):
        self.state.pending_action = action
        logging.debug(f"Staged {action}")
        return action

    def request_edit(self, original_key):
        """Stage saving one key's edit"""
        entry = self.state.session.get(original_key)
        if entry is None:
            raise NoPendingChangesError(f"No pending changes for '{original_key}'")
        ActionLogic.check_rename(self.state.table, self.state.session, entry)
        return self._stage(PendingAction(ACTION_EDIT_SINGLE, original_key))

    def request_bulk_edit(self):
        """Stage saving every pending edit"""
        if not self.state.session.dirty:
            raise NoPendingChangesError("No pending changes to save")
        ActionLogic.check_bulk_renames(self.state.table, self.state.session)
        return self._stage(PendingAction(ACTION_EDIT_BULK))

    def request_delete(self, key):
        if key not in self.state.table:
            raise KeyNotFoundError(key)
        return self._stage(PendingAction(ACTION_DELETE, key))

    def request_create(self):
        """
        Stage creating the draft key

        Raises DuplicateKeyError or InvalidKeyError before anything is staged.
        """
        try:
            key = ActionLogic.check_new_key(
                self.state.table, self.state.session, self.state.draft.key
            )
        except LocaleManagerError as e:
            log_warning(self.status_fn, str(e))
            raise
        return self._stage(PendingAction(ACTION_CREATE, key))

    def request_cancel_all(self):
        if not self.state.session.dirty:
            raise NoPendingChangesError("No pending changes to cancel")
        return self._stage(PendingAction(ACTION_CANCEL_ALL))

    def decline(self):
        """Close the confirmation prompt without changing anything"""
        self.state.pending_action = None

    def confirm(self):
        """
        Apply the pending action

        Table changes are installed before the files are written. Returns the
        list of written files (empty for cancel-all).
        """
        action = self.state.pending_action
        if action is None:
            raise NoPendingChangesError("No action awaiting confirmation")
        self.state.pending_action = None

        state = self.state
        if action.kind == ACTION_CANCEL_ALL:
            count = len(state.session)
            state.session = ActionLogic.apply_cancel_all(state.session)
            log_success(self.status_fn, f"Discarded {count} pending change(s)")
            return []

        if action.kind == ACTION_EDIT_SINGLE:
            state.table, state.session = ActionLogic.apply_edit(
                state.table, state.session, action.key
            )
            message = f"Saved changes to '{action.key}'"
        elif action.kind == ACTION_EDIT_BULK:
            count = len(state.session)
            state.table, state.session = ActionLogic.apply_bulk_edit(state.table, state.session)
            message = f"Saved {count} pending change(s)"
        elif action.kind == ACTION_DELETE:
            state.table, state.session = ActionLogic.apply_delete(
                state.table, state.session, action.key
            )
            message = f"Deleted '{action.key}'"
        else:
            state.table = ActionLogic.apply_create(
                state.table, state.session, state.draft, state.languages
            )
            state.draft.reset()
            message = f"Created '{action.key}'"

        # Keep the language list current if the new table brought in a language
        state.languages = LocaleTableModel.languages_of(state.table, state.languages)
        logging.info(message)
        return self.save()
