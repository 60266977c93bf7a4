"""
Localization Manager

Copyright (C) 2024 Urban-Equipe

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.
"""

import tkinter as tk
from tkinter import ttk, filedialog, messagebox
import logging
import os

from app_controller import LocaleController
from config_manager import ConfigManager
from constants import (
    APP_TITLE, CONFIRM_MESSAGES, COLOR_STATUS_HINT, COLOR_STATUS_OK, FONT_ARIAL_BOLD,
    LOG_FILE_NAME, NO_DIRECTORY_TEXT, STATUS_CLEAR_DELAY_MS, UNSAVED_CHANGES_TITLE
)
from edit_session import ACTION_CREATE
from errors import LocaleManagerError, ParseError, WriteError
from logging_utils import setup_logging
from statistics_logic import LocaleStatistics
from views import TableView, NewKeyView, EditDialog


class LocalizationManagerGUI:
    def __init__(self, root):
        self.root = root
        self.root.title(APP_TITLE)

        # Initialize config manager
        self.config_manager = ConfigManager()
        self.config_manager.load()
        self.root.geometry(self.config_manager.window_geometry)

        self.controller = LocaleController(status_fn=self.set_status)
        self._status_clear_job = None

        # Create UI
        self.create_widgets()
        self.root.protocol("WM_DELETE_WINDOW", self.on_close)

        # Auto-load the last directory if available
        if self.config_manager.last_directory:
            self.open_directory(self.config_manager.last_directory)

    def create_widgets(self):
        # Directory section at the top (always visible)
        directory_frame = ttk.LabelFrame(self.root, text="Locale Directory", padding="10")
        directory_frame.pack(fill=tk.X, padx=10, pady=5)

        buttons_row = ttk.Frame(directory_frame)
        buttons_row.pack(fill=tk.X, pady=5)

        ttk.Button(buttons_row, text="Select Directory",
                   command=self.select_directory).pack(side=tk.LEFT, padx=5)
        ttk.Button(buttons_row, text="Reload",
                   command=self.reload_directory).pack(side=tk.LEFT, padx=5)
        ttk.Button(buttons_row, text="Save All Files",
                   command=self.save_files).pack(side=tk.LEFT, padx=5)

        self.directory_label = ttk.Label(directory_frame, text=NO_DIRECTORY_TEXT, font=FONT_ARIAL_BOLD)
        self.directory_label.pack(anchor=tk.W, padx=5)

        self.info_label = ttk.Label(directory_frame, text="Select a directory to see detected languages",
                                    foreground=COLOR_STATUS_HINT)
        self.info_label.pack(anchor=tk.W, padx=5)

        # Create form
        self.new_key_view = NewKeyView(self.root, self)
        self.new_key_view.create()

        # Pending edits
        pending_frame = ttk.Frame(self.root)
        pending_frame.pack(fill=tk.X, padx=10)
        ttk.Button(pending_frame, text="Save All Changes",
                   command=self.save_all_changes).pack(side=tk.LEFT, padx=5)
        ttk.Button(pending_frame, text="Cancel All Changes",
                   command=self.cancel_all_changes).pack(side=tk.LEFT, padx=5)

        # Status bar
        self.status_label = ttk.Label(self.root, text="", relief=tk.SUNKEN, anchor=tk.W)
        self.status_label.pack(side=tk.BOTTOM, fill=tk.X)

        # Table
        self.table_view = TableView(self.root, self)
        self.table_view.create()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def refresh(self):
        """Re-render everything derived from the controller state"""
        state = self.controller.state
        self.table_view.update()
        self.new_key_view.update()

        if state.directory:
            title = APP_TITLE
            if state.has_unsaved_changes:
                title = f"* {APP_TITLE}"
            self.root.title(title)
            self.directory_label.config(text=f"Selected directory: {state.directory}")
            stats = self.controller.statistics()
            text = LocaleStatistics.format_statistics(stats)
            if state.unsynced:
                text += " | files out of sync, use 'Save All Files' to retry"
            self.info_label.config(text=text, foreground=COLOR_STATUS_OK)
        else:
            self.directory_label.config(text=NO_DIRECTORY_TEXT)

    def set_status(self, message):
        """Show a transient message in the status bar"""
        self.status_label.config(text=message)
        if self._status_clear_job is not None:
            self.root.after_cancel(self._status_clear_job)
        self._status_clear_job = self.root.after(
            STATUS_CLEAR_DELAY_MS, lambda: self.status_label.config(text="")
        )

    # ------------------------------------------------------------------
    # Directory
    # ------------------------------------------------------------------

    def confirm_discard_changes(self):
        """Ask before throwing away unsaved changes"""
        if not self.controller.state.has_unsaved_changes:
            return True
        return messagebox.askyesno(
            UNSAVED_CHANGES_TITLE,
            "You have unsaved changes. Discard them?"
        )

    def select_directory(self):
        """Pick a directory of language files and load it"""
        if not self.confirm_discard_changes():
            return
        directory = filedialog.askdirectory(title="Select Locale Directory")
        if directory:
            self.open_directory(directory)

    def reload_directory(self):
        directory = self.controller.state.directory
        if not directory:
            messagebox.showwarning("Warning", "Please select a directory first.")
            return
        if self.confirm_discard_changes():
            self.open_directory(directory)

    def open_directory(self, directory):
        try:
            self.controller.load_directory(directory)
        except ParseError as e:
            messagebox.showerror("Error", f"Error loading language files:\n{e}")
            return False
        except OSError as e:
            logging.error(f"Error reading {directory}: {e}", exc_info=True)
            messagebox.showerror("Error", f"Error reading directory {directory}: {e}")
            return False

        self.config_manager.last_directory = directory
        self.config_manager.save()

        self.table_view.clear_search()
        self.new_key_view.reset()
        self.refresh()
        return True

    def save_files(self):
        """Write the current table to all language files"""
        if not self.controller.state.directory:
            messagebox.showwarning("Warning", "Please select a directory first.")
            return
        try:
            self.controller.save()
        except WriteError as e:
            self.show_write_error(e)
        self.refresh()

    # ------------------------------------------------------------------
    # Confirmation gate
    # ------------------------------------------------------------------

    def run_action(self, request, *args):
        """Stage an action, ask for confirmation and apply it"""
        try:
            action = request(*args)
        except LocaleManagerError as e:
            messagebox.showwarning("Warning", str(e))
            return False

        message = CONFIRM_MESSAGES[action.kind].format(
            key=action.key, count=len(self.controller.state.session)
        )
        if not messagebox.askyesno("Confirm Action", message):
            self.controller.decline()
            return False

        try:
            self.controller.confirm()
        except WriteError as e:
            self.show_write_error(e)
        except LocaleManagerError as e:
            messagebox.showwarning("Warning", str(e))
            self.refresh()
            return False
        except OSError as e:
            logging.error(f"Unexpected file error: {e}", exc_info=True)
            messagebox.showerror("Error", f"Error saving files: {e}")

        if action.kind == ACTION_CREATE:
            self.new_key_view.reset()
        self.refresh()
        return True

    def show_write_error(self, error):
        written = '\n'.join(os.path.basename(f) for f in error.written_files) or "none"
        messagebox.showerror(
            "Error",
            f"{error}\n\nFiles already written:\n{written}\n\n"
            "The changes are kept in memory. Use 'Save All Files' to retry."
        )

    # ------------------------------------------------------------------
    # Row actions
    # ------------------------------------------------------------------

    def require_selection(self):
        key = self.table_view.selected_key()
        if key is None:
            messagebox.showwarning("Warning", "Please select a key first.")
        return key

    def on_item_double_click(self, event):
        key = self.table_view.key_at(event)
        if key is not None:
            self.open_edit_dialog(key)

    def open_edit_dialog(self, key):
        try:
            EditDialog(self.root, self, key).create()
        except LocaleManagerError as e:
            messagebox.showwarning("Warning", str(e))

    def edit_selected(self):
        key = self.require_selection()
        if key is not None:
            self.open_edit_dialog(key)

    def save_selected(self):
        key = self.require_selection()
        if key is not None:
            self.save_row(key)

    def save_row(self, key):
        self.run_action(self.controller.request_edit, key)

    def cancel_selected_edit(self):
        key = self.require_selection()
        if key is not None:
            self.cancel_edit(key)

    def cancel_edit(self, key):
        self.controller.cancel_edit(key)
        self.refresh()

    def delete_selected(self):
        key = self.require_selection()
        if key is not None:
            self.run_action(self.controller.request_delete, key)

    def create_key(self):
        if not self.controller.state.directory:
            messagebox.showwarning("Warning", "Please select a directory first.")
            return
        self.run_action(self.controller.request_create)

    def save_all_changes(self):
        self.run_action(self.controller.request_bulk_edit)

    def cancel_all_changes(self):
        self.run_action(self.controller.request_cancel_all)

    # ------------------------------------------------------------------
    # Shutdown
    # ------------------------------------------------------------------

    def on_close(self):
        """Warn about unsaved changes before closing the window"""
        if not self.confirm_discard_changes():
            return
        self.config_manager.window_geometry = self.root.geometry()
        self.config_manager.save()
        self.root.destroy()


def main():
    setup_logging(os.path.join(os.path.expanduser("~"), LOG_FILE_NAME))
    root = tk.Tk()
    app = LocalizationManagerGUI(root)
    root.mainloop()


if __name__ == "__main__":
    main()
