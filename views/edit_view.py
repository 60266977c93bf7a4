"""
Edit View for Localization Manager
"""

import tkinter as tk
from tkinter import ttk
from tkinter.font import Font
from .base_view import BaseView


class EditDialog(BaseView):
    """Dialog for editing the key and values of one row

    Every keystroke is staged in the edit session, so closing the dialog keeps
    the changes pending until they are saved or cancelled.
    """

    def __init__(self, parent_frame, app, original_key):
        super().__init__(parent_frame, app)
        self.original_key = original_key

    def create(self):
        entry = self.controller.begin_edit(self.original_key)

        self.container = tk.Toplevel(self.parent_frame)
        self.container.title("Edit Translation")
        self.container.geometry("600x400")
        self.container.transient(self.parent_frame)

        ttk.Label(self.container, text=f"Key: {self.original_key}",
                  font=Font(weight="bold")).pack(pady=5)

        fields = ttk.Frame(self.container, padding="10")
        fields.pack(fill=tk.BOTH, expand=True)

        ttk.Label(fields, text="Key:").grid(row=0, column=0, sticky=tk.W, padx=5, pady=5)
        self.key_var = tk.StringVar(value=entry.pending_key)
        ttk.Entry(fields, textvariable=self.key_var).grid(row=0, column=1, sticky=tk.EW, padx=5, pady=5)
        self.key_var.trace_add("write", self.on_key_changed)

        self.value_vars = {}
        for row, language in enumerate(self.controller.languages(), start=1):
            ttk.Label(fields, text=f"{language}:").grid(row=row, column=0, sticky=tk.W, padx=5, pady=5)
            var = tk.StringVar(value=entry.pending_values.get(language, ''))
            ttk.Entry(fields, textvariable=var).grid(row=row, column=1, sticky=tk.EW, padx=5, pady=5)
            var.trace_add("write", self.make_value_callback(language, var))
            self.value_vars[language] = var

        fields.columnconfigure(1, weight=1)

        button_frame = ttk.Frame(self.container)
        button_frame.pack(fill=tk.X, pady=10)
        ttk.Button(button_frame, text="Save",
                   command=self.save).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Discard Changes",
                   command=self.discard).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Close",
                   command=self.close).pack(side=tk.RIGHT, padx=5)

        self.container.protocol("WM_DELETE_WINDOW", self.close)
        # Modal: the row must not be deleted or reloaded while it is open
        self.container.wait_visibility()
        self.container.grab_set()
        self.app.refresh()

    def on_key_changed(self, *args):
        self.controller.update_pending_key(self.original_key, self.key_var.get())

    def make_value_callback(self, language, var):
        def callback(*args):
            self.controller.update_pending_value(self.original_key, language, var.get())
        return callback

    def save(self):
        self.destroy()
        self.app.save_row(self.original_key)

    def discard(self):
        self.destroy()
        self.app.cancel_edit(self.original_key)

    def close(self):
        """Close the dialog, keeping changes staged"""
        self.destroy()
        self.controller.close_edit(self.original_key)
        self.app.refresh()
