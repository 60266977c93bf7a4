"""
New Key View for Localization Manager
"""

import tkinter as tk
from tkinter import ttk
from .base_view import BaseView


class NewKeyView(BaseView):
    """Form for creating a key with one value per language"""

    def create(self):
        self.container = ttk.LabelFrame(self.parent_frame, text="Create New Key", padding="10")
        self.container.pack(fill=tk.X, padx=10, pady=5)

        key_frame = ttk.Frame(self.container)
        key_frame.pack(fill=tk.X, pady=2)
        ttk.Label(key_frame, text="New key:", width=12).pack(side=tk.LEFT, padx=5)
        self.key_var = tk.StringVar(value="")
        ttk.Entry(key_frame, textvariable=self.key_var).pack(side=tk.LEFT, padx=5, fill=tk.X, expand=True)
        self.key_var.trace_add("write", lambda *args: self.controller.update_draft_key(self.key_var.get()))

        # One row per language, rebuilt when the language set changes
        self.values_frame = ttk.Frame(self.container)
        self.values_frame.pack(fill=tk.X)
        self.value_vars = {}  # {language: StringVar}

        ttk.Button(self.container, text="Create New Key",
                   command=self.app.create_key).pack(anchor=tk.W, padx=5, pady=5)

    def update(self):
        """Rebuild the value fields for the current languages"""
        languages = self.controller.languages()
        if list(self.value_vars) == languages:
            return

        for child in self.values_frame.winfo_children():
            child.destroy()
        self.value_vars = {}

        for language in languages:
            row = ttk.Frame(self.values_frame)
            row.pack(fill=tk.X, pady=2)
            ttk.Label(row, text=f"{language} value:", width=12).pack(side=tk.LEFT, padx=5)
            var = tk.StringVar(value=self.controller.state.draft.values.get(language, ''))
            ttk.Entry(row, textvariable=var).pack(side=tk.LEFT, padx=5, fill=tk.X, expand=True)
            var.trace_add("write", self.make_value_callback(language, var))
            self.value_vars[language] = var

    def make_value_callback(self, language, var):
        def callback(*args):
            self.controller.update_draft_value(language, var.get())
        return callback

    def reset(self):
        """Clear the form after a successful create"""
        self.key_var.set("")
        for var in self.value_vars.values():
            var.set("")
