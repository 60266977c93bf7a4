"""
Table View for Localization Manager

Search box, key table with one column per language and row actions.
"""

import tkinter as tk
from tkinter import ttk
from .base_view import BaseView
from constants import (
    TAG_PENDING, TAG_MISSING, COLOR_PENDING_BG, COLOR_MISSING_BG,
    KEY_COLUMN_WIDTH, LANGUAGE_COLUMN_WIDTH
)


class TableView(BaseView):
    """View for the searchable locale table"""

    def create(self):
        """Create the table UI"""
        self.container = ttk.Frame(self.parent_frame)
        self.container.pack(fill=tk.BOTH, expand=True, padx=10, pady=5)

        # Search row
        search_frame = ttk.Frame(self.container)
        search_frame.pack(fill=tk.X, pady=5)

        ttk.Label(search_frame, text="Search:").pack(side=tk.LEFT, padx=5)
        self.search_var = tk.StringVar(value="")
        search_entry = ttk.Entry(search_frame, textvariable=self.search_var, width=40)
        search_entry.pack(side=tk.LEFT, padx=5, fill=tk.X, expand=True)
        self.search_var.trace_add("write", self.on_search_changed)

        self.match_label = ttk.Label(search_frame, text="")
        self.match_label.pack(side=tk.LEFT, padx=5)

        # Treeview with scrollbars
        tree_frame = ttk.Frame(self.container)
        tree_frame.pack(fill=tk.BOTH, expand=True)

        vsb = ttk.Scrollbar(tree_frame, orient="vertical")
        hsb = ttk.Scrollbar(tree_frame, orient="horizontal")

        self.tree = ttk.Treeview(tree_frame, columns=("key",), show="headings",
                                 yscrollcommand=vsb.set, xscrollcommand=hsb.set)

        self.tree.heading("key", text="Key")
        self.tree.column("key", width=KEY_COLUMN_WIDTH)

        vsb.config(command=self.tree.yview)
        hsb.config(command=self.tree.xview)

        self.tree.grid(row=0, column=0, sticky="nsew")
        vsb.grid(row=0, column=1, sticky="ns")
        hsb.grid(row=1, column=0, sticky="ew")

        tree_frame.grid_rowconfigure(0, weight=1)
        tree_frame.grid_columnconfigure(0, weight=1)

        self.tree.tag_configure(TAG_PENDING, background=COLOR_PENDING_BG)
        self.tree.tag_configure(TAG_MISSING, background=COLOR_MISSING_BG)

        # Bind double-click to edit
        self.tree.bind("<Double-1>", self.app.on_item_double_click)

        # Row actions
        button_frame = ttk.Frame(self.container)
        button_frame.pack(fill=tk.X, pady=5)

        ttk.Button(button_frame, text="Edit",
                   command=self.app.edit_selected).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Save Row",
                   command=self.app.save_selected).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Cancel Row Edit",
                   command=self.app.cancel_selected_edit).pack(side=tk.LEFT, padx=5)
        ttk.Button(button_frame, text="Delete",
                   command=self.app.delete_selected).pack(side=tk.LEFT, padx=5)

        self.row_keys = {}  # {item_id: original key}
        self.columns_languages = []

    def on_search_changed(self, *args):
        self.controller.set_query(self.search_var.get())
        self.update()

    def configure_columns(self, languages):
        """Rebuild the columns when the language set changes"""
        if languages == self.columns_languages:
            return
        self.columns_languages = list(languages)

        columns = ["key"] + [f"lang_{language}" for language in languages]
        self.tree.configure(columns=columns)

        self.tree.heading("key", text="Key")
        self.tree.column("key", width=KEY_COLUMN_WIDTH)
        for language in languages:
            self.tree.heading(f"lang_{language}", text=language)
            self.tree.column(f"lang_{language}", width=LANGUAGE_COLUMN_WIDTH)

    def update(self):
        """Repopulate the table from the controller's filtered view"""
        languages = self.controller.languages()
        self.configure_columns(languages)

        children = self.tree.get_children()
        if children:
            self.tree.delete(*children)
        self.row_keys = {}

        session = self.controller.state.session
        visible = self.controller.visible_table()

        for index, (key, values) in enumerate(visible.items()):
            entry = session.get(key)
            tags = ()
            if entry is not None:
                # Show staged data for rows being edited
                shown_key = key if not entry.is_rename else f"{key} → {entry.pending_key}"
                shown_values = entry.pending_values
                tags = (TAG_PENDING,)
            else:
                shown_key = key
                shown_values = values
                if any(not shown_values.get(language) for language in languages):
                    tags = (TAG_MISSING,)

            item_id = f"row{index}"
            self.row_keys[item_id] = key
            self.tree.insert("", tk.END, iid=item_id, tags=tags, values=[shown_key] + [
                shown_values.get(language, '') for language in languages
            ])

        total = len(self.controller.state.table)
        if self.controller.state.query:
            self.match_label.config(text=f"{len(visible)} of {total} key(s) match")
        else:
            self.match_label.config(text="")

    def selected_key(self):
        """Original key of the selected row, or None"""
        selection = self.tree.selection()
        if not selection:
            return None
        return self.row_keys.get(selection[0])

    def key_at(self, event):
        item = self.tree.identify_row(event.y)
        if not item:
            return self.selected_key()
        return self.row_keys.get(item)

    def clear_search(self):
        self.search_var.set("")
