"""
View modules for Localization Manager
"""

from .table_view import TableView
from .new_key_view import NewKeyView
from .edit_view import EditDialog

__all__ = ['TableView', 'NewKeyView', 'EditDialog']
