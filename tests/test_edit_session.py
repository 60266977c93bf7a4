"""
Tests for edit session state - entries, dirty flag, drafts and pending actions.
"""
import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from edit_session import (
    ACTION_DELETE, EditSession, NewEntryDraft, PendingAction
)


TABLE = {
    "hello": {"en": "Hello", "fr": "Bonjour"},
    "bye": {"en": "Bye", "fr": "Salut"},
}


class TestBeginEdit:
    """Test starting edits."""

    def test_begin_edit_copies_values(self):
        """Should default pending key and values to the current ones"""
        session = EditSession()
        entry = session.begin_edit("hello", TABLE)

        assert entry.original_key == "hello"
        assert entry.pending_key == "hello"
        assert entry.pending_values == TABLE["hello"]
        assert entry.pending_values is not TABLE["hello"]
        assert session.dirty

    def test_begin_edit_twice_keeps_pending_changes(self):
        """Should not reset pending data when editing an already pending key"""
        session = EditSession()
        session.begin_edit("hello", TABLE)
        session.set_pending_value("hello", "en", "Hi")
        session.set_pending_key("hello", "greeting")

        entry = session.begin_edit("hello", TABLE)

        assert entry.pending_values["en"] == "Hi"
        assert entry.pending_key == "greeting"
        assert len(session) == 1

    def test_pending_values_do_not_touch_table(self):
        """Should never modify the table while editing"""
        session = EditSession()
        session.begin_edit("bye", TABLE)
        session.set_pending_value("bye", "en", "Goodbye")
        assert TABLE["bye"]["en"] == "Bye"


class TestCancel:
    """Test cancelling edits."""

    def test_cancel_last_entry_clears_dirty(self):
        """Should clear the dirty flag when the last entry is cancelled"""
        session = EditSession()
        session.begin_edit("hello", TABLE)
        session.begin_edit("bye", TABLE)

        session.cancel("hello")
        assert session.dirty

        session.cancel("bye")
        assert not session.dirty

    def test_cancel_unknown_key(self):
        """Should ignore cancelling a key that is not being edited"""
        session = EditSession()
        assert session.cancel("missing") is None


class TestPendingKeys:
    """Test rename target tracking."""

    def test_pending_keys_exclude(self):
        """Should list rename targets, optionally skipping one entry"""
        session = EditSession()
        session.begin_edit("hello", TABLE)
        session.begin_edit("bye", TABLE)
        session.set_pending_key("bye", "farewell")

        assert session.pending_keys() == {"hello", "farewell"}
        assert session.pending_keys(exclude="bye") == {"hello"}

    def test_copy_is_independent(self):
        """Should copy entries so changes to the copy do not leak"""
        session = EditSession()
        session.begin_edit("hello", TABLE)
        clone = session.copy()
        clone.set_pending_value("hello", "en", "Hey")
        clone.cancel("hello")

        assert session.get("hello").pending_values["en"] == "Hello"
        assert "hello" in session


class TestDraftAndActions:
    """Test the new key draft and pending actions."""

    def test_draft_reset(self):
        """Should reset key and values"""
        draft = NewEntryDraft()
        draft.key = "new"
        draft.set_value("en", "New")
        draft.reset()
        assert draft.key == ""
        assert draft.values == {}

    def test_pending_action_rejects_unknown_kind(self):
        """Should only accept known action kinds"""
        with pytest.raises(ValueError):
            PendingAction("rename-everything")

    def test_pending_action_equality(self):
        """Should compare by kind and key"""
        assert PendingAction(ACTION_DELETE, "a") == PendingAction(ACTION_DELETE, "a")
        assert PendingAction(ACTION_DELETE, "a") != PendingAction(ACTION_DELETE, "b")


class TestPendingKeyAndClose:
    """Test staging renames and closing unchanged entries."""

    def test_set_pending_key_strips_new_key(self):
        """Should strip whitespace around a new key name"""
        session = EditSession()
        session.begin_edit("hello", TABLE)
        session.set_pending_key("hello", "  greeting ")
        assert session.get("hello").pending_key == "greeting"

    def test_set_pending_key_keeps_original_verbatim(self):
        """Should keep a padded original key untouched when retyped as-is"""
        table = {" padded ": {"en": "x"}}
        session = EditSession()
        session.begin_edit(" padded ", table)
        session.set_pending_key(" padded ", " padded ")
        entry = session.get(" padded ")
        assert entry.pending_key == " padded "
        assert not entry.is_rename

    def test_discard_if_unchanged_drops_noop_entry(self):
        """Should drop an entry equal to the table and clear the dirty flag"""
        session = EditSession()
        session.begin_edit("hello", TABLE)
        assert session.discard_if_unchanged("hello", TABLE)
        assert not session.dirty

    def test_discard_if_unchanged_keeps_changes(self):
        """Should keep entries with changed values or a new key"""
        session = EditSession()
        session.begin_edit("hello", TABLE)
        session.set_pending_value("hello", "en", "Hi")
        session.begin_edit("bye", TABLE)
        session.set_pending_key("bye", "farewell")

        assert not session.discard_if_unchanged("hello", TABLE)
        assert not session.discard_if_unchanged("bye", TABLE)
        assert not session.discard_if_unchanged("missing", TABLE)
        assert len(session) == 2
