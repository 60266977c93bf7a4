"""
Tests for configuration persistence.
"""
import json
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config_manager import ConfigManager
from constants import DEFAULT_WINDOW_SIZE


def test_save_and_load(tmp_path):
    """Should persist the last directory and window geometry"""
    config_file = str(tmp_path / "config.json")
    config = ConfigManager(config_file)
    config.last_directory = str(tmp_path)
    config.window_geometry = "800x600"
    config.save()

    loaded = ConfigManager(config_file)
    loaded.load()
    assert loaded.last_directory == str(tmp_path)
    assert loaded.window_geometry == "800x600"


def test_missing_directory_forgotten(tmp_path):
    """Should drop a last directory that no longer exists"""
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"last_directory": str(tmp_path / "gone")}), encoding="utf-8")

    config = ConfigManager(str(config_file))
    config.load()
    assert config.last_directory == ""


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    """Should ignore a corrupted config file"""
    config_file = tmp_path / "config.json"
    config_file.write_text("{broken", encoding="utf-8")

    config = ConfigManager(str(config_file))
    config.load()
    assert config.last_directory == ""
    assert config.window_geometry == DEFAULT_WINDOW_SIZE


def test_save_failure_is_ignored(tmp_path):
    """Should not raise when the config file cannot be written"""
    config = ConfigManager(str(tmp_path / "missing_dir" / "config.json"))
    config.save()
