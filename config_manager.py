"""
Configuration Management for Localization Manager

Handles loading and saving of user configuration.
"""

import os
import json
import logging

from constants import CONFIG_FILE_NAME, DEFAULT_WINDOW_SIZE


class ConfigManager:
    """Manages application configuration"""

    def __init__(self, config_file=None):
        self.config_file = config_file or os.path.join(os.path.expanduser("~"), CONFIG_FILE_NAME)
        self.last_directory = ''
        self.window_geometry = DEFAULT_WINDOW_SIZE

    def load(self):
        """Load saved configuration"""
        try:
            if os.path.exists(self.config_file):
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    config = json.load(f)
                    # Only remember directories that still exist
                    last_directory = config.get('last_directory', '')
                    if last_directory and os.path.isdir(last_directory):
                        self.last_directory = last_directory
                    self.window_geometry = config.get('window_geometry', DEFAULT_WINDOW_SIZE)
        except (OSError, ValueError, AttributeError) as e:
            # If config file is corrupted, just ignore it
            logging.warning(f"Ignoring unreadable config file {self.config_file}: {e}")
            self.last_directory = ''
            self.window_geometry = DEFAULT_WINDOW_SIZE

    def save(self):
        """Save configuration"""
        try:
            config = {
                'last_directory': self.last_directory,
                'window_geometry': self.window_geometry
            }
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(config, f, indent=2)
        except OSError as e:
            logging.warning(f"Could not save config file {self.config_file}: {e}")
