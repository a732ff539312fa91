"""Configuration module"""

from aliasargs.config.loader import SettingsLoader, load_settings

__all__ = [
    'SettingsLoader',
    'load_settings'
]
