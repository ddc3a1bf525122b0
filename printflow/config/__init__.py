"""
Configuration Module

Application configuration settings and utilities.
"""

from printflow.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
]
