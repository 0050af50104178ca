"""
Configuration Package

Centralized configuration management for env-enforcer.
"""

from .app_config import EnforcerConfig, get_enforcer_config, reload_enforcer_config

__all__ = [
    'EnforcerConfig',
    'get_enforcer_config',
    'reload_enforcer_config',
]
