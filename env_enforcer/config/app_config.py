"""
Enforcer Configuration Module

Environment-driven defaults for the request-pipeline adapter, logging and
the example server.
"""

import os
import logging
from typing import Dict, Any, Optional

logger = logging.getLogger("env_enforcer.config")

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("true", "1", "yes")


class EnforcerConfig:
    """env-enforcer configuration manager."""

    def __init__(self):
        """Initialize configuration with environment variables and defaults."""
        self._load_config()

    def _load_config(self):
        """Load configuration from environment variables with fallbacks."""

        # Adapter defaults
        self.update_status = _env_flag("ENV_ENFORCER_UPDATE_STATUS", "true")
        self.should_throw = _env_flag("ENV_ENFORCER_SHOULD_THROW", "false")

        # Logging
        self.log_level = os.getenv("ENV_ENFORCER_LOG_LEVEL", "INFO").strip().upper()
        self.structured_logs = _env_flag("ENV_ENFORCER_STRUCTURED_LOGS", "true")

        # Example server
        self.host = os.getenv("ENV_ENFORCER_HOST", "127.0.0.1")
        self.port = int(os.getenv("ENV_ENFORCER_PORT", "42069"))

        logger.debug(
            f"Enforcer configuration loaded: update_status={self.update_status} "
            f"should_throw={self.should_throw} log_level={self.log_level}"
        )

    def get_adapter_config(self) -> Dict[str, Any]:
        """Get adapter defaults."""
        return {
            "should_update_status": self.update_status,
            "should_throw": self.should_throw,
        }

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return {
            "log_level": self.log_level,
            "structured": self.structured_logs,
        }

    def get_server_config(self) -> Dict[str, Any]:
        """Get example server configuration."""
        return {
            "host": self.host,
            "port": self.port,
        }

    def validate_config(self) -> bool:
        """
        Validate the current configuration.

        Returns:
            True if configuration is valid, False otherwise
        """
        validation_errors = []

        if self.log_level not in VALID_LOG_LEVELS:
            validation_errors.append(
                f"ENV_ENFORCER_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}"
            )

        if self.port < 1 or self.port > 65535:
            validation_errors.append("ENV_ENFORCER_PORT must be between 1 and 65535")

        if not self.host or not self.host.strip():
            validation_errors.append("ENV_ENFORCER_HOST cannot be empty")

        if validation_errors:
            logger.error("Configuration validation failed with the following errors:")
            for error in validation_errors:
                logger.error(f"  - {error}")
            return False

        logger.debug("Enforcer configuration validation passed")
        return True

    def get_env_template(self) -> str:
        """
        Generate a template .env file with all configuration options.

        Returns:
            String containing .env template
        """
        return """# env-enforcer Configuration Template

# Adapter defaults
ENV_ENFORCER_UPDATE_STATUS=true
ENV_ENFORCER_SHOULD_THROW=false

# Logging
ENV_ENFORCER_LOG_LEVEL=INFO
ENV_ENFORCER_STRUCTURED_LOGS=true

# Example server
ENV_ENFORCER_HOST=127.0.0.1
ENV_ENFORCER_PORT=42069
"""


# Global configuration instance
_enforcer_config: Optional[EnforcerConfig] = None


def get_enforcer_config() -> EnforcerConfig:
    """
    Get the global enforcer configuration instance.

    Returns:
        EnforcerConfig instance
    """
    global _enforcer_config
    if _enforcer_config is None:
        _enforcer_config = EnforcerConfig()
        if not _enforcer_config.validate_config():
            logger.warning("Enforcer configuration validation failed, using values as loaded")
    return _enforcer_config


def reload_enforcer_config() -> EnforcerConfig:
    """
    Reload the enforcer configuration from environment variables.

    Returns:
        New EnforcerConfig instance
    """
    global _enforcer_config
    _enforcer_config = EnforcerConfig()
    if not _enforcer_config.validate_config():
        logger.warning("Enforcer configuration validation failed, using values as loaded")
    return _enforcer_config
