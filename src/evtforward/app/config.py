"""
Configuration Management for evtforward

Environment-aware settings for the forwarder and its logging.
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from ..core.events import DEFAULT_DETAIL

PACKAGE_LOGGER = "evtforward"

logger = logging.getLogger(__name__)


class Environment(Enum):
    """Application environments"""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class ForwarderConfig:
    """Complete forwarder configuration"""
    environment: Environment = Environment.DEVELOPMENT

    # Log a warning instead of a debug line when an event has no listener
    warn_on_missing_handler: bool = False
    default_detail: Any = DEFAULT_DETAIL
    # Prop under which with_event_forwarder injects the bound forwarder
    prop_name: str = "forward_evt"

    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def for_environment(cls, environment: Environment) -> 'ForwarderConfig':
        """Create configuration for specific environment"""
        config = cls(environment=environment)

        if environment == Environment.DEVELOPMENT:
            config.warn_on_missing_handler = True
            config.logging.level = "DEBUG"

        elif environment == Environment.TESTING:
            config.logging.level = "WARNING"

        elif environment == Environment.PRODUCTION:
            config.logging.level = "INFO"

        return config

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'ForwarderConfig':
        """Create configuration from dictionary"""
        environment = Environment(config_dict.get("environment", Environment.DEVELOPMENT.value))
        config = cls.for_environment(environment)

        for key in ("warn_on_missing_handler", "default_detail", "prop_name"):
            if key in config_dict:
                setattr(config, key, config_dict[key])

        for key, value in (config_dict.get("logging") or {}).items():
            if hasattr(config.logging, key):
                setattr(config.logging, key, value)

        return config

    @classmethod
    def from_environment(cls) -> 'ForwarderConfig':
        """Create configuration from environment variables"""
        env_name = os.getenv('EVTFORWARD_ENV', 'development')
        try:
            environment = Environment(env_name.lower())
        except ValueError:
            logger.warning("Unknown EVTFORWARD_ENV %r, using %s", env_name, Environment.DEVELOPMENT.value)
            environment = Environment.DEVELOPMENT
        config = cls.for_environment(environment)

        if os.getenv('EVTFORWARD_WARN_MISSING'):
            config.warn_on_missing_handler = os.getenv('EVTFORWARD_WARN_MISSING').lower() == 'true'

        if os.getenv('EVTFORWARD_LOG_LEVEL'):
            config.logging.level = os.getenv('EVTFORWARD_LOG_LEVEL').upper()

        return config

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {
            "environment": self.environment.value,
            "warn_on_missing_handler": self.warn_on_missing_handler,
            "default_detail": self.default_detail,
            "prop_name": self.prop_name,
            "logging": {
                "level": self.logging.level,
                "format": self.logging.format,
            },
        }


# Global configuration management
_current_config: Optional[ForwarderConfig] = None


def set_config(config: Optional[ForwarderConfig]):
    """Set the global configuration (None resets to environment defaults)"""
    global _current_config
    _current_config = config


def get_config() -> ForwarderConfig:
    """Get the current global configuration"""
    global _current_config

    if _current_config is None:
        # Auto-create from environment if not set
        _current_config = ForwarderConfig.from_environment()

    return _current_config


class PackageHandler(logging.StreamHandler):
    """Stderr handler installed by configure_logging."""

    def __init__(self):
        super().__init__(stream=sys.stderr)


def configure_logging(config: Optional[ForwarderConfig] = None) -> logging.Logger:
    """Attach a stream handler to the package logger using ``config.logging``."""
    config = config or get_config()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(getattr(logging, config.logging.level.upper(), logging.INFO))

    # Replace our own handler on reconfiguration, leave foreign ones alone
    for handler in list(package_logger.handlers):
        if isinstance(handler, PackageHandler):
            package_logger.removeHandler(handler)

    handler = PackageHandler()
    handler.setFormatter(logging.Formatter(config.logging.format))
    package_logger.addHandler(handler)
    return package_logger


__all__ = [
    "Environment", "LoggingConfig", "ForwarderConfig",
    "set_config", "get_config", "configure_logging", "PackageHandler",
]
