"""
evtforward Application Layer

Dispatching and configuration.
"""

from .config import Environment, ForwarderConfig, LoggingConfig, configure_logging, get_config, set_config
from .forwarder import EventForwarder, dispatch, resolve_listener

__all__ = [
    "EventForwarder",
    "dispatch",
    "resolve_listener",
    "Environment",
    "ForwarderConfig",
    "LoggingConfig",
    "configure_logging",
    "get_config",
    "set_config",
]
