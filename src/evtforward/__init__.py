"""
evtforward - Single-listener event forwarding for component props

Forward an event from a child component to the ``on<Type>`` listener its
parent passed down, and get the listener's result back asynchronously.
"""

from .core import (
    EventDescriptor,
    ForwarderError,
    InvalidInputError,
    NamedEvent,
    ObjectEvent,
    SyntheticEvent,
    create_event,
    derive_listener_name,
    to_descriptor,
)
from .app import (
    Environment,
    EventForwarder,
    ForwarderConfig,
    configure_logging,
    dispatch,
    get_config,
    set_config,
)
from .ui import use_event_forwarder, with_event_forwarder

__all__ = [
    # Core
    'derive_listener_name',
    'create_event',
    'to_descriptor',
    'SyntheticEvent',
    'NamedEvent',
    'ObjectEvent',
    'EventDescriptor',
    'ForwarderError',
    'InvalidInputError',

    # Dispatching
    'dispatch',
    'EventForwarder',

    # Configuration
    'Environment',
    'ForwarderConfig',
    'configure_logging',
    'get_config',
    'set_config',

    # Composition
    'use_event_forwarder',
    'with_event_forwarder',
]
