"""
evtforward Core Module

Domain layer - naming convention, synthetic events and descriptors.
No dispatching and no UI concerns.
"""

from .errors import ForwarderError, InvalidInputError
from .events import (
    DEFAULT_DETAIL,
    EventDescriptor,
    NamedEvent,
    ObjectEvent,
    SyntheticEvent,
    create_event,
    to_descriptor,
)
from .naming import LISTENER_PREFIX, derive_listener_name

__all__ = [
    "ForwarderError",
    "InvalidInputError",
    "DEFAULT_DETAIL",
    "EventDescriptor",
    "NamedEvent",
    "ObjectEvent",
    "SyntheticEvent",
    "create_event",
    "to_descriptor",
    "LISTENER_PREFIX",
    "derive_listener_name",
]
