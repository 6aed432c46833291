"""
Forwarder Exceptions

Faults raised by the naming convention, the event factory and the dispatcher.
A missing handler is never one of them.
"""


class ForwarderError(Exception):
    """Base exception for event forwarder errors"""
    pass


class InvalidInputError(ForwarderError, ValueError):
    """Raised when an event type or event descriptor cannot be dispatched"""
    pass
