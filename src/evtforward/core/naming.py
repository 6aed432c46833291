"""Listener naming convention: ``choose`` is handled by ``onChoose``."""

from .errors import InvalidInputError

LISTENER_PREFIX = "on"


def derive_listener_name(event_type: str) -> str:
    """
    Map an event type to the prop name its listener is registered under.

    The first character is upper-cased and the rest is kept as is, so
    ``"submitForm"`` becomes ``"onSubmitForm"``.

    Raises:
        InvalidInputError: if ``event_type`` is not a non-empty string
    """
    if not isinstance(event_type, str):
        raise InvalidInputError(f"Event type must be a string, got {type(event_type).__name__}")
    if not event_type:
        raise InvalidInputError("Event type must not be empty")
    return f"{LISTENER_PREFIX}{event_type[0].upper()}{event_type[1:]}"
