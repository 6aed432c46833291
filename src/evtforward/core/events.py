"""
Synthetic Events and Event Descriptors

This module provides the event record handed to listeners and the
descriptor union the dispatcher accepts.

A descriptor is either *named* (a bare event type plus an optional detail,
from which a SyntheticEvent is created) or *object* (an event the caller
already built, forwarded to the listener untouched).
"""

from collections.abc import Mapping
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from .errors import InvalidInputError

DEFAULT_DETAIL = 0


class SyntheticEvent(BaseModel):
    """In-memory stand-in for a platform event: a type and its payload."""
    model_config = ConfigDict(frozen=True)

    type: str = Field(min_length=1)
    detail: Any = DEFAULT_DETAIL

    def __repr__(self) -> str:
        return f"SyntheticEvent(type={self.type!r}, detail={self.detail!r})"


class NamedEvent(BaseModel):
    """Descriptor for an event given by type name only."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["named"] = "named"
    type: str = Field(min_length=1)
    detail: Any = DEFAULT_DETAIL

    @property
    def event_type(self) -> str:
        return self.type


class ObjectEvent(BaseModel):
    """Descriptor wrapping an already constructed event object."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["object"] = "object"
    event: Any

    @field_validator("event")
    @classmethod
    def _require_type(cls, value: Any) -> Any:
        if not isinstance(getattr(value, "type", None), str):
            raise ValueError("event object must expose a string 'type' attribute")
        return value

    @property
    def event_type(self) -> str:
        return self.event.type


EventDescriptor = Annotated[Union[NamedEvent, ObjectEvent], Field(discriminator="kind")]

_descriptor_adapter = TypeAdapter(EventDescriptor)


def create_event(event_type: str, detail: Any = DEFAULT_DETAIL) -> SyntheticEvent:
    """
    Create the synthetic event for a named dispatch.

    Args:
        event_type: Event type, e.g. ``"choose"``
        detail: Payload carried by the event (defaults to 0)

    Returns:
        Immutable SyntheticEvent
    """
    if not isinstance(event_type, str) or not event_type:
        raise InvalidInputError(f"Event type must be a non-empty string, got {event_type!r}")
    return SyntheticEvent(type=event_type, detail=detail)


def to_descriptor(evt: Any, detail: Any = DEFAULT_DETAIL) -> Union[NamedEvent, ObjectEvent]:
    """
    Coerce the forms accepted by ``forward_evt`` into an event descriptor.

    Accepts a descriptor, an event type string, a ``{"kind": ...}`` mapping
    or any object with a string ``type`` attribute. ``detail`` only applies
    to event type strings.

    Raises:
        InvalidInputError: for anything else, including an empty type
    """
    if isinstance(evt, (NamedEvent, ObjectEvent)):
        return evt

    try:
        if isinstance(evt, str):
            return NamedEvent(type=evt, detail=detail)
        if isinstance(evt, Mapping):
            if "kind" not in evt:
                raise InvalidInputError("Event mapping must declare its 'kind' ('named' or 'object')")
            return _descriptor_adapter.validate_python(dict(evt))
        if isinstance(getattr(evt, "type", None), str):
            return ObjectEvent(event=evt)
    except ValidationError as e:
        raise InvalidInputError(f"Invalid event descriptor: {e}") from e

    raise InvalidInputError(
        f"Cannot dispatch {type(evt).__name__}: expected an event type string or an event object"
    )
