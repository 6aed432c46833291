"""
Event Forwarder

Resolves the single listener registered for an event in a handler context,
invokes it and normalizes the outcome.

Normalization follows the passthrough policy: the awaited dispatch returns
whatever the listener returned (awaiting it first when it is awaitable), or
the forwarded event itself when no listener is registered.
"""

import asyncio
import inspect
import logging
from collections.abc import Mapping
from typing import Any, Callable, Optional

from ..core.events import NamedEvent, ObjectEvent, create_event, to_descriptor
from ..core.naming import derive_listener_name
from .config import ForwarderConfig, get_config

logger = logging.getLogger(__name__)

_MISSING = object()


def resolve_listener(context: Any, listener_name: str) -> Optional[Callable[[Any], Any]]:
    """Look up a listener by name; non-callable values count as absent."""
    if isinstance(context, Mapping):
        candidate = context.get(listener_name)
    else:
        candidate = getattr(context, listener_name, None)
    return candidate if callable(candidate) else None


async def dispatch(context: Any, descriptor: Any, *, config: Optional[ForwarderConfig] = None) -> Any:
    """
    Forward one event to its listener in ``context``.

    Args:
        context: Mapping (or object) holding ``on<Type>`` listeners
        descriptor: NamedEvent / ObjectEvent, or anything ``to_descriptor`` accepts

    Returns:
        The listener's (awaited) return value, or the forwarded event when
        the context has no listener for it

    Raises:
        InvalidInputError: if the descriptor or its event type is invalid
        Exception: whatever the listener raises, unchanged
    """
    config = config or get_config()
    descriptor = to_descriptor(descriptor)
    event_type = descriptor.event_type
    listener_name = derive_listener_name(event_type)
    listener = resolve_listener(context, listener_name)

    if isinstance(descriptor, ObjectEvent):
        forwarded = descriptor.event
    else:
        forwarded = create_event(event_type, descriptor.detail)

    if listener is None:
        log = logger.warning if config.warn_on_missing_handler else logger.debug
        log("No listener %s for event %r", listener_name, event_type)
        return forwarded

    logger.debug("Forwarding %r to %s", event_type, listener_name)
    result = listener(forwarded)
    if inspect.isawaitable(result):
        result = await result
    return result


class EventForwarder:
    """
    Dispatcher bound to one handler context.

    The context is captured once at construction (typically a component's
    props); callers then only supply the event::

        forward_evt = EventForwarder({"onChoose": on_choose})
        await forward_evt("choose", thing_id)
    """

    def __init__(self, context: Any, config: Optional[ForwarderConfig] = None):
        self._context = context
        self.config = config or get_config()
        self._pending: set[asyncio.Task] = set()

    @property
    def context(self) -> Any:
        return self._context

    def describe(self, evt: Any, detail: Any = _MISSING) -> NamedEvent | ObjectEvent:
        """Build the descriptor for ``evt``, applying the configured default detail."""
        if detail is _MISSING:
            detail = self.config.default_detail
        return to_descriptor(evt, detail)

    def listener_for(self, event_type: str) -> Optional[Callable[[Any], Any]]:
        """Return the listener that would receive ``event_type``, if any."""
        return resolve_listener(self._context, derive_listener_name(event_type))

    async def __call__(self, evt: Any, detail: Any = _MISSING) -> Any:
        return await dispatch(self._context, self.describe(evt, detail), config=self.config)

    def submit(self, evt: Any, detail: Any = _MISSING) -> "asyncio.Task[Any]":
        """
        Schedule a dispatch on the running loop without awaiting it.

        Meant for synchronous UI callbacks. The forwarder keeps the task
        alive until it finishes and logs a listener failure; awaiting the
        returned task still raises it. Raises RuntimeError when no event
        loop is running.
        """
        loop = asyncio.get_running_loop()
        task = loop.create_task(self(evt, detail))
        self._pending.add(task)
        task.add_done_callback(self._on_submitted_done)
        return task

    @property
    def pending(self) -> int:
        """Number of submitted dispatches still running."""
        return len(self._pending)

    def _on_submitted_done(self, task: "asyncio.Task[Any]") -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Submitted dispatch failed: %s", exc, exc_info=exc)

    def __repr__(self) -> str:
        return f"EventForwarder(context={self._context!r})"
