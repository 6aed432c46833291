"""
Component composition helpers.

Components are plain functions taking children positionally and props as
keyword arguments and returning fastcore FT trees, as in FastHTML. Listener
props follow the ``on<Type>`` convention; the child reaches them only
through the injected forwarder.
"""

import functools
from types import MappingProxyType
from typing import Any, Callable, Optional

from fastcore.xml import FT

from ..app.config import ForwarderConfig, get_config
from ..app.forwarder import EventForwarder
from ..core.errors import InvalidInputError

Component = Callable[..., FT]


def use_event_forwarder(props: dict[str, Any], config: Optional[ForwarderConfig] = None) -> EventForwarder:
    """Bind a forwarder to a component's props."""
    return EventForwarder(MappingProxyType(dict(props)), config)


def with_event_forwarder(
    component: Component,
    *,
    prop_name: Optional[str] = None,
    config: Optional[ForwarderConfig] = None,
) -> Component:
    """
    Wrap ``component`` so it receives a bound forwarder as an extra prop.

    All props are passed through unchanged; the forwarder is bound to them at
    render time, so the parent's current listeners are the ones invoked.

    Args:
        component: Component function to wrap
        prop_name: Injected prop name (defaults to ``config.prop_name``)
        config: Forwarder configuration (defaults to the global one)

    Returns:
        New component function with the same name and docstring
    """
    @functools.wraps(component)
    def wrapper(*children: Any, **props: Any) -> FT:
        cfg = config or get_config()
        name = prop_name or cfg.prop_name
        if name in props:
            raise InvalidInputError(f"Prop {name!r} is reserved for the injected event forwarder")
        forwarder = use_event_forwarder(props, cfg)
        return component(*children, **props, **{name: forwarder})

    return wrapper


__all__ = ["Component", "use_event_forwarder", "with_event_forwarder"]
