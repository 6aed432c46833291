"""Tests for component composition with an injected forwarder."""

import pytest
from fastcore.xml import Button, Div, to_xml

from evtforward import (
    EventForwarder,
    ForwarderConfig,
    InvalidInputError,
    SyntheticEvent,
    use_event_forwarder,
    with_event_forwarder,
)


def make_child(captured):
    @with_event_forwarder
    def FuncChild(*children, thing_id, forward_evt, **props):
        """Button for one thing."""
        captured["forward_evt"] = forward_evt
        captured["props"] = props
        return Button(f"Func name: {thing_id}", *children)

    return FuncChild


class TestWithEventForwarder:

    def test_renders_wrapped_component(self):
        FuncChild = make_child({})
        html = to_xml(Div(FuncChild(thing_id="alpha")))
        assert "Func name: alpha" in html

    def test_preserves_metadata(self):
        FuncChild = make_child({})
        assert FuncChild.__name__ == "FuncChild"
        assert FuncChild.__doc__ == "Button for one thing."

    def test_props_pass_through(self):
        captured = {}

        def on_choose(evt):
            return evt

        make_child(captured)(thing_id="alpha", onChoose=on_choose, cls="btn")
        assert captured["props"] == {"onChoose": on_choose, "cls": "btn"}
        assert isinstance(captured["forward_evt"], EventForwarder)

    @pytest.mark.asyncio
    async def test_injected_forwarder_reaches_parent_listener(self):
        captured, chosen = {}, []

        def change_choice(evt):
            chosen.append(evt.detail)
            return evt.detail

        make_child(captured)(thing_id="beta", onChoose=change_choice)
        result = await captured["forward_evt"]("choose", "beta")

        assert result == "beta"
        assert chosen == ["beta"]

    @pytest.mark.asyncio
    async def test_without_listener_returns_event(self):
        captured = {}
        make_child(captured)(thing_id="gamma")
        result = await captured["forward_evt"]("choose", "gamma")
        assert result == SyntheticEvent(type="choose", detail="gamma")

    def test_reserved_prop_is_rejected(self):
        FuncChild = make_child({})
        with pytest.raises(InvalidInputError):
            FuncChild(thing_id="alpha", forward_evt=print)

    def test_custom_prop_name(self):
        captured = {}

        def Child(emit, **props):
            captured["emit"] = emit
            return Div()

        with_event_forwarder(Child, prop_name="emit")()
        assert isinstance(captured["emit"], EventForwarder)

    def test_prop_name_from_config(self):
        captured = {}

        def Child(**props):
            captured.update(props)
            return Div()

        with_event_forwarder(Child, config=ForwarderConfig(prop_name="dispatch_evt"))()
        assert isinstance(captured["dispatch_evt"], EventForwarder)


class TestUseEventForwarder:

    @pytest.mark.asyncio
    async def test_binds_props(self):
        forward_evt = use_event_forwarder({"onChoose": lambda e: e.detail * 3})
        assert await forward_evt("choose", 2) == 6

    def test_context_is_read_only_snapshot(self):
        props = {"onChoose": print}
        forward_evt = use_event_forwarder(props)
        props["onClose"] = print

        assert "onClose" not in forward_evt.context
        with pytest.raises(TypeError):
            forward_evt.context["onChoose"] = None
