"""
Chooser App - Minimal evtforward Application

A parent page hands an ``onChoose`` listener to a row of child buttons.
Clicking a button posts back to the child's route, where the child binds a
forwarder to its own props and forwards a ``choose`` event carrying its id;
the parent's listener records it and the page re-renders with the choice.

Run with ``python examples/chooser-app/main.py`` and open http://localhost:5001.
"""

from fasthtml.common import H1, Button, Div, FastHTML, serve

from evtforward import configure_logging, use_event_forwarder

configure_logging()

app = FastHTML()

THINGS = ["alpha", "beta", "gamma"]
state = {"choice": "click on one btn"}


def change_choice(evt):
    state["choice"] = evt.detail
    return evt.detail


def child_props(thing_id: str) -> dict:
    return {"thing_id": thing_id, "onChoose": change_choice}


def FuncChild(thing_id: str, **props):
    """Button that posts back so the child can forward ``choose``."""
    return Button(
        f"Func name: {thing_id}",
        hx_post=f"/choose/{thing_id}",
        hx_target="#parent",
        hx_swap="outerHTML",
    )


async def choose_clicked(props: dict):
    """Click handler of FuncChild, run server-side with the child's props."""
    dispatch_evt = use_event_forwarder(props)
    await dispatch_evt("choose", props["thing_id"])


def Parent():
    return Div(
        H1(state["choice"]),
        *[FuncChild(**child_props(thing)) for thing in THINGS],
        id="parent",
    )


@app.get("/")
def home():
    return Parent()


@app.post("/choose/{thing_id}")
async def choose(thing_id: str):
    await choose_clicked(child_props(thing_id))
    return Parent()


if __name__ == "__main__":
    serve()
