from __future__ import annotations

import contextlib
from contextvars import ContextVar
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from emitkit.component import Component

_current: ContextVar[Component | None] = ContextVar("emitkit_current_component", default=None)


def current_component() -> Component | None:
    """Get the component whose listener or lifecycle hook is currently running

    Listeners are plain callables, so this is how they reach the instance that
    emitted the event, much like Flask's ``current_app`` inside a request.

    Returns:
        Component | None: The active component, or None outside of a listener or hook.
    """
    return _current.get()


@contextlib.contextmanager
def active_component(component: Component | None) -> Iterator[None]:
    """Make `component` current for the duration of the block, restoring the previous one after."""
    token = _current.set(component)
    try:
        yield
    finally:
        _current.reset(token)
