"""Per-component event dispatcher with once-listeners and hook-event tracking."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from flask_babel import _

from emitkit.constants import HOOK_PREFIX
from emitkit.lib.current_component import active_component

Listener = Callable[..., Any]
ErrorCallback = Callable[[Exception, str], None]

# Tells a bare off() apart from off(None)
_UNSET = object()


@dataclass
class ListenerEntry:
    """A registered callable, plus the user callable it wraps for once-listeners."""

    fn: Listener
    original: Listener | None = None

    def matches(self, fn: Listener) -> bool:
        return _same_listener(self.fn, fn) or (
            self.original is not None and _same_listener(self.original, fn)
        )


def _same_listener(registered: Listener, fn: Listener) -> bool:
    if registered is fn:
        return True
    # obj.method builds a new bound method on every access
    bound_to = getattr(registered, "__self__", _UNSET)
    return (
        bound_to is not _UNSET
        and bound_to is getattr(fn, "__self__", None)
        and getattr(registered, "__func__", None) is getattr(fn, "__func__", _UNSET)
    )


def _log_listener_error(err: Exception, info: str) -> None:
    logging.error(f"Error in {info}: {err!r}", exc_info=err)


class EventDispatcher:
    """Minimal event dispatcher owned by a single component instance.

    Listeners are called synchronously in registration order. A listener that
    raises does not stop the others; its exception is passed to `on_error`
    together with a description of the failing event.

    Attributes:
        owner: Object returned by the chaining methods and made current while
            listeners run. Defaults to the dispatcher itself.
        hook_prefix: Event names starting with this mark lifecycle hook events.
        has_hook_listener: Whether a hook event was ever subscribed to. Never
            reset, so the lifecycle runner can skip the lookup with one check.
    """

    def __init__(
        self,
        owner: Any = None,
        hook_prefix: str = HOOK_PREFIX,
        on_error: ErrorCallback | None = None,
        debug: bool = False,
    ) -> None:
        self.owner = owner if owner is not None else self
        self.hook_prefix = hook_prefix
        self.on_error = on_error or _log_listener_error
        self.debug = debug
        self.has_hook_listener = False
        self._listeners: dict[str, list[ListenerEntry]] = {}

    @property
    def listeners(self) -> dict[str, list[ListenerEntry]]:
        return self._listeners

    def listener_count(self, event_name: str) -> int:
        return len(self._listeners.get(event_name, ()))

    def on(self, event_name: str | Sequence[str], fn: Listener) -> Any:
        """Register a listener for one event, or independently for each of several."""
        if isinstance(event_name, (list, tuple)):
            for name in event_name:
                self.on(name, fn)
            return self.owner
        self._add(event_name, ListenerEntry(fn))
        return self.owner

    def once(self, event_name: str, fn: Listener) -> Any:
        """Register a listener that removes itself before its first call."""

        def wrapper(*args, **kwargs):
            # Remove first so a re-emit from inside fn can't reach it again
            self.off(event_name, wrapper)
            return fn(*args, **kwargs)

        self._add(event_name, ListenerEntry(wrapper, original=fn))
        return self.owner

    def _add(self, event_name: str, entry: ListenerEntry) -> None:
        self._listeners.setdefault(event_name, []).append(entry)
        if event_name.startswith(self.hook_prefix):
            self.has_hook_listener = True
        logging.debug(f"Listener registered for event: {event_name}")

    def off(self, event_name: Any = _UNSET, fn: Listener | None = None) -> Any:
        """Remove listeners.

        With no arguments every listener is removed. With only an event name
        (or list of names) every listener of that event is removed. With both,
        the most recently registered matching listener is removed; a
        once-listener matches the callable originally given to `once`.
        An explicit `None` event name matches nothing.
        """
        if event_name is _UNSET:
            if fn is None:
                self._listeners.clear()
            return self.owner

        if isinstance(event_name, (list, tuple)):
            for name in event_name:
                self.off(name, fn)
            return self.owner

        entries = self._listeners.get(event_name)
        if not entries:
            return self.owner

        if fn is None:
            del self._listeners[event_name]
            return self.owner

        for i in range(len(entries) - 1, -1, -1):
            if entries[i].matches(fn):
                del entries[i]
                logging.debug(f"Listener removed for event: {event_name}")
                break
        if not entries:
            del self._listeners[event_name]
        return self.owner

    def emit(self, event_name: str, *args, **kwargs) -> Any:
        """Call every listener registered for this event when emit was called."""
        if self.debug:
            self._tip_event_case(event_name)

        entries = self._listeners.get(event_name)
        if not entries:
            return self.owner

        # Listeners may subscribe or unsubscribe while we iterate
        snapshot = list(entries)
        with active_component(self.owner):
            for entry in snapshot:
                try:
                    entry.fn(*args, **kwargs)
                except Exception as e:
                    # MSG: Describes where an error happened, followed by the event name
                    self.on_error(e, _('event handler for "%s"') % event_name)
        return self.owner

    def _tip_event_case(self, event_name: str) -> None:
        lower_name = event_name.lower()
        if lower_name != event_name and lower_name in self._listeners:
            logging.debug(
                f'Event "{event_name}" is emitted but the listeners are registered for '
                f'"{lower_name}". Event names are case sensitive, consider emitting '
                f'"{lower_name}" instead.'
            )
