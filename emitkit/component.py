"""Component base class owning an event dispatcher and a lifecycle."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Sequence

from emitkit.config import Config, ConfigType, resolve_config
from emitkit.constants import LIFECYCLE_HOOKS
from emitkit.lib.error_handler import handle_error
from emitkit.lib.events import EventDispatcher, Listener
from emitkit.lib.lifecycle import lifecycle

HookHandlers = Mapping[str, Any]


def _as_list(value) -> list:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


class Component:
    """A unit with its own events and lifecycle.

    Subclasses hook into the lifecycle by defining methods named after the
    phases (``created``, ``mounted``, ``destroyed``, ...). Extra handlers can be
    passed per instance through `hooks`. Both run before the matching
    ``hook:<phase>`` event is emitted.

    Attributes:
        parent: The component this one was created under, if any.
        children: Components created with this one as their parent.
        hooks: Handlers for each lifecycle phase, in call order.
        events: The component's EventDispatcher.
        is_mounted: Whether mount() has run.
        is_destroyed: Whether destroy() has run.
    """

    is_mounted: bool = False
    is_destroyed: bool = False

    def __init__(
        self,
        parent: Component | None = None,
        hooks: HookHandlers | None = None,
        listeners: Mapping[str, Listener | Sequence[Listener]] | None = None,
        config: type[Config] | ConfigType | None = None,
    ) -> None:
        """Create the component and run its creation hooks.

        Args:
            parent: Parent component. Errors raised here are offered to its
                ``error_captured`` handlers.
            hooks: Lifecycle handlers keyed by phase name, one callable or a list.
            listeners: Event listeners to attach before creation, keyed by event name.
            config: Configuration class or ConfigType. Inherited from the parent
                when omitted.
        """
        if config is None and parent is not None:
            config = parent.config
        self.config = resolve_config(config)
        self.parent = parent
        self.children: list[Component] = []
        if parent is not None:
            parent.children.append(self)

        self.hooks = self._collect_hooks(hooks or {})
        self.events = EventDispatcher(
            owner=self,
            hook_prefix=self.config.HOOK_PREFIX,
            on_error=self._handle_listener_error,
            debug=self.config.DEBUG,
        )
        for event_name, fns in (listeners or {}).items():
            for fn in _as_list(fns):
                self.events.on(event_name, fn)

        lifecycle.call_hook(self, "before_create")
        lifecycle.call_hook(self, "created")

    def _collect_hooks(self, hooks: HookHandlers) -> dict[str, list[Callable]]:
        collected = {}
        for phase in LIFECYCLE_HOOKS:
            handlers = []
            method = getattr(type(self), phase, None)
            if callable(method):
                handlers.append(getattr(self, phase))
            handlers.extend(_as_list(hooks.get(phase)))
            if handlers:
                collected[phase] = handlers
        return collected

    def _handle_listener_error(self, err: Exception, info: str) -> None:
        handle_error(err, self, info)

    @property
    def has_hook_listener(self) -> bool:
        return self.events.has_hook_listener

    def on(self, event_name: str | Sequence[str], fn: Listener) -> Component:
        return self.events.on(event_name, fn)

    def once(self, event_name: str, fn: Listener) -> Component:
        return self.events.once(event_name, fn)

    def off(self, *args, **kwargs) -> Component:
        """Same arguments as EventDispatcher.off; a bare off() removes every listener."""
        return self.events.off(*args, **kwargs)

    def emit(self, event_name: str, *args, **kwargs) -> Component:
        return self.events.emit(event_name, *args, **kwargs)

    def mount(self) -> Component:
        if self.is_mounted or self.is_destroyed:
            return self
        lifecycle.call_hook(self, "before_mount")
        self.is_mounted = True
        lifecycle.call_hook(self, "mounted")
        return self

    def update(self) -> Component:
        """Signal that the component's state changed. Ignored until mounted."""
        if not self.is_mounted or self.is_destroyed:
            return self
        lifecycle.call_hook(self, "before_update")
        lifecycle.call_hook(self, "updated")
        return self

    def activate(self) -> Component:
        lifecycle.call_hook(self, "activated")
        return self

    def deactivate(self) -> Component:
        lifecycle.call_hook(self, "deactivated")
        return self

    def destroy(self) -> Component:
        """Tear the component down, children first.

        The ``destroyed`` hook event is still delivered; all listeners are
        removed right after it. Calling destroy() again does nothing.
        """
        if self.is_destroyed:
            return self
        lifecycle.call_hook(self, "before_destroy")
        self.is_destroyed = True
        if self.parent is not None and self in self.parent.children:
            self.parent.children.remove(self)
        for child in list(self.children):
            child.destroy()
        lifecycle.call_hook(self, "destroyed")
        self.off()
        logging.debug(f"{type(self).__name__} destroyed")
        return self
