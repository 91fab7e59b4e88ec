"""Runs component lifecycle hooks and republishes them as hook events."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from flask_babel import _

from emitkit.lib.current_component import active_component
from emitkit.lib.error_handler import handle_error

if TYPE_CHECKING:
    from emitkit.component import Component


class LifecycleRunner:
    """Moves components through their lifecycle phases.

    For each phase the component's own hook handlers run first, each isolated
    from the others' failures. Afterwards, and only if the component ever had a
    listener for a hook event, the phase is emitted as ``<hook prefix><phase>``.
    Components nobody observes that way skip the listener lookup entirely.
    """

    def call_hook(self, component: Component, phase: str) -> None:
        """Run the handlers registered for `phase` and emit the matching hook event.

        Args:
            component: The component changing phase.
            phase: Lifecycle phase name, e.g. 'created' or 'destroyed'.
        """
        logging.debug(f"{type(component).__name__}: {phase}")

        with active_component(component):
            for handler in component.hooks.get(phase, []):
                try:
                    handler()
                except Exception as e:
                    # MSG: Describes where an error happened, preceded by the lifecycle phase
                    handle_error(e, component, _("%s hook") % phase)

        events = component.events
        if events.has_hook_listener:
            events.emit(events.hook_prefix + phase)


lifecycle = LifecycleRunner()
