"""Routing of errors raised by listeners and lifecycle hooks."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from emitkit.config import resolve_config
from emitkit.lib.current_component import active_component

if TYPE_CHECKING:
    from emitkit.component import Component


def handle_error(err: Exception, component: Component | None, info: str) -> None:
    """Report an error raised while running code on behalf of a component.

    Ancestors get the first chance: each ``error_captured`` handler is called as
    ``handler(err, component, info)`` starting from the direct parent, and a
    handler returning ``False`` stops the error from going further. Errors that
    are not stopped go to the configured ``ERROR_HANDLER``, or to the log if
    there is none.

    This function never raises.

    Args:
        err (Exception): The error that was raised.
        component (Component | None): The component the failing code ran for.
        info (str): Where the error happened, e.g. 'event handler for "save"'.
    """
    ancestor = component.parent if component is not None else None
    while ancestor is not None:
        with active_component(ancestor):
            for handler in ancestor.hooks.get("error_captured", []):
                try:
                    if handler(err, component, info) is False:
                        return
                except Exception as e:
                    _global_handle_error(e, ancestor, "error_captured hook")
        ancestor = ancestor.parent

    _global_handle_error(err, component, info)


def _global_handle_error(err: Exception, component: Component | None, info: str) -> None:
    config = resolve_config(component.config if component is not None else None)

    if config.ERROR_HANDLER is not None:
        try:
            config.ERROR_HANDLER(err, component, info)
            return
        except Exception as e:
            # Only log the handler's own error if it isn't just re-raising
            if e is not err:
                _log_error(e, config, "config.ERROR_HANDLER")

    _log_error(err, config, info)


def _log_error(err: Exception, config, info: str) -> None:
    if config.SILENT:
        return
    logging.error(f"Error in {info}: {err!r}", exc_info=err)
