from emitkit.component import Component
from emitkit.lib.current_component import current_component
from emitkit.lib.events import EventDispatcher
from emitkit.lib.lifecycle import LifecycleRunner
from emitkit.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    Component.__name__,
    EventDispatcher.__name__,
    LifecycleRunner.__name__,
    current_component.__name__,
]
