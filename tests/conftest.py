"""Pytest fixtures for emitkit tests."""

import pytest

from emitkit.component import Component
from emitkit.config import TestingConfig
from emitkit.lib.events import EventDispatcher


class RecordingComponent(Component):
    """Component that records every lifecycle phase it goes through.

    The phase methods are defined on the class so they run as the component's
    own hooks, ahead of any handlers passed in through `hooks`.
    """

    def __init__(self, *args, **kwargs):
        self.phases = []
        super().__init__(*args, **kwargs)

    def before_create(self):
        self.phases.append("before_create")

    def created(self):
        self.phases.append("created")

    def before_mount(self):
        self.phases.append("before_mount")

    def mounted(self):
        self.phases.append("mounted")

    def before_update(self):
        self.phases.append("before_update")

    def updated(self):
        self.phases.append("updated")

    def activated(self):
        self.phases.append("activated")

    def deactivated(self):
        self.phases.append("deactivated")

    def before_destroy(self):
        self.phases.append("before_destroy")

    def destroyed(self):
        self.phases.append("destroyed")


@pytest.fixture
def events():
    """Create a standalone EventDispatcher."""
    return EventDispatcher()


@pytest.fixture
def component():
    """Create a plain Component with the testing configuration."""
    return Component(config=TestingConfig)


@pytest.fixture
def recording_component():
    """Create a RecordingComponent with the testing configuration."""
    return RecordingComponent(config=TestingConfig)


@pytest.fixture
def recording_component_cls():
    """The RecordingComponent class, for tests that construct their own."""
    return RecordingComponent
