"""Tests for configuration classes."""

import pytest

from emitkit.config import (
    Config,
    ConfigType,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    resolve_config,
)


def test_base_config_defaults():
    assert Config.HOOK_PREFIX == "hook:"
    assert Config.ERROR_HANDLER is None
    assert Config.SILENT is False
    assert Config.DEBUG is False


def test_environment_configs():
    assert DevelopmentConfig.DEBUG is True
    assert ProductionConfig.DEBUG is False
    assert TestingConfig.TESTING is True


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, Config),
        (ConfigType.DEVELOPMENT, DevelopmentConfig),
        (ConfigType.PRODUCTION, ProductionConfig),
        (ConfigType.TESTING, TestingConfig),
        (TestingConfig, TestingConfig),
    ],
)
def test_resolve_config(value, expected):
    assert resolve_config(value) is expected
