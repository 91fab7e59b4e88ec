import enum

from emitkit.constants import HOOK_PREFIX


class Config:
    """Base configuration."""

    HOOK_PREFIX = HOOK_PREFIX
    # Called as handler(err, component, info) for errors no parent captured
    ERROR_HANDLER = None
    SILENT = False
    DEBUG = False


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True


class ConfigType(enum.Enum):
    DEVELOPMENT = DevelopmentConfig
    PRODUCTION = ProductionConfig
    TESTING = TestingConfig


def resolve_config(config) -> type[Config]:
    """Accept a Config subclass, a ConfigType member or None (base Config)."""
    if config is None:
        return Config
    if isinstance(config, ConfigType):
        return config.value
    return config
