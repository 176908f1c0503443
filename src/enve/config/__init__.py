"""Configuration Module for enve

Example:
    from enve.config import ResolutionConfig, LogSettings

    config = ResolutionConfig.from_flags(file="app.env", overwrite=True)
    log = LogSettings.from_env()
"""

from enve.config.settings import (
    DEFAULT_ENV_FILE,
    FileSource,
    LogSettings,
    ResolutionConfig,
    Source,
    StdinSource,
)

__all__ = [
    "DEFAULT_ENV_FILE",
    # Sources
    "FileSource",
    "StdinSource",
    "Source",
    # Settings
    "ResolutionConfig",
    "LogSettings",
]
