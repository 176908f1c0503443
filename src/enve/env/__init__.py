"""Environment resolution: parsing, source loading, merging and rendering.

Example:
    import os
    from enve.config import ResolutionConfig
    from enve.env import EnvLoader, merge, render

    config = ResolutionConfig.from_flags(file="app.env")
    result = EnvLoader(config, environ=os.environ).load()
    env = merge(result, os.environ, overwrite=config.overwrite)
    print(render(env, "json"))
"""

from enve.env.loader import EnvLoader, Loaded, Skipped, SourceResult, stdin_is_piped
from enve.env.merge import merge
from enve.env.parser import parse
from enve.env.serializer import (
    DEFAULT_OUTPUT,
    OUTPUT_FORMATS,
    render,
    to_json,
    to_text,
    to_xml,
    validate_format,
)
from enve.env.variables import EnvironmentSet, EnvironmentVariable

__all__ = [
    # Model
    "EnvironmentVariable",
    "EnvironmentSet",
    # Parsing and loading
    "parse",
    "EnvLoader",
    "Loaded",
    "Skipped",
    "SourceResult",
    "stdin_is_piped",
    # Merging
    "merge",
    # Rendering
    "DEFAULT_OUTPUT",
    "OUTPUT_FORMATS",
    "render",
    "to_text",
    "to_json",
    "to_xml",
    "validate_format",
]
