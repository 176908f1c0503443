"""Merging loaded variables with the inherited environment.

Precedence (low -> high):
- isolated (fresh or ignore-environment): parsed variables only, last
  duplicate wins
- overwrite: inherited variables, then every parsed variable, last
  duplicate wins
- default: inherited variables, plus parsed variables whose name was not
  inherited, first duplicate wins

Non-isolated merges mutate ``environ`` in place, so anything holding the same
mapping (``os.environ`` in the CLI) sees the result.
"""

from __future__ import annotations

from typing import MutableMapping, Optional

from enve.env.loader import Loaded, SourceResult
from enve.env.variables import EnvironmentSet
from enve.logger import Logger, get_logger


def merge(
    result: SourceResult,
    environ: MutableMapping[str, str],
    overwrite: bool = False,
    fresh_environment: bool = False,
    ignore_environment: bool = False,
    logger: Optional[Logger] = None,
) -> EnvironmentSet:
    """Combine a resolved source with the inherited environment.

    Args:
        result: Outcome of EnvLoader.load()
        environ: Inherited environment; mutated unless the result is isolated
        overwrite: Parsed variables replace inherited ones
        fresh_environment: Result holds parsed variables only
        ignore_environment: Result starts from an empty set

    Returns:
        The resolved variables in order
    """
    logger = logger or get_logger()

    if fresh_environment or ignore_environment:
        if not isinstance(result, Loaded):
            logger.debug("Isolated environment without a source", reason=result.reason)
            return EnvironmentSet()
        resolved = EnvironmentSet(result.variables)
        logger.debug("Isolated environment", origin=result.origin, count=len(resolved))
        return resolved

    if not isinstance(result, Loaded):
        logger.debug("Inherited environment only", reason=result.reason)
        return EnvironmentSet.from_mapping(environ)

    snapshot = set(environ)
    applied = 0
    skipped = 0

    for var in result.variables:
        if overwrite:
            environ[var.name] = var.value
            applied += 1
        elif var.name not in snapshot and var.name not in environ:
            environ[var.name] = var.value
            applied += 1
        else:
            skipped += 1

    logger.debug(
        "Merged variables",
        origin=result.origin,
        overwrite=overwrite,
        applied=applied,
        skipped=skipped,
    )
    return EnvironmentSet.from_mapping(environ)


__all__ = ["merge"]
