"""Dotenv parsing on top of python-dotenv.

python-dotenv owns the grammar (quoting, ``export``, comments, blank lines,
``${VAR}`` expansion). This module turns its lenient output into strict
results: statements it cannot parse, NUL characters, undecodable bytes and
malformed names become a ParseError that points at the offending character.
"""

from __future__ import annotations

import codecs
import io
from typing import Dict, List, Mapping, Optional, Tuple

from dotenv.parser import parse_stream
from dotenv.variables import parse_variables

from enve.exceptions import ParseError

NAME_PUNCTUATION = "_.-"


def _position(text: str, index: int) -> Tuple[int, int]:
    """1-based (line, column) of ``text[index]``."""
    line = text.count("\n", 0, index) + 1
    column = index - (text.rfind("\n", 0, index) + 1) + 1
    return line, column


def _unexpected(text: str, index: int, where: str = "") -> ParseError:
    char = text[index] if index < len(text) else ""
    line, column = _position(text, index)
    suffix = f" in {where}" if where else ""
    return ParseError(
        f"unexpected character {char!r}{suffix} at line {line}, column {column}",
        character=char,
        line=line,
        column=column,
    )


def _decode(data: bytes) -> str:
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        bad = data[e.start:e.start + 1].decode("latin-1")
        line = data.count(b"\n", 0, e.start) + 1
        column = e.start - (data.rfind(b"\n", 0, e.start) + 1) + 1
        raise ParseError(
            f"invalid UTF-8 byte {bad!r} at line {line}, column {column}",
            character=bad,
            line=line,
            column=column,
        ) from e


def _check_name(text: str, start: int, statement: str, name: str) -> None:
    """Reject names holding characters other than letters, digits and ``_.-``."""
    offset = statement.find(name)
    for i, char in enumerate(name):
        if not (char.isalnum() or char in NAME_PUNCTUATION):
            raise _unexpected(text, start + max(offset, 0) + i, "variable name")


def _expand(value: str, env: Mapping[str, Optional[str]]) -> str:
    return "".join(atom.resolve(env) for atom in parse_variables(value))


def parse(data: bytes, environ: Optional[Mapping[str, str]] = None) -> List[Tuple[str, str]]:
    """Parse dotenv content into ordered ``(name, value)`` pairs.

    Duplicate names are all kept, in order; callers decide which one wins.
    ``${NAME}`` references resolve against earlier pairs first, then against
    ``environ``.

    Raises:
        ParseError: On undecodable bytes, NUL characters, unparsable
            statements or invalid variable names
    """
    text = _decode(data)

    nul = text.find("\x00")
    if nul != -1:
        raise _unexpected(text, nul)

    pairs: List[Tuple[str, str]] = []
    resolved: Dict[str, Optional[str]] = dict(environ or {})
    offset = 0

    for binding in parse_stream(io.StringIO(text)):
        statement = binding.original.string
        start = offset
        offset += len(statement)

        if binding.error:
            lead = len(statement) - len(statement.lstrip())
            raise _unexpected(text, start + lead, "statement")

        if binding.key is None:
            continue

        _check_name(text, start, statement, binding.key)

        # A bare NAME without "=" carries no value
        if binding.value is None:
            continue

        value = _expand(binding.value, resolved)
        resolved[binding.key] = value
        pairs.append((binding.key, value))

    return pairs
