"""Environment variable and ordered variable set."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple


@dataclass(frozen=True)
class EnvironmentVariable:
    """A single NAME=VALUE pair."""

    name: str
    value: str

    def __post_init__(self) -> None:
        if not self.name or "=" in self.name or "\x00" in self.name:
            raise ValueError(f"invalid environment variable name: {self.name!r}")
        if "\x00" in self.value:
            raise ValueError(f"environment variable {self.name} contains a NUL character")

    def __str__(self) -> str:
        return f"{self.name}={self.value}"


class EnvironmentSet:
    """Ordered collection of variables with unique names.

    Order is insertion order. Adding a name that is already present replaces
    its value in place.
    """

    def __init__(self, variables: Iterable[EnvironmentVariable] = ()) -> None:
        self._vars: Dict[str, EnvironmentVariable] = {}
        for var in variables:
            self._vars[var.name] = var

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "EnvironmentSet":
        return cls(EnvironmentVariable(name, value) for name, value in pairs)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "EnvironmentSet":
        """Build a set from an inherited environment.

        Entries without a separable name (empty, or holding ``=`` or NUL) and
        values holding NUL are skipped.
        """
        return cls.from_pairs(
            (name, value)
            for name, value in mapping.items()
            if name and "=" not in name and "\x00" not in name and "\x00" not in value
        )

    def to_dict(self) -> Dict[str, str]:
        return {var.name: var.value for var in self}

    def names(self) -> List[str]:
        return list(self._vars)

    def __iter__(self) -> Iterator[EnvironmentVariable]:
        return iter(self._vars.values())

    def __len__(self) -> int:
        return len(self._vars)

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnvironmentSet):
            return NotImplemented
        return list(self) == list(other)

    def __repr__(self) -> str:
        return f"EnvironmentSet({list(self)!r})"
