"""
EditOperation — one membership change of the owner list

Tagged variant produced by the edit-script engine and consumed, in the same
order, by the transaction assembler:

- Swap(old, new): replace an owner in place
- Add(owner): append a new owner
- Remove(owner): drop an existing owner
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class EditKind(str, Enum):
    """Kind of owner list edit"""

    SWAP = "swap"
    ADD = "add"
    REMOVE = "remove"


@dataclass(frozen=True)
class Swap:
    """Substitute `old` with `new` at the same list position."""

    old: str
    new: str

    @property
    def kind(self) -> EditKind:
        return EditKind.SWAP


@dataclass(frozen=True)
class Add:
    """Insert `owner`."""

    owner: str

    @property
    def kind(self) -> EditKind:
        return EditKind.ADD


@dataclass(frozen=True)
class Remove:
    """Delete `owner`."""

    owner: str

    @property
    def kind(self) -> EditKind:
        return EditKind.REMOVE


EditOperation = Union[Swap, Add, Remove]
