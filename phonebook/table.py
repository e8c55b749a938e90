from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Iterator


HASH_MASK = 0x7FFFFFFF

HashFunction = Callable[[str], int]


@dataclass(frozen=True)
class Record:
    key: str
    value: str


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Tombstone:
    pass


@dataclass(frozen=True)
class Occupied(Record):
    pass


Slot = Empty | Tombstone | Occupied

EMPTY = Empty()
TOMBSTONE = Tombstone()


@dataclass(frozen=True)
class Probes:
    """The value an operation produced and how many slots or nodes it examined."""

    value: str | None
    probes: int


class InvalidArgumentError(ValueError):
    pass


def hash_string(key: str) -> int:
    # 32-bit FNV-1a
    hash = 2166136261
    for i in range(len(key)):
        hash ^= ord(key[i])
        hash = (hash * 16777619) & 0xFFFFFFFF
    return hash


def check_record(key: str | None, value: str | None):
    if not key or not value:
        raise InvalidArgumentError("Key/value cannot be None or empty!")


class HashTable(ABC):
    """The surface shared by every phonebook table.

    get and remove never fail: a None key gives Probes(None, 0), while a key
    that is simply missing gives Probes(None, n) with n > 0.
    """

    @abstractmethod
    def put(self, key: str, value: str) -> Probes:
        ...

    @abstractmethod
    def get(self, key: str | None) -> Probes:
        ...

    @abstractmethod
    def remove(self, key: str | None) -> Probes:
        ...

    @abstractmethod
    def contains_key(self, key: str | None) -> bool:
        ...

    @abstractmethod
    def contains_value(self, value: str | None) -> bool:
        ...

    @abstractmethod
    def size(self) -> int:
        ...

    @abstractmethod
    def capacity(self) -> int:
        ...

    @abstractmethod
    def items(self) -> Iterator[tuple[str, str]]:
        ...

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: str | None) -> bool:
        return self.contains_key(key)
