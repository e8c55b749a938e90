from typing import Iterator

from .primes import CapacitySequence
from .shared import trace
from .table import (
    HASH_MASK,
    HashFunction,
    HashTable,
    Probes,
    Record,
    check_record,
    hash_string,
)


class SeparateChainingTable(HashTable):
    """An array of insertion-ordered chains.

    The table never resizes itself; callers decide when to enlarge or shrink.
    """

    def __init__(self, hash_function: HashFunction = hash_string) -> None:
        self._hash_function = hash_function
        self._primes = CapacitySequence()
        self.count = 0
        self.chains: list[list[Record]] = [[] for _ in range(self._primes.current())]
        # live records in insertion order, keyed by identity
        self._inserted: dict[int, Record] = {}

    def put(self, key: str, value: str) -> Probes:
        check_record(key, value)

        record = Record(key, value)
        self.chains[self.hash(key)].append(record)
        self._inserted[id(record)] = record
        self.count += 1
        return Probes(value, 1)

    def get(self, key: str | None) -> Probes:
        if key is None:
            return Probes(None, 0)

        chain = self.chains[self.hash(key)]
        index, probes = self._scan(chain, key)
        if index is None:
            return Probes(None, probes)
        return Probes(chain[index].value, probes)

    def remove(self, key: str | None) -> Probes:
        if key is None:
            return Probes(None, 0)

        chain = self.chains[self.hash(key)]
        index, probes = self._scan(chain, key)
        if index is None:
            return Probes(None, probes)

        record = chain.pop(index)
        del self._inserted[id(record)]
        self.count -= 1
        return Probes(record.value, probes)

    def contains_key(self, key: str | None) -> bool:
        if key is None:
            return False
        index, _ = self._scan(self.chains[self.hash(key)], key)
        return index is not None

    def contains_value(self, value: str | None) -> bool:
        for chain in self.chains:
            for record in chain:
                if record.value == value:
                    return True
        return False

    def size(self) -> int:
        return self.count

    def capacity(self) -> int:
        return len(self.chains)

    def items(self) -> Iterator[tuple[str, str]]:
        for chain in self.chains:
            for record in chain:
                yield record.key, record.value

    def enlarge(self):
        self._rebuild(self._primes.next())

    def shrink(self):
        self._rebuild(self._primes.previous())

    def hash(self, key: str) -> int:
        return (self._hash_function(key) & HASH_MASK) % len(self.chains)

    def _scan(self, chain: list[Record], key: str) -> tuple[int | None, int]:
        # the hash itself is the first probe, so an empty chain still costs one
        for i, record in enumerate(chain):
            if record.key == key:
                return i, i + 1
        return None, max(len(chain), 1)

    def _rebuild(self, capacity: int):
        records = list(self._inserted.values())
        old_capacity = self.capacity()

        self.chains = [[] for _ in range(capacity)]
        self.count = 0
        self._inserted = {}
        for record in records:
            self.put(record.key, record.value)

        trace("rebuild {0} -> {1} ({2} records)\n", old_capacity, capacity, len(records))
