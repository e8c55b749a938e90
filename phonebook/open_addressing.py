from abc import abstractmethod
from typing import Iterator

from .primes import CapacitySequence
from .probing import ProbeSequence
from .shared import trace
from .table import (
    EMPTY,
    HASH_MASK,
    TOMBSTONE,
    Empty,
    HashFunction,
    HashTable,
    Occupied,
    Probes,
    Slot,
    Tombstone,
    check_record,
    hash_string,
)


TABLE_MAX_LOAD = 0.5


class OpenAddressingTable(HashTable):
    """One buffer of slots walked by a probe sequence.

    `count` is what get can see; `occupied` also counts tombstones and is what
    drives resizing. Subclasses pick the probe sequence and decide which
    records have to move after a hard delete.
    """

    probe_sequence: ProbeSequence

    def __init__(self, soft: bool, hash_function: HashFunction = hash_string) -> None:
        self.soft = soft
        self._hash_function = hash_function
        self._primes = CapacitySequence()
        self.count = 0
        self.occupied = 0
        self.slots: list[Slot] = [EMPTY] * self._primes.current()

    def put(self, key: str, value: str) -> Probes:
        check_record(key, value)

        probes = 0
        if self.occupied > self.capacity() * TABLE_MAX_LOAD:
            probes += self._resize()
        probes += self._insert(key, value)
        return Probes(value, probes)

    def get(self, key: str | None) -> Probes:
        if key is None:
            return Probes(None, 0)

        index, probes = self._find(key)
        if index is None:
            return Probes(None, probes)

        slot = self.slots[index]
        assert isinstance(slot, Occupied)
        return Probes(slot.value, probes)

    def remove(self, key: str | None) -> Probes:
        if key is None:
            return Probes(None, 0)

        index, probes = self._find(key)
        if index is None:
            return Probes(None, probes)

        slot = self.slots[index]
        assert isinstance(slot, Occupied)

        if self.soft:
            self.slots[index] = TOMBSTONE
            self.count -= 1
            return Probes(slot.value, probes)

        self._vacate(index)
        moving, scanned = self._displaced(index)
        reinserted = self._reinsert(moving)
        trace(
            "rehome {0!r}: {1} records, {2} probes\n",
            key,
            len(moving),
            scanned + reinserted,
        )
        return Probes(slot.value, probes + scanned + reinserted)

    def contains_key(self, key: str | None) -> bool:
        if key is None:
            return False
        index, _ = self._find(key)
        return index is not None

    def contains_value(self, value: str | None) -> bool:
        for slot in self.slots:
            if isinstance(slot, Occupied) and slot.value == value:
                return True
        return False

    def size(self) -> int:
        return self.count

    def capacity(self) -> int:
        return len(self.slots)

    def items(self) -> Iterator[tuple[str, str]]:
        for slot in self.slots:
            if isinstance(slot, Occupied):
                yield slot.key, slot.value

    def hash(self, key: str) -> int:
        return (self._hash_function(key) & HASH_MASK) % len(self.slots)

    def probe(self, key: str) -> Iterator[int]:
        base = self.hash(key)
        capacity = len(self.slots)
        for step in range(1, capacity + 1):
            yield self.probe_sequence.address(base, step, capacity)

    def _find(self, key: str) -> tuple[int | None, int]:
        probes = 0
        for index in self.probe(key):
            probes += 1
            match self.slots[index]:
                case Empty():
                    return None, probes
                case Tombstone():
                    continue
                case Occupied(key=resident):
                    if resident == key:
                        return index, probes
                    if self._passed(resident, key):
                        return None, probes

        return None, probes

    def _insert(self, key: str, value: str) -> int:
        probes = 0
        for index in self.probe(key):
            probes += 1
            match self.slots[index]:
                case Empty():
                    self.slots[index] = Occupied(key, value)
                    self.count += 1
                    self.occupied += 1
                    return probes
                case Tombstone():
                    continue
                case Occupied(key=resident, value=held):
                    if self._passed(resident, key):
                        # carry the larger record on down the run
                        self.slots[index] = Occupied(key, value)
                        key, value = resident, held

        raise RuntimeError(f"no free slot for {key!r} at capacity {self.capacity()}")

    def _passed(self, resident: str, key: str) -> bool:
        # true once the walk for `key` has gone beyond where it could live
        return False

    def _resize(self) -> int:
        old_capacity = self.capacity()
        records = [slot for slot in self.slots if isinstance(slot, Occupied)]

        self.slots = [EMPTY] * self._primes.next()
        self.count = 0
        self.occupied = 0

        probes = old_capacity + self._reinsert(records)
        trace(
            "resize {0} -> {1} ({2} records, {3} probes)\n",
            old_capacity,
            self.capacity(),
            len(records),
            probes,
        )
        return probes

    def _vacate(self, index: int):
        self.slots[index] = EMPTY
        self.count -= 1
        self.occupied -= 1

    @abstractmethod
    def _displaced(self, index: int) -> tuple[list[Occupied], int]:
        """Vacate and return the records a hard delete at `index` may have cut
        off from their probe sequence, plus the number of slots examined."""

    def _reinsert(self, records: list[Occupied]) -> int:
        probes = 0
        for record in records:
            probes += self._insert(record.key, record.value)
        return probes
