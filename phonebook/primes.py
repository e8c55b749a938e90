# Roughly doubling primes, so growing through them keeps inserts amortized O(1).
PRIMES = (
    2,
    5,
    11,
    23,
    47,
    97,
    197,
    397,
    797,
    1597,
    3203,
    6421,
    12853,
    25717,
    51437,
    102877,
    205759,
    411527,
    823117,
    1646237,
    3292489,
    6584983,
    13169977,
    26339969,
    52679969,
    105359939,
    210719881,
    421439783,
    842879579,
    1685759167,
)

STARTING_INDEX = 1


class CapacitySequence:
    """Walks up and down the fixed prime table; every capacity comes from here."""

    def __init__(self) -> None:
        self.reset()

    def current(self) -> int:
        return PRIMES[self._index]

    def next(self) -> int:
        if self._index + 1 >= len(PRIMES):
            raise IndexError(f"no prime after {self.current()}")
        self._index += 1
        return PRIMES[self._index]

    def previous(self) -> int:
        if self._index == 0:
            raise IndexError(f"no prime before {self.current()}")
        self._index -= 1
        return PRIMES[self._index]

    def reset(self):
        self._index = STARTING_INDEX
