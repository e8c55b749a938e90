from .open_addressing import OpenAddressingTable
from .probing import QuadraticProbe
from .table import Occupied


class QuadraticProbingTable(OpenAddressingTable):
    """Open addressing visiting b, b+2, b+6, b+12, ... from the base slot.

    The probe offsets are not contiguous, so a hard delete cannot tell which
    records relied on the vacated slot. It rehashes the whole table instead,
    which makes every hard delete O(n).
    """

    probe_sequence = QuadraticProbe()

    def _displaced(self, index: int) -> tuple[list[Occupied], int]:
        moving: list[Occupied] = []
        for i, slot in enumerate(self.slots):
            if isinstance(slot, Occupied):
                moving.append(slot)
                self._vacate(i)

        return moving, self.capacity()
