from .open_addressing import OpenAddressingTable
from .probing import LinearProbe
from .table import Occupied


class LinearProbingTable(OpenAddressingTable):
    probe_sequence = LinearProbe()

    def _displaced(self, index: int) -> tuple[list[Occupied], int]:
        # everything in the run after the hole, up to the next empty slot
        moving: list[Occupied] = []
        probes = 0
        capacity = self.capacity()
        for step in range(1, capacity):
            i = (index + step) % capacity
            probes += 1
            slot = self.slots[i]
            if not isinstance(slot, Occupied):
                break
            moving.append(slot)
            self._vacate(i)

        return moving, probes
