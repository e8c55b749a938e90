from .linear import LinearProbingTable


class OrderedLinearProbingTable(LinearProbingTable):
    """Linear probing that keeps each run sorted by key.

    Inserts bubble larger keys further down the run, so a lookup can give up
    as soon as it meets a key that sorts after the one it wants. Tombstones
    take no part in the ordering. Hard deletes rehome the same run as plain
    linear probing, and re-inserting through the sorted insert restores order.
    """

    def _passed(self, resident: str, key: str) -> bool:
        return resident > key
