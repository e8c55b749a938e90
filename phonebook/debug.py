from .chaining import SeparateChainingTable
from .open_addressing import OpenAddressingTable
from .shared import printf
from .table import Empty, HashTable, Occupied, Slot, Tombstone


def dump_table(table: HashTable, name: str):
    printf("== {0:s} ==\n", name)

    match table:
        case OpenAddressingTable():
            for index, slot in enumerate(table.slots):
                dump_slot(index, slot)
        case SeparateChainingTable():
            for index, chain in enumerate(table.chains):
                printf("{0:04d} ", index)
                if not chain:
                    printf("<empty>")
                printf("{0:s}", " -> ".join(f"{r.key!r}: {r.value!r}" for r in chain))
                printf("\n")


def dump_slot(index: int, slot: Slot):
    printf("{0:04d} ", index)
    match slot:
        case Empty():
            printf("<empty>")
        case Tombstone():
            printf("<tombstone>")
        case Occupied(key=key, value=value):
            printf("{0!r}: {1!r}", key, value)
    printf("\n")
