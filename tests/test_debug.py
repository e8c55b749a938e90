from phonebook.chaining import SeparateChainingTable
from phonebook.debug import dump_table
from phonebook.linear import LinearProbingTable
from phonebook.quadratic import QuadraticProbingTable
from phonebook.shared import set_debug_trace_resize


def zero_hash(key: str) -> int:
    return 0


def test_dump_open_addressing(capsys):
    t = LinearProbingTable(soft=True, hash_function=zero_hash)
    t.put("Alice", "111")
    t.put("Bob", "222")
    t.remove("Bob")

    dump_table(t, "linear")
    assert capsys.readouterr().out == (
        "== linear ==\n"
        "0000 'Alice': '111'\n"
        "0001 <tombstone>\n"
        "0002 <empty>\n"
        "0003 <empty>\n"
        "0004 <empty>\n"
    )


def test_dump_chaining(capsys):
    t = SeparateChainingTable(hash_function=zero_hash)
    t.put("Alice", "111")
    t.put("Bob", "{222}")

    dump_table(t, "chaining")
    assert capsys.readouterr().out == (
        "== chaining ==\n"
        "0000 'Alice': '111' -> 'Bob': '{222}'\n"
        "0001 <empty>\n"
        "0002 <empty>\n"
        "0003 <empty>\n"
        "0004 <empty>\n"
    )


def test_trace_resize(capsys):
    t = LinearProbingTable(soft=False, hash_function=zero_hash)
    set_debug_trace_resize(True)
    try:
        for key in ["a", "b", "c", "d"]:
            t.put(key, key)
        t.remove("a")
    finally:
        set_debug_trace_resize(False)

    assert capsys.readouterr().out == (
        "resize 5 -> 11 (3 records, 11 probes)\n" "rehome 'a': 3 records, 10 probes\n"
    )


def test_trace_rebuild(capsys):
    t = SeparateChainingTable()
    t.put("Alice", "111")
    set_debug_trace_resize(True)
    try:
        t.enlarge()
        t.shrink()
    finally:
        set_debug_trace_resize(False)

    assert capsys.readouterr().out == (
        "rebuild 5 -> 11 (1 records)\n" "rebuild 11 -> 5 (1 records)\n"
    )


def test_trace_off_by_default(capsys):
    t = QuadraticProbingTable(soft=False)
    for i in range(20):
        t.put(f"person{i}", str(i))
    t.remove("person3")

    assert capsys.readouterr().out == ""
