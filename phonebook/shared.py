from typing import Any


_debug_trace_resize = False


def set_debug_trace_resize(b: bool):
    global _debug_trace_resize
    _debug_trace_resize = b


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def trace(format: str, *args: Any):
    if _debug_trace_resize:
        printf(format, *args)
