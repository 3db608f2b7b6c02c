"""Listing of the allocations held by a heap."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, TextIO

from zonealloc.heap import Heap, HeapError, ZoneType
from zonealloc.numfmt import to_base

_HEX = "0123456789ABCDEF"
_DECIMAL = "0123456789"


def _as_int(value: int) -> int:
    value &= (1 << 32) - 1
    if value >= 1 << 31:
        value -= 1 << 32
    return value


def _hex(value: int) -> str:
    return "0x" + to_base(_as_int(value), _HEX)


def _dec(value: int) -> str:
    return to_base(_as_int(value), _DECIMAL)


def format_alloc_mem(heap: Heap) -> str:
    """The allocation listing of *heap*, grouped by size class.

    Each class present starts with the address of its first zone, followed
    by one ``start - end : size`` line per allocated chunk. A final line
    gives the total number of allocated bytes.
    """
    zones = heap.zones()
    lines: List[str] = []
    total = 0
    for zone_type in ZoneType:
        first = next((zone for zone in zones if zone.type is zone_type), None)
        if first is not None:
            lines.append(f"{zone_type.name} : {_hex(first.base)}")
        for zone in zones:
            for chunk in zone.chunks:
                if not chunk.free and chunk.type is zone_type:
                    lines.append(
                        f"{_hex(chunk.addr)} - {_hex(chunk.end())} : {_dec(chunk.size)}"
                    )
                    total = _as_int(total + chunk.size)
    lines.append(f"Total : {_dec(total)} octets")
    return "\n".join(lines) + "\n"


def show_alloc_mem(heap: Heap, stream: Optional[TextIO] = None) -> None:
    """Write the allocation listing of *heap* to *stream* (default stdout)."""
    (sys.stdout if stream is None else stream).write(format_alloc_mem(heap))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Allocate the sizes given on the command line and list the heap."""
    parser = argparse.ArgumentParser(
        prog="zonealloc", description="Allocate blocks and show the heap layout."
    )
    parser.add_argument("sizes", nargs="*", type=int, help="sizes to allocate, in bytes")
    parser.add_argument("--page-size", type=int, default=None, help="page size in bytes")
    args = parser.parse_args(argv)
    try:
        heap = Heap(args.page_size)
        for size in args.sizes:
            heap.malloc(size)
    except (HeapError, ValueError) as exc:
        print(f"zonealloc: {exc}", file=sys.stderr)
        return 1
    show_alloc_mem(heap)
    return 0


if __name__ == "__main__":
    sys.exit(main())