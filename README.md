# zonealloc

`zonealloc` models a zone-based memory allocator in pure Python. Requests are
sorted by size into three kinds of zone, each zone is carved into chunks, and
freed chunks are merged with the free chunks that follow them. Everything
happens inside a simulated address space: addresses are plain integers and
each zone keeps its own bytes, so you can inspect zones, chunks and their
contents without touching real memory.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## How allocations are placed

Every request is classified with `zonealloc.heap.zone_type_for_size`, which
returns a `ZoneType`:

| Zone type | Request size          |
|-----------|-----------------------|
| `TINY`    | up to 64 bytes        |
| `SMALL`   | up to 2048 bytes      |
| `LARGE`   | anything bigger       |

Tiny and small zones are sized by `zone_size` to hold a hundred requests of
their largest size plus headers, rounded up to whole pages. A large request
gets a zone sized for it alone. `zone_size_for_type` gives the chunk space of
a tiny or small zone, and 0 for `LARGE`. The page size defaults to the
system's page size.

A request of zero bytes is treated as one byte. A new request goes to the
first zone of its type that is not marked full; when no free chunk there can
take it, that zone is marked full and a new zone is created. A zone in which
nothing is allocated any more is released.

## Using the heap

```python
from zonealloc.heap import Heap

heap = Heap(page_size=4096)

addr = heap.malloc(32)          # address of a 32-byte chunk in a TINY zone
heap.write(addr, b"hello")
print(heap.read(addr, 5))       # b'hello'

addr = heap.realloc(addr, 500)  # stays in place when the next chunk is free
                                # and the two together are large enough,
                                # otherwise the data moves to a new chunk
heap.free(addr)
```

- `Heap.malloc(size)` returns an address; a negative size, or one too large
  for a 32-bit signed count, raises `HeapError`.
- `Heap.free(addr)` releases a chunk; `None` and unknown addresses are
  ignored.
- `Heap.realloc(addr, size)` behaves like `malloc` when `addr` is `None`, and
  raises `HeapError` when no chunk starts at `addr`.
- `Heap.read(addr, size)` and `Heap.write(addr, data)` work only on bytes that
  lie inside one allocated chunk, and raise `HeapError` otherwise.
- `Heap.find_chunk(addr)` returns a copy of the chunk starting at `addr`,
  free or not, or `None`.
- `Heap.zones()` returns copies of the current zones in creation order.

Each `Zone` and `Chunk` knows its `end()`, and `Zone.contains(addr)` tells
whether an address lies strictly inside the zone. The heap is guarded by a
lock, so it can be shared between threads.

## Reporting

`zonealloc.report.format_alloc_mem(heap)` builds a listing of the live
allocations. For each zone type present it prints the address of the first
zone of that type, then one `start - end : size` line per allocated chunk,
and it ends with `Total : N octets`. `show_alloc_mem(heap, stream)` writes the
listing to a stream, standard output by default.

From the command line:

```
zonealloc-show 10 100 5000 --page-size 4096
```

allocates the given sizes in a fresh heap and prints its listing. Both the
sizes and `--page-size` are optional; with no sizes it prints an empty
listing.

## Helpers

The package also ships small utilities:

- `zonealloc.charclass`: ASCII tests and case conversion (`is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`).
- `zonealloc.numfmt`: `parse_int` (C-style, wrapping to 32 bits),
  `format_int`, `to_base` with any digit alphabet, and `has_repeated_chars`.
- `zonealloc.basefmt`: `to_base_unsigned` and `format_unsigned` for
  fixed-width unsigned values.
- `zonealloc.textops`: searching, comparing with C string rules, joining,
  `bounded_concat`, `substring` and character mapping.
- `zonealloc.textsplit`: `split_words`, `word_count`, `trim`,
  `squeeze_blanks`, `split_at`, `copy_table`, `table_size`.
- `zonealloc.linkedlist`: a singly linked `LinkedList` of `Node`s.
- `zonealloc.linereader`: `LineReader`, which reads a text or binary stream
  line by line through a fixed-size buffer.

## What it does not do

The allocator never hands out real memory and cannot replace Python's or the
system's allocator; it only models one. The package has no byte-buffer
helpers or console printing helpers beyond what is listed above.