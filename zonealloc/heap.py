"""A zone-based memory allocator working on a simulated address space.

Requests are sorted into three classes. TINY (up to 64 bytes) and SMALL
(up to 2048 bytes) requests share zones sized to hold about a hundred
requests of their class. LARGE requests get a zone sized for the request
alone. Each zone is a run of chunks, every chunk preceded by a header. A
free chunk is split when a request is placed in it. Freeing merges a chunk
with the free chunks that follow it, and a zone is released once nothing
in it is allocated.

Addresses are plain integers. Every zone keeps its own bytes, so data can
be written to and read back from allocated chunks.
"""

from __future__ import annotations

import mmap
import operator
import threading
from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import List, Optional, Tuple

TINY_ALLOC = 64
SMALL_ALLOC = 2048
META_PAGE = 4096

CHUNK_HEADER = 40
ZONE_HEADER = 40
ZONE_CAPACITY = 100

_FIRST_ZONE_ADDRESS = 0x10000000
_INT_SIGN_BIT = 1 << 31
_INT_MASK = (1 << 32) - 1


class HeapError(Exception):
    """Raised when the allocator cannot honour a request."""


class ZoneType(IntEnum):
    """Size class of a zone and of the chunks in it."""

    TINY = 0
    SMALL = 1
    LARGE = 2


@dataclass
class Chunk:
    """A run of bytes inside a zone, preceded by its header."""

    addr: int
    size: int
    type: ZoneType
    free: bool = True

    @property
    def header(self) -> int:
        """Address of the chunk's header."""
        return self.addr - CHUNK_HEADER

    def end(self) -> int:
        """Address just past the chunk's last byte."""
        return self.addr + self.size


@dataclass
class Zone:
    """A mapped region holding chunks of a single size class."""

    base: int
    size: int
    type: ZoneType
    chunks: List[Chunk] = field(default_factory=list)
    full: bool = False
    idle: bool = True
    allocs: int = 0
    memory: Optional[bytearray] = field(default=None, repr=False, compare=False)

    def end(self) -> int:
        """Address just past the zone's last byte."""
        return self.base + self.size

    def contains(self, addr: int) -> bool:
        """True if *addr* lies strictly between the zone's start and end."""
        return self.base < addr < self.end()


def zone_type_for_size(size: int) -> ZoneType:
    """Size class of a request of *size* bytes."""
    if size <= TINY_ALLOC:
        return ZoneType.TINY
    if size <= SMALL_ALLOC:
        return ZoneType.SMALL
    return ZoneType.LARGE


def _check_page_size(page_size: int) -> int:
    page_size = operator.index(page_size)
    if page_size < 1:
        raise ValueError(f"page size must be positive, got {page_size}")
    return page_size


def zone_size(size: int, page_size: int = mmap.PAGESIZE) -> int:
    """Bytes to map for a zone that will receive a request of *size* bytes."""
    size = operator.index(size)
    page_size = _check_page_size(page_size)
    if size > SMALL_ALLOC:
        pages = (size + 2 * CHUNK_HEADER + ZONE_HEADER) // page_size
    else:
        largest = TINY_ALLOC if size <= TINY_ALLOC else SMALL_ALLOC
        pages = (
            (largest + CHUNK_HEADER) * ZONE_CAPACITY + ZONE_HEADER + CHUNK_HEADER
        ) // page_size
    return (pages + 1) * page_size


def zone_size_for_type(zone_type: ZoneType, page_size: int = mmap.PAGESIZE) -> int:
    """Bytes of chunk space for a zone of *zone_type*; 0 for LARGE zones."""
    page_size = _check_page_size(page_size)
    zone_type = ZoneType(zone_type)
    if zone_type is ZoneType.LARGE:
        return 0
    largest = TINY_ALLOC if zone_type is ZoneType.TINY else SMALL_ALLOC
    pages = (largest + CHUNK_HEADER) * ZONE_CAPACITY // page_size
    return (pages + 1) * page_size


class Heap:
    """A thread-safe allocator handing out addresses from its own zones."""

    def __init__(self, page_size: Optional[int] = None) -> None:
        self.page_size = _check_page_size(mmap.PAGESIZE if page_size is None else page_size)
        self._zones: List[Zone] = []
        self._next_base = _FIRST_ZONE_ADDRESS
        self._lock = threading.Lock()

    # -- public interface -------------------------------------------------

    def malloc(self, size: int) -> int:
        """Allocate *size* bytes and return the address of the first one."""
        with self._lock:
            return self._allocate(size)

    def free(self, addr: Optional[int]) -> None:
        """Release the chunk starting at *addr*; unknown addresses are ignored."""
        with self._lock:
            self._free(addr)

    def realloc(self, addr: Optional[int], size: int) -> int:
        """Resize the chunk at *addr* to *size* bytes, moving it if needed.

        With *addr* None this is the same as malloc. An address that does
        not start a chunk raises HeapError.
        """
        with self._lock:
            if addr is None:
                return self._allocate(size)
            found = self._locate(addr)
            if found is None:
                raise HeapError(f"no chunk starts at address {addr:#x}")
            zone, index = found
            return self._reallocate(zone, index, size)

    def find_chunk(self, addr: int) -> Optional[Chunk]:
        """A copy of the chunk starting at *addr*, free or not, or None."""
        with self._lock:
            found = self._locate(addr)
            if found is None:
                return None
            zone, index = found
            return replace(zone.chunks[index])

    def read(self, addr: int, size: int) -> bytes:
        """The *size* bytes at *addr*, which must lie in one allocated chunk."""
        size = operator.index(size)
        with self._lock:
            zone, offset = self._span(addr, size)
            return bytes(zone.memory[offset : offset + size])

    def write(self, addr: int, data: bytes) -> None:
        """Store *data* at *addr*, which must lie in one allocated chunk."""
        data = bytes(data)
        with self._lock:
            zone, offset = self._span(addr, len(data))
            zone.memory[offset : offset + len(data)] = data

    def zones(self) -> List[Zone]:
        """Copies of the mapped zones, in the order they were created."""
        with self._lock:
            return [
                replace(zone, chunks=[replace(chunk) for chunk in zone.chunks])
                for zone in self._zones
            ]

    # -- internals --------------------------------------------------------

    def _new_zone(self, size: int) -> Zone:
        zone_type = zone_type_for_size(size)
        length = zone_size(size, self.page_size)
        base = self._next_base
        self._next_base += length
        first = Chunk(
            addr=base + ZONE_HEADER + CHUNK_HEADER,
            size=length - CHUNK_HEADER - ZONE_HEADER,
            type=zone_type,
        )
        zone = Zone(base=base, size=length, type=zone_type, chunks=[first],
                    memory=bytearray(length))
        self._zones.append(zone)
        return zone

    @staticmethod
    def _try_place(zone: Zone, index: int, size: int) -> Optional[Chunk]:
        chunk = zone.chunks[index]
        if not chunk.free:
            return None
        if chunk.size == size:
            chunk.free = False
        elif chunk.size > size + CHUNK_HEADER + 1:
            rest = Chunk(
                addr=chunk.addr + size + CHUNK_HEADER,
                size=chunk.size - CHUNK_HEADER - size,
                type=chunk.type,
            )
            chunk.size = size
            chunk.free = False
            zone.chunks.insert(index + 1, rest)
        else:
            return None
        zone.idle = False
        zone.allocs += 1
        return chunk

    def _place(self, zone: Zone, size: int) -> Chunk:
        fresh = False
        while True:
            for index in range(len(zone.chunks)):
                placed = self._try_place(zone, index, size)
                if placed is not None:
                    return placed
            if fresh:
                raise HeapError(f"a new zone cannot hold a request of {size} bytes")
            zone.full = True
            zone = self._new_zone(size)
            fresh = True

    def _allocate(self, size: int) -> int:
        size = operator.index(size)
        if size < 0 or (size & _INT_MASK) & _INT_SIGN_BIT:
            raise HeapError(f"cannot allocate {size} bytes")
        if size == 0:
            size = 1
        zone_type = zone_type_for_size(size)
        zone = next(
            (z for z in self._zones if not z.full and z.type is zone_type), None
        )
        if zone is None:
            zone = self._new_zone(size)
        return self._place(zone, size).addr

    def _locate(self, addr: int) -> Optional[Tuple[Zone, int]]:
        for zone in self._zones:
            if zone.contains(addr):
                for index, chunk in enumerate(zone.chunks):
                    if chunk.addr == addr:
                        return zone, index
        return None

    @staticmethod
    def _release(zone: Zone, index: int) -> None:
        chunk = zone.chunks[index]
        if not chunk.free:
            chunk.free = True
            zone.allocs -= 1
        while index + 1 < len(zone.chunks) and zone.chunks[index + 1].free:
            following = zone.chunks.pop(index + 1)
            chunk.size += following.size + CHUNK_HEADER
        if zone.allocs == 0:
            zone.idle = True

    def _free(self, addr: Optional[int]) -> None:
        if addr is None:
            return
        position = 0
        while position < len(self._zones):
            zone = self._zones[position]
            if zone.contains(addr):
                for index, chunk in enumerate(zone.chunks):
                    if chunk.addr == addr:
                        self._release(zone, index)
                        break
            if zone.idle:
                del self._zones[position]
                if position == 0:
                    # Unmapping the first zone ends the walk.
                    return
            else:
                position += 1

    def _reallocate(self, zone: Zone, index: int, size: int) -> int:
        size = operator.index(size)
        chunk = zone.chunks[index]
        following = zone.chunks[index + 1] if index + 1 < len(zone.chunks) else None
        if (
            following is not None
            and following.free
            and 0 < size <= chunk.size + following.size
        ):
            growth = size - chunk.size
            chunk.size = size
            following.addr = chunk.addr + size + CHUNK_HEADER
            following.size -= growth
            return chunk.addr

        new_addr = self._allocate(size)
        offset = chunk.addr - zone.base
        data = bytes(zone.memory[offset : offset + chunk.size])
        new_zone, new_index = self._locate(new_addr)
        target = new_zone.chunks[new_index]
        count = min(len(data), target.size)
        new_offset = new_addr - new_zone.base
        new_zone.memory[new_offset : new_offset + count] = data[:count]
        self._free(chunk.addr)
        return new_addr

    def _span(self, addr: int, length: int) -> Tuple[Zone, int]:
        addr = operator.index(addr)
        if length < 0:
            raise ValueError(f"length must not be negative, got {length}")
        for zone in self._zones:
            if zone.base <= addr < zone.end():
                for chunk in zone.chunks:
                    if not chunk.free and chunk.addr <= addr and addr + length <= chunk.end():
                        return zone, addr - zone.base
        raise HeapError(f"{length} bytes at {addr:#x} are not inside an allocated chunk")