"""A fixed-size memory pool with first-fit allocation and block coalescing."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

STANDARD_MEMORY_POOL_SIZE = 8 * 1024 * 1024
MIN_MEMORY_POOL_SIZE = 1024 * 1024
# Bookkeeping bytes reserved in front of every block's user data.
HEADER_SIZE = 24
MIN_MEMORY_BLOCK_SIZE = HEADER_SIZE + 16


class MemoryPoolError(Exception):
    """Raised when the pool cannot satisfy a request or is given a bad pointer."""


@dataclass
class MemoryBlock:
    """A block in the pool: ``size`` bytes of user data after a header at ``offset``."""

    offset: int
    size: int
    active: bool = False

    @property
    def data_offset(self) -> int:
        return self.offset + HEADER_SIZE


class MemoryPool:
    """A byte pool handing out integer offsets ("pointers") to its user data areas."""

    def __init__(self, size: int = MIN_MEMORY_POOL_SIZE) -> None:
        size = max(size, MIN_MEMORY_POOL_SIZE)
        self._pool_size = size
        self._memory: bytearray | None = bytearray(size)
        self._blocks: list[MemoryBlock] = [MemoryBlock(0, size - HEADER_SIZE)]

    @property
    def pool_size(self) -> int:
        return self._pool_size

    def _require_open(self) -> bytearray:
        if self._memory is None:
            raise MemoryPoolError("memory pool is closed")
        return self._memory

    def _find_block(self, ptr: int) -> MemoryBlock:
        self._require_open()
        if not HEADER_SIZE <= ptr < self._pool_size:
            raise MemoryPoolError("pointer is not in the memory pool")
        for block in self._blocks:
            if block.data_offset == ptr:
                return block
        raise MemoryPoolError("pointer does not start a block of the memory pool")

    def alloc(self, size: int) -> int:
        """Reserve ``size`` bytes and return the offset of the data area."""
        self._require_open()
        if size < 0:
            raise ValueError("size must not be negative")
        for index, block in enumerate(self._blocks):
            if block.active or block.size < size:
                continue
            remaining = block.size - size
            if remaining > MIN_MEMORY_BLOCK_SIZE:
                new_block = MemoryBlock(block.data_offset + size, remaining - HEADER_SIZE)
                block.size = size
                self._blocks.insert(index + 1, new_block)
            block.active = True
            return block.data_offset
        raise MemoryPoolError("no free block found for allocation")

    def free(self, ptr: int) -> None:
        """Release the block at ``ptr`` and merge neighbouring free blocks."""
        self._find_block(ptr).active = False
        merged: list[MemoryBlock] = []
        for block in self._blocks:
            if merged and not merged[-1].active and not block.active:
                merged[-1].size += HEADER_SIZE + block.size
            else:
                merged.append(block)
        self._blocks = merged

    def realloc(self, ptr: int, new_size: int) -> int | None:
        """Move the data at ``ptr`` into a block of ``new_size`` bytes.

        Returns the new pointer, or None when the current block is already
        large enough. Added bytes are zeroed and the old block is freed.
        """
        if new_size < 0:
            raise ValueError("new size must not be negative")
        block = self._find_block(ptr)
        if block.size >= new_size:
            return None
        old_size = block.size
        new_ptr = self.alloc(new_size)
        memory = self._require_open()
        memory[new_ptr:new_ptr + old_size] = memory[ptr:ptr + old_size]
        memory[new_ptr + old_size:new_ptr + new_size] = bytes(new_size - old_size)
        self.free(ptr)
        return new_ptr

    def view(self, ptr: int) -> memoryview:
        """Return a writable view of the data area of the block at ``ptr``."""
        block = self._find_block(ptr)
        if not block.active:
            raise MemoryPoolError("block is not allocated")
        memory = self._require_open()
        return memoryview(memory)[ptr:ptr + block.size]

    def blocks(self) -> Iterator[MemoryBlock]:
        """Yield copies of the pool's blocks in address order."""
        self._require_open()
        for block in self._blocks:
            yield MemoryBlock(block.offset, block.size, block.active)

    def close(self) -> None:
        """Release the pool's memory; the pool can no longer be used."""
        self._require_open()
        self._memory = None
        self._blocks = []

    def __enter__(self) -> MemoryPool:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._memory is not None:
            self.close()