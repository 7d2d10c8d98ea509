import pytest

from dungeonterm.memory import (
    HEADER_SIZE,
    MIN_MEMORY_BLOCK_SIZE,
    MIN_MEMORY_POOL_SIZE,
    MemoryPool,
    MemoryPoolError,
)


def _accounted(pool):
    return sum(HEADER_SIZE + b.size for b in pool.blocks())


def test_small_size_is_raised_to_minimum():
    pool = MemoryPool(10)
    assert pool.pool_size == MIN_MEMORY_POOL_SIZE
    blocks = list(pool.blocks())
    assert len(blocks) == 1
    assert blocks[0].size == MIN_MEMORY_POOL_SIZE - HEADER_SIZE
    assert not blocks[0].active


def test_alloc_splits_block():
    pool = MemoryPool()
    ptr = pool.alloc(100)
    assert ptr == HEADER_SIZE
    blocks = list(pool.blocks())
    assert len(blocks) == 2
    assert blocks[0].active and blocks[0].size == 100
    assert not blocks[1].active
    assert blocks[1].offset == ptr + 100
    assert _accounted(pool) == pool.pool_size


def test_alloc_uses_whole_block_when_remainder_small():
    pool = MemoryPool()
    whole = next(pool.blocks()).size
    pool.alloc(whole - MIN_MEMORY_BLOCK_SIZE)
    blocks = list(pool.blocks())
    assert len(blocks) == 1
    assert blocks[0].size == whole
    assert blocks[0].active


def test_alloc_too_large_raises():
    pool = MemoryPool()
    with pytest.raises(MemoryPoolError):
        pool.alloc(MIN_MEMORY_POOL_SIZE)


def test_alloc_negative_raises():
    with pytest.raises(ValueError):
        MemoryPool().alloc(-1)


def test_free_merges_blocks():
    pool = MemoryPool()
    a = pool.alloc(64)
    b = pool.alloc(128)
    pool.free(a)
    assert len(list(pool.blocks())) == 3
    pool.free(b)
    blocks = list(pool.blocks())
    assert len(blocks) == 1
    assert blocks[0].size == pool.pool_size - HEADER_SIZE


def test_freed_space_is_reused_first_fit():
    pool = MemoryPool()
    a = pool.alloc(64)
    pool.alloc(64)
    pool.free(a)
    assert pool.alloc(32) == a


def test_free_unknown_pointer_raises():
    pool = MemoryPool()
    pool.alloc(64)
    with pytest.raises(MemoryPoolError):
        pool.free(HEADER_SIZE + 1)
    with pytest.raises(MemoryPoolError):
        pool.free(pool.pool_size + 5)


def test_view_round_trip():
    pool = MemoryPool()
    ptr = pool.alloc(5)
    view = pool.view(ptr)
    view[:] = b"hello"
    assert bytes(pool.view(ptr)) == b"hello"


def test_realloc_copies_and_zeroes():
    pool = MemoryPool()
    ptr = pool.alloc(4)
    pool.view(ptr)[:] = b"abcd"
    new_ptr = pool.realloc(ptr, 8)
    assert new_ptr != ptr
    assert bytes(pool.view(new_ptr)) == b"abcd" + bytes(4)
    with pytest.raises(MemoryPoolError):
        pool.view(ptr)
    assert _accounted(pool) == pool.pool_size


def test_realloc_smaller_returns_none():
    pool = MemoryPool()
    ptr = pool.alloc(16)
    assert pool.realloc(ptr, 8) is None
    assert next(pool.blocks()).active


def test_realloc_negative_raises():
    pool = MemoryPool()
    ptr = pool.alloc(16)
    with pytest.raises(ValueError):
        pool.realloc(ptr, -1)


def test_closed_pool_rejects_use():
    with MemoryPool() as pool:
        pool.alloc(8)
    with pytest.raises(MemoryPoolError):
        pool.alloc(8)
    with pytest.raises(MemoryPoolError):
        pool.close()