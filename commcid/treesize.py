from __future__ import annotations

"""
Piece tree geometry.

A piece tree is a binary Merkle tree over 32-byte leaves. Raw data is fr32
expanded before it enters the tree: every 127 bytes become 128 bytes, so a
tree of height h holds (32 << h) padded bytes, i.e. (32 << h) * 127 / 128
unpadded bytes.

Fixture table (unpadded size -> height, padding):

    0, 1, 31      -> 0
    32            -> 1
    127           -> 2, 0
    127 * 4       -> 4, 0
    512           -> 5, 504
    32GiB         -> 31, 33822867456
    32GiB*127/128 -> 30, 0
    64GiB         -> 32, 67645734912
    64GiB*127/128 -> 31, 0

Fixture table (fr32 padded size -> height):

    0, 1, 31, 32 -> 0
    127, 128     -> 2
    129          -> 3
    512          -> 4
    32GiB        -> 30
    64GiB        -> 31
"""

from typing import Tuple

from .constants import MAX_UNPADDED_SIZE, MIN_UNPADDED_SIZE, NODE_SIZE
from .errors import InvalidSize


def _check_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be an int, got {type(size).__name__}")
    if size < 0:
        raise InvalidSize("unsupported size: negative")
    return size


def fr32_padded_size_to_v1_tree_height(size: int) -> int:
    """Height of the tree holding ``size`` bytes that are already fr32 padded."""
    size = _check_size(size)
    leaves = -(-size // NODE_SIZE)
    if leaves <= 1:
        return 0
    # ceil(log2(leaves))
    return (leaves - 1).bit_length()


def unpadded_size_to_v1_tree_height(size: int) -> int:
    """Height of the tree holding ``size`` bytes before fr32 expansion."""
    size = _check_size(size)
    if size > MAX_UNPADDED_SIZE:
        raise InvalidSize("unsupported size: too big")
    padded = -(-size * 128 // 127)
    return fr32_padded_size_to_v1_tree_height(padded)


def v1_tree_unpadded_capacity(height: int) -> int:
    """Unpadded bytes a tree of ``height`` holds once fully filled."""
    return (NODE_SIZE << height) * 127 // 128


def unpadded_size_to_v1_tree_height_and_padding(size: int) -> Tuple[int, int]:
    """Return ``(height, padding)`` for ``size`` unpadded bytes.

    ``padding`` is the number of unpadded bytes that must follow the data to
    fill the tree; it is 0 when the data fills the tree exactly.
    """
    size = _check_size(size)
    if size < MIN_UNPADDED_SIZE:
        raise InvalidSize("unsupported size: too small")
    height = unpadded_size_to_v1_tree_height(size)
    return height, v1_tree_unpadded_capacity(height) - size
