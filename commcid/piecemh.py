from __future__ import annotations

"""
Piece multihash CIDs.

The piece multihash (code fr32-sha256-trunc254-padbintree) carries enough to
recover the unpadded piece size next to the commitment:

    varint(padding) || u8(height) || digest[32]

34 to 42 bytes in total. The CID around it uses the raw codec; decoding
accepts any outer codec.
"""

from dataclasses import dataclass
from io import BytesIO
from typing import Tuple

import multihash
import varint

from .cid import Cid
from .commitment import check_commitment, decode_commitment_hash
from .constants import (
    CODEC_RAW,
    COMMITMENT_SIZE,
    FR32_SHA256_TRUNC254_PADDED_BINARY_TREE_CODE,
    MAX_UNPADDED_SIZE,
    MAX_VARINT_LEN,
    MIN_UNPADDED_SIZE,
)
from .errors import IncorrectHash, MalformedDigest
from .treesize import (
    unpadded_size_to_v1_tree_height,
    unpadded_size_to_v1_tree_height_and_padding,
    v1_tree_unpadded_capacity,
)


@dataclass(frozen=True)
class PiecePayload:
    padding: int
    height: int
    digest: bytes

    @classmethod
    def for_size(cls, digest: bytes, unpadded_size: int) -> "PiecePayload":
        digest = check_commitment(digest)
        height, padding = unpadded_size_to_v1_tree_height_and_padding(unpadded_size)
        return cls(padding=padding, height=height, digest=digest)

    @property
    def unpadded_size(self) -> int:
        return v1_tree_unpadded_capacity(self.height) - self.padding

    def pack(self) -> bytes:
        return varint.encode(self.padding) + bytes([self.height]) + self.digest

    @classmethod
    def unpack(cls, data: bytes) -> "PiecePayload":
        """Parse a packed payload; framing errors raise ValueError.

        Only the canonical ``(height, padding)`` pair for the size it encodes
        is accepted, so every accepted payload re-encodes to itself.
        """
        stream = BytesIO(data)
        try:
            padding = varint.decode_stream(stream)
        except (TypeError, EOFError) as e:
            raise ValueError(f"piece payload: bad padding varint: {e}") from e
        pos = stream.tell()
        if pos > MAX_VARINT_LEN:
            raise ValueError("piece payload: padding varint too long")
        remaining = len(data) - pos
        if remaining != 1 + COMMITMENT_SIZE:
            raise ValueError(f"piece payload: expected {1 + COMMITMENT_SIZE} bytes after padding, got {remaining}")
        payload = cls(padding=padding, height=data[pos], digest=bytes(data[pos + 1 :]))
        size = payload.unpadded_size
        if not MIN_UNPADDED_SIZE <= size <= MAX_UNPADDED_SIZE:
            raise ValueError(f"piece payload: height {payload.height} and padding {padding} give size {size}")
        if unpadded_size_to_v1_tree_height(size) != payload.height:
            raise ValueError(f"piece payload: height {payload.height} is not canonical for size {size}")
        return payload


def data_commitment_v1_to_piece_mh_cid(digest: bytes, unpadded_size: int) -> Cid:
    payload = PiecePayload.for_size(digest, unpadded_size)
    mh = multihash.encode(payload.pack(), FR32_SHA256_TRUNC254_PADDED_BINARY_TREE_CODE)
    return Cid.v1(CODEC_RAW, mh)


def piece_mh_cid_to_data_commitment_v1(cid: Cid) -> Tuple[bytes, int]:
    """Return ``(digest, unpadded_size)`` from a piece multihash CID."""
    decoded = decode_commitment_hash(cid)
    if decoded.code != FR32_SHA256_TRUNC254_PADDED_BINARY_TREE_CODE:
        raise IncorrectHash()
    try:
        payload = PiecePayload.unpack(decoded.digest)
    except ValueError as e:
        raise MalformedDigest(e) from e
    return payload.digest, payload.unpadded_size
