from __future__ import annotations

"""
Commitment <-> CIDv1 codec.

Each commitment kind fixes a CID codec and a multihash code:

- data / piece commitment: fil-commitment-unsealed, sha2-256-trunc254-padded
- replica commitment: fil-commitment-sealed, poseidon-bls12_381-a2-fc1

Decoding checks the CID codec first, then the multihash framing, then the
multihash code. The order decides which error a bad CID reports.
"""

from dataclasses import dataclass
from typing import Dict, Tuple

import multihash
import varint

from .cid import Cid, decode_multihash
from .constants import (
    COMMITMENT_SIZE,
    FIL_COMMITMENT_SEALED,
    FIL_COMMITMENT_UNSEALED,
    POSEIDON_BLS12_381_A1_FC1,
    SHA2_256_TRUNC254_PADDED,
)
from .errors import IncorrectCodec, IncorrectHash, InvalidLength, MalformedDigest


def check_commitment(commitment: bytes) -> bytes:
    if len(commitment) != COMMITMENT_SIZE:
        raise InvalidLength(len(commitment))
    return bytes(commitment)


def _is_unknown_hash_code(mh: bytes) -> bool:
    try:
        code = varint.decode_bytes(mh)
    except (TypeError, EOFError, ValueError):
        return False
    return not multihash.is_valid_code(code)


def decode_commitment_hash(cid: Cid):
    """Decode the CID's multihash, mapping library failures to domain errors.

    A code missing from the multihash table cannot be decoded by the library
    and cannot match any commitment kind, so it reports IncorrectHash; every
    other decode failure is MalformedDigest.
    """
    try:
        return decode_multihash(cid)
    except ValueError as e:
        if _is_unknown_hash_code(cid.multihash):
            raise IncorrectHash() from e
        raise MalformedDigest(e) from e


@dataclass(frozen=True)
class CommitmentKind:
    name: str
    codec: int
    hash_code: int

    def to_cid(self, commitment: bytes) -> Cid:
        commitment = check_commitment(commitment)
        return Cid.v1(self.codec, multihash.encode(commitment, self.hash_code))

    def from_cid(self, cid: Cid) -> bytes:
        if cid.codec != self.codec:
            raise IncorrectCodec()
        decoded = decode_commitment_hash(cid)
        if decoded.code != self.hash_code:
            raise IncorrectHash()
        # Length is whatever the multihash declares; callers needing 32 check it.
        return decoded.digest


DATA = CommitmentKind("data", FIL_COMMITMENT_UNSEALED, SHA2_256_TRUNC254_PADDED)
PIECE = CommitmentKind("piece", FIL_COMMITMENT_UNSEALED, SHA2_256_TRUNC254_PADDED)
REPLICA = CommitmentKind("replica", FIL_COMMITMENT_SEALED, POSEIDON_BLS12_381_A1_FC1)

# Data and piece commitments share a codec; the codec maps to the piece kind.
_KINDS_BY_CODEC: Dict[int, CommitmentKind] = {
    FIL_COMMITMENT_UNSEALED: PIECE,
    FIL_COMMITMENT_SEALED: REPLICA,
}


def kind_for_codec(codec: int) -> CommitmentKind:
    kind = _KINDS_BY_CODEC.get(codec)
    if kind is None:
        raise IncorrectCodec()
    return kind


def validate_cid_segments(codec: int, hash_code: int, commitment: bytes) -> None:
    """Check that a codec, multihash code and commitment form a valid triple.

    Raises IncorrectCodec for a non-Filecoin codec, IncorrectHash when the
    hash code does not pair with the codec, and InvalidLength when the
    commitment is not 32 bytes.
    """
    kind = kind_for_codec(codec)
    if hash_code != kind.hash_code:
        raise IncorrectHash()
    check_commitment(commitment)


def commitment_to_cid(codec: int, hash_code: int, commitment: bytes) -> Cid:
    validate_cid_segments(codec, hash_code, commitment)
    return Cid.v1(codec, multihash.encode(bytes(commitment), hash_code))


def cid_to_commitment(cid: Cid) -> Tuple[int, int, bytes]:
    """Split a commitment CID into ``(codec, hash_code, commitment)``."""
    decoded = decode_commitment_hash(cid)
    validate_cid_segments(cid.codec, decoded.code, decoded.digest)
    return cid.codec, decoded.code, decoded.digest


def data_commitment_v1_to_cid(commitment: bytes) -> Cid:
    return DATA.to_cid(commitment)


def cid_to_data_commitment_v1(cid: Cid) -> bytes:
    return DATA.from_cid(cid)


def piece_commitment_v1_to_cid(commitment: bytes) -> Cid:
    return PIECE.to_cid(commitment)


def cid_to_piece_commitment_v1(cid: Cid) -> bytes:
    return PIECE.from_cid(cid)


def replica_commitment_v1_to_cid(commitment: bytes) -> Cid:
    return REPLICA.to_cid(commitment)


def cid_to_replica_commitment_v1(cid: Cid) -> bytes:
    return REPLICA.from_cid(cid)
