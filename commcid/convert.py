from __future__ import annotations

from typing import Tuple

from .cid import Cid
from .commitment import cid_to_data_commitment_v1, data_commitment_v1_to_cid
from .piecemh import data_commitment_v1_to_piece_mh_cid, piece_mh_cid_to_data_commitment_v1


def convert_v1_cid_to_piece_mh_cid(v1_cid: Cid, unpadded_size: int) -> Cid:
    """Re-wrap a fil-commitment-unsealed CID as a piece multihash CID."""
    digest = cid_to_data_commitment_v1(v1_cid)
    return data_commitment_v1_to_piece_mh_cid(digest, unpadded_size)


def convert_piece_mh_cid_to_v1_cid(piece_cid: Cid) -> Tuple[Cid, int]:
    """Inverse of convert_v1_cid_to_piece_mh_cid; also returns the unpadded size."""
    digest, unpadded_size = piece_mh_cid_to_data_commitment_v1(piece_cid)
    return data_commitment_v1_to_cid(digest), unpadded_size
