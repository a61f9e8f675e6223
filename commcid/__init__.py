"""
commcid: Filecoin commitment CIDs.

Converts 32-byte commitment digests (Merkle roots) to and from content
identifiers:

- fil-commitment-unsealed / fil-commitment-sealed CIDv1 for data, piece and
  replica commitments
- piece multihash CIDs (fr32-sha256-trunc254-padbintree), which also carry the
  tree height and padding so the unpadded piece size can be recovered
- conversion between the two piece CID forms

Computing the commitments themselves is out of scope.
"""

__version__ = "0.1"

from .cid import Cid, parse_cid
from .commitment import (
    DATA,
    PIECE,
    REPLICA,
    CommitmentKind,
    cid_to_commitment,
    cid_to_data_commitment_v1,
    cid_to_piece_commitment_v1,
    cid_to_replica_commitment_v1,
    commitment_to_cid,
    data_commitment_v1_to_cid,
    piece_commitment_v1_to_cid,
    replica_commitment_v1_to_cid,
    validate_cid_segments,
)
from .convert import convert_piece_mh_cid_to_v1_cid, convert_v1_cid_to_piece_mh_cid
from .errors import (
    CidFormatError,
    CommCidError,
    IncorrectCodec,
    IncorrectHash,
    InvalidLength,
    InvalidSize,
    MalformedDigest,
)
from .piecemh import PiecePayload, data_commitment_v1_to_piece_mh_cid, piece_mh_cid_to_data_commitment_v1
from .treesize import (
    fr32_padded_size_to_v1_tree_height,
    unpadded_size_to_v1_tree_height,
    unpadded_size_to_v1_tree_height_and_padding,
)

__all__ = [
    "constants",
    "Cid",
    "parse_cid",
    "CommitmentKind",
    "DATA",
    "PIECE",
    "REPLICA",
    "data_commitment_v1_to_cid",
    "cid_to_data_commitment_v1",
    "piece_commitment_v1_to_cid",
    "cid_to_piece_commitment_v1",
    "replica_commitment_v1_to_cid",
    "cid_to_replica_commitment_v1",
    "commitment_to_cid",
    "cid_to_commitment",
    "validate_cid_segments",
    "fr32_padded_size_to_v1_tree_height",
    "unpadded_size_to_v1_tree_height",
    "unpadded_size_to_v1_tree_height_and_padding",
    "PiecePayload",
    "data_commitment_v1_to_piece_mh_cid",
    "piece_mh_cid_to_data_commitment_v1",
    "convert_v1_cid_to_piece_mh_cid",
    "convert_piece_mh_cid_to_v1_cid",
    "CommCidError",
    "InvalidLength",
    "InvalidSize",
    "IncorrectCodec",
    "IncorrectHash",
    "MalformedDigest",
    "CidFormatError",
]
