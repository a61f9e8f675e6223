# CID version
CID_V1 = 1

# CID content codecs (multicodec table)
CODEC_RAW = 0x55
CODEC_DAG_CBOR = 0x71
FIL_COMMITMENT_UNSEALED = 0xF101
FIL_COMMITMENT_SEALED = 0xF102

# Multihash codes
SHA2_256 = 0x12
SHA2_256_TRUNC254_PADDED = 0x1012
POSEIDON_BLS12_381_A1_FC1 = 0xB401
FR32_SHA256_TRUNC254_PADDED_BINARY_TREE_CODE = 0x1011


# Commitment and tree geometry
COMMITMENT_SIZE = 32
NODE_SIZE = 32  # bytes per tree leaf
MIN_UNPADDED_SIZE = 127  # one fr32 quad before expansion
MAX_UNPADDED_SIZE = (2**64 - 1) // 128  # largest size whose fr32 expansion fits a u64

# Padding varints are capped at 63 bits, 9 bytes on the wire
MAX_VARINT_LEN = 9

# Multibase prefixes
MULTIBASE_BASE32 = "b"
MULTIBASE_BASE32_UPPER = "B"
MULTIBASE_BASE16 = "f"
MULTIBASE_BASE16_UPPER = "F"
