from __future__ import annotations

from dataclasses import dataclass

import libipld
import multihash
import varint

from .constants import (
    CID_V1,
    MULTIBASE_BASE16,
    MULTIBASE_BASE16_UPPER,
    MULTIBASE_BASE32,
    MULTIBASE_BASE32_UPPER,
)
from .errors import CidFormatError


_BASES = {
    "base32": MULTIBASE_BASE32,
    "base16": MULTIBASE_BASE16,
}

# multibase prefix -> str method the body must be a fixed point of
_CASE_RULES = {
    MULTIBASE_BASE32: str.lower,
    MULTIBASE_BASE32_UPPER: str.upper,
    MULTIBASE_BASE16: str.lower,
    MULTIBASE_BASE16_UPPER: str.upper,
}


@dataclass(frozen=True)
class Cid:
    """A version 1 content identifier.

    The multihash is held as raw bytes and is not validated on construction;
    the commitment codecs decide how (and whether) to interpret it.
    """

    version: int
    codec: int
    multihash: bytes

    @classmethod
    def v1(cls, codec: int, multihash: bytes) -> "Cid":
        return cls(version=CID_V1, codec=codec, multihash=bytes(multihash))

    def to_bytes(self) -> bytes:
        return varint.encode(self.version) + varint.encode(self.codec) + self.multihash

    @classmethod
    def from_bytes(cls, data: bytes) -> "Cid":
        data = bytes(data)
        try:
            info = libipld.decode_cid(data)
        except ValueError as e:
            raise CidFormatError(f"malformed CID bytes: {e}") from e
        if info["version"] != CID_V1:
            raise CidFormatError(f"unsupported CID version {info['version']}")
        prefix = varint.encode(info["version"]) + varint.encode(info["codec"])
        if not data.startswith(prefix):
            raise CidFormatError("CID prefix is not minimally encoded")
        mh = data[len(prefix) :]
        mh_info = info["hash"]
        digest = bytes(mh_info["digest"])
        if len(digest) != mh_info["size"]:
            raise CidFormatError(f"truncated multihash digest: {len(digest)} of {mh_info['size']} bytes")
        expected = varint.encode(mh_info["code"]) + varint.encode(mh_info["size"]) + digest
        if mh != expected:
            raise CidFormatError(f"trailing bytes after CID: {len(mh) - len(expected)}")
        return cls(version=info["version"], codec=info["codec"], multihash=mh)

    def encode(self, base: str = "base32") -> str:
        prefix = _BASES.get(base)
        if prefix is None:
            raise ValueError(f"unsupported multibase: {base}")
        raw = self.to_bytes()
        if prefix == MULTIBASE_BASE32:
            return libipld.encode_cid(raw)
        return libipld.encode_multibase(prefix, raw)

    @classmethod
    def decode(cls, text: str) -> "Cid":
        if not text:
            raise CidFormatError("empty CID string")
        prefix, body = text[0], text[1:]
        fold = _CASE_RULES.get(prefix)
        if fold is None:
            raise CidFormatError(f"unsupported multibase prefix {prefix!r}")
        if fold(body) != body:
            raise CidFormatError(f"mixed-case body for multibase prefix {prefix!r}")
        try:
            _base, raw = libipld.decode_multibase(text)
        except ValueError as e:
            raise CidFormatError(f"invalid multibase text: {e}") from e
        return cls.from_bytes(raw)

    def __str__(self) -> str:
        return self.encode()


def decode_multihash(cid: Cid):
    """Decode the multihash of ``cid`` with py-multihash.

    Returns the library's ``Multihash(code, name, length, digest)`` tuple.
    Framing failures, including bytes after the declared digest, raise
    ValueError.
    """
    try:
        decoded = multihash.decode(cid.multihash)
    except (TypeError, EOFError) as e:
        raise ValueError(f"multihash: {e}") from e
    if multihash.encode(decoded.digest, decoded.code) != cid.multihash:
        raise ValueError("multihash: length inconsistent with digest")
    return decoded


def parse_cid(text: str) -> Cid:
    return Cid.decode(text)
