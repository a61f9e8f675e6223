from __future__ import annotations

import os
import unittest

import multihash
import varint

from commcid.cid import Cid, decode_multihash, parse_cid
from commcid.constants import CODEC_RAW, FIL_COMMITMENT_UNSEALED, SHA2_256, SHA2_256_TRUNC254_PADDED
from commcid.errors import CidFormatError

UNSEALED_TEXT = "baga6ea4seaqes3nobte6ezpp4wqan2age2s5yxcatzotcvobhgcmv5wi2xh5mbi"


class CidBytesTests(unittest.TestCase):
    def test_bytes_roundtrip(self):
        c = Cid.v1(FIL_COMMITMENT_UNSEALED, multihash.encode(os.urandom(32), SHA2_256_TRUNC254_PADDED))
        raw = c.to_bytes()
        self.assertEqual(raw[:4], b"\x01\x81\xe2\x03")
        self.assertEqual(Cid.from_bytes(raw), c)

    def test_rejects_malformed_bytes(self):
        good = Cid.v1(CODEC_RAW, multihash.encode(b"\x00" * 32, SHA2_256)).to_bytes()
        for name, raw in {
            "version-0": b"\x00" + good[1:],
            "truncated": good[:-1],
            "trailing": good + b"\x00",
            "empty": b"",
        }.items():
            with self.subTest(name):
                with self.assertRaises(CidFormatError):
                    Cid.from_bytes(raw)


class CidTextTests(unittest.TestCase):
    def test_base32_roundtrip(self):
        c = parse_cid(UNSEALED_TEXT)
        self.assertEqual(c.version, 1)
        self.assertEqual(c.codec, FIL_COMMITMENT_UNSEALED)
        self.assertEqual(str(c), UNSEALED_TEXT)
        self.assertEqual(c.encode("base32"), UNSEALED_TEXT)

    def test_upper_case_base32(self):
        self.assertEqual(Cid.decode(UNSEALED_TEXT.upper()), parse_cid(UNSEALED_TEXT))

    def test_base16(self):
        c = parse_cid(UNSEALED_TEXT)
        hex_text = c.encode("base16")
        self.assertEqual(hex_text, "f" + c.to_bytes().hex())
        self.assertEqual(Cid.decode(hex_text), c)
        self.assertEqual(Cid.decode("F" + hex_text[1:].upper()), c)

    def test_rejects_mixed_case_body(self):
        mixed = "b" + UNSEALED_TEXT[1:5].upper() + UNSEALED_TEXT[5:]
        for text in (mixed, "B" + UNSEALED_TEXT[1:], "f" + parse_cid(UNSEALED_TEXT).to_bytes().hex().upper()):
            with self.subTest(text=text):
                with self.assertRaises(CidFormatError):
                    parse_cid(text)

    def test_unsupported_base(self):
        c = Cid.v1(CODEC_RAW, multihash.encode(b"\x00" * 32, SHA2_256))
        with self.assertRaises(ValueError):
            c.encode("base58btc")

    def test_rejects_malformed_text(self):
        for text in ("", "zQmSomething", "b!!!", "fzz"):
            with self.subTest(text=text):
                with self.assertRaises(CidFormatError):
                    parse_cid(text)


class DecodeMultihashTests(unittest.TestCase):
    def test_decodes_digest(self):
        digest = os.urandom(32)
        decoded = decode_multihash(Cid.v1(CODEC_RAW, multihash.encode(digest, SHA2_256_TRUNC254_PADDED)))
        self.assertEqual((decoded.code, decoded.length, decoded.digest), (SHA2_256_TRUNC254_PADDED, 32, digest))

    def test_rejects_inconsistent_length(self):
        mh = multihash.encode(b"\x01" * 32, SHA2_256)
        for bad in (mh[:-1], mh + b"\x00", b"\x12", varint.encode(SHA2_256) + b"\x80"):
            with self.subTest(len=len(bad)):
                with self.assertRaises(ValueError):
                    decode_multihash(Cid.v1(CODEC_RAW, bad))


if __name__ == "__main__":
    unittest.main()
