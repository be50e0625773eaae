from __future__ import annotations

import dataclasses
import hashlib
import unittest

from frodomatrix.codec import counter_block, matrix_digest, pack_matrix, parse_u16le, u16le
from frodomatrix.errors import InvalidParameter, InvalidSeedLength
from frodomatrix.generator import CipherExpansionGenerator, HashExpansionGenerator
from frodomatrix.params import FRODOKEM_640, PARAMETER_SETS, MatrixParams, get_parameter_set


class CodecTests(unittest.TestCase):
    def test_u16le_is_little_endian(self):
        self.assertEqual(u16le(0), b"\x00\x00")
        self.assertEqual(u16le(1), b"\x01\x00")
        self.assertEqual(u16le(0x1234), b"\x34\x12")
        self.assertEqual(u16le(0xFFFF), b"\xff\xff")
        for bad in (-1, 0x10000):
            with self.assertRaises(ValueError):
                u16le(bad)

    def test_counter_block_layout(self):
        block = counter_block(0x0102, 0x0308)
        self.assertEqual(len(block), 16)
        self.assertEqual(block[:4], b"\x02\x01\x08\x03")
        self.assertEqual(block[4:], bytes(12))
        with self.assertRaises(ValueError):
            counter_block(0x10000, 0)

    def test_parse_reduces_modulo_q(self):
        buf = b"\xff\xff\x00\x80\x34\x12"
        self.assertEqual(parse_u16le(buf, 1 << 16), [0xFFFF, 0x8000, 0x1234])
        self.assertEqual(parse_u16le(buf, 1 << 15), [0x7FFF, 0, 0x1234])
        self.assertEqual(parse_u16le(buf, 2), [1, 0, 0])
        with self.assertRaises(ValueError):
            parse_u16le(b"\x00", 2)

    def test_pack_and_digest(self):
        m = [[1, 0x0203], [0xFFFF, 0]]
        packed = pack_matrix(m)
        self.assertEqual(packed, b"\x01\x00\x03\x02\xff\xff\x00\x00")
        self.assertEqual(matrix_digest(m), hashlib.sha256(packed).hexdigest())


class ParamsTests(unittest.TestCase):
    def test_matrix_params_frozen(self):
        p = MatrixParams(8, 1 << 15)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            p.n = 16  # type: ignore[misc]

    def test_boundaries(self):
        MatrixParams(1, 2)
        MatrixParams(1 << 16, 1 << 16)
        with self.assertRaises(InvalidParameter):
            MatrixParams((1 << 16) + 1, 2)

    def test_presets(self):
        self.assertEqual(set(PARAMETER_SETS), {"frodokem-640", "frodokem-976", "frodokem-1344"})
        ps = get_parameter_set("FrodoKEM-976")
        self.assertEqual((ps.n, ps.q, ps.seed_length), (976, 1 << 16, 16))
        self.assertEqual(get_parameter_set(" frodokem-640 "), FRODOKEM_640)
        self.assertEqual(FRODOKEM_640.params, MatrixParams(640, 1 << 15))
        with self.assertRaises(InvalidParameter):
            get_parameter_set("FrodoKEM-512")

    def test_preset_generators(self):
        shake = FRODOKEM_640.generator("shake128")
        self.assertIsInstance(shake, HashExpansionGenerator)
        self.assertEqual(shake.seed_length, 16)
        with self.assertRaises(InvalidSeedLength):
            shake.gen_row(bytes(8), 0)
        aes = FRODOKEM_640.generator("aes128")
        self.assertIsInstance(aes, CipherExpansionGenerator)
        row = aes.gen_row(bytes(16), 639)
        self.assertEqual(len(row), 640)
        self.assertTrue(all(0 <= v < (1 << 15) for v in row))


if __name__ == "__main__":
    unittest.main()
