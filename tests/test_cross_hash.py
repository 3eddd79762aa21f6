# ==============================================================================
# File: tests/test_cross_hash.py
# Purpose: Known-answer and property tests for the Water / Wheat / Woo hashes.
# ==============================================================================
import unittest
import numpy as np

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from palette_kit.numerics.cross_hash import (
    ElementKind,
    hash32,
    hash32_object,
    hash64,
    hash64_object,
    hash_code,
    mum,
)

INTS = [1, 2, 3, 4, 5, -6, 7, 0x7FFFFFFF, -2 ** 31]
BYTES = [1, -2, 3, -128, 127, 0, -1]
BOOLS = [True, False, True, True, False, False, True]
LONGS = [1, 2, 3, 4, 5, -6, 2 ** 63 - 1]
DOUBLES = [0.0, 1.0, -2.5, 3.141592653589793, 1e100]
FLOATS = [0.0, 1.0, -2.5, 3.1415927, 1e30]


class TestKnownAnswers(unittest.TestCase):
    """Reference values shared with the Java version of these hashes."""

    def _check(self, data, expected32, expected64):
        self.assertEqual(hash32(data), expected32)
        self.assertEqual(hash64(data), expected64)

    def test_int_arrays(self):
        print("\n[TEST] Running test_int_arrays...")
        cases = {
            0: (-575934652, -7257914125961516757),
            1: (-900757345, 173503307964257116),
            2: (1404914559, -2910971948200657000),
            3: (-839167243, -8543238021052769255),
            4: (1327754068, -3345396935634855138),
            5: (890785531, -3083456356829015852),
            9: (1609850316, 7519047217656665951),
        }
        for n, (h32, h64) in cases.items():
            with self.subTest(n=n):
                self._check(np.array(INTS[:n], dtype=np.int32), h32, h64)
        print("[TEST] test_int_arrays: OK")

    def test_byte_arrays(self):
        cases = {
            1: (1070081295, -6746433366134411607),
            2: (1138237382, -404830693505216851),
            3: (705973868, 6157840527087688018),
            7: (-783096554, -3959482913123221922),
        }
        for n, (h32, h64) in cases.items():
            with self.subTest(n=n):
                self._check(np.array(BYTES[:n], dtype=np.int8), h32, h64)
        # bytes objects hash as signed bytes
        self._check(np.array(BYTES, dtype=np.int8).tobytes(), -783096554, -3959482913123221922)

    def test_strings(self):
        print("\n[TEST] Running test_strings...")
        self._check("a", -919392330, -4600065614521598033)
        self._check("abc", -1715738142, 2623939056298925513)
        self._check("abcd", -756529346, 9084486840160599736)
        self._check("hello world", -655161389, 7287907303971433999)
        self._check("Hello, World!", 1624089193, 1422555911054235931)
        print("[TEST] test_strings: OK")

    def test_high_chars(self):
        self._check(np.array([0xFFFF, 0x8001, 0x41], dtype=np.uint16), -1607126181, -2178015264082432742)
        self._check("\uffff\u8001A", -1607126181, -2178015264082432742)

    def test_bool_arrays(self):
        cases = {
            1: (880035511, -1666620901427458623),
            3: (-411085246, 6352678156022847985),
            7: (-1605342143, -1525372416536995766),
        }
        for n, (h32, h64) in cases.items():
            with self.subTest(n=n):
                self._check(np.array(BOOLS[:n], dtype=bool), h32, h64)

    def test_long_arrays(self):
        cases = {
            0: (2117430887, 3763466311832712818),
            1: (172953487, 4505259324363012121),
            3: (1544980922, -7604915231413179159),
            7: (894449600, -3306227056338639980),
        }
        for n, (h32, h64) in cases.items():
            with self.subTest(n=n):
                self._check(np.array(LONGS[:n], dtype=np.int64), h32, h64)

    def test_float_and_double_arrays(self):
        self._check(np.array(DOUBLES[:1], dtype=np.float64), 1154270068, 8086183564253417143)
        self._check(np.array(DOUBLES, dtype=np.float64), 1466562941, 627414334006642810)
        self._check(np.array(FLOATS[:1], dtype=np.float32), -970181531, -5735197133599702842)
        self._check(np.array(FLOATS, dtype=np.float32), 837174722, -8230562235276224105)

    def test_string_arrays(self):
        words = ["red", "green", "blue", "alpha"]
        self._check(words[:1], 1616981785, -3689749351917164392)
        self._check(words, 1839044040, -374394392671255132)
        self._check(np.array(words), 1839044040, -374394392671255132)


class TestHashProperties(unittest.TestCase):
    """Behaviour that does not depend on exact values."""

    def test_none_is_zero(self):
        print("\n[TEST] Running test_none_is_zero...")
        self.assertEqual(hash32(None), 0)
        self.assertEqual(hash64(None), 0)
        for kind in ElementKind:
            with self.subTest(kind=kind):
                self.assertEqual(hash32(None, kind), 0)
                self.assertEqual(hash64(None, kind), 0)
        self.assertEqual(hash32_object(None), 0)
        self.assertEqual(hash64_object(None), 0)
        print("[TEST] test_none_is_zero: OK")

    def test_empty_is_not_zero(self):
        self.assertEqual(hash32(""), -575934652)
        self.assertEqual(hash64([]), -7257914125961516757)

    def test_deterministic(self):
        data = np.arange(1000, dtype=np.int32)
        self.assertEqual(hash32(data), hash32(data.copy()))
        self.assertEqual(hash64(data), hash64(data.copy()))
        self.assertEqual(hash32("palette"), hash32("palette"))

    def test_output_ranges(self):
        rng = np.random.default_rng(7)
        for _ in range(50):
            data = rng.integers(-2 ** 31, 2 ** 31, size=int(rng.integers(0, 40)), dtype=np.int64).astype(np.int32)
            h32, h64 = hash32(data), hash64(data)
            self.assertTrue(-2 ** 31 <= h32 < 2 ** 31)
            self.assertTrue(-2 ** 63 <= h64 < 2 ** 63)

    def test_avalanche(self):
        """Flipping one input bit changes about half of the output bits."""
        rng = np.random.default_rng(12345)
        flips32, flips64, trials = 0, 0, 0
        for _ in range(200):
            data = rng.integers(-2 ** 31, 2 ** 31, size=8, dtype=np.int64).astype(np.int32)
            base32, base64 = hash32(data) & 0xFFFFFFFF, hash64(data) & 0xFFFFFFFFFFFFFFFF
            pos, bit = int(rng.integers(8)), int(rng.integers(32))
            flipped = data.copy()
            flipped.view(np.uint32)[pos] ^= np.uint32(1 << bit)
            flips32 += bin(base32 ^ (hash32(flipped) & 0xFFFFFFFF)).count("1")
            flips64 += bin(base64 ^ (hash64(flipped) & 0xFFFFFFFFFFFFFFFF)).count("1")
            trials += 1
        self.assertAlmostEqual(flips32 / (32 * trials), 0.5, delta=0.05)
        self.assertAlmostEqual(flips64 / (64 * trials), 0.5, delta=0.05)

    def test_kind_override(self):
        values = [1, 2, 3, 4, 5]
        self.assertEqual(hash32(values, ElementKind.INT), hash32(np.array(values, dtype=np.int32)))
        self.assertEqual(hash64(values, "long"), hash64(np.array(values, dtype=np.int64)))
        self.assertEqual(hash32([1, -2, 3], ElementKind.BYTE), 705973868)

    def test_int_and_long_differ(self):
        values = [1, 2, 3]
        self.assertNotEqual(hash64(values, ElementKind.INT), hash64(values, ElementKind.LONG))

    def test_ranged(self):
        data = np.array(INTS, dtype=np.int32)
        self.assertEqual(hash32(data, start=0, end=3), hash32(data[:3]))
        self.assertEqual(hash32(data, start=2, end=100), hash32(data[2:]))
        self.assertEqual(hash32(data, start=4, end=4), 0)
        self.assertEqual(hash64(data, start=5, end=1), 0)
        # the 64-bit ranged form ends with the 32-bit finish
        ranged = hash64(data, start=0, end=len(data))
        self.assertTrue(-2 ** 31 <= ranged < 2 ** 31)
        self.assertNotEqual(ranged, hash64(data))

    def test_length(self):
        data = np.array(INTS, dtype=np.int32)
        self.assertEqual(hash32(data, length=3), -839167243)
        self.assertEqual(hash64(data, length=5), -3083456356829015852)

    def test_nan_is_canonical(self):
        quiet = np.array([np.nan], dtype=np.float64)
        other = np.array([1.0], dtype=np.float64).view(np.int64)
        other[0] = 0x7FF0000000000001
        self.assertEqual(hash32(quiet), hash32(other.view(np.float64)))
        self.assertEqual(hash64(quiet), hash64(other.view(np.float64)))

    def test_streaming(self):
        gen32 = hash32(x for x in ["a", "b", "c", "d", "e"])
        gen32_again = hash32(iter(["a", "b", "c", "d", "e"]))
        self.assertEqual(gen32, gen32_again)
        self.assertNotEqual(hash32(iter(["a", "b"])), hash32(iter(["b", "a"])))
        self.assertEqual(hash64(iter([])), hash64(iter(())))

    def test_nested_sequences(self):
        nested = [[1, 2], "x", None, (3.5, True)]
        self.assertEqual(hash32(nested), hash32(list(nested)))
        self.assertNotEqual(hash32(nested), hash32([[2, 1], "x", None, (3.5, True)]))


class _NoHash:
    __hash__ = None


class TestUnusualInput(unittest.TestCase):
    """Inputs outside the common cases never raise, except for an unknown kind."""

    def test_unhashable_objects(self):
        print("\n[TEST] Running test_unhashable_objects...")
        obj = _NoHash()
        for value in ([{"a": 1}], [{}], [set()], (obj,), obj):
            with self.subTest(value=type(value).__name__):
                h32, h64 = hash32(value), hash64(value)
                self.assertTrue(-2 ** 31 <= h32 < 2 ** 31)
                self.assertTrue(-2 ** 63 <= h64 < 2 ** 63)
        self.assertEqual(hash32([obj]), hash32([obj]))
        self.assertEqual(hash32_object(obj), hash32_object(obj))
        print("[TEST] test_unhashable_objects: OK")

    def test_unknown_kind(self):
        with self.assertRaises(TypeError):
            hash32([1, 2], "quux")
        with self.assertRaises(TypeError):
            hash64(np.arange(3), "int128")

    def test_two_dimensional_rows(self):
        grid = np.array([[1, 2], [3, 4]], dtype=np.int32)
        flat = np.array([1, 2, 3, 4], dtype=np.int32)
        rows = np.array([hash32(grid[0]), hash32(grid[1])], dtype=np.int32)
        self.assertNotEqual(hash32(grid), hash32(flat))
        self.assertEqual(hash32(grid), hash32(rows))
        self.assertEqual(hash64(grid), hash64(rows))
        self.assertEqual(hash32([[1, 2], [3, 4]], ElementKind.INT), hash32(rows))

    def test_negative_bounds_are_clamped(self):
        data = np.array(INTS, dtype=np.int32)
        self.assertEqual(hash32(data, start=-2, end=3), hash32(data, start=0, end=3))
        self.assertEqual(hash32(data, start=0, end=-1), 0)
        self.assertEqual(hash32(data, start=-5), hash32(data, start=0))
        self.assertEqual(hash64(data, start=7, end=50), hash64(data, start=7, end=len(INTS)))


class TestObjectHash(unittest.TestCase):
    """Single-object hashing."""

    def test_hash_code_java_conventions(self):
        self.assertEqual(hash_code("hello"), 99162322)
        self.assertEqual(hash_code(""), 0)
        self.assertEqual(hash_code(True), 1231)
        self.assertEqual(hash_code(False), 1237)
        self.assertEqual(hash_code(-5), -5)
        self.assertEqual(hash_code(1 << 40), 256)
        self.assertEqual(hash_code(1.0), 1072693248)

    def test_object_hash_mixing(self):
        self.assertEqual(hash32_object(0), 0)
        h = (1 * 0x9E375) & 0xFFFFFFFF
        self.assertEqual(hash32_object(1), h ^ (h >> 16))
        self.assertEqual(hash64_object(0), 0)
        self.assertEqual(hash32(7), hash32_object(7))
        self.assertEqual(hash64(7), hash64_object(7))

    def test_mum(self):
        self.assertEqual(mum(0, 12345), 0)
        self.assertEqual(mum(1 << 32, 1), (1 << 32) - 1)


if __name__ == "__main__":
    unittest.main()
