import struct
import unittest

from pcgrand.floats import ieee754_random_f32, ieee754_random_f64
from pcgrand.pcg import Pcg32x32
from pcgrand.gen32 import Gen32

def is_f32(value: float) -> bool:
    return struct.unpack('<f', struct.pack('<f', value))[0] == value

class ReplayGen(Gen32):
    def __init__(self, words) -> None:
        self.words = list(words)
        self.draws = 0

    def next_u32(self) -> int:
        self.draws += 1
        return self.words.pop(0)

class ConstantGen(Gen32):
    def __init__(self, word: int) -> None:
        self.word  = word
        self.draws = 0

    def next_u32(self) -> int:
        self.draws += 1
        return self.word

class ieee754_random_f32_Tests(unittest.TestCase):

    def test_all_ones_rounds_to_one(self):
        self.assertEqual(1.0, ieee754_random_f32(ConstantGen(0xffffffff)))

    def test_all_zeros_is_zero(self):
        gen = ConstantGen(0)
        self.assertEqual(0.0, ieee754_random_f32(gen))
        self.assertEqual(4, gen.draws)

    def test_half(self):
        self.assertEqual(0.5, ieee754_random_f32(ReplayGen([0x80000000])))

    def test_leading_zeros_lower_the_exponent(self):
        gen = ReplayGen([0x00000001, 0])
        self.assertEqual(2**-32, ieee754_random_f32(gen))
        self.assertEqual(2, gen.draws)

    def test_leading_zero_words_lower_the_exponent(self):
        gen = ReplayGen([0, 0x80000000])
        self.assertEqual(2**-33, ieee754_random_f32(gen))

    def test_signed_uses_one_extra_draw(self):
        gen = ReplayGen([0x80000000, 0x80000000])
        self.assertEqual(-0.5, ieee754_random_f32(gen, True))
        self.assertEqual(2, gen.draws)

        gen = ReplayGen([0x80000000, 0x7fffffff])
        self.assertEqual(0.5, ieee754_random_f32(gen, True))

    def test_signed_extremes(self):
        self.assertEqual(-1.0, ieee754_random_f32(ConstantGen(0xffffffff), True))

    def test_generator_values(self):
        gen = Pcg32x32.seed(3,3)
        for _ in range(2000):
            value = gen.next_f32_unit()
            self.assertTrue(0 <= value <= 1)
            self.assertTrue(is_f32(value))

    def test_generator_signed_values(self):
        gen    = Pcg32x32.seed(3,3)
        values = [gen.next_f32_signed_unit() for _ in range(2000)]
        self.assertTrue(all(-1 <= v <= 1 for v in values))
        self.assertTrue(any(v < 0 for v in values))
        self.assertTrue(any(v > 0 for v in values))

    def test_mean_near_half(self):
        gen    = Pcg32x32.seed(4,4)
        values = [gen.next_f32_unit() for _ in range(20000)]
        self.assertAlmostEqual(0.5, sum(values)/len(values), places=1)

class ieee754_random_f64_Tests(unittest.TestCase):

    def test_all_ones_rounds_to_one(self):
        self.assertEqual(1.0, ieee754_random_f64(ConstantGen(0xffffffff)))

    def test_all_zeros_is_zero(self):
        gen = ConstantGen(0)
        self.assertEqual(0.0, ieee754_random_f64(gen))
        self.assertEqual(32, gen.draws)

    def test_quarter(self):
        gen = ReplayGen([0, 0x40000000, 0, 0])
        self.assertEqual(0.25, ieee754_random_f64(gen))
        self.assertEqual(4, gen.draws)

    def test_signed_uses_one_extra_draw(self):
        gen = ReplayGen([0, 0x80000000, 0xffffffff])
        self.assertEqual(-0.5, ieee754_random_f64(gen, True))
        self.assertEqual(3, gen.draws)

    def test_generator_values(self):
        gen = Pcg32x32.seed(5,5)
        for _ in range(2000):
            self.assertTrue(0 <= gen.next_f64_unit() <= 1)

    def test_generator_signed_values(self):
        gen    = Pcg32x32.seed(5,5)
        values = [gen.next_f64_signed_unit() for _ in range(2000)]
        self.assertTrue(all(-1 <= v <= 1 for v in values))
        self.assertTrue(any(v < 0 for v in values))

    def test_deterministic(self):
        gen1 = Pcg32x32.seed(6,6)
        gen2 = Pcg32x32.seed(6,6)
        self.assertEqual([gen1.next_f64_unit() for _ in range(50)], [gen2.next_f64_unit() for _ in range(50)])

if __name__ == '__main__':
    unittest.main()
