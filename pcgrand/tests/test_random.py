import unittest

import pcgrand.random

from pcgrand.context import PcgContext, GeneratorConfig
from pcgrand.exceptions import BoundError
from pcgrand.pcg import Pcg32x32

class Random_Tests(unittest.TestCase):

    def setUp(self) -> None:
        PcgContext.reset()
        pcgrand.random._random = None

    def tearDown(self) -> None:
        PcgContext.reset()
        pcgrand.random._random = None

    def test_seed_unchanged(self):
        pcgrand.random.seed(0)
        self.assertEqual(0xc49ffa8a, pcgrand.random.next_u32())
        self.assertEqual(0x360644ca, pcgrand.random.next_u32())

    def test_seed_stream_unchanged(self):
        pcgrand.random.seed(7, 3)
        self.assertEqual(0x40886a09, pcgrand.random.next_u32())

    def test_seed_replaces_generator(self):
        pcgrand.random.seed(1)
        first = pcgrand.random.generator()
        pcgrand.random.seed(1)
        self.assertIsNot(first, pcgrand.random.generator())
        self.assertEqual(first, pcgrand.random.generator())

    def test_default_generator_uses_context(self):
        PcgContext.generator = GeneratorConfig(7, 3)
        self.assertEqual(Pcg32x32.seed(7, 3), pcgrand.random.generator())
        self.assertEqual(0x40886a09, pcgrand.random.next_u32())

    def test_repeatable(self):
        pcgrand.random.seed(10)
        first = [pcgrand.random.next_bounded(10) for _ in range(20)]
        pcgrand.random.seed(10)
        self.assertEqual(first, [pcgrand.random.next_bounded(10) for _ in range(20)])

    def test_matches_generator(self):
        gen = Pcg32x32.seed(0, 0)
        pcgrand.random.seed(0, 0)

        self.assertEqual(gen.next_bool(), pcgrand.random.next_bool())
        self.assertEqual(gen.next_u8(), pcgrand.random.next_u8())
        self.assertEqual(gen.next_u16(), pcgrand.random.next_u16())
        self.assertEqual(gen.next_u64(), pcgrand.random.next_u64())
        self.assertEqual(gen.next_f32_unit(), pcgrand.random.next_f32_unit())
        self.assertEqual(gen.next_f32_signed_unit(), pcgrand.random.next_f32_signed_unit())
        self.assertEqual(gen.next_f64_unit(), pcgrand.random.next_f64_unit())
        self.assertEqual(gen.next_f64_signed_unit(), pcgrand.random.next_f64_signed_unit())
        self.assertEqual(gen.pick("abcdef"), pcgrand.random.pick("abcdef"))
        self.assertEqual(gen.shuffle(list(range(10))), pcgrand.random.shuffle(list(range(10))))

    def test_shuffle_unchanged(self):
        pcgrand.random.seed(0)
        self.assertEqual([3, 1, 4, 2, 0], pcgrand.random.shuffle([0, 1, 2, 3, 4]))

    def test_shuffle_empty(self):
        with self.assertRaises(BoundError):
            pcgrand.random.shuffle([])

    def test_next_bounded_zero(self):
        with self.assertRaises(BoundError):
            pcgrand.random.next_bounded(0)

    def test_jump(self):
        pcgrand.random.seed(3, 4)
        pcgrand.random.jump(100)

        expected = Pcg32x32.seed(3, 4)
        expected.jump(100)

        self.assertEqual(expected, pcgrand.random.generator())

if __name__ == '__main__':
    unittest.main()
