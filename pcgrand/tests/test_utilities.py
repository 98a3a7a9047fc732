import sys
import unittest
import unittest.mock

from pcgrand.exceptions import PcgExit
from pcgrand.utilities import U32_MAX, wrap, saturating_len_as_u32, pcg_exit, PackageChecker

class wrap_Tests(unittest.TestCase):
    def test_wrap_32(self):
        self.assertEqual(0, wrap(2**32))
        self.assertEqual(U32_MAX, wrap(-1))
        self.assertEqual(5, wrap(5))

    def test_wrap_64(self):
        self.assertEqual(1, wrap(2**64+1, 64))
        self.assertEqual(2**32, wrap(2**32, 64))

class saturating_len_as_u32_Tests(unittest.TestCase):
    def test_small_lengths_pass_through(self):
        self.assertEqual(0, saturating_len_as_u32(0))
        self.assertEqual(10, saturating_len_as_u32(10))
        self.assertEqual(U32_MAX, saturating_len_as_u32(U32_MAX))

    def test_large_lengths_saturate(self):
        with unittest.mock.patch.object(sys, 'maxsize', 2**63-1):
            self.assertEqual(U32_MAX, saturating_len_as_u32(U32_MAX+1))
            self.assertEqual(U32_MAX, saturating_len_as_u32(2**40))

    def test_narrow_interpreters_pass_through(self):
        with unittest.mock.patch.object(sys, 'maxsize', 2**31-1):
            self.assertEqual(2**31-1, saturating_len_as_u32(2**31-1))

class pcg_exit_Tests(unittest.TestCase):
    def test_pcg_exit(self):
        with self.assertRaises(PcgExit) as e:
            pcg_exit("abc")
        self.assertEqual("abc", str(e.exception))

class PackageChecker_Tests(unittest.TestCase):
    def test_missing_not_strict(self):
        self.assertFalse(PackageChecker._check("test", "a_package_that_does_not_exist", strict=False))

    def test_missing_strict(self):
        with self.assertRaises(PcgExit) as e:
            PackageChecker._check("test", "a_package_that_does_not_exist")
        self.assertIn("pip install a_package_that_does_not_exist", str(e.exception))

    def test_present(self):
        self.assertTrue(PackageChecker._check("test", "unittest"))

if __name__ == '__main__':
    unittest.main()
