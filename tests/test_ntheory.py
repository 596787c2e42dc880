import unittest
from gfpm import ntheory


class Arithmetic(unittest.TestCase):

    def test_is_prime(self):
        self.assertFalse(ntheory.is_prime(-7))
        self.assertFalse(ntheory.is_prime(0))
        self.assertFalse(ntheory.is_prime(1))
        self.assertTrue(ntheory.is_prime(2))
        self.assertTrue(ntheory.is_prime(3))
        self.assertFalse(ntheory.is_prime(4))
        self.assertFalse(ntheory.is_prime(9))
        self.assertFalse(ntheory.is_prime(91))
        self.assertTrue(ntheory.is_prime(97))
        self.assertTrue(ntheory.is_prime(65537))
        self.assertEqual([p for p in range(30) if ntheory.is_prime(p)],
                         [2, 3, 5, 7, 11, 13, 17, 19, 23, 29])

    def test_factor(self):
        self.assertEqual(ntheory.factor(1), [])
        self.assertEqual(ntheory.factor(2), [(2, 1)])
        self.assertEqual(ntheory.factor(7), [(7, 1)])
        self.assertEqual(ntheory.factor(12), [(2, 2), (3, 1)])
        self.assertEqual(ntheory.factor(255), [(3, 1), (5, 1), (17, 1)])
        self.assertEqual(ntheory.factor(3**4 * 11**2), [(3, 4), (11, 2)])
        self.assertEqual(ntheory.factor(2**64 - 1),
                         [(3, 1), (5, 1), (17, 1), (257, 1), (641, 1), (65537, 1), (6700417, 1)])
        self.assertRaises(ValueError, ntheory.factor, 0)
        self.assertRaises(ValueError, ntheory.factor, -4)

    def test_divisors(self):
        self.assertEqual(ntheory.divisors(1), [1])
        self.assertEqual(ntheory.divisors(2), [1, 2])
        self.assertEqual(ntheory.divisors(7), [1, 7])
        self.assertEqual(ntheory.divisors(8), [1, 2, 4, 8])
        self.assertEqual(ntheory.divisors(12), [1, 2, 3, 4, 6, 12])
        self.assertEqual(ntheory.divisors(255), [1, 3, 5, 15, 17, 51, 85, 255])
        for n in range(1, 100):
            self.assertEqual(ntheory.divisors(n), [d for d in range(1, n + 1) if n % d == 0])


if __name__ == "__main__":
    unittest.main()
