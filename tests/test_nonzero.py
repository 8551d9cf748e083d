import unittest

from rbig import NonZeroUInt, Sign


class NonZeroUIntTests(unittest.TestCase):
    def test_constructors(self):
        self.assertEqual(NonZeroUInt.one().get(), 1)
        self.assertEqual(NonZeroUInt.new(5).get(), 5)
        self.assertIsNone(NonZeroUInt.new(0))
        self.assertEqual(int(NonZeroUInt(7)), 7)

    def test_invalid_values(self):
        with self.assertRaises(ZeroDivisionError):
            NonZeroUInt(0)
        with self.assertRaises(ValueError):
            NonZeroUInt(-1)
        with self.assertRaises(ValueError):
            NonZeroUInt.new(-3)
        with self.assertRaises(TypeError):
            NonZeroUInt.new(2.5)

    def test_arithmetic_preserves_non_zero(self):
        self.assertEqual(NonZeroUInt(3) * NonZeroUInt(4), NonZeroUInt(12))
        self.assertEqual(NonZeroUInt(3) + NonZeroUInt(4), NonZeroUInt(7))
        self.assertEqual(NonZeroUInt(12) // 4, NonZeroUInt(3))
        self.assertEqual(NonZeroUInt(12) // NonZeroUInt(6), NonZeroUInt(2))
        self.assertEqual(NonZeroUInt(3).pow(4), NonZeroUInt(81))
        self.assertEqual(NonZeroUInt(3) ** 0, NonZeroUInt.one())

    def test_mixed_operands_are_rejected(self):
        with self.assertRaises(TypeError):
            NonZeroUInt(2) * 3
        with self.assertRaises(TypeError):
            NonZeroUInt(2) + 3
        with self.assertRaises(ValueError):
            NonZeroUInt(2).pow(-1)
        with self.assertRaises(ValueError):
            NonZeroUInt(12) // -4

    def test_ordering_and_hash(self):
        self.assertLess(NonZeroUInt(2), NonZeroUInt(3))
        self.assertGreaterEqual(NonZeroUInt(3), NonZeroUInt(3))
        self.assertEqual(hash(NonZeroUInt(9)), hash(NonZeroUInt(9)))
        self.assertEqual(len({NonZeroUInt(9), NonZeroUInt(9), NonZeroUInt(1)}), 2)
        self.assertEqual(repr(NonZeroUInt(4)), "NonZeroUInt(4)")


class SignTests(unittest.TestCase):
    def test_order_and_default_choice(self):
        self.assertLess(Sign.NEGATIVE, Sign.POSITIVE)
        self.assertEqual(max(Sign.NEGATIVE, Sign.POSITIVE), Sign.POSITIVE)
        self.assertIs(Sign.of(0), Sign.POSITIVE)
        self.assertIs(Sign.of(-3), Sign.NEGATIVE)

    def test_negation_and_multiplication(self):
        self.assertIs(-Sign.POSITIVE, Sign.NEGATIVE)
        self.assertIs(-Sign.NEGATIVE, Sign.POSITIVE)
        self.assertIs(Sign.NEGATIVE * Sign.NEGATIVE, Sign.POSITIVE)
        self.assertIs(Sign.NEGATIVE * Sign.POSITIVE, Sign.NEGATIVE)
        self.assertIs(Sign.POSITIVE * Sign.POSITIVE, Sign.POSITIVE)

    def test_pow_uses_parity(self):
        self.assertIs(Sign.NEGATIVE.pow(3), Sign.NEGATIVE)
        self.assertIs(Sign.NEGATIVE.pow(2), Sign.POSITIVE)
        self.assertIs(Sign.NEGATIVE.pow(0), Sign.POSITIVE)
        self.assertIs(Sign.POSITIVE.pow(5), Sign.POSITIVE)

    def test_apply(self):
        self.assertEqual(Sign.NEGATIVE.apply(5), -5)
        self.assertEqual(Sign.POSITIVE.apply(5), 5)
        self.assertEqual(repr(Sign.NEGATIVE), "Sign.NEGATIVE")


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
