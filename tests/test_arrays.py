import unittest

import numpy as np

from rbig import Rational, as_rational_array, zeros, zeros_like


def R(numer, denom=1):
    return Rational.from_numer_denom(numer, denom)


class NumpyInteropTests(unittest.TestCase):
    def test_numpy_array_operations_with_scalar(self):
        vector = np.array([0.25, 0.5, 0.75])
        result = R(1, 4) + vector
        self.assertEqual(result.dtype, object)
        self.assertTrue(all(isinstance(item, Rational) for item in result))
        self.assertEqual(list(result), [R(1, 2), R(3, 4), R(1)])

    def test_numpy_array_operations_with_object_array(self):
        vector = np.array([R(1, 2), R(1, 3)], dtype=object)
        result = vector + R(1, 6)
        self.assertEqual(list(result), [R(2, 3), R(1, 2)])
        result = vector - R(1, 6)
        self.assertEqual(list(result), [R(1, 3), R(1, 6)])

    def test_numpy_ufunc_support(self):
        vector = np.array([R(1, 2), R(3, 4)], dtype=object)
        result = np.add(vector, R(1, 4))
        np.testing.assert_allclose([float(item) for item in result], [0.75, 1.0])
        self.assertEqual(np.negative(R(1, 2)), R(-1, 2))
        self.assertEqual(np.floor(R(-7, 2)), -4)
        self.assertEqual(np.ceil(R(-7, 2)), -3)

    def test_unsupported_ufunc_arguments(self):
        with self.assertRaises(TypeError):
            np.sqrt(R(1, 4))
        with self.assertRaises(NotImplementedError):
            np.add(R(1, 2), R(1, 2), out=np.empty(1, dtype=object))

    def test_numpy_power(self):
        vector = np.array([R(2, 3), R(4, 5)], dtype=object)
        result = np.power(vector, 2)
        self.assertEqual(list(result), [R(4, 9), R(16, 25)])
        exponents = R(1, 2) ** np.array([1, -1])
        self.assertEqual(list(exponents), [R(1, 2), R(2)])

    def test_rational_array_helpers(self):
        arr = zeros(4)
        self.assertEqual(arr.shape, (4,))
        self.assertTrue(all(isinstance(item, Rational) and item.is_zero() for item in arr))
        with self.assertRaises(ValueError):
            zeros(-1)

        arr_from_list = as_rational_array([R(1, 2), 0.25, 3])
        self.assertEqual(arr_from_list.shape, (3,))
        self.assertEqual(list(arr_from_list), [R(1, 2), R(1, 4), R(3)])

        arr_like = zeros_like(np.array([[1, 2], [3, 4]]))
        self.assertEqual(arr_like.shape, (2, 2))
        self.assertTrue(all(item.is_zero() for item in arr_like.flat))

    def test_as_rational_array_copy_semantics(self):
        source = np.array([R(1, 2), R(1, 3)], dtype=object)
        self.assertIs(as_rational_array(source, copy=False), source)
        self.assertIsNot(as_rational_array(source), source)
        copied = as_rational_array(source)
        copied[0] += 1
        self.assertEqual(source[0], R(1, 2))
        self.assertEqual(copied[0], R(3, 2))
        converted = as_rational_array(np.array([1, 2, 3]))
        self.assertEqual(converted.dtype, object)
        self.assertEqual(list(converted), [R(1), R(2), R(3)])


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
